"""Name similarity scoring."""

from .similarity import edit_distance, similarity

__all__ = ["edit_distance", "similarity"]
