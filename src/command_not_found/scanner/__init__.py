"""Manifest scanning over a filelist directory tree."""

from .manifest import ExactMatch, FuzzyMatch, ManifestScanner, ScanResult, SearchRequest, scan, scan_request
from .walk import EntryKind, WalkEntry, walk

__all__ = [
    "EntryKind",
    "ExactMatch",
    "FuzzyMatch",
    "ManifestScanner",
    "ScanResult",
    "SearchRequest",
    "WalkEntry",
    "scan",
    "scan_request",
    "walk",
]
