"""Command-not-found handler - suggest packages that provide a missing command."""

__version__ = "0.1.0"

# Lazy imports keep `python -m command_not_found` startup light
def __getattr__(name: str):
    """Lazy import of the public components."""
    if name == "ManifestScanner":
        from command_not_found.scanner.manifest import ManifestScanner
        return ManifestScanner
    elif name == "ScanResult":
        from command_not_found.scanner.manifest import ScanResult
        return ScanResult
    elif name == "SearchRequest":
        from command_not_found.scanner.manifest import SearchRequest
        return SearchRequest
    elif name == "scan":
        from command_not_found.scanner.manifest import scan
        return scan
    elif name == "similarity":
        from command_not_found.matching.similarity import similarity
        return similarity
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "ManifestScanner",
    "ScanResult",
    "SearchRequest",
    "scan",
    "similarity",
]
