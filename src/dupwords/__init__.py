from __future__ import annotations

from .scanner.detect import find_duplicates
from .scanner.discovery import discover
from .scanner.scan import scan_file, scan_lines

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "discover",
    "find_duplicates",
    "scan_file",
    "scan_lines",
]
