"""sizemap data models."""

from sizemap.models.scan_result import ScanError, ScanResult
from sizemap.models.size_entry import SizeEntry

__all__ = [
    "ScanError",
    "ScanResult",
    "SizeEntry",
]
