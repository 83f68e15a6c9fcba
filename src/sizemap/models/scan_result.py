"""Scan result dataclass."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


class ScanError(Exception):
    """Raised when a scan cannot produce a result."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


@dataclass(slots=True)
class ScanResult:
    """Sizes of every immediate child of a scan root.

    ``children`` maps each immediate child's name to the total size of
    the regular files below it.  ``total`` is the grand total for the
    whole tree and ``root`` is the normalized path it was computed for.
    """

    root: str
    total: int = 0
    children: dict[str, int] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def buckets(self) -> dict[str, int]:
        """Flat ``{name: size}`` mapping with the grand total under ``root``.

        A child whose name equals ``root`` is shadowed by the total here;
        use ``children`` and ``total`` when that matters.
        """
        if self.root in self.children:
            log.warning(
                "Entry %r has the same name as the scan root; the flat mapping only keeps the total",
                self.root,
            )
        buckets = dict(self.children)
        buckets[self.root] = self.total
        return buckets

    @classmethod
    def from_buckets(cls, buckets: Mapping[str, int], root: str) -> ScanResult:
        """Build a result from a flat mapping keyed like ``buckets``.

        The value under ``root`` is always read as the grand total, so a
        child shadowed in ``buckets`` cannot be recovered here.
        """
        children = {name: size for name, size in buckets.items() if name and name != root}
        return cls(root=root, total=buckets.get(root, 0), children=children)
