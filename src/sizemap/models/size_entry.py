"""Presentation record for one line of the listing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SizeEntry:
    """One bucket annotated for display.

    ``percent`` is the share of the grand total in ``[0, 1]`` and ``bar``
    is ``bar_length`` repetitions of the bar glyph.  The grand-total
    entry has ``is_root`` set.
    """

    name: str
    size: int
    percent: float
    bar_length: int
    bar: str
    is_root: bool = False
