"""Turn scan results into the printed listing."""

from __future__ import annotations

import bisect
from collections.abc import Mapping
from enum import IntEnum

import click

from sizemap.models.scan_result import ScanResult
from sizemap.models.size_entry import SizeEntry
from sizemap.utils import bytes_to_human

BAR_GLYPH = "|"
MIN_BAR_LENGTH = 1
MAX_BAR_LENGTH = 100
SEPARATOR = "-----"


class Emphasis(IntEnum):
    """Display emphasis, lowest to highest."""

    MINOR = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    EXTREME = 4


# Lower bounds of every level above MINOR, ascending.
SIZE_THRESHOLDS = (1024, 1024**2, 1024**3, 1024**4)
PERCENT_THRESHOLDS = (0.20, 0.40, 0.60, 0.80)

EMPHASIS_COLORS = {
    Emphasis.MINOR: "bright_black",
    Emphasis.LOW: "yellow",
    Emphasis.MEDIUM: "red",
    Emphasis.HIGH: "cyan",
    Emphasis.EXTREME: "magenta",
}


def size_emphasis(size: int) -> Emphasis:
    """Emphasis by byte size: <1K, >=1K, >=1M, >=1G, >=1T."""
    return Emphasis(bisect.bisect_right(SIZE_THRESHOLDS, size))


def percent_emphasis(percent: float) -> Emphasis:
    """Emphasis by share of the total: <20%, >=20%, >=40%, >=60%, >=80%."""
    return Emphasis(bisect.bisect_right(PERCENT_THRESHOLDS, percent))


def calc_percent(size: int, total: int) -> float:
    """Share of ``total`` taken by ``size``, 0.0 when the total is empty."""
    if total == 0:
        return 0.0
    return size / total


def calc_bar_length(percent: float) -> int:
    return max(MIN_BAR_LENGTH, min(MAX_BAR_LENGTH, round(percent * 100)))


def create_bar(length: int, glyph: str = BAR_GLYPH) -> str:
    return glyph * length


def new_entry(
    name: str,
    size: int,
    total: int,
    *,
    is_root: bool = False,
    glyph: str = BAR_GLYPH,
) -> SizeEntry:
    percent = calc_percent(size, total)
    bar_length = calc_bar_length(percent)
    return SizeEntry(
        name=name,
        size=size,
        percent=percent,
        bar_length=bar_length,
        bar=create_bar(bar_length, glyph),
        is_root=is_root,
    )


def build_entries(result: ScanResult, *, glyph: str = BAR_GLYPH) -> list[SizeEntry]:
    """One entry per child sorted by name, then the grand-total entry."""
    entries = [
        new_entry(name, size, result.total, glyph=glyph)
        for name, size in sorted(result.children.items())
    ]
    entries.append(new_entry(result.root, result.total, result.total, is_root=True, glyph=glyph))
    return entries


def format_size(size: int) -> str:
    return click.style(bytes_to_human(size), fg=EMPHASIS_COLORS[size_emphasis(size)])


def format_bar(entry: SizeEntry) -> str:
    return click.style(entry.bar, fg=EMPHASIS_COLORS[percent_emphasis(entry.percent)])


def format_entry_line(entry: SizeEntry) -> str:
    return f"{format_size(entry.size)}\t{entry.name}\t{format_bar(entry)}"


def format_total_lines(root: str, total: int) -> list[str]:
    """The separator and the bar-less grand-total line that end every listing."""
    return [SEPARATOR, f"{click.style(bytes_to_human(total), bold=True)}\t{root}"]


def format_stream_line(name: str, size: int) -> str:
    """Line for a child printed before the total is known, so without a bar."""
    return f"{format_size(size)}\t{name}"


def format_lines(result: ScanResult, *, glyph: str = BAR_GLYPH) -> list[str]:
    """Build every line of the listing.

    Children are sorted by name and drawn with a bar proportional to
    their share of the total.  The grand total always comes last, after
    a separator, wherever its name would sort.  Lines carry ANSI styles;
    ``click.echo`` drops them when the output is not a terminal.
    """
    *entries, root_entry = build_entries(result, glyph=glyph)
    lines = [format_entry_line(entry) for entry in entries]
    lines.extend(format_total_lines(root_entry.name, root_entry.size))
    return lines


def format_buckets(
    buckets: Mapping[str, int],
    root: str,
    *,
    glyph: str = BAR_GLYPH,
) -> list[str]:
    """``format_lines`` for a flat ``{name: size}`` mapping keyed by ``root``."""
    return format_lines(ScanResult.from_buckets(buckets, root), glyph=glyph)
