"""CLI interface for sizemap."""

from __future__ import annotations

import cProfile
import logging
import time
from contextlib import contextmanager
from typing import Iterator

import click

from sizemap.core.aggregator import SizeAggregator
from sizemap.core.paths import normalize_root
from sizemap.core.presenter import (
    BAR_GLYPH,
    format_lines,
    format_stream_line,
    format_total_lines,
)
from sizemap.models.scan_result import ScanError
from sizemap.settings import Settings
from sizemap.utils import format_elapsed

log = logging.getLogger(__name__)

PROFILE_FILE = "sizemap.prof"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@contextmanager
def _profiled(enabled: bool) -> Iterator[None]:
    """Run the body under cProfile and dump the stats to PROFILE_FILE."""
    if not enabled:
        yield
        return
    profiler = cProfile.Profile()
    profiler.enable()
    try:
        yield
    finally:
        profiler.disable()
        profiler.dump_stats(PROFILE_FILE)
        log.info("Wrote profile to %s", PROFILE_FILE)


def _print_listing(path: str, glyph: str, color: bool | None) -> None:
    """Size everything first, then print the sorted listing with bars."""
    result = SizeAggregator().scan(path)
    for line in format_lines(result, glyph=glyph):
        click.echo(line, color=color)
    if result.skipped:
        log.info("Skipped %d unreadable path(s)", len(result.skipped))


def _print_streaming(path: str, color: bool | None) -> None:
    """Print each immediate child as soon as it is sized, without bars."""
    aggregator = SizeAggregator()
    root = normalize_root(path)
    total = 0
    for name, size in aggregator.iter_child_sizes(path):
        total += size
        click.echo(format_stream_line(name, size), color=color)
    for line in format_total_lines(root, total):
        click.echo(line, color=color)
    if aggregator.skipped:
        log.info("Skipped %d unreadable path(s)", len(aggregator.skipped))


@click.command()
@click.argument("path", default=".", type=click.Path())
@click.option(
    "--bar/--no-bar",
    " /-n",
    default=None,
    help="Draw bars (default), or print each entry as soon as it is sized without them.",
)
@click.option("--glyph", default=None, help="Character used to draw the bars.")
@click.option("--color/--no-color", default=None, help="Force or disable colored output.")
@click.option("--profile", is_flag=True, help=f"Profile the scan and write {PROFILE_FILE}.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(
    path: str,
    bar: bool | None,
    glyph: str | None,
    color: bool | None,
    profile: bool,
    verbose: int,
) -> None:
    """Show the size of every entry directly under PATH (default: .)."""
    _setup_logging(verbose)
    settings = Settings.instance()

    if bar is None:
        bar = not settings.get("display.no_bar", False)
    glyph = glyph or str(settings.get("display.glyph") or BAR_GLYPH)
    if len(glyph) != 1:
        raise click.BadParameter("must be a single character", param_hint="'--glyph'")

    tic = time.perf_counter()
    try:
        with _profiled(profile):
            if bar:
                _print_listing(path, glyph, color)
            else:
                _print_streaming(path, color)
    except ScanError as e:
        raise click.ClickException(str(e)) from e
    log.info("Finished in %s", format_elapsed(time.perf_counter() - tic))
