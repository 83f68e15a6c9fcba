"""Per-child size aggregation for a directory tree."""

from __future__ import annotations

import logging
import os
import stat
import time
from collections.abc import Iterator
from typing import Callable

from sizemap.core.paths import normalize_root
from sizemap.models.scan_result import ScanError, ScanResult
from sizemap.utils import format_elapsed

log = logging.getLogger(__name__)

SkipCallback = Callable[[str, OSError], None]  # (path, error)


def _scan_error(path: str, error: OSError) -> ScanError:
    path = os.fsdecode(error.filename) if error.filename else path
    return ScanError(f"{path}: {error.strerror or error}", path)


def log_skip(path: str, error: OSError) -> None:
    """Default diagnostic sink: report the skipped path as a warning."""
    log.warning("Skipping path that could not be read %r: %s", path, error)


class SizeAggregator:
    """Sizes every immediate child of a directory.

    Each immediate child of the scan root gets one bucket holding the
    size of everything below it, however deep.  Nodes that raise
    ``PermissionError`` are reported to ``on_skip`` and left out; any
    other ``OSError`` aborts the scan with ``ScanError``.
    """

    def __init__(self, on_skip: SkipCallback | None = None) -> None:
        self._on_skip = on_skip or log_skip
        self.skipped: list[str] = []

    def scan(self, root: str) -> ScanResult:
        """Walk ``root`` and return the size of each immediate child.

        Raises:
            ScanError: If the root is missing, is not a directory, or the
                walk hits an error other than a permission error.
        """
        tic = time.perf_counter()
        result = ScanResult(root=normalize_root(root))
        for name, size in self._iter_children(result.root):
            result.children[name] = size
            result.total += size
        result.skipped = list(self.skipped)

        log.debug(
            "Scanned %s: %d entries, %d bytes in %s",
            result.root,
            len(result.children),
            result.total,
            format_elapsed(time.perf_counter() - tic),
        )
        return result

    def iter_child_sizes(self, root: str) -> Iterator[tuple[str, int]]:
        """Yield ``(name, size)`` for each immediate child as soon as it is sized.

        Children come in name order.  Same errors as ``scan``, raised when
        the iterator reaches them.
        """
        yield from self._iter_children(normalize_root(root))

    def _iter_children(self, scan_root: str) -> Iterator[tuple[str, int]]:
        self.skipped = []
        self._check_root(scan_root)
        for entry in self._list_root(scan_root):
            size = self._child_size(entry)
            if size is not None:
                yield entry.name, size

    def _check_root(self, scan_root: str) -> None:
        """Fail before any bucket exists if the root is unusable."""
        try:
            st = os.stat(scan_root)
        except FileNotFoundError as e:
            raise ScanError(f"{scan_root}: no such file or directory", scan_root) from e
        except PermissionError:
            # Reported by the listing below, like any other unreadable node.
            return
        except OSError as e:
            raise _scan_error(scan_root, e) from e
        if not stat.S_ISDIR(st.st_mode):
            raise ScanError(f"{scan_root}: not a directory", scan_root)

    def _list_root(self, scan_root: str) -> list[os.DirEntry]:
        try:
            with os.scandir(scan_root) as it:
                return sorted(it, key=lambda entry: entry.name)
        except PermissionError as e:
            self._skip(scan_root, e)
            return []
        except OSError as e:
            raise _scan_error(scan_root, e) from e

    def _child_size(self, entry: os.DirEntry) -> int | None:
        """Total size below one immediate child, None if it was skipped."""
        try:
            if entry.is_dir(follow_symlinks=False):
                return self._tree_size(entry.path)
            return entry.stat(follow_symlinks=False).st_size
        except PermissionError as e:
            self._skip(entry.path, e)
            return None
        except OSError as e:
            raise _scan_error(entry.path, e) from e

    def _tree_size(self, path: str) -> int | None:
        """Sum the sizes of all non-directory entries below ``path``.

        Returns None when ``path`` itself cannot be opened.
        """
        total = 0
        stack = [path]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    for entry in it:
                        try:
                            if entry.is_dir(follow_symlinks=False):
                                stack.append(entry.path)
                            else:
                                total += entry.stat(follow_symlinks=False).st_size
                        except PermissionError as e:
                            self._skip(entry.path, e)
            except PermissionError as e:
                self._skip(current, e)
                if current == path:
                    return None
            except OSError as e:
                raise _scan_error(current, e) from e
        return total

    def _skip(self, path: str, error: OSError) -> None:
        self.skipped.append(path)
        self._on_skip(path, error)


def scan(root: str, on_skip: SkipCallback | None = None) -> ScanResult:
    """Size every immediate child of ``root``. See ``SizeAggregator.scan``."""
    return SizeAggregator(on_skip).scan(root)


def iter_child_sizes(
    root: str,
    on_skip: SkipCallback | None = None,
) -> Iterator[tuple[str, int]]:
    """Streaming variant of ``scan``. See ``SizeAggregator.iter_child_sizes``."""
    return SizeAggregator(on_skip).iter_child_sizes(root)
