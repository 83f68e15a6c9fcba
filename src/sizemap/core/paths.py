"""Scan root normalization."""

from __future__ import annotations

import os


def normalize_root(raw: str) -> str:
    """Return the canonical spelling of a user supplied scan root.

    Repeated separators are collapsed, ``.`` segments and trailing
    separators are dropped and ``..`` is resolved lexically, so ``dir``,
    ``dir/``, ``./dir`` and ``./dir//`` all become ``dir``.  An empty
    string means the current directory and becomes ``.``.  The
    filesystem is never consulted.
    """
    path = os.path.normpath(raw or os.curdir)
    # POSIX keeps a leading "//" as implementation defined; fold it.
    if os.sep == "/" and path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path
