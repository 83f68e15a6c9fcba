"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

_UNITS = ("B", "K", "M", "G", "T", "P", "E")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a short 1024-based string ('0B', '12B', '1.5M')."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"

    value = float(size_bytes)
    for unit in _UNITS[:-1]:
        if value < 1024:
            break
        value /= 1024
    else:
        unit = _UNITS[-1]

    if unit == "B":
        return f"{size_bytes}B"
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{unit}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
