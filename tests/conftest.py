"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from sizemap.settings import Settings


@pytest.fixture
def sample_tree(tmp_path):
    """Directory with three subdirectories and one top-level file (64 bytes).

        tree/
            file3.txt              12
            subdir.1/file1.txt      7
            subdir.2/file2.txt      9
            subdir.2/file3.txt     16
            subdir.3/file5.txt     20
    """
    root = tmp_path / "tree"
    for name in ("subdir.1", "subdir.2", "subdir.3"):
        (root / name).mkdir(parents=True)
    (root / "subdir.1" / "file1.txt").write_bytes(b"writes\n")
    (root / "subdir.2" / "file2.txt").write_bytes(b".........")
    (root / "file3.txt").write_bytes(b"foobarfoobar")
    (root / "subdir.2" / "file3.txt").write_bytes(b"sometextgoeshere")
    (root / "subdir.3" / "file5.txt").write_bytes(b"blahblahblahblahblah")
    return root


@pytest.fixture
def deep_tree(tmp_path):
    """Files nested several levels below each immediate child."""
    root = tmp_path / "deep"
    (root / "a" / "b" / "c" / "d").mkdir(parents=True)
    (root / "a" / "top.bin").write_bytes(b"x" * 100)
    (root / "a" / "b" / "mid.bin").write_bytes(b"x" * 200)
    (root / "a" / "b" / "c" / "d" / "bottom.bin").write_bytes(b"x" * 300)
    (root / "e" / "f").mkdir(parents=True)
    (root / "e" / "f" / "leaf.bin").write_bytes(b"x" * 50)
    (root / "empty").mkdir()
    return root


@pytest.fixture
def deny_scandir(monkeypatch):
    """Make ``os.scandir`` raise for chosen paths.

    Returns a function taking a path and an exception instance; opening
    that path raises the exception from then on.  Works regardless of
    the user the tests run as.
    """
    real_scandir = os.scandir
    denied: dict[str, OSError] = {}

    def fake_scandir(path="."):
        error = denied.get(os.fspath(path))
        if error is not None:
            raise error
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def deny(path, error: OSError | None = None) -> None:
        denied[os.fspath(path)] = error or PermissionError(13, "Permission denied", os.fspath(path))

    return deny


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point settings at an empty temp config home and reset the singleton."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_home / "sizemap" / "settings.json"
