"""Tests for scan root normalization."""

from __future__ import annotations

import os

import pytest

from sizemap.core.paths import normalize_root


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", "."),
        (".", "."),
        ("./", "."),
        (".//", "."),
        ("dir", "dir"),
        ("dir/", "dir"),
        ("dir//", "dir"),
        ("./dir", "dir"),
        ("./dir/", "dir"),
        ("dir1/dir2", os.path.join("dir1", "dir2")),
        ("dir1//dir2/", os.path.join("dir1", "dir2")),
        ("./dir1/./dir2", os.path.join("dir1", "dir2")),
        ("dir1/../dir2", "dir2"),
        ("..", ".."),
    ],
)
def test_normalize_relative(raw, expected):
    assert normalize_root(raw) == expected


@pytest.mark.skipif(os.sep != "/", reason="POSIX paths")
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/", "/"),
        ("//", "/"),
        ("///", "/"),
        ("/tmp/", "/tmp"),
        ("//tmp//x//", "/tmp/x"),
    ],
)
def test_normalize_absolute(raw, expected):
    assert normalize_root(raw) == expected


def test_normalize_is_idempotent():
    for raw in ("./a//b/", "a", ".", "/x/y/"):
        once = normalize_root(raw)
        assert normalize_root(once) == once


def test_never_ends_with_separator():
    for raw in ("a/", "a//", "./a/b///"):
        assert not normalize_root(raw).endswith(os.sep)
