"""Tests for PathResolver confinement."""

from __future__ import annotations

from pathlib import Path

import pytest

from file_agent.models.errors import InvalidFileNameError
from file_agent.services.path_resolver import PathResolver


def test_plain_name(tmp_path: Path):
    resolver = PathResolver(tmp_path)
    assert resolver.resolve("notes.txt") == tmp_path.resolve() / "notes.txt"


def test_base_dir_is_absolute_and_normalized(tmp_path: Path):
    (tmp_path / "a").mkdir()
    resolver = PathResolver(tmp_path / "a" / ".." / "a")
    assert resolver.base_dir == (tmp_path / "a").resolve()
    assert resolver.base_dir.is_absolute()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("../../etc/passwd", "passwd"),
        ("sub/dir/name.txt", "name.txt"),
        ("../secret", "secret"),
        ("/etc/hosts", "hosts"),
        ("..\\..\\win.ini", "win.ini"),
        ("dir/", "dir"),
    ],
)
def test_directory_part_is_dropped(tmp_path: Path, name: str, expected: str):
    resolver = PathResolver(tmp_path)
    path = resolver.resolve(name)
    assert path.name == expected
    assert path.parent == resolver.base_dir


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_rejected(tmp_path: Path, name):
    resolver = PathResolver(tmp_path)
    with pytest.raises(InvalidFileNameError, match="Filename cannot be empty"):
        resolver.resolve(name)


@pytest.mark.parametrize("name", [".", "..", "a/..", "/", "../.", "a/ "])
def test_unusable_segment_rejected(tmp_path: Path, name: str):
    resolver = PathResolver(tmp_path)
    with pytest.raises(InvalidFileNameError):
        resolver.resolve(name)


def test_invalid_name_error_is_value_error(tmp_path: Path):
    """Callers catching ValueError keep working."""
    with pytest.raises(ValueError):
        PathResolver(tmp_path).resolve("")
