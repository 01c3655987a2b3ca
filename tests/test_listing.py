"""Tests for fixturegen.listing."""

from __future__ import annotations

from pathlib import Path

import pytest

from fixturegen.listing import list_dir_files


def _seed_tree(root: Path) -> None:
    for relative in ("top.txt", "other.md", "a/one.txt", "a/b/two.txt", "a/b/c/three.txt"):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(relative, encoding="utf-8")
    (root / "empty").mkdir()


def test_recursive_listing_returns_every_file(tmp_path: Path) -> None:
    _seed_tree(tmp_path)

    files = list_dir_files(tmp_path, recursive=True)

    assert sorted(files) == sorted(
        f"{tmp_path}/{relative}"
        for relative in ("top.txt", "other.md", "a/one.txt", "a/b/two.txt", "a/b/c/three.txt")
    )


def test_shallow_listing_skips_directories(tmp_path: Path) -> None:
    _seed_tree(tmp_path)

    files = list_dir_files(str(tmp_path), recursive=False)

    assert sorted(files) == [f"{tmp_path}/other.md", f"{tmp_path}/top.txt"]


def test_listing_accepts_trailing_separator(tmp_path: Path) -> None:
    (tmp_path / "x.txt").write_text("x", encoding="utf-8")

    assert list_dir_files(f"{tmp_path}/") == [f"{tmp_path}/x.txt"]


def test_listing_empty_directory(tmp_path: Path) -> None:
    assert list_dir_files(tmp_path) == []


def test_listing_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list_dir_files(tmp_path / "missing")


def test_listing_does_not_follow_directory_symlinks(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "sub" / "loop").symlink_to(tmp_path, target_is_directory=True)
    (tmp_path / "sub" / "dangling").symlink_to(tmp_path / "missing.txt")
    (tmp_path / "alias.txt").symlink_to(tmp_path / "a.txt")

    files = list_dir_files(tmp_path, recursive=True)

    assert sorted(files) == [
        f"{tmp_path}/a.txt",
        f"{tmp_path}/alias.txt",
        f"{tmp_path}/sub/b.txt",
    ]
