"""Tests for fixturegen.archive."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from fixturegen.archive import ArchiveError, extract, unzip
from fixturegen.models import ArchiveExtractionJob
from tests._fixtures.archives import build_zip

FILES = {
    "root/a.txt": "hello",
    "root/sub/b.txt": "world",
    "root/sub/deeper/c.txt": "!",
}


def test_extract_writes_files_and_directories(tmp_path: Path) -> None:
    archive = build_zip(tmp_path / "code.zip", FILES, directories=["root/", "root/empty/"])
    out_dir = tmp_path / "out"

    written = extract(ArchiveExtractionJob(archive_path=archive, destination_dir=out_dir))

    assert (out_dir / "root" / "a.txt").read_text(encoding="utf-8") == "hello"
    assert (out_dir / "root" / "sub" / "b.txt").read_text(encoding="utf-8") == "world"
    assert (out_dir / "root" / "sub" / "deeper" / "c.txt").read_text(encoding="utf-8") == "!"
    assert (out_dir / "root" / "empty").is_dir()
    assert written == [
        str(out_dir / "root"),
        str(out_dir / "root" / "empty"),
        str(out_dir / "root" / "a.txt"),
        str(out_dir / "root" / "sub" / "b.txt"),
        str(out_dir / "root" / "sub" / "deeper" / "c.txt"),
    ]


def test_extract_second_run_writes_nothing(tmp_path: Path) -> None:
    archive = build_zip(tmp_path / "code.zip", FILES)
    out_dir = tmp_path / "out"

    first = unzip(archive, out_dir)
    second = unzip(archive, out_dir)

    assert len(first) == len(FILES)
    assert second == []


def test_extract_resumes_after_partial_run(tmp_path: Path) -> None:
    archive = build_zip(tmp_path / "code.zip", FILES)
    out_dir = tmp_path / "out"
    already = out_dir / "root" / "a.txt"
    already.parent.mkdir(parents=True)
    already.write_text("left over from an earlier run", encoding="utf-8")

    written = unzip(archive, out_dir)

    assert written == [
        str(out_dir / "root" / "sub" / "b.txt"),
        str(out_dir / "root" / "sub" / "deeper" / "c.txt"),
    ]
    assert already.read_text(encoding="utf-8") == "left over from an earlier run"


def test_extract_rejects_malformed_archive(tmp_path: Path) -> None:
    archive = tmp_path / "broken.zip"
    archive.write_bytes(b"this is not a zip file")

    with pytest.raises(ArchiveError):
        unzip(archive, tmp_path / "out")


def test_extract_missing_archive_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        unzip(tmp_path / "missing.zip", tmp_path / "out")


def test_extract_refuses_entries_outside_destination(tmp_path: Path) -> None:
    archive = tmp_path / "evil.zip"
    with zipfile.ZipFile(archive, "w") as handle:
        handle.writestr("../escape.txt", "nope")

    with pytest.raises(ArchiveError):
        unzip(archive, tmp_path / "out")
    assert not (tmp_path / "escape.txt").exists()


def test_extract_aborts_on_first_write_failure(tmp_path: Path) -> None:
    archive = build_zip(tmp_path / "code.zip", {"root/sub/b.txt": "world", "root/z.txt": "z"})
    out_dir = tmp_path / "out"
    (out_dir / "root").mkdir(parents=True)
    (out_dir / "root" / "sub").write_text("a file where a directory belongs", encoding="utf-8")

    # root/sub exists as a file, so root/sub/b.txt cannot be created.
    with pytest.raises(OSError):
        unzip(archive, out_dir)
    assert not (out_dir / "root" / "z.txt").exists()
