"""ZIP extraction step of the fixture pipeline."""

from __future__ import annotations

import shutil
import zipfile
from pathlib import Path, PurePosixPath
from typing import List

from .logging import get_logger
from .models import ArchiveExtractionJob

logger = get_logger("archive")


class ArchiveError(OSError):
    """Raised when an archive cannot be read or holds an unsafe entry."""


def extract(job: ArchiveExtractionJob) -> List[str]:
    """Expand ``job.archive_path`` under ``job.destination_dir``.

    Entries are processed in archive order. An entry whose destination already
    exists is skipped, so re-running after an interrupted extraction only
    writes what is missing. Returns the destination paths written by this
    call. The first failure aborts the remaining entries.
    """
    archive_path = Path(job.archive_path)
    destination_dir = Path(job.destination_dir)
    logger.info("Unzipping %s into %s", archive_path, destination_dir)

    try:
        reader = zipfile.ZipFile(archive_path)
    except zipfile.BadZipFile as exc:
        raise ArchiveError(f"{archive_path} is not a valid ZIP archive: {exc}") from exc

    written: List[str] = []
    with reader:
        for info in reader.infolist():
            target = _entry_destination(destination_dir, info.filename)
            if target.exists():
                logger.info("Skipping extraction of %s as it is already present", target)
                continue

            logger.debug("Extracting %s", target)
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                try:
                    with reader.open(info) as source, target.open("wb") as sink:
                        shutil.copyfileobj(source, sink)
                except zipfile.BadZipFile as exc:
                    raise ArchiveError(f"Corrupt entry {info.filename} in {archive_path}: {exc}") from exc
            written.append(str(target))

    logger.debug("Extracted %d entries from %s", len(written), archive_path)
    return written


def unzip(archive_path: Path | str, out_dir: Path | str) -> List[str]:
    """Convenience wrapper around :func:`extract`."""
    return extract(ArchiveExtractionJob(archive_path=Path(archive_path), destination_dir=Path(out_dir)))


def _entry_destination(destination_dir: Path, name: str) -> Path:
    entry = PurePosixPath(name)
    if entry.is_absolute() or ".." in entry.parts:
        raise ArchiveError(f"Refusing to extract {name!r} outside of {destination_dir}")
    return destination_dir.joinpath(*entry.parts)


__all__ = ["ArchiveError", "extract", "unzip"]
