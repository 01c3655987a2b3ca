"""Plain descriptors passed between the fixture pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class RemoteResource:
    """A URL and the local path its body is persisted to."""

    url: str
    destination: Path


@dataclass(frozen=True)
class ArchiveExtractionJob:
    """A ZIP archive and the directory it expands into."""

    archive_path: Path
    destination_dir: Path


@dataclass(frozen=True)
class StringFileDescriptor:
    """Accessor whose content is embedded inline in the generated module."""

    var_name: str
    file_name: str
    file_content: str


@dataclass(frozen=True)
class LargeFileDescriptor:
    """Accessor that loads its content from disk when the fixture is used."""

    var_name: str
    file_name: str
    file_path: str


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to render one generated accessor module."""

    timestamp: datetime
    package_name: str
    string_files: Tuple[StringFileDescriptor, ...] = field(default_factory=tuple)
    large_files: Tuple[LargeFileDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but keep the request immutable.
        object.__setattr__(self, "string_files", tuple(self.string_files))
        object.__setattr__(self, "large_files", tuple(self.large_files))

    def var_names(self) -> list[str]:
        """Return every declared identifier in output order."""
        names = [item.var_name for item in self.string_files]
        names.extend(item.var_name for item in self.large_files)
        return names


__all__ = [
    "ArchiveExtractionJob",
    "GenerationRequest",
    "LargeFileDescriptor",
    "RemoteResource",
    "StringFileDescriptor",
]
