"""Runtime accessors referenced by generated fixture modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StringFileAccessor:
    """A named fixture whose content is held in memory."""

    name: str
    text: str

    def content(self) -> str:
        return self.text


@dataclass(frozen=True)
class LocalFileAccessor:
    """A named fixture read from disk each time its content is requested."""

    name: str
    path: Path

    def content(self) -> str:
        return self.path.read_text(encoding="utf-8")


def new_string_file_accessor(file_name: str, content: str) -> StringFileAccessor:
    return StringFileAccessor(name=file_name, text=content)


def new_local_file_accessor(file_name: str, file_path: str | Path) -> LocalFileAccessor:
    return LocalFileAccessor(name=file_name, path=Path(file_path))


__all__ = [
    "LocalFileAccessor",
    "StringFileAccessor",
    "new_local_file_accessor",
    "new_string_file_accessor",
]
