"""Turns enumerated fixture files into accessor descriptors."""

from __future__ import annotations

import keyword
import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_MAX_INLINE_BYTES
from .generator import GenerationError
from .logging import get_logger
from .models import LargeFileDescriptor, StringFileDescriptor
from .naming import derive_identifier


class DuplicateIdentifierError(GenerationError):
    """Raised when two files derive the same accessor identifier."""


@dataclass
class DescriptorSet:
    """Descriptors produced for one batch of files."""

    string_files: List[StringFileDescriptor] = field(default_factory=list)
    large_files: List[LargeFileDescriptor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.string_files) + len(self.large_files)


class DescriptorBuilder:
    """Classifies files as inline or on-disk accessors and names them."""

    def __init__(
        self,
        prefix: str,
        *,
        max_inline_bytes: int = DEFAULT_MAX_INLINE_BYTES,
        include: Sequence[str] | None = None,
    ) -> None:
        self.prefix = prefix
        self.max_inline_bytes = max_inline_bytes
        self.include = list(include or [])
        self.logger = get_logger("descriptors")

    def select(self, paths: Iterable[str]) -> List[str]:
        """Return the paths matching the include patterns, in input order."""
        if not self.include:
            return list(paths)
        selected = []
        for path in paths:
            relative = self._relative(path)
            if any(fnmatchcase(relative, pattern) for pattern in self.include):
                selected.append(path)
        return selected

    def build(self, paths: Iterable[str]) -> DescriptorSet:
        """Build descriptors for ``paths``.

        Files no larger than ``max_inline_bytes`` are embedded as text, the
        rest are referenced by path. Raises :class:`DuplicateIdentifierError`
        when two paths map to the same identifier.
        """
        result = DescriptorSet()
        owners: Dict[str, str] = {}
        for path in self.select(paths):
            var_name = self.identifier_for(path)
            if var_name in owners:
                raise DuplicateIdentifierError(
                    f"{path} and {owners[var_name]} both map to identifier {var_name!r}"
                )
            owners[var_name] = path

            file_name = self._relative(path)
            content = self._inline_content(path)
            if content is not None:
                result.string_files.append(
                    StringFileDescriptor(var_name=var_name, file_name=file_name, file_content=content)
                )
            else:
                result.large_files.append(
                    LargeFileDescriptor(var_name=var_name, file_name=file_name, file_path=path)
                )
        self.logger.debug(
            "Prepared %d inline and %d on-disk accessors",
            len(result.string_files),
            len(result.large_files),
        )
        return result

    def identifier_for(self, path: str) -> str:
        name = derive_identifier(path, self.prefix)
        if not name.isidentifier() or keyword.iskeyword(name):
            name = f"File{name}"
        return name

    def _inline_content(self, path: str) -> Optional[str]:
        size = os.path.getsize(path)
        if size > self.max_inline_bytes:
            self.logger.debug("%s is %d bytes; referencing it from disk", path, size)
            return None
        raw = Path(path).read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            self.logger.debug("%s is not UTF-8 text; referencing it from disk", path)
            return None

    def _relative(self, path: str) -> str:
        if self.prefix and path.startswith(self.prefix):
            return path[len(self.prefix):]
        return path


__all__ = ["DescriptorBuilder", "DescriptorSet", "DuplicateIdentifierError"]
