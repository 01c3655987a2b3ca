"""Enumerate regular files below an extracted tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List


def list_dir_files(dir_path: Path | str, recursive: bool = True) -> List[str]:
    """Return the paths of regular files under ``dir_path``.

    Paths are built as ``dir_path + "/" + name`` and come back in the order the
    filesystem yields them. With ``recursive=False`` sub-directories are
    neither descended into nor reported. Symbolic links are never descended
    into: a link to a regular file is reported like a file, a link to a
    directory or a dangling link is skipped. An unreadable directory at any depth
    raises ``OSError`` and no partial result is returned.
    """
    base = str(dir_path)
    if not base.endswith("/"):
        base += "/"

    files: List[str] = []
    with os.scandir(base) as entries:
        for entry in entries:
            full_path = base + entry.name
            if entry.is_dir(follow_symlinks=False):
                if recursive:
                    files.extend(list_dir_files(full_path, recursive))
                continue
            if entry.is_file():
                files.append(full_path)
    return files


__all__ = ["list_dir_files"]
