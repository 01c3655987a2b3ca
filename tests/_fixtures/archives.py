"""Helpers for building throwaway ZIP archives and faking downloads in tests."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Iterable, List, Mapping


def build_zip(path: Path, files: Mapping[str, str], directories: Iterable[str] = ()) -> Path:
    """Write a ZIP at ``path`` holding ``name -> text`` entries.

    Directory entries are written first, in the order given, followed by the
    files in mapping order.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for directory in directories:
            archive.writestr(directory.rstrip("/") + "/", "")
        for name, content in files.items():
            archive.writestr(name, content)
    return path


def zip_bytes(files: Mapping[str, str], directories: Iterable[str] = ()) -> bytes:
    """Return the raw bytes of a ZIP holding ``files``."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for directory in directories:
            archive.writestr(directory.rstrip("/") + "/", "")
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


class FakeUrlopen:
    """Stands in for ``urllib.request.urlopen`` and records every request."""

    def __init__(self, payload: bytes) -> None:
        self.payload = payload
        self.calls: List[dict[str, object]] = []

    def __call__(self, request, **kwargs):
        self.calls.append({"url": request.full_url, "timeout": kwargs.get("timeout")})
        return io.BytesIO(self.payload)


__all__ = ["FakeUrlopen", "build_zip", "zip_bytes"]
