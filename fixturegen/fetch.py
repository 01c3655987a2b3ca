"""HTTP download step of the fixture pipeline."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional
from urllib.request import Request, urlopen

from .logging import get_logger
from .models import RemoteResource

_USER_AGENT = "fixturegen"
_CHUNK_SIZE = 64 * 1024

logger = get_logger("fetch")


def fetch(resource: RemoteResource, *, timeout: Optional[float] = None) -> Path:
    """Download ``resource.url`` into ``resource.destination``.

    Nothing is transferred when the destination file already exists. Network
    and filesystem failures propagate as ``OSError`` (``urllib.error.URLError``
    is one); a partially written file is left in place.
    """
    destination = Path(resource.destination)
    if destination.is_file():
        logger.info(
            "Skipping download of %s, %s is already present", resource.url, destination
        )
        return destination

    logger.debug("Creating directory %s", destination.parent)
    destination.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading %s into %s", resource.url, destination)
    request = Request(resource.url, headers={"User-Agent": _USER_AGENT})
    kwargs = {} if timeout is None else {"timeout": timeout}
    with urlopen(request, **kwargs) as response:  # type: ignore[arg-type]
        with destination.open("wb") as handle:
            shutil.copyfileobj(response, handle, _CHUNK_SIZE)
    return destination


def download(url: str, out_path: Path | str, *, timeout: Optional[float] = None) -> Path:
    """Convenience wrapper around :func:`fetch`."""
    return fetch(RemoteResource(url=url, destination=Path(out_path)), timeout=timeout)


__all__ = ["download", "fetch"]
