"""Download third-party sources and generate fixture accessor modules."""

from .archive import ArchiveError, extract, unzip
from .fetch import download
from .generator import GenerationError, SourceGenerator
from .listing import list_dir_files
from .models import (
    ArchiveExtractionJob,
    GenerationRequest,
    LargeFileDescriptor,
    RemoteResource,
    StringFileDescriptor,
)
from .naming import derive_identifier
from .pipeline import FixturePipeline

__version__ = "0.1.0"

__all__ = [
    "ArchiveError",
    "ArchiveExtractionJob",
    "FixturePipeline",
    "GenerationError",
    "GenerationRequest",
    "LargeFileDescriptor",
    "RemoteResource",
    "SourceGenerator",
    "StringFileDescriptor",
    "derive_identifier",
    "download",
    "extract",
    "list_dir_files",
    "unzip",
]
