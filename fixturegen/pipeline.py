"""Pipeline orchestration for the fetch, extract, list and generate flow."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import List, Optional

from .archive import extract
from .config import FixtureConfig
from .descriptors import DescriptorBuilder
from .fetch import fetch
from .generator import SourceGenerator
from .listing import list_dir_files
from .logging import get_logger
from .models import ArchiveExtractionJob, GenerationRequest, RemoteResource


class FixturePipeline:
    """Prepares the third-party source tree and the accessor module built from it.

    The download directory doubles as a cache keyed by path: an existing
    archive is not downloaded again and existing entries are not re-extracted.
    Nothing guards against two processes sharing the same directory, so runs
    must not overlap.
    """

    def __init__(
        self,
        config: FixtureConfig,
        *,
        generator: SourceGenerator | None = None,
    ) -> None:
        self.config = config
        self.generator = generator or SourceGenerator(config.generate.templates_dir)
        self.logger = get_logger("pipeline")

    def fetch_and_enumerate(self) -> List[str]:
        """Download and unpack the source archive, then list its files.

        Each stage runs only if the previous one succeeded; the first error is
        raised to the caller.
        """
        config = self.config
        self.logger.info("Preparing %s in %s", config.source.url, config.download_dir)

        fetch(
            RemoteResource(url=config.source.url, destination=config.archive_path),
            timeout=config.source.timeout,
        )
        extract(
            ArchiveExtractionJob(
                archive_path=config.archive_path,
                destination_dir=config.download_dir,
            )
        )
        files = list_dir_files(config.extract_dir, recursive=True)
        self.logger.info("Found %d files under %s", len(files), config.extract_dir)
        return files

    def build_request(
        self,
        files: List[str],
        *,
        package_name: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> GenerationRequest:
        """Assemble a :class:`GenerationRequest` for ``files``."""
        settings = self.config.generate
        builder = DescriptorBuilder(
            self._identifier_prefix(),
            max_inline_bytes=settings.max_inline_bytes,
            include=settings.include,
        )
        descriptors = builder.build(files)
        return GenerationRequest(
            timestamp=timestamp or datetime.now(UTC),
            package_name=package_name or settings.package,
            string_files=descriptors.string_files,
            large_files=descriptors.large_files,
        )

    def generate(
        self,
        output: Path | None = None,
        *,
        package_name: Optional[str] = None,
        timestamp: Optional[datetime] = None,
        dry_run: bool = False,
    ) -> tuple[GenerationRequest, str]:
        """Run the whole pipeline and render the accessor module.

        Returns the request together with the rendered text. The module is
        written to ``output`` (or the configured output path) unless
        ``dry_run`` is set.
        """
        files = self.fetch_and_enumerate()
        request = self.build_request(files, package_name=package_name, timestamp=timestamp)
        if dry_run:
            self.logger.info("Dry-run completed; accessor module not written")
            return request, self.generator.generate(request)

        text = self.generator.write(request, output or self.config.output_path)
        return request, text

    def _identifier_prefix(self) -> str:
        prefix = self.config.generate.prefix
        base = self.config.download_dir / prefix if prefix else self.config.extract_dir
        return f"{str(base).rstrip('/')}/"


__all__ = ["FixturePipeline"]
