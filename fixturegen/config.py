"""Configuration loading for fixturegen (.fixturegen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".fixturegen.yml"
DOWNLOAD_DIR_ENV = "FIXTUREGEN_DOWNLOAD_DIR"

DEFAULT_SOURCE_URL = "https://github.com/falcosecurity/falco/archive/refs/tags/0.33.1.zip"
DEFAULT_ARCHIVE_NAME = "falco-code.zip"
DEFAULT_EXTRACT_ROOT = "falco-0.33.1"
DEFAULT_DOWNLOAD_DIR = "generated"
DEFAULT_PACKAGE = "fixtures"
DEFAULT_OUTPUT = "fixtures/sources.py"
DEFAULT_MAX_INLINE_BYTES = 64 * 1024


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SourceConfig:
    """Where the third-party archive comes from and how it unpacks."""

    url: str = DEFAULT_SOURCE_URL
    archive_name: str = DEFAULT_ARCHIVE_NAME
    extract_root: str = DEFAULT_EXTRACT_ROOT
    timeout: Optional[float] = None


@dataclass
class GenerateConfig:
    """Settings for the generated accessor module."""

    package: str = DEFAULT_PACKAGE
    output: Optional[Path] = None
    prefix: Optional[str] = None
    include: List[str] = field(default_factory=list)
    max_inline_bytes: int = DEFAULT_MAX_INLINE_BYTES
    templates_dir: Optional[Path] = None


@dataclass
class FixtureConfig:
    """Represents the settings defined in .fixturegen.yml."""

    root: Path
    download_dir: Path
    source: SourceConfig = field(default_factory=SourceConfig)
    generate: GenerateConfig = field(default_factory=GenerateConfig)

    @property
    def archive_path(self) -> Path:
        return self.download_dir / self.source.archive_name

    @property
    def extract_dir(self) -> Path:
        return self.download_dir / self.source.extract_root

    @property
    def output_path(self) -> Path:
        return self.generate.output or (self.root / DEFAULT_OUTPUT)


def load_config(config_path: Path) -> FixtureConfig:
    """Load configuration from ``config_path`` (a directory or the file itself)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    download_dir = _resolve_download_dir(root, _as_str(data.get("download_dir")))

    source = SourceConfig()
    source_data = _as_dict(data.get("source"))
    if source_data:
        source.url = _as_str(source_data.get("url")) or source.url
        source.archive_name = _as_str(source_data.get("archive_name")) or source.archive_name
        source.extract_root = _as_str(source_data.get("extract_root")) or source.extract_root
        source.timeout = _as_float(source_data.get("timeout"))

    generate = GenerateConfig()
    generate_data = _as_dict(data.get("generate"))
    if generate_data:
        generate.package = _as_str(generate_data.get("package")) or generate.package
        output = _as_str(generate_data.get("output"))
        generate.output = root / output if output else None
        generate.prefix = _as_str(generate_data.get("prefix"))
        generate.include = _as_str_list(generate_data.get("include"))
        max_inline = _as_int(generate_data.get("max_inline_bytes"))
        if max_inline is not None:
            if max_inline < 0:
                raise ConfigError("generate.max_inline_bytes must not be negative")
            generate.max_inline_bytes = max_inline
        templates_dir = _as_str(generate_data.get("templates_dir"))
        generate.templates_dir = root / templates_dir if templates_dir else None

    return FixtureConfig(root=root, download_dir=download_dir, source=source, generate=generate)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve_download_dir(root: Path, configured: Optional[str]) -> Path:
    override = os.getenv(DOWNLOAD_DIR_ENV)
    raw = override or configured or DEFAULT_DOWNLOAD_DIR
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "ConfigError",
    "FixtureConfig",
    "GenerateConfig",
    "SourceConfig",
    "load_config",
]
