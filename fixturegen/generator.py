"""Renders generated Python modules that declare fixture accessors."""

from __future__ import annotations

import keyword
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .logging import get_logger
from .models import GenerationRequest

TEMPLATE_NAME = "accessors.py.j2"


class GenerationError(RuntimeError):
    """Raised when a generation request cannot be rendered."""


class SourceGenerator:
    """Renders a :class:`GenerationRequest` through a Jinja2 template."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("generator")

    def generate(self, request: GenerationRequest) -> str:
        """Return the module text for ``request``.

        String bindings come first, then file-reference bindings, each in the
        order given by the request.
        """
        self._check_names(request)
        try:
            template = self._env.get_template(TEMPLATE_NAME)
            return template.render(
                timestamp=request.timestamp.isoformat(),
                package_name=request.package_name,
                string_files=request.string_files,
                large_files=request.large_files,
                var_names=request.var_names(),
            )
        except TemplateError as exc:
            raise GenerationError(f"Failed to render {TEMPLATE_NAME}: {exc}") from exc

    def write(self, request: GenerationRequest, path: Path) -> str:
        """Render ``request``, write it to ``path`` and return the text."""
        text = self.generate(request)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        self.logger.info(
            "Wrote %d string and %d file accessors to %s",
            len(request.string_files),
            len(request.large_files),
            path,
        )
        return text

    @staticmethod
    def _check_names(request: GenerationRequest) -> None:
        parts = request.package_name.split(".")
        if not all(part.isidentifier() and not keyword.iskeyword(part) for part in parts):
            raise GenerationError(f"{request.package_name!r} is not a valid Python package name")
        seen: set[str] = set()
        for name in request.var_names():
            if not name.isidentifier() or keyword.iskeyword(name):
                raise GenerationError(f"{name!r} is not a valid Python identifier")
            if name in seen:
                raise GenerationError(f"Identifier {name!r} is declared more than once")
            seen.add(name)

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        default_dir = Path(__file__).with_name("templates")
        directories: List[str] = []
        if templates_dir is not None and templates_dir != default_dir:
            directories.append(str(templates_dir))
        directories.append(str(default_dir))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["pyliteral"] = python_literal
        return env


def python_literal(value: object) -> str:
    """Return ``value`` as a Python string literal.

    Multi-line text that can be embedded verbatim is emitted triple-quoted to
    keep generated files readable; anything else falls back to ``repr``.
    """
    text = str(value)
    if "\n" in text and _fits_triple_quotes(text):
        return f'"""{text}"""'
    return repr(text)


def _fits_triple_quotes(text: str) -> bool:
    if '"""' in text or "\\" in text or text.endswith('"'):
        return False
    return all(char in "\n\t" or char.isprintable() for char in text)


__all__ = ["GenerationError", "SourceGenerator", "python_literal"]
