"""CLI entrypoints for fixturegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .generator import GenerationError
from .logging import configure_logging
from .pipeline import FixturePipeline


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log every extracted entry and other debug detail.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding .fixturegen.yml, or the file itself (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixturegen",
        description="Download third-party sources and generate fixture accessor modules.",
    )
    _add_verbosity_options(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Download and extract the source archive, then report its files.",
    )
    _add_verbosity_options(fetch_parser, suppress_default=True)
    _add_path_argument(fetch_parser)
    fetch_parser.add_argument(
        "--list",
        action="store_true",
        help="Print every extracted file path.",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render the accessor module from the extracted sources.",
    )
    _add_verbosity_options(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Where to write the generated module (overrides generate.output).",
    )
    generate_parser.add_argument(
        "--package",
        default=None,
        help="Package name recorded in the generated module header.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated module instead of writing it.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fixturegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    try:
        config = load_config(Path(args.path))
    except (ConfigError, OSError) as exc:
        parser.exit(1, f"fixturegen: invalid configuration: {exc}\n")

    pipeline = FixturePipeline(config)

    if args.command == "fetch":
        try:
            files = pipeline.fetch_and_enumerate()
        except OSError as exc:
            parser.exit(1, f"fixturegen fetch failed: {exc}\nRun with --verbose for more details.\n")
        if args.list:
            for path in files:
                print(path)
        print(f"{len(files)} files available under {_relativize(config.extract_dir)}")
    elif args.command == "generate":
        dry_run = bool(args.dry_run)
        try:
            request, text = pipeline.generate(
                args.output,
                package_name=args.package,
                dry_run=dry_run,
            )
        except (OSError, GenerationError) as exc:
            parser.exit(1, f"fixturegen generate failed: {exc}\nRun with --verbose for more details.\n")
        if dry_run:
            print(text, end="")
        else:
            target = args.output or config.output_path
            count = len(request.string_files) + len(request.large_files)
            print(f"{count} accessors written to {_relativize(target)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
