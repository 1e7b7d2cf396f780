"""CLI entrypoints for ngcomp commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import ExtractionError
from .logging import configure_logging
from .orchestrator import ExtractionOrchestrator
from .ports.editors import ConsoleEditor, LineRange


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _line_range(value: str) -> LineRange:
    try:
        return LineRange.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngcomp",
        description="Extract a template fragment into a new Angular component.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Move the selected markup of a component into a new component.",
    )
    _add_verbose_option(extract_parser, suppress_default=True)
    extract_parser.add_argument(
        "document",
        help="Path to the component file being edited (template or class source).",
    )
    selection = extract_parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--lines",
        type=_line_range,
        help="Inclusive 1-based line range of the document to extract, e.g. 12:30.",
    )
    selection.add_argument(
        "--selection-file",
        help="Read the markup to extract from this file ('-' for stdin).",
    )
    extract_parser.add_argument(
        "--name",
        help="Name of the new component (prompted when omitted).",
    )
    extract_parser.add_argument(
        "--config",
        help="Directory or file path used to locate .ngcomp.yml (defaults to the document's folder).",
    )
    extract_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the class source lacks any metadata field instead of warning.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing the extract command.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ngcomp commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "extract" and args.selection_file == "-" and not args.name:
        parser.error("--name is required when the selection is read from stdin")

    verbose = bool(args.verbose)
    configure_logging(verbose=verbose)

    if args.command == "extract":
        document = Path(args.document)
        try:
            config = load_config(Path(args.config) if args.config else document.expanduser().resolve().parent)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        if args.strict:
            config.strict = True
        configure_logging(verbose=verbose, config=config)

        try:
            editor = ConsoleEditor.from_arguments(
                document,
                lines=args.lines,
                selection_file=args.selection_file,
                name=args.name,
            )
        except OSError as exc:
            parser.exit(1, f"Cannot read input: {exc}\n")

        orchestrator = ExtractionOrchestrator(editor, config=config)
        try:
            result = asyncio.run(orchestrator.run())
        except (ExtractionError, OSError) as exc:
            parser.exit(1, f"ngcomp extract failed: {exc}\nRun with --verbose for more details.\n")
        if result is None:
            return
        for path in result.files():
            print(f"Created {_relativize(path)}")
        if result.missing_fields:
            print(f"Not updated: {', '.join(result.missing_fields)}")
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
