#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/cli.py
"""Command-line interface for events2md.

Renders a serialized document tree (JSON or YAML, as produced by
:func:`events2md.ast.ast_to_json`) to markdown.

Renderer options are generated from the fields of
:class:`~events2md.options.MarkdownRendererOptions`, using the ``help`` and
``type`` entries of their metadata.

Examples
--------
Render to stdout::

    $ events2md document.json

Render a YAML tree to a file with narrow tables::

    $ events2md document.yaml --table-width 60 -o document.md

Preview in the terminal with rich formatting::

    $ events2md document.json --rich

Read from stdin::

    $ cat document.json | events2md - --input-format json

"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Optional, cast

from events2md.ast.nodes import Document
from events2md.ast.serialization import json_to_ast, yaml_to_ast
from events2md.constants import DEFAULT_INPUT_FORMAT, InputFormat
from events2md.exceptions import Events2MdError, ParsingError
from events2md.logging_utils import configure_logging
from events2md.options.markdown import MarkdownRendererOptions
from events2md.renderers.markdown import MarkdownRenderer
from events2md.utils.io_utils import read_text, write_text

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1

_OPTION_PREFIX = "markdown"

# Short spellings of frequently used options
_OPTION_ALIASES = {"table_width_stop": "--table-width"}

_YAML_EXTENSIONS = (".yaml", ".yml")


def _option_flag(name: str) -> str:
    return f"--{_OPTION_PREFIX}-{name.replace('_', '-')}"


def _add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one argument per renderer option field.

    Every argument defaults to None so that only options given on the
    command line override the option defaults.
    """
    group = parser.add_argument_group("Markdown rendering options")
    for option_field in fields(MarkdownRendererOptions):
        metadata = dict(option_field.metadata)
        flags = [_option_flag(option_field.name)]
        if option_field.name in _OPTION_ALIASES:
            flags.insert(0, _OPTION_ALIASES[option_field.name])

        kwargs: dict[str, Any] = {
            "dest": f"{_OPTION_PREFIX}_{option_field.name}",
            "default": None,
            "help": metadata.get("help", f"Configure {option_field.name}"),
        }
        if option_field.default is not MISSING and isinstance(option_field.default, bool):
            kwargs["action"] = "store_true"
        else:
            kwargs["type"] = metadata.get("type", str)
            kwargs["help"] += f" (default: {option_field.default})"
        group.add_argument(*flags, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="events2md",
        description="Render serialized document trees to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  events2md document.json
  events2md document.yaml --table-width 60 -o document.md
  cat document.json | events2md -
""",
    )
    parser.add_argument("input", help="Document tree file (JSON or YAML), or '-' for stdin")
    parser.add_argument("-o", "--out", help="Output file (default: stdout)")
    parser.add_argument(
        "--input-format",
        choices=["json", "yaml"],
        help="Input format (default: inferred from the file extension, json for stdin)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Show the rendered markdown with rich terminal formatting (ignored with --out)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")

    _add_options_arguments(parser)
    return parser


def _get_version() -> str:
    from events2md import __version__

    return __version__


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def detect_input_format(source: str, explicit: Optional[str] = None) -> InputFormat:
    """Pick the input format from an explicit choice or the file extension.

    Examples
    --------
        >>> detect_input_format("doc.yml")
        'yaml'
        >>> detect_input_format("-")
        'json'

    """
    if explicit is not None:
        if explicit not in ("json", "yaml"):
            raise ValueError(f"Unsupported input format: {explicit}")
        return cast(InputFormat, explicit)
    if Path(source).suffix.lower() in _YAML_EXTENSIONS:
        return "yaml"
    return DEFAULT_INPUT_FORMAT


def build_options(parsed_args: argparse.Namespace) -> MarkdownRendererOptions:
    """Create renderer options from the arguments given on the command line.

    Raises
    ------
    ValueError
        If an option value is out of range

    """
    overrides = {}
    for option_field in fields(MarkdownRendererOptions):
        value = getattr(parsed_args, f"{_OPTION_PREFIX}_{option_field.name}", None)
        if value is not None:
            overrides[option_field.name] = value
    return MarkdownRendererOptions(**overrides)


def print_rich_markdown(markdown: str) -> None:
    """Print markdown to stdout formatted by rich."""
    from rich.console import Console
    from rich.markdown import Markdown

    Console(file=sys.stdout).print(Markdown(markdown))


def load_document(source: str, input_format: InputFormat) -> Document:
    """Read and deserialize a document tree.

    Raises
    ------
    ParsingError
        If the input does not describe a document
    OSError
        If the input file cannot be read

    """
    text = sys.stdin.read() if source == "-" else read_text(source)
    node = yaml_to_ast(text) if input_format == "yaml" else json_to_ast(text)
    if not isinstance(node, Document):
        raise ParsingError(f"Root node must be a Document, got {type(node).__name__}", parsing_stage="structure")
    return node


def main(args: list[str] | None = None) -> int:
    """Execute the command-line entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    input_format = detect_input_format(parsed_args.input, parsed_args.input_format)
    logger.debug("Reading %s as %s", parsed_args.input, input_format)

    try:
        doc = load_document(parsed_args.input, input_format)
        renderer = MarkdownRenderer(options)
        if parsed_args.out:
            renderer.render(doc, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
        elif parsed_args.rich:
            print_rich_markdown(renderer.render_to_string(doc))
        else:
            write_text(renderer.render_to_string(doc), sys.stdout)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Events2MdError as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
