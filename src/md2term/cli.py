#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/cli.py
"""Command line interface for md2term.

Renders a Markdown file, or standard input, to the terminal.

Usage
-----
    md2term README.md
    cat notes.md | md2term --theme monokai
    md2term reply.md --role assistant

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from md2term.api import render_markdown
from md2term.constants import DEFAULT_CODE_THEME
from md2term.exceptions import Md2TermError, ParsingError, RenderingError, ValidationError
from md2term.logging_utils import configure_logging
from md2term.messages import Message, Role, format_message
from md2term.options.terminal import TerminalRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the md2term command."""
    parser = argparse.ArgumentParser(
        prog="md2term",
        description="Render Markdown as styled text in the terminal.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to render, or '-' to read standard input (default)",
    )
    parser.add_argument(
        "--role",
        choices=[role.value for role in Role],
        help="Format the input as a chat message from this role",
    )
    parser.add_argument(
        "--theme",
        default=DEFAULT_CODE_THEME,
        help=f"Pygments style used for code blocks (default: {DEFAULT_CODE_THEME})",
    )
    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Show fenced code blocks without syntax highlighting",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    return parser


def _read_input(input_path: str) -> Union[str, bytes]:
    """Read the raw Markdown from a file or standard input."""
    if input_path == "-":
        stream = getattr(sys.stdin, "buffer", sys.stdin)
        return stream.read()
    return Path(input_path).read_bytes()


def main(args: Optional[list[str]] = None) -> int:
    """Execute the md2term command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        content = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: Cannot read '{parsed_args.input}': {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        options = TerminalRendererOptions(highlight_code=not parsed_args.no_highlight)
        if parsed_args.role:
            text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
            styled = format_message(
                Message(Role(parsed_args.role), text),
                theme=parsed_args.theme,
                options=options,
            )
        else:
            styled = render_markdown(content, theme=parsed_args.theme, renderer_options=options)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except Md2TermError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug("Rendered %d spans", len(styled.spans))

    console = Console(highlight=False)
    console.print(styled.to_rich(), end="", soft_wrap=True)
    return EXIT_SUCCESS
