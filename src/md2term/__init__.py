"""md2term - Render Markdown as styled text for character-cell terminals.

md2term parses Markdown into a small document tree and renders that tree into
a single styled text value: a sequence of text runs, each carrying one
resolved style (text effects plus foreground and background colours). The
styled text can be printed through rich or inspected directly.

Key Features
------------
- Inline formatting (emphasis, strong, strikethrough, code spans) as effects
- Coloured heading markers and headings, underlined link targets
- Re-numbered, indented ordered and bullet lists, including task lists
- Dimmed block quotes
- Syntax highlighted fenced code blocks using pygments, with an ANSI palette
  theme by default
- Chat message formatting with coloured role labels

Requirements
------------
- Python 3.10+
- mistune, pygments and rich

Examples
--------
Rendering a Markdown string:

    >>> from md2term import render_markdown
    >>> styled = render_markdown("# Title\\n\\nSome *emphasis*.")
    >>> styled.plain
    '# Title\\n\\nSome emphasis.'

Printing to the terminal:

    >>> from rich.console import Console
    >>> Console().print(styled.to_rich(), end="")  # doctest: +SKIP

Rendering a tree built by hand:

    >>> from md2term import render
    >>> from md2term.ast import Document, Paragraph, Text
    >>> render(Document(children=[Paragraph(children=[Text(literal="hi")])])).plain
    'hi'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from md2term.api import render_markdown
from md2term.exceptions import (
    HighlightError,
    InvalidOptionsError,
    Md2TermError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2term.messages import Message, Role, format_message
from md2term.options import MarkdownParserOptions, TerminalRendererOptions
from md2term.output import OutputBuffer, StyledSpan, StyledText
from md2term.parsers.markdown import markdown_to_ast
from md2term.renderers.terminal import TerminalRenderer, render

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main API
    "render",
    "render_markdown",
    "markdown_to_ast",
    "format_message",
    # Types
    "Message",
    "Role",
    "StyledSpan",
    "StyledText",
    "OutputBuffer",
    "TerminalRenderer",
    # Options
    "MarkdownParserOptions",
    "TerminalRendererOptions",
    # Exceptions
    "Md2TermError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "HighlightError",
    "RenderingError",
]
