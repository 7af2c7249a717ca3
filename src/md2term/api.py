#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/api.py
"""High level entry points for rendering Markdown to the terminal."""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Union

from md2term.ast import Document
from md2term.exceptions import ValidationError
from md2term.highlight import SyntaxTable
from md2term.options.markdown import MarkdownParserOptions
from md2term.options.terminal import TerminalRendererOptions
from md2term.output import StyledText
from md2term.parsers.markdown import markdown_to_ast
from md2term.renderers.terminal import render

logger = logging.getLogger(__name__)


def _split_kwargs(
    kwargs: dict[str, Any],
    parser_options: MarkdownParserOptions,
    renderer_options: TerminalRendererOptions,
) -> tuple[MarkdownParserOptions, TerminalRendererOptions]:
    """Apply keyword overrides to whichever options class declares the field."""
    parser_fields = {f.name for f in fields(MarkdownParserOptions)}
    renderer_fields = {f.name for f in fields(TerminalRendererOptions)}

    parser_kwargs = {k: v for k, v in kwargs.items() if k in parser_fields}
    renderer_kwargs = {k: v for k, v in kwargs.items() if k in renderer_fields}

    unknown = set(kwargs) - parser_fields - renderer_fields
    if unknown:
        name = sorted(unknown)[0]
        raise ValidationError(f"Unknown option: {name}", parameter_name=name, parameter_value=kwargs[name])

    if parser_kwargs:
        parser_options = parser_options.create_updated(**parser_kwargs)
    if renderer_kwargs:
        renderer_options = renderer_options.create_updated(**renderer_kwargs)
    return parser_options, renderer_options


def render_markdown(
    source: Union[str, bytes, Document],
    *,
    theme: Any = None,
    syntax_table: Optional[SyntaxTable] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[TerminalRendererOptions] = None,
    **kwargs: Any,
) -> StyledText:
    r"""Render Markdown text to styled terminal text.

    Parameters
    ----------
    source : str, bytes or Document
        Markdown text, or a document that has already been parsed
    theme : str, theme object or None, default = None
        Highlighting theme for fenced code blocks
    syntax_table : SyntaxTable or None, default = None
        Syntax definitions for fenced code blocks
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options
    renderer_options : TerminalRendererOptions or None, default = None
        Terminal rendering options
    kwargs : Any
        Individual option overrides, routed to the parser or renderer options
        by field name

    Returns
    -------
    StyledText
        The rendered document

    Raises
    ------
    ValidationError
        If a keyword does not name a parser or renderer option

    Examples
    --------
    >>> render_markdown("**bold** text").plain
    'bold text'
    >>> render_markdown("```\nx = 1\n```", highlight_code=False).plain
    'x = 1\n\n'

    """
    parser_options, renderer_options = _split_kwargs(
        kwargs,
        parser_options or MarkdownParserOptions(),
        renderer_options or TerminalRendererOptions(),
    )

    if isinstance(source, Document):
        doc = source
    else:
        doc = markdown_to_ast(source, parser_options)

    return render(doc, theme=theme, syntax_table=syntax_table, options=renderer_options)
