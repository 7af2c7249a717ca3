#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the top-level rendering API."""

import pytest

import md2term
from md2term import render_markdown
from md2term.ast import Document, Paragraph, Text
from md2term.exceptions import ValidationError
from md2term.options import MarkdownParserOptions, TerminalRendererOptions
from md2term.styles import Color, Effect


@pytest.mark.unit
class TestRenderMarkdown:
    """Tests for render_markdown."""

    def test_string_input(self) -> None:
        styled = render_markdown("# Title\n\nSome *emphasis*.")
        assert styled.plain == "# Title\n\nSome emphasis."
        assert next(s for s in styled if s.text == "emphasis").style.has(Effect.ITALIC)

    def test_bytes_input(self) -> None:
        assert render_markdown("héllo".encode("utf-8")).plain == "héllo"

    def test_document_input(self) -> None:
        doc = Document(children=[Paragraph(children=[Text(literal="built")])])
        assert render_markdown(doc).plain == "built"

    def test_renderer_kwargs(self) -> None:
        styled = render_markdown("[a](b)", link_color=3)
        assert next(s for s in styled if s.text == "b").style.foreground == Color.from_ansi(3)

    def test_parser_kwargs(self) -> None:
        assert render_markdown("~~x~~", parse_strikethrough=False).plain == "~~x~~"

    def test_kwargs_override_options(self) -> None:
        options = TerminalRendererOptions(heading_marker_char="=")
        styled = render_markdown("# T", renderer_options=options, heading_marker_char="*")
        assert styled.plain == "* T\n\n"

    def test_parser_options(self) -> None:
        options = MarkdownParserOptions(parse_frontmatter=False)
        assert "title" in render_markdown("---\ntitle: x\n---\n", parser_options=options).plain

    def test_unknown_kwarg(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            render_markdown("x", colour="red")
        assert exc_info.value.parameter_name == "colour"

    def test_package_exports(self) -> None:
        assert md2term.render_markdown is render_markdown
        assert md2term.format_message is not None
        assert md2term.__version__
