#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/renderers/terminal.py
"""Styled terminal text rendering from AST.

This module provides the TerminalRenderer class which turns a parsed
Markdown tree into one :class:`~md2term.output.StyledText` for display in a
character-cell terminal. Inline formatting becomes text effects, headings
and links get accent colours, lists are re-numbered and indented, and fenced
code blocks are syntax highlighted.

The tree is walked iteratively with enter/exit events. Style and list state
opened when a node is entered is closed again when it is exited. Rendering
never fails on content: undecodable text, unknown languages, tokenizer
failures and unsupported node kinds all degrade to plain output.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from md2term.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Phase,
    SoftBreak,
    Strikethrough,
    Strong,
    TaskItem,
    Text,
    TreeWalker,
)
from md2term.ast.visitors import EnterExitVisitor
from md2term.constants import DEFAULT_TASK_SYMBOL
from md2term.highlight import CodeHighlighter, SyntaxTable, default_syntax_table, load_theme
from md2term.lists import ListTracker
from md2term.options.terminal import TerminalRendererOptions
from md2term.output import OutputBuffer, StyledText
from md2term.renderers.base import BaseRenderer
from md2term.styles import DEFAULT_STYLE, TERMINAL_DEFAULT, Color, Effect, StyleFrame, StyleStack
from md2term.utils.encoding import decode_literal

logger = logging.getLogger(__name__)

EMPHASIS_FRAME = StyleFrame.of(Effect.ITALIC)
STRONG_FRAME = StyleFrame.of(Effect.BOLD)
STRIKETHROUGH_FRAME = StyleFrame.of(Effect.STRIKETHROUGH)
BLOCK_QUOTE_FRAME = StyleFrame.of(Effect.DIM)

# code spans ignore the ambient style
CODE_SPAN_STYLE = StyleFrame.of(Effect.BOLD, foreground=TERMINAL_DEFAULT, background=TERMINAL_DEFAULT)


class TerminalRenderer(BaseRenderer):
    """Render AST documents to styled terminal text.

    The renderer itself keeps only its options; all traversal state lives in
    a per-call render pass, so one instance may serve concurrent calls.

    Parameters
    ----------
    options : TerminalRendererOptions or None, default = None
        Terminal rendering options

    Examples
    --------
    Basic usage:

        >>> from md2term.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Paragraph(children=[Text(literal="Hello "), Strong(children=[Text(literal="world")])])
        ... ])
        >>> TerminalRenderer().render(doc).plain
        'Hello world'

    """

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Initialize the terminal renderer with options."""
        BaseRenderer._validate_options_type(options, TerminalRendererOptions, "terminal")
        options = options or TerminalRendererOptions()
        super().__init__(options)
        self.options: TerminalRendererOptions = options

    def render(
        self,
        doc: Node,
        theme: Any = None,
        syntax_table: Optional[SyntaxTable] = None,
    ) -> StyledText:
        """Render a tree to styled text.

        Parameters
        ----------
        doc : Node
            Root of the tree, normally a Document
        theme : str, theme object or None, default = None
            Highlighting theme; defaults to ``options.code_theme``. Strings
            name a pygments style, other values go to the syntax table as is
        syntax_table : SyntaxTable or None, default = None
            Syntax definitions; defaults to the shared pygments table

        Returns
        -------
        StyledText
            The rendered tree

        """
        resolved_theme = load_theme(self.options.code_theme if theme is None else theme)
        table = syntax_table if syntax_table is not None else default_syntax_table()
        return _RenderPass(self.options, CodeHighlighter(table, resolved_theme)).run(doc)


class _RenderPass(EnterExitVisitor):
    """State of a single render call."""

    def __init__(self, options: TerminalRendererOptions, highlighter: CodeHighlighter):
        self.options = options
        self.highlighter = highlighter
        self.output = OutputBuffer()
        self.styles = StyleStack()
        self.lists = ListTracker(indent_unit=options.indent_unit, default_bullet=options.default_bullet)
        self.walker: Optional[TreeWalker] = None

        self._heading_marker_frame = StyleFrame(foreground=Color.from_ansi(options.heading_marker_color))
        self._heading_text_frame = StyleFrame(foreground=Color.from_ansi(options.heading_text_color))
        self._url_frame = StyleFrame.of(Effect.UNDERLINE, foreground=Color.from_ansi(options.link_color))

    def run(self, root: Node) -> StyledText:
        self.walker = TreeWalker(root)
        for node, phase in self.walker:
            node.accept(self, phase is Phase.ENTERING)
        return self.output.build()

    def _append_styled(self, text: str) -> None:
        self.output.append(text, self.styles.effective())

    def _toggle_frame(self, frame: StyleFrame, entering: bool) -> None:
        if entering:
            self.styles.push(frame)
        else:
            self.styles.pop()

    # Block-level nodes

    def visit_document(self, node: Document, entering: bool) -> None:
        pass

    def visit_heading(self, node: Heading, entering: bool) -> None:
        if entering:
            self.styles.push(self._heading_marker_frame)
            self._append_styled(self.options.heading_marker_char * node.level + " ")
            self.styles.pop()
            self.styles.push(self._heading_text_frame)
        else:
            self.styles.pop()
            self.output.append_plain("\n\n")

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        if entering:
            return
        # nothing but the root left to exit: this was the last content
        if self.walker is None or self.walker.pending <= 1:
            return
        self.output.append_plain("\n" if self.lists.depth > 0 else "\n\n")

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        self._toggle_frame(BLOCK_QUOTE_FRAME, entering)

    def visit_list(self, node: List, entering: bool) -> None:
        if entering:
            self.lists.push(node.kind, start=node.start, delimiter=node.delimiter)
            return
        self.lists.pop()
        if self.lists.depth == 0:
            self.output.append_plain("\n")

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        if entering:
            self.output.append_plain(self.lists.item_marker(node.bullet_char))

    def visit_task_item(self, node: TaskItem, entering: bool) -> None:
        if entering:
            self.visit_list_item(node, entering)
            symbol = (node.symbol or DEFAULT_TASK_SYMBOL) if node.checked else " "
            self.output.append_plain(f"[{symbol}] ")

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        if not entering:
            return
        if self.options.highlight_code:
            runs = self.highlighter.highlight(node.info, node.literal)
        else:
            runs = [(decode_literal(node.literal), DEFAULT_STYLE)]
        for text, style in runs:
            self.output.append(text, style)
        # the literal normally ends with its own newline
        self.output.append_plain("\n")

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        if entering:
            self.output.append_plain(decode_literal(node.literal))
            self.output.append_plain("\n")

    # Inline nodes

    def visit_text(self, node: Text, entering: bool) -> None:
        if entering:
            self._append_styled(decode_literal(node.literal))

    def visit_code(self, node: Code, entering: bool) -> None:
        if entering:
            self.output.append_plain("`")
            self.output.append(decode_literal(node.literal), CODE_SPAN_STYLE)
            self.output.append_plain("`")

    def visit_soft_break(self, node: SoftBreak, entering: bool) -> None:
        if entering:
            self.output.append_plain(" ")

    def visit_line_break(self, node: LineBreak, entering: bool) -> None:
        if entering:
            self.output.append_plain("\n")

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        self._toggle_frame(EMPHASIS_FRAME, entering)

    def visit_strong(self, node: Strong, entering: bool) -> None:
        self._toggle_frame(STRONG_FRAME, entering)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> None:
        self._toggle_frame(STRIKETHROUGH_FRAME, entering)

    def visit_link(self, node: Link, entering: bool) -> None:
        if not entering:
            self._append_url(node.url)

    def visit_image(self, node: Image, entering: bool) -> None:
        if not entering:
            self._append_url(node.url)

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> None:
        if entering:
            self.output.append_plain(decode_literal(node.literal))

    def _append_url(self, url: str) -> None:
        """Append `` (url)`` after link text; only the URL gets link styling."""
        self._append_styled(" (")
        self.styles.push(self._url_frame)
        self._append_styled(decode_literal(url))
        self.styles.pop()
        self._append_styled(")")


def render(
    root: Node,
    theme: Any = None,
    syntax_table: Optional[SyntaxTable] = None,
    options: TerminalRendererOptions | None = None,
) -> StyledText:
    """Render a document tree to styled terminal text.

    Parameters
    ----------
    root : Node
        Root of the tree, normally a Document
    theme : str, theme object or None, default = None
        Highlighting theme for fenced code blocks
    syntax_table : SyntaxTable or None, default = None
        Syntax definitions for fenced code blocks
    options : TerminalRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    StyledText
        The rendered tree

    Examples
    --------
    >>> from md2term.parsers.markdown import markdown_to_ast
    >>> render(markdown_to_ast("1. one\\n2. two")).plain
    '1. one\\n2. two\\n\\n'

    """
    return TerminalRenderer(options).render(root, theme=theme, syntax_table=syntax_table)
