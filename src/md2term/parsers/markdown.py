#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown text to the md2term AST using
the mistune parser, with the strikethrough and task-list extensions enabled
by default. Front matter at the start of the text is captured verbatim in a
FrontMatter node.

"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import mistune

from md2term.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    FrontMatter,
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
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    ThematicBreak,
)
from md2term.constants import DEFAULT_BULLET_CHAR, DEFAULT_TASK_SYMBOL
from md2term.exceptions import InvalidOptionsError, ParsingError
from md2term.options.markdown import MarkdownParserOptions
from md2term.utils.encoding import decode_literal

logger = logging.getLogger(__name__)

_FRONTMATTER_FENCES = ("---", "+++")


class MarkdownToAstConverter:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")

    Without extensions:

        >>> options = MarkdownParserOptions(parse_strikethrough=False, parse_task_lists=False)
        >>> doc = MarkdownToAstConverter(options).parse("~~not struck~~")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        # We process tokens ourselves
        self._markdown = mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text; bytes are decoded as UTF-8 with replacement

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = decode_literal(input_data)

        children: list[Node] = []
        if self.options.parse_frontmatter:
            front_matter, markdown_content = self._extract_frontmatter(markdown_content)
            if front_matter is not None:
                children.append(front_matter)

        try:
            tokens, _state = self._markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", original_error=e) from e

        if isinstance(tokens, list):
            children.extend(self._process_tokens(tokens))

        return Document(children=children)

    def _extract_frontmatter(self, content: str) -> tuple[Optional[FrontMatter], str]:
        """Split a leading ``---`` or ``+++`` fenced block off the content.

        Returns
        -------
        tuple[FrontMatter or None, str]
            The front matter node, if any, and the remaining content

        """
        for fence in _FRONTMATTER_FENCES:
            if not (content.startswith(fence + "\n") or content.startswith(fence + "\r\n")):
                continue

            lines = content.splitlines(keepends=True)
            for i in range(1, len(lines)):
                if lines[i].strip() == fence:
                    literal = "".join(lines[: i + 1])
                    return FrontMatter(literal=literal), "".join(lines[i + 1 :])
        return None, content

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(literal=token.get("raw", ""))
        elif token_type == "footnotes":
            return self._process_footnotes(token)
        elif token_type == "blank_line":
            return None

        logger.debug("Skipping unsupported Markdown token type %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node; the full info string is kept

        """
        attrs = token.get("attrs", {})
        info = attrs.get("info", "") if isinstance(attrs, dict) else ""
        return CodeBlock(literal=token.get("raw", ""), info=(info or "").strip())

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'bullet' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        marker = token.get("bullet") or ""
        tight = token.get("tight", True)

        if ordered:
            delimiter = "paren" if marker == ")" else "period"
            node = List(kind="ordered", start=attrs.get("start", 1), delimiter=delimiter, tight=tight)
        else:
            node = List(kind="bullet", tight=tight)

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        for child in children:
            if not isinstance(child, dict):
                continue
            item = self._process_list_item(child)
            if ordered:
                item.delimiter = node.delimiter
            else:
                item.bullet_char = marker or DEFAULT_BULLET_CHAR
            node.children.append(item)

        return node

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token, including task list items."""
        content = self._process_tokens(token.get("children", []))

        if token.get("type") == "task_list_item":
            attrs = token.get("attrs", {})
            checked = bool(attrs.get("checked", False)) if isinstance(attrs, dict) else False
            return TaskItem(children=content, checked=checked, symbol=DEFAULT_TASK_SYMBOL if checked else None)

        return ListItem(children=content)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        The header row comes first, followed by the body rows.
        """
        table = Table()

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # header cells are direct children of table_head
                table.children.append(TableRow(is_header=True, children=self._process_table_cells(section)))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    table.children.append(TableRow(children=self._process_table_cells(row_token)))

        return table

    def _process_table_cells(self, row_token: dict[str, Any]) -> list[Node]:
        return [
            TableCell(children=self._process_inline_tokens(cell.get("children", [])))
            for cell in row_token.get("children", [])
            if cell.get("type") == "table_cell"
        ]

    def _process_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Process the footnote definitions collected at the end of the document."""
        definitions: list[Node] = []
        for item in token.get("children", []):
            attrs = item.get("attrs", {})
            identifier = str(attrs.get("key", "")) if isinstance(attrs, dict) else ""
            definitions.append(
                FootnoteDefinition(identifier=identifier, children=self._process_tokens(item.get("children", [])))
            )
        return definitions

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into AST nodes."""
        nodes: list[Node] = []

        if not isinstance(tokens, list):
            return nodes

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            url=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text becomes the node's children."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            url=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        return FootnoteReference(identifier=str(token.get("raw", "")))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unsupported tokens

        """
        token_type = token.get("type", "")

        if token_type == "text":
            return Text(literal=token.get("raw", ""))
        if token_type == "codespan":
            return Code(literal=token.get("raw", ""))
        if token_type == "inline_html":
            return HTMLInline(literal=token.get("raw", ""))
        if token_type == "softbreak":
            return SoftBreak()
        if token_type == "linebreak":
            return LineBreak()

        containers: dict[str, type[Node]] = {
            "strong": Strong,
            "emphasis": Emphasis,
            "strikethrough": Strikethrough,
        }
        if token_type in containers:
            return containers[token_type](children=self._process_inline_tokens(token.get("children", [])))

        handler_map: dict[str, Any] = {
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Skipping unsupported inline Markdown token type %r", token_type)
        return None


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to AST.

    This is a convenience function that creates a converter and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
