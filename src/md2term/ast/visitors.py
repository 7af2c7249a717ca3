#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/ast/visitors.py
"""Visitor base class for enter/exit processing of AST nodes.

Visitors receive each node twice, once per boundary, through the node's
``accept(visitor, entering)`` double dispatch. The base class implements
every hook as a no-op so that subclasses only override the node kinds they
format; all other kinds are still traversed by the walker and their
descendants still surface.

Examples
--------
Counting text nodes:

    >>> class TextCounter(EnterExitVisitor):
    ...     def __init__(self):
    ...         self.count = 0
    ...
    ...     def visit_text(self, node, entering):
    ...         if entering:
    ...             self.count += 1

"""

from __future__ import annotations

from typing import Any

from md2term.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    DescriptionDetails,
    DescriptionItem,
    DescriptionList,
    DescriptionTerm,
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
    Superscript,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    ThematicBreak,
)


class EnterExitVisitor:
    """Base class for dual-visit AST visitors.

    Every ``visit_*`` method receives the node and a flag telling whether the
    walker is entering or exiting it. Unless overridden, each hook delegates
    to :meth:`generic_visit`, which does nothing.

    """

    def generic_visit(self, node: Node, entering: bool) -> Any:
        """Handle a node kind that has no dedicated formatting."""
        return None

    # Block-level nodes

    def visit_document(self, node: Document, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_front_matter(self, node: FrontMatter, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_heading(self, node: Heading, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_paragraph(self, node: Paragraph, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_code_block(self, node: CodeBlock, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_list(self, node: List, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_list_item(self, node: ListItem, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_task_item(self, node: TaskItem, entering: bool) -> Any:
        """Visit a TaskItem node; defaults to the plain list item hook."""
        return self.visit_list_item(node, entering)

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_table(self, node: Table, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_table_row(self, node: TableRow, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_table_cell(self, node: TableCell, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_footnote_definition(self, node: FootnoteDefinition, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_description_list(self, node: DescriptionList, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_description_item(self, node: DescriptionItem, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_description_term(self, node: DescriptionTerm, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_description_details(self, node: DescriptionDetails, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    # Inline nodes

    def visit_text(self, node: Text, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_code(self, node: Code, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_soft_break(self, node: SoftBreak, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_line_break(self, node: LineBreak, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_emphasis(self, node: Emphasis, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_strong(self, node: Strong, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_superscript(self, node: Superscript, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_link(self, node: Link, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_image(self, node: Image, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> Any:
        return self.generic_visit(node, entering)

    def visit_footnote_reference(self, node: FootnoteReference, entering: bool) -> Any:
        return self.generic_visit(node, entering)
