#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed Markdown documents.

The module consists of three components:

- nodes: AST node classes representing document structure
- traversal: iterative dual-visit walker over a tree
- visitors: enter/exit visitor base class

Examples
--------
    >>> from md2term.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(literal="Title")]),
    ...     Paragraph(children=[Text(literal="Hello world")])
    ... ])

"""

from __future__ import annotations

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
from md2term.ast.traversal import Phase, TreeWalker
from md2term.ast.visitors import EnterExitVisitor

__all__ = [
    # Base
    "Node",
    # Block nodes
    "Document",
    "FrontMatter",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "TaskItem",
    "ThematicBreak",
    "HTMLBlock",
    "Table",
    "TableRow",
    "TableCell",
    "FootnoteDefinition",
    "DescriptionList",
    "DescriptionItem",
    "DescriptionTerm",
    "DescriptionDetails",
    # Inline nodes
    "Text",
    "Code",
    "SoftBreak",
    "LineBreak",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Superscript",
    "Link",
    "Image",
    "HTMLInline",
    "FootnoteReference",
    # Traversal
    "Phase",
    "TreeWalker",
    "EnterExitVisitor",
]
