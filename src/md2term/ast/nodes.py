#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/ast/nodes.py
"""AST node classes for parsed Markdown documents.

This module defines the node hierarchy produced by the Markdown parser and
consumed by the terminal renderer. Each node represents a structural or
inline element in the document and owns an ordered list of child nodes.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support a double dispatch
``accept(visitor, entering)`` used by the dual-visit tree walker.

Block-level nodes represent structural document elements:
    - Document, FrontMatter, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, TaskItem, ThematicBreak, HTMLBlock
    - Table, TableRow, TableCell
    - FootnoteDefinition, DescriptionList, DescriptionItem,
      DescriptionTerm, DescriptionDetails

Inline nodes represent text formatting:
    - Text, Code, SoftBreak, LineBreak
    - Emphasis, Strong, Strikethrough, Superscript
    - Link, Image, HTMLInline, FootnoteReference

Literal fields accept ``str`` or ``bytes``; renderers decode them leniently.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from md2term.constants import ListDelimiter, ListKind

Literal_ = str | bytes


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    children : list of Node
        Ordered child nodes
    metadata : dict
        Arbitrary metadata associated with this node

    """

    children: list[Node]
    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any, entering: bool) -> Any:
        """Accept a visitor for one boundary of this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_*`` methods
        entering : bool
            True on the entering visit, False on the exiting visit

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, entering)


@dataclass
class FrontMatter(Node):
    """Front matter block found at the very start of a document.

    Parameters
    ----------
    literal : str or bytes
        Raw front matter text including its fences

    """

    literal: Literal_ = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_front_matter``."""
        return visitor.visit_front_matter(self, entering)


@dataclass
class Heading(Node):
    """Heading node (ATX or setext).

    Parameters
    ----------
    level : int
        Heading level, 1 through 6
    children : list of Node, default = empty list
        Inline content of the heading

    """

    level: int
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_paragraph(self, entering)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    literal : str or bytes
        Source code, usually ending with a newline
    info : str, default = ""
        Info string of the fence; its first whitespace-delimited token is
        the language identifier

    """

    literal: Literal_
    info: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def language(self) -> str:
        """First whitespace-delimited token of the info string."""
        parts = self.info.split(maxsplit=1)
        return parts[0] if parts else ""

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, entering)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_block_quote(self, entering)


@dataclass
class List(Node):
    """Ordered or bullet list.

    Parameters
    ----------
    kind : {"bullet", "ordered"}
        List type
    start : int, default = 1
        Number of the first item (ordered lists only)
    delimiter : {"period", "paren"}, default = "period"
        Character following the item number (ordered lists only)
    tight : bool, default = True
        Whether the list is tight
    children : list of ListItem
        Items of the list

    """

    kind: ListKind
    start: int = 1
    delimiter: ListDelimiter = "period"
    tight: bool = True
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(Node):
    """List item containing block-level children.

    Parameters
    ----------
    bullet_char : str or None, default = None
        Bullet glyph used in the source (bullet lists only)
    delimiter : {"period", "paren"} or None, default = None
        Delimiter used in the source (ordered lists only)

    """

    bullet_char: Optional[str] = None
    delimiter: Optional[ListDelimiter] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, entering)


@dataclass
class TaskItem(ListItem):
    """List item carrying a task checkbox.

    Parameters
    ----------
    checked : bool, default = False
        Whether the box is ticked
    symbol : str or None, default = None
        Character used to tick the box in the source (``x`` or ``X``)

    """

    checked: bool = False
    symbol: Optional[str] = None

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_task_item``."""
        return visitor.visit_task_item(self, entering)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_thematic_break(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, emitted verbatim."""

    literal: Literal_ = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_html_block(self, entering)


@dataclass
class Table(Node):
    """Table; children are TableRow nodes, header row first."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_table(self, entering)


@dataclass
class TableRow(Node):
    """Table row; children are TableCell nodes."""

    is_header: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(Node):
    """Table cell containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_table_cell(self, entering)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition block.

    Parameters
    ----------
    identifier : str
        Footnote label
    children : list of Node
        Block content of the footnote

    """

    identifier: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_footnote_definition``."""
        return visitor.visit_footnote_definition(self, entering)


@dataclass
class DescriptionList(Node):
    """Description list; children are DescriptionItem nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_description_list(self, entering)


@dataclass
class DescriptionItem(Node):
    """One term with its details inside a description list."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_description_item(self, entering)


@dataclass
class DescriptionTerm(Node):
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_description_term(self, entering)


@dataclass
class DescriptionDetails(Node):
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_description_details(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    literal : str or bytes
        Text content

    """

    literal: Literal_ = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, entering)


@dataclass
class Code(Node):
    """Inline code span."""

    literal: Literal_ = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_code(self, entering)


@dataclass
class SoftBreak(Node):
    """Soft line break (a newline inside a paragraph)."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_soft_break(self, entering)


@dataclass
class LineBreak(Node):
    """Hard line break (trailing backslash or two trailing spaces)."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_line_break(self, entering)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_emphasis(self, entering)


@dataclass
class Strong(Node):
    """Strong (bold) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_strong(self, entering)


@dataclass
class Strikethrough(Node):
    """Struck-through inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_strikethrough(self, entering)


@dataclass
class Superscript(Node):
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_superscript(self, entering)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link destination
    title : str or None, default = None
        Optional link title
    children : list of Node
        Link text

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(Node):
    """Image reference; children hold the alt text.

    Parameters
    ----------
    url : str
        Image source
    title : str or None, default = None
        Optional image title

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, entering)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML, emitted verbatim."""

    literal: Literal_ = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_html_inline(self, entering)


@dataclass
class FootnoteReference(Node):
    """Reference to a footnote definition."""

    identifier: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_footnote_reference(self, entering)
