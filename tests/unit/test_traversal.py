#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_traversal.py
"""Unit tests for the dual-visit tree walker and the enter/exit visitor.

Tests cover:
- Entering/exiting order for nested trees
- Pending worklist counts
- Deep nesting without recursion
- Visitor dispatch and the no-op default for unsupported kinds

"""

import pytest

from md2term.ast import (
    Document,
    EnterExitVisitor,
    Emphasis,
    List,
    ListItem,
    Paragraph,
    Phase,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    TreeWalker,
)


def _events(root):
    return [(type(node).__name__, phase) for node, phase in TreeWalker(root)]


@pytest.mark.unit
class TestTreeWalker:
    """Tests for TreeWalker ordering."""

    def test_single_node(self) -> None:
        """A childless root is entered and exited."""
        assert _events(Document()) == [("Document", Phase.ENTERING), ("Document", Phase.EXITING)]

    def test_children_visited_in_document_order(self) -> None:
        """Siblings are entered left to right, each completing before the next."""
        doc = Document(children=[
            Paragraph(children=[Text(literal="a")]),
            Paragraph(children=[Text(literal="b")]),
        ])
        names = [(name, phase.name) for name, phase in _events(doc)]
        assert names == [
            ("Document", "ENTERING"),
            ("Paragraph", "ENTERING"),
            ("Text", "ENTERING"),
            ("Text", "EXITING"),
            ("Paragraph", "EXITING"),
            ("Paragraph", "ENTERING"),
            ("Text", "ENTERING"),
            ("Text", "EXITING"),
            ("Paragraph", "EXITING"),
            ("Document", "EXITING"),
        ]

    def test_every_node_visited_exactly_twice(self) -> None:
        """Each node gets one entering and one exiting event."""
        inner = Text(literal="x")
        strong = Strong(children=[Emphasis(children=[inner])])
        doc = Document(children=[Paragraph(children=[strong])])

        events = list(TreeWalker(doc))
        assert len(events) == 10
        assert [phase for node, phase in events if node is inner] == [Phase.ENTERING, Phase.EXITING]

    def test_pending_counts_remaining_entries(self) -> None:
        """Pending reflects the worklist after the current entry was popped."""
        doc = Document(children=[Paragraph(children=[Text(literal="a")]), Paragraph()])
        walker = TreeWalker(doc)
        seen = {}
        for node, phase in walker:
            if isinstance(node, Paragraph) and phase is Phase.EXITING:
                seen.setdefault("exits", []).append(walker.pending)

        # first paragraph: second paragraph + document exit remain
        # last paragraph: only the document exit remains
        assert seen["exits"] == [2, 1]

    def test_deep_nesting_does_not_recurse(self) -> None:
        """A very deep tree is walked without hitting the recursion limit."""
        node = Text(literal="deep")
        for _ in range(5000):
            node = Strong(children=[node])
        doc = Document(children=[Paragraph(children=[node])])

        events = list(TreeWalker(doc))
        assert len(events) == 2 * 5003


class _Recorder(EnterExitVisitor):
    def __init__(self):
        self.calls = []

    def visit_paragraph(self, node, entering):
        self.calls.append(("paragraph", entering))

    def visit_list_item(self, node, entering):
        self.calls.append(("item", entering))


@pytest.mark.unit
class TestEnterExitVisitor:
    """Tests for visitor dispatch."""

    def test_accept_dispatches_by_kind(self) -> None:
        """accept calls the matching visit method with the phase flag."""
        recorder = _Recorder()
        Paragraph().accept(recorder, True)
        Paragraph().accept(recorder, False)
        assert recorder.calls == [("paragraph", True), ("paragraph", False)]

    def test_task_item_falls_back_to_list_item(self) -> None:
        """Task items reach visit_list_item unless overridden."""
        recorder = _Recorder()
        TaskItem(checked=True).accept(recorder, True)
        assert recorder.calls == [("item", True)]

    def test_unsupported_kinds_are_noops(self) -> None:
        """Table nodes are traversed without any visit side effects."""
        recorder = _Recorder()
        table = Table(children=[TableRow(children=[TableCell(children=[Text(literal="c")])])])
        for node, phase in TreeWalker(Document(children=[table, List(kind="bullet", children=[ListItem()])])):
            node.accept(recorder, phase is Phase.ENTERING)
        assert recorder.calls == [("item", True), ("item", False)]
