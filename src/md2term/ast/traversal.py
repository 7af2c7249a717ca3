#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/ast/traversal.py
"""Iterative dual-visit traversal of document trees.

The walker keeps an explicit worklist of ``(node, phase)`` entries instead of
recursing, so deeply nested documents cannot exhaust the interpreter stack.
Every node is reported twice: once when it is entered and once when it is
exited, after all of its descendants have completed both of their events.

Examples
--------
>>> from md2term.ast import Document, Paragraph, Text
>>> doc = Document(children=[Paragraph(children=[Text(literal="hi")])])
>>> [(type(n).__name__, p.name) for n, p in TreeWalker(doc)]  # doctest: +NORMALIZE_WHITESPACE
[('Document', 'ENTERING'), ('Paragraph', 'ENTERING'), ('Text', 'ENTERING'),
 ('Text', 'EXITING'), ('Paragraph', 'EXITING'), ('Document', 'EXITING')]

"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from md2term.ast.nodes import Node


class Phase(Enum):
    """Boundary of a subtree being reported by the walker."""

    ENTERING = "entering"
    EXITING = "exiting"


class TreeWalker:
    """Explicit-stack walker yielding ``(node, phase)`` pairs in document order.

    Parameters
    ----------
    root : Node
        Root of the tree to walk. The tree must not be mutated while walking.

    Notes
    -----
    On ``ENTERING`` a node, the walker first schedules its ``EXITING`` entry and
    then schedules every child in reverse order, so that children are popped
    in document order. The walk terminates when the worklist is empty.

    """

    def __init__(self, root: Node):
        """Initialize the walker with the root entry scheduled."""
        self._worklist: list[tuple[Node, Phase]] = [(root, Phase.ENTERING)]

    @property
    def pending(self) -> int:
        """Number of entries still waiting on the worklist."""
        return len(self._worklist)

    def __iter__(self) -> Iterator[tuple[Node, Phase]]:
        worklist = self._worklist
        while worklist:
            node, phase = worklist.pop()
            if phase is Phase.ENTERING:
                worklist.append((node, Phase.EXITING))
                for child in reversed(node.children):
                    worklist.append((child, Phase.ENTERING))
            yield node, phase
