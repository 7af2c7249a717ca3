#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/lists.py
"""Nesting state for bullet and ordered lists.

One :class:`ListFrame` is kept per open list. Ordered frames count their own
items, so a nested list never disturbs the numbering of its parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from md2term.constants import (
    DEFAULT_BULLET_CHAR,
    DEFAULT_INDENT_UNIT,
    LIST_DELIMITER_CHARS,
    ListDelimiter,
    ListKind,
)
from md2term.exceptions import RenderingError

logger = logging.getLogger(__name__)


@dataclass
class ListFrame:
    """State of one open list.

    Parameters
    ----------
    kind : {"bullet", "ordered"}
        List type
    depth : int
        Nesting depth, 1 for an outermost list
    index : int, default = 1
        Number of the next item (ordered lists only)
    delimiter : {"period", "paren"}, default = "period"
        Character after the item number (ordered lists only)
    bullet : str, default = "-"
        Glyph used when an item does not carry its own (bullet lists only)

    """

    kind: ListKind
    depth: int
    index: int = 1
    delimiter: ListDelimiter = "period"
    bullet: str = DEFAULT_BULLET_CHAR


class ListTracker:
    """Stack of list frames mirroring the current list nesting.

    Parameters
    ----------
    indent_unit : str, default = "  "
        Indentation emitted once per nesting level above the first
    default_bullet : str, default = "-"
        Glyph for bullet items that do not record one

    Examples
    --------
    >>> tracker = ListTracker()
    >>> _ = tracker.push("ordered", start=5)
    >>> tracker.item_marker(), tracker.item_marker()
    ('5. ', '6. ')

    """

    def __init__(self, indent_unit: str = DEFAULT_INDENT_UNIT, default_bullet: str = DEFAULT_BULLET_CHAR):
        self.indent_unit = indent_unit
        self.default_bullet = default_bullet
        self._frames: list[ListFrame] = []

    @property
    def depth(self) -> int:
        """Current list nesting depth, 0 outside any list."""
        return len(self._frames)

    @property
    def current(self) -> Optional[ListFrame]:
        return self._frames[-1] if self._frames else None

    def push(self, kind: ListKind, start: int = 1, delimiter: ListDelimiter = "period") -> ListFrame:
        """Open a list.

        Parameters
        ----------
        kind : {"bullet", "ordered"}
            List type
        start : int, default = 1
            Number of the first item of an ordered list
        delimiter : {"period", "paren"}, default = "period"
            Delimiter of an ordered list

        Returns
        -------
        ListFrame
            The new innermost frame

        Raises
        ------
        RenderingError
            If ``kind`` or ``delimiter`` is not a known value

        """
        if kind not in ("bullet", "ordered"):
            raise RenderingError(f"Unknown list kind: {kind!r}")
        if delimiter not in LIST_DELIMITER_CHARS:
            raise RenderingError(f"Unknown list delimiter: {delimiter!r}")

        frame = ListFrame(
            kind=kind,
            depth=self.depth + 1,
            index=start if kind == "ordered" else 1,
            delimiter=delimiter,
            bullet=self.default_bullet,
        )
        self._frames.append(frame)
        return frame

    def pop(self) -> ListFrame:
        """Close the innermost list and return its frame."""
        return self._frames.pop()

    def item_marker(self, bullet_char: Optional[str] = None) -> str:
        """Return the marker for the next item of the innermost list.

        Bullet items get ``depth - 1`` indent units, the glyph and a space.
        Ordered items get the same indent, the current number, the delimiter
        and a space; the number is then advanced.

        Parameters
        ----------
        bullet_char : str or None, default = None
            Glyph recorded on the item itself, preferred over the frame's

        Returns
        -------
        str
            Indentation and marker text

        """
        frame = self.current
        if frame is None:
            # item outside any list: render it as a top-level bullet
            logger.debug("List item found outside of a list")
            return f"{bullet_char or self.default_bullet} "

        indent = self.indent_unit * (frame.depth - 1)
        if frame.kind == "bullet":
            return f"{indent}{bullet_char or frame.bullet} "

        marker = f"{indent}{frame.index}{LIST_DELIMITER_CHARS[frame.delimiter]} "
        frame.index += 1
        return marker
