#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/output.py
"""Styled text produced by the terminal renderer.

:class:`OutputBuffer` accumulates ``(text, style)`` runs during a render and
:meth:`OutputBuffer.build` freezes them into a :class:`StyledText` value.
The concatenation of the span texts is always exactly the rendered string:
spans never overlap and never leave gaps, and empty runs are dropped.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from rich.text import Text as RichText

from md2term.styles import DEFAULT_STYLE, StyleFrame


@dataclass(frozen=True)
class StyledSpan:
    """Contiguous text run carrying one resolved style.

    Parameters
    ----------
    text : str
        Non-empty text of the run
    style : StyleFrame
        Resolved style of the run

    """

    text: str
    style: StyleFrame


@dataclass(frozen=True)
class StyledText:
    """Immutable sequence of styled spans.

    Parameters
    ----------
    spans : tuple of StyledSpan, default = ()
        Spans in display order

    """

    spans: tuple[StyledSpan, ...] = ()

    @property
    def plain(self) -> str:
        """The rendered text without styling."""
        return "".join(span.text for span in self.spans)

    def __len__(self) -> int:
        return sum(len(span.text) for span in self.spans)

    def __iter__(self) -> Iterator[StyledSpan]:
        return iter(self.spans)

    def __str__(self) -> str:
        return self.plain

    def offsets(self) -> Iterator[tuple[int, int, StyledSpan]]:
        """Yield ``(start, end, span)`` character offsets for every span."""
        position = 0
        for span in self.spans:
            end = position + len(span.text)
            yield position, end, span
            position = end

    def to_rich(self) -> RichText:
        """Convert to a :class:`rich.text.Text` for display.

        Examples
        --------
        >>> from rich.console import Console
        >>> Console().print(styled_text.to_rich(), end="")  # doctest: +SKIP

        """
        text = RichText(end="")
        for span in self.spans:
            text.append(span.text, style=span.style.to_rich())
        return text


class OutputBuffer:
    """Append-only accumulator of styled runs."""

    def __init__(self) -> None:
        self._spans: list[StyledSpan] = []

    def __len__(self) -> int:
        return len(self._spans)

    def append(self, text: str, style: StyleFrame) -> None:
        """Append ``text`` under a resolved ``style``; empty text is ignored."""
        if text:
            self._spans.append(StyledSpan(text, style))

    def append_plain(self, text: str) -> None:
        """Append ``text`` under the ambient default style."""
        self.append(text, DEFAULT_STYLE)

    def extend(self, styled: StyledText) -> None:
        """Append every span of an existing styled text."""
        for span in styled.spans:
            self.append(span.text, span.style)

    def build(self) -> StyledText:
        """Freeze the accumulated runs into a styled text value."""
        return StyledText(tuple(self._spans))
