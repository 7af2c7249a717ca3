#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/highlight/bridge.py
"""Bridge between fenced code blocks and a line-oriented syntax highlighter.

The renderer only ever talks to :class:`CodeHighlighter`. The highlighter in
turn only relies on two narrow interfaces:

- :class:`SyntaxTable` resolves a syntax definition for a block (by language
  token, by first line, or the mandatory plain-text definition) and opens a
  tokenizer for it.
- :class:`LineTokenizer` turns one line at a time into ``(style, substring)``
  pairs, carrying its lexical state from line to line.

Tokenizer styles use a small foreign model (:class:`HighlightStyle`): an RGBA
foreground and a font-style bitmask. An alpha of zero marks a palette colour
whose index is stored in the red channel; any other alpha means "use the
terminal's default foreground". Backgrounds are always dropped.

"""

from __future__ import annotations

import logging
from enum import IntFlag
from typing import Any, NamedTuple, Optional, Protocol, runtime_checkable

from md2term.constants import ANSI_PALETTE_SIZE
from md2term.exceptions import HighlightError
from md2term.styles import DEFAULT_STYLE, TERMINAL_DEFAULT, Color, Effect, StyleFrame
from md2term.utils.encoding import decode_literal

logger = logging.getLogger(__name__)


class FontStyle(IntFlag):
    """Font-style bits reported by a tokenizer."""

    BOLD = 1
    UNDERLINE = 2
    ITALIC = 4


class RGBA(NamedTuple):
    """Foreground colour reported by a tokenizer."""

    r: int
    g: int
    b: int
    a: int


class HighlightStyle(NamedTuple):
    """Style attached to one tokenizer substring.

    Parameters
    ----------
    foreground : RGBA
        Foreground colour; ``a == 0`` marks a palette index stored in ``r``
    font_style : FontStyle
        Bold, italic and underline bits

    """

    foreground: RGBA
    font_style: FontStyle = FontStyle(0)


@runtime_checkable
class LineTokenizer(Protocol):
    """Stateful tokenizer fed one line (terminator included) at a time."""

    def tokenize(self, line: str) -> list[tuple[HighlightStyle, str]]: ...


@runtime_checkable
class SyntaxTable(Protocol):
    """Collection of syntax definitions known to the highlighter."""

    def find_by_token(self, token: str) -> Optional[Any]: ...

    def find_by_first_line(self, line: str) -> Optional[Any]: ...

    def plain_text(self) -> Any: ...

    def tokenizer(self, definition: Any, theme: Any, source: str) -> LineTokenizer: ...


_FONT_EFFECTS = (
    (FontStyle.BOLD, Effect.BOLD),
    (FontStyle.ITALIC, Effect.ITALIC),
    (FontStyle.UNDERLINE, Effect.UNDERLINE),
)


def translate_style(style: HighlightStyle) -> StyleFrame:
    """Translate a tokenizer style into a resolved terminal style.

    Parameters
    ----------
    style : HighlightStyle
        Style reported by the tokenizer

    Returns
    -------
    StyleFrame
        Resolved frame; the background is always the terminal default

    Examples
    --------
    >>> frame = translate_style(HighlightStyle(RGBA(2, 0, 0, 0), FontStyle.BOLD))
    >>> frame.foreground.ansi, sorted(e.value for e in frame.effects)
    (2, ['bold'])
    >>> translate_style(HighlightStyle(RGBA(255, 0, 0, 255))).foreground.is_default
    True

    """
    if style.foreground.a == 0:
        foreground = Color.from_ansi(style.foreground.r % ANSI_PALETTE_SIZE)
    else:
        foreground = TERMINAL_DEFAULT

    effects = frozenset(effect for bit, effect in _FONT_EFFECTS if style.font_style & bit)
    return StyleFrame(effects=effects, foreground=foreground, background=TERMINAL_DEFAULT)


def language_token(info: str) -> str:
    """Return the first whitespace-delimited token of a fence info string."""
    parts = info.split(maxsplit=1)
    return parts[0] if parts else ""


def split_lines(text: str) -> list[str]:
    """Split ``text`` after every newline, keeping the terminators."""
    lines = []
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        end = len(text) if end == -1 else end + 1
        lines.append(text[start:end])
        start = end
    return lines


def first_non_blank_line(text: str) -> str:
    """Return the first line of ``text`` that is not only whitespace."""
    for line in text.splitlines():
        if line.strip():
            return line.lstrip()
    return ""


class CodeHighlighter:
    """Highlight fenced code blocks for one render call.

    Parameters
    ----------
    syntax_table : SyntaxTable
        Read-only table of syntax definitions
    theme : Any
        Read-only theme understood by the table's tokenizers

    """

    def __init__(self, syntax_table: SyntaxTable, theme: Any):
        self.syntax_table = syntax_table
        self.theme = theme

    def resolve(self, info: str, literal: str) -> Any:
        """Resolve the syntax definition for a block.

        Tries, in order, an exact lookup of the info string's language token,
        a match of the literal's first non-blank line, and finally the
        plain-text definition.

        Parameters
        ----------
        info : str
            Fence info string
        literal : str
            Block content

        Returns
        -------
        Any
            Definition understood by the syntax table

        """
        token = language_token(info)
        if token:
            definition = self.syntax_table.find_by_token(token)
            if definition is not None:
                return definition
            logger.debug("No syntax found for language token %r", token)

        first_line = first_non_blank_line(literal)
        if first_line:
            definition = self.syntax_table.find_by_first_line(first_line)
            if definition is not None:
                return definition

        logger.debug("Falling back to plain text for code block (info=%r)", info)
        return self.syntax_table.plain_text()

    def highlight(self, info: str, literal: str | bytes) -> list[tuple[str, StyleFrame]]:
        """Tokenize a block into styled runs.

        Parameters
        ----------
        info : str
            Fence info string
        literal : str or bytes
            Block content

        Returns
        -------
        list of (str, StyleFrame)
            Runs whose texts concatenate to the decoded literal. If the
            tokenizer fails for any reason, a single unstyled run holding the
            whole literal is returned instead.

        """
        source = decode_literal(literal)
        if not source:
            return []

        try:
            definition = self.resolve(info, source)
            return self._tokenize(definition, source)
        except Exception as exc:
            logger.warning("Code highlighting failed, rendering block as plain text: %s", exc)
            return [(source, DEFAULT_STYLE)]

    def _tokenize(self, definition: Any, source: str) -> list[tuple[str, StyleFrame]]:
        tokenizer = self.syntax_table.tokenizer(definition, self.theme, source)
        runs: list[tuple[str, StyleFrame]] = []
        for line in split_lines(source):
            pairs = tokenizer.tokenize(line)
            if "".join(text for _, text in pairs) != line:
                raise HighlightError("Tokenizer output does not reproduce the input line", language=str(definition))
            runs.extend((text, translate_style(style)) for style, text in pairs if text)
        return runs
