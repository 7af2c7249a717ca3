#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/highlight/pygments_backend.py
"""Pygments implementation of the syntax table and line tokenizer.

Syntax definitions are pygments lexer classes wrapped in
:class:`SyntaxDefinition`. Themes are pygments :class:`~pygments.style.Style`
classes. Pygments styles that name ANSI palette colours (``ansired``,
``ansibrightblue`` ...) are reported to the bridge as palette entries; any
other colour is reported as a true colour and ends up as the terminal
default foreground.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_by_name, find_lexer_class_for_filename
from pygments.lexers.special import TextLexer
from pygments.style import Style
from pygments.token import _TokenType
from pygments.util import ClassNotFound

from md2term.constants import DEFAULT_FIRST_LINE_MATCHERS, PYGMENTS_ANSI_COLORS
from md2term.exceptions import HighlightError
from md2term.highlight.bridge import RGBA, FontStyle, HighlightStyle

logger = logging.getLogger(__name__)

_OPAQUE_DEFAULT = RGBA(0, 0, 0, 0xFF)


@dataclass(frozen=True)
class SyntaxDefinition:
    """A named pygments lexer class.

    Parameters
    ----------
    name : str
        Human readable language name
    lexer_class : type of Lexer
        Lexer used to tokenize blocks of this language

    """

    name: str
    lexer_class: type[Lexer]

    @classmethod
    def from_lexer_class(cls, lexer_class: type[Lexer]) -> SyntaxDefinition:
        return cls(name=lexer_class.name, lexer_class=lexer_class)

    def __str__(self) -> str:
        return self.name


def foreign_style(theme: type[Style], token_type: _TokenType) -> HighlightStyle:
    """Describe the theme's style for a token type in the bridge's model.

    Parameters
    ----------
    theme : type of pygments Style
        Highlighting theme
    token_type : pygments token type
        Token type to look up

    Returns
    -------
    HighlightStyle
        Palette colours carry alpha 0 and their index in the red channel

    """
    info = theme.style_for_token(token_type)

    font_style = FontStyle(0)
    if info["bold"]:
        font_style |= FontStyle.BOLD
    if info["italic"]:
        font_style |= FontStyle.ITALIC
    if info["underline"]:
        font_style |= FontStyle.UNDERLINE

    ansicolor = info.get("ansicolor")
    if ansicolor in PYGMENTS_ANSI_COLORS:
        foreground = RGBA(PYGMENTS_ANSI_COLORS.index(ansicolor), 0, 0, 0)
    elif info.get("color"):
        value = int(info["color"], 16)
        foreground = RGBA((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF)
    else:
        foreground = _OPAQUE_DEFAULT

    return HighlightStyle(foreground=foreground, font_style=font_style)


class PygmentsLineTokenizer:
    """Line-at-a-time view over one pygments token stream.

    The lexer runs once, lazily, over the whole block so that multi-line
    constructs (strings, comments, heredocs) keep their state across lines.
    Each :meth:`tokenize` call consumes exactly the characters of the line it
    is given, splitting tokens that straddle a line boundary.

    Parameters
    ----------
    lexer : pygments Lexer
        Lexer instance configured not to alter its input
    theme : type of pygments Style
        Highlighting theme
    source : str
        Complete block content, fed back line by line

    """

    def __init__(self, lexer: Lexer, theme: type[Style], source: str):
        self._language = lexer.name
        self._theme = theme
        self._source = source
        self._stream: Iterator[tuple[int, _TokenType, str]] = iter(lexer.get_tokens_unprocessed(source))
        self._pending: Optional[tuple[int, _TokenType, str]] = None
        self._offset = 0
        self._styles: dict[_TokenType, HighlightStyle] = {}

    def tokenize(self, line: str) -> list[tuple[HighlightStyle, str]]:
        """Return the ``(style, substring)`` pairs covering ``line``.

        Raises
        ------
        HighlightError
            If ``line`` is not the next line of the source or the token
            stream ends or jumps unexpectedly

        """
        start = self._offset
        end = start + len(line)
        if self._source[start:end] != line:
            raise HighlightError("Line does not continue the tokenized source", language=self._language)

        pairs: list[tuple[HighlightStyle, str]] = []
        while self._offset < end:
            index, token_type, value = self._next_token()
            if index != self._offset:
                raise HighlightError(
                    f"Token stream out of step at offset {self._offset} (token at {index})",
                    language=self._language,
                )
            take = min(len(value), end - index)
            if take < len(value):
                self._pending = (index + take, token_type, value[take:])
            pairs.append((self._style_for(token_type), value[:take]))
            self._offset += take
        return pairs

    def _next_token(self) -> tuple[int, _TokenType, str]:
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token
        for index, token_type, value in self._stream:
            if value:
                return index, token_type, value
        raise HighlightError("Token stream ended before the source", language=self._language)

    def _style_for(self, token_type: _TokenType) -> HighlightStyle:
        style = self._styles.get(token_type)
        if style is None:
            style = foreign_style(self._theme, token_type)
            self._styles[token_type] = style
        return style


class PygmentsSyntaxTable:
    """Syntax table backed by the pygments lexer registry.

    Parameters
    ----------
    first_line_matchers : iterable of (str, str), optional
        ``(pattern, lexer alias)`` pairs tried against the first non-blank
        line of a block. Defaults to shebang and document-type sniffing.

    Notes
    -----
    The table holds no mutable state after construction and may be shared
    between threads.

    """

    def __init__(self, first_line_matchers: Optional[Iterable[tuple[str, str]]] = None):
        matchers = DEFAULT_FIRST_LINE_MATCHERS if first_line_matchers is None else first_line_matchers
        self._first_line_matchers: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (re.compile(pattern), alias) for pattern, alias in matchers
        )
        self._plain_text = SyntaxDefinition.from_lexer_class(TextLexer)

    def find_by_token(self, token: str) -> Optional[SyntaxDefinition]:
        """Find a definition by lexer alias, then by file extension.

        Examples
        --------
        >>> PygmentsSyntaxTable().find_by_token("py").name
        'Python'

        """
        if not token:
            return None
        try:
            return SyntaxDefinition.from_lexer_class(find_lexer_class_by_name(token))
        except ClassNotFound:
            pass

        lexer_class = find_lexer_class_for_filename(f"file.{token}")
        if lexer_class is None:
            return None
        return SyntaxDefinition.from_lexer_class(lexer_class)

    def find_by_first_line(self, line: str) -> Optional[SyntaxDefinition]:
        for pattern, alias in self._first_line_matchers:
            if pattern.search(line):
                try:
                    return SyntaxDefinition.from_lexer_class(find_lexer_class_by_name(alias))
                except ClassNotFound:
                    logger.debug("First-line matcher names unknown lexer %r", alias)
        return None

    def plain_text(self) -> SyntaxDefinition:
        return self._plain_text

    def tokenizer(self, definition: SyntaxDefinition, theme: type[Style], source: str) -> PygmentsLineTokenizer:
        """Open a line tokenizer for one block."""
        lexer = definition.lexer_class(stripnl=False, stripall=False, ensurenl=False, tabsize=0)
        return PygmentsLineTokenizer(lexer, theme, source)


@lru_cache(maxsize=1)
def default_syntax_table() -> PygmentsSyntaxTable:
    """Return the shared default syntax table."""
    return PygmentsSyntaxTable()
