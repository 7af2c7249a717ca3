#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/highlight/themes.py
"""Highlighting themes.

The default theme, :class:`AnsiStyle`, only uses the 16 ANSI palette colours
so highlighted code follows whatever palette the user's terminal is set to.
Any installed pygments style can be selected by name instead; its true-colour
entries render in the terminal's default foreground.
"""

from __future__ import annotations

import logging
from typing import Any

from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    String,
    Token,
)
from pygments.util import ClassNotFound

from md2term.constants import DEFAULT_CODE_THEME
from md2term.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AnsiStyle(Style):
    """Pygments style restricted to the terminal's ANSI palette."""

    name = "ansi"

    styles = {
        Token: "",
        Comment: "italic ansibrightblack",
        Comment.Preproc: "noitalic ansimagenta",
        Keyword: "bold ansimagenta",
        Keyword.Constant: "nobold ansicyan",
        Keyword.Type: "nobold ansiyellow",
        Operator.Word: "bold ansimagenta",
        Name.Builtin: "ansicyan",
        Name.Function: "ansiblue",
        Name.Class: "bold ansiyellow",
        Name.Namespace: "ansiyellow",
        Name.Decorator: "ansicyan",
        Name.Tag: "ansired",
        Name.Attribute: "ansiyellow",
        Name.Exception: "ansired",
        String: "ansigreen",
        String.Escape: "ansicyan",
        String.Interpol: "ansicyan",
        String.Regex: "ansicyan",
        Number: "ansiyellow",
        Generic.Heading: "bold ansiblue",
        Generic.Subheading: "bold ansicyan",
        Generic.Deleted: "ansired",
        Generic.Inserted: "ansigreen",
        Generic.Emph: "italic",
        Generic.Strong: "bold",
        Generic.Prompt: "bold ansibrightblack",
        Error: "ansired",
    }


def load_theme(theme: Any = None) -> Any:
    """Resolve a highlighting theme.

    Parameters
    ----------
    theme : str, theme object or None, default = None
        ``None`` or ``"ansi"`` selects :class:`AnsiStyle`; any other string is
        looked up among the installed pygments styles. Anything else, such as
        a pygments Style class or a theme for a custom syntax table, is
        returned unchanged

    Returns
    -------
    Any
        The theme, a pygments Style class when resolved by name

    Raises
    ------
    ValidationError
        If no pygments style has the given name

    """
    if theme is None:
        return AnsiStyle
    if not isinstance(theme, str):
        return theme
    if theme == DEFAULT_CODE_THEME:
        return AnsiStyle

    try:
        return get_style_by_name(theme)
    except ClassNotFound as e:
        raise ValidationError(
            f"Unknown code theme: {theme!r}",
            parameter_name="theme",
            parameter_value=theme,
            original_error=e,
        ) from e
