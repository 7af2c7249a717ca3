#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2term/options/terminal.py
"""Configuration options for terminal rendering.

This module defines options for rendering the AST to styled terminal text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2term.constants import (
    DEFAULT_BULLET_CHAR,
    DEFAULT_CODE_THEME,
    DEFAULT_HEADING_MARKER_CHAR,
    DEFAULT_HEADING_MARKER_COLOR,
    DEFAULT_HEADING_TEXT_COLOR,
    DEFAULT_INDENT_UNIT,
    DEFAULT_LINK_COLOR,
)
from md2term.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TerminalRendererOptions(BaseRendererOptions):
    """Configuration options for terminal rendering.

    Parameters
    ----------
    indent_unit : str, default "  "
        Indentation added per list nesting level above the first.
    default_bullet : str, default "-"
        Glyph for bullet items whose source glyph is unknown.
    heading_marker_char : str, default "#"
        Character repeated ``level`` times in front of headings.
    heading_marker_color : int, default 1
        ANSI palette index of the heading marker (red).
    heading_text_color : int, default 2
        ANSI palette index of the heading text (green).
    link_color : int, default 4
        ANSI palette index of link and image URLs (blue).
    highlight_code : bool, default True
        Whether fenced code blocks are syntax highlighted. When False the
        literal is emitted unstyled.
    code_theme : str, default "ansi"
        Name of the highlighting theme used when the caller passes none.

    Examples
    --------
        >>> options = TerminalRendererOptions(indent_unit="    ")
        >>> options.create_updated(link_color=6).link_color
        6

    """

    indent_unit: str = field(
        default=DEFAULT_INDENT_UNIT,
        metadata={"help": "Indentation per list nesting level", "type": str, "importance": "advanced"},
    )
    default_bullet: str = field(
        default=DEFAULT_BULLET_CHAR,
        metadata={"help": "Bullet glyph for items without one", "type": str, "importance": "advanced"},
    )
    heading_marker_char: str = field(
        default=DEFAULT_HEADING_MARKER_CHAR,
        metadata={"help": "Character repeated before headings", "type": str, "importance": "advanced"},
    )
    heading_marker_color: int = field(
        default=DEFAULT_HEADING_MARKER_COLOR,
        metadata={"help": "ANSI colour index of heading markers", "type": int, "importance": "core"},
    )
    heading_text_color: int = field(
        default=DEFAULT_HEADING_TEXT_COLOR,
        metadata={"help": "ANSI colour index of heading text", "type": int, "importance": "core"},
    )
    link_color: int = field(
        default=DEFAULT_LINK_COLOR,
        metadata={"help": "ANSI colour index of link URLs", "type": int, "importance": "core"},
    )
    highlight_code: bool = field(
        default=True,
        metadata={
            "help": "Syntax highlight fenced code blocks",
            "cli_name": "no-highlight",
            "importance": "core",
        },
    )
    code_theme: str = field(
        default=DEFAULT_CODE_THEME,
        metadata={"help": "Pygments style name for code blocks", "type": str, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate colour indexes and marker characters.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        self._require_ansi_index("heading_marker_color", "heading_text_color", "link_color")
        if len(self.heading_marker_char) != 1:
            raise ValueError(f"heading_marker_char must be a single character, got {self.heading_marker_char!r}")
        if not self.default_bullet:
            raise ValueError("default_bullet must not be empty")
