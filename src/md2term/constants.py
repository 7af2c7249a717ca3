#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2term.

This module centralizes the hardcoded values and default configuration
constants used across md2term.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Terminal Rendering - Markers, indentation and accent colours
3. Syntax Highlighting - Theme and first-line sniffing defaults
4. Chat Messages - Role labels and colours
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListKind = Literal["bullet", "ordered"]
ListDelimiter = Literal["period", "paren"]
RoleName = Literal["user", "system", "assistant"]

# =============================================================================
# Terminal Rendering
# =============================================================================

# ANSI palette indexes (0-7 normal, 8-15 bright)
ANSI_BLACK = 0
ANSI_RED = 1
ANSI_GREEN = 2
ANSI_YELLOW = 3
ANSI_BLUE = 4
ANSI_MAGENTA = 5
ANSI_CYAN = 6
ANSI_WHITE = 7
ANSI_PALETTE_SIZE = 16

DEFAULT_INDENT_UNIT = "  "
DEFAULT_BULLET_CHAR = "-"
DEFAULT_HEADING_MARKER_CHAR = "#"
DEFAULT_HEADING_MARKER_COLOR = ANSI_RED
DEFAULT_HEADING_TEXT_COLOR = ANSI_GREEN
DEFAULT_LINK_COLOR = ANSI_BLUE
DEFAULT_TASK_SYMBOL = "x"

LIST_DELIMITER_CHARS: dict[str, str] = {
    "period": ".",
    "paren": ")",
}

# =============================================================================
# Syntax Highlighting
# =============================================================================

DEFAULT_CODE_THEME = "ansi"

# (pattern, lexer alias) pairs tried against the first non-blank line of a
# fenced block whose info string did not name a known language
DEFAULT_FIRST_LINE_MATCHERS: tuple[tuple[str, str], ...] = (
    (r"^#!.*\bpython[0-9.]*\b", "python"),
    (r"^#!.*\b(?:ba|z|k|da)?sh\b", "bash"),
    (r"^#!.*\bnode\b", "javascript"),
    (r"^#!.*\bperl\b", "perl"),
    (r"^#!.*\bruby\b", "ruby"),
    (r"^#!.*\bphp\b", "php"),
    (r"^<\?php", "php"),
    (r"^<\?xml\b", "xml"),
    (r"(?i)^<!DOCTYPE\s+html", "html"),
)

# pygments ANSI colour names in palette order
PYGMENTS_ANSI_COLORS: tuple[str, ...] = (
    "ansiblack",
    "ansired",
    "ansigreen",
    "ansiyellow",
    "ansiblue",
    "ansimagenta",
    "ansicyan",
    "ansigray",
    "ansibrightblack",
    "ansibrightred",
    "ansibrightgreen",
    "ansibrightyellow",
    "ansibrightblue",
    "ansibrightmagenta",
    "ansibrightcyan",
    "ansiwhite",
)

# =============================================================================
# Chat Messages
# =============================================================================

ROLE_LABELS: dict[str, str] = {
    "user": "You",
    "assistant": "Assistant",
    "system": "System",
}

ROLE_COLORS: dict[str, int] = {
    "user": ANSI_CYAN,
    "assistant": ANSI_MAGENTA,
    "system": ANSI_GREEN,
}
