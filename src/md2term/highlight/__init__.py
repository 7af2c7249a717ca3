#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/highlight/__init__.py
"""Syntax highlighting for fenced code blocks.

- bridge: tokenizer/syntax-table interfaces and style translation
- pygments_backend: pygments-based syntax table and tokenizer
- themes: the ANSI palette theme and theme lookup
"""

from md2term.highlight.bridge import (
    RGBA,
    CodeHighlighter,
    FontStyle,
    HighlightStyle,
    LineTokenizer,
    SyntaxTable,
    translate_style,
)
from md2term.highlight.pygments_backend import (
    PygmentsLineTokenizer,
    PygmentsSyntaxTable,
    SyntaxDefinition,
    default_syntax_table,
)
from md2term.highlight.themes import AnsiStyle, load_theme

__all__ = [
    "RGBA",
    "AnsiStyle",
    "CodeHighlighter",
    "FontStyle",
    "HighlightStyle",
    "LineTokenizer",
    "PygmentsLineTokenizer",
    "PygmentsSyntaxTable",
    "SyntaxDefinition",
    "SyntaxTable",
    "default_syntax_table",
    "load_theme",
    "translate_style",
]
