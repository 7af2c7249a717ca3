#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the md2term parser and renderer."""

from md2term.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2term.options.markdown import MarkdownParserOptions
from md2term.options.terminal import TerminalRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "TerminalRendererOptions",
]
