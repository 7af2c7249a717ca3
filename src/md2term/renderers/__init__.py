#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the md2term AST into styled output."""

from md2term.renderers.base import BaseRenderer
from md2term.renderers.terminal import TerminalRenderer, render

__all__ = ["BaseRenderer", "TerminalRenderer", "render"]
