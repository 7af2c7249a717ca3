#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the md2term AST."""

from md2term.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
