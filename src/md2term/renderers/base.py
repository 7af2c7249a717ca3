#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from.
The BaseRenderer provides a consistent interface for converting the md2term
AST into styled output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2term.ast import Document
from md2term.exceptions import InvalidOptionsError
from md2term.options.base import BaseRendererOptions
from md2term.output import StyledText


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, theme: Any = None, syntax_table: Any = None) -> StyledText:
        """Render the AST to styled text.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        theme : Any, optional
            Highlighting theme for code blocks
        syntax_table : Any, optional
            Syntax definitions for code blocks

        Returns
        -------
        StyledText
            The rendered document

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST and return only the unstyled text."""
        return self.render(doc).plain

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
