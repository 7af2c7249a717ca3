#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for md2term.

This module defines the exception classes raised while parsing Markdown and
rendering it for the terminal.

Exception Hierarchy
-------------------
- Md2TermError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (Markdown input could not be parsed)

  - HighlightError (code tokenization failures)

  - RenderingError (malformed document trees)

Notes
-----
HighlightError never escapes a render call. The code highlighter catches it
and falls back to the unstyled literal of the affected block.

"""

from typing import Any


class Md2TermError(Exception):
    """Base exception class for all md2term-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2TermError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}', "
                f"got '{received_type.__name__}'"
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2TermError):
    """Exception raised when Markdown input cannot be parsed."""


class HighlightError(Md2TermError):
    """Exception raised when a code block cannot be tokenized.

    Parameters
    ----------
    message : str
        Description of the failure
    language : str, optional
        Name of the syntax definition in use when tokenization failed
    original_error : Exception, optional
        The underlying tokenizer exception

    """

    def __init__(self, message: str, language: str | None = None, original_error: Exception | None = None):
        """Initialize the highlight error with the syntax in use."""
        super().__init__(message, original_error=original_error)
        self.language = language


class RenderingError(Md2TermError):
    """Exception raised when a document tree is structurally invalid.

    Missing structural fields (for example a list without a kind) come from a
    broken parser and are not recovered.
    """
