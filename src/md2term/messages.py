#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/messages.py
"""Chat message formatting.

A message is shown as a coloured role label, a colon, and the message body.
Assistant messages are Markdown and are rendered through the terminal
renderer; user and system messages are shown as plain text.

Examples
--------
    >>> message = Message(Role.USER, "  hello  ")
    >>> format_message(message).plain
    'You: hello\\n\\n'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from md2term.constants import ROLE_COLORS, ROLE_LABELS
from md2term.highlight import SyntaxTable
from md2term.options.terminal import TerminalRendererOptions
from md2term.output import OutputBuffer, StyledText
from md2term.parsers.markdown import markdown_to_ast
from md2term.renderers.terminal import render
from md2term.styles import TERMINAL_DEFAULT, Color, Effect, StyleFrame

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Parameters
    ----------
    role : Role
        Author of the message
    content : str
        Message body; Markdown for assistant messages

    """

    role: Role
    content: str


def role_label_style(role: Role) -> StyleFrame:
    """Return the resolved style of a role label."""
    return StyleFrame.of(
        Effect.BOLD,
        Effect.UNDERLINE,
        foreground=Color.from_ansi(ROLE_COLORS[role.value]),
        background=TERMINAL_DEFAULT,
    )


def format_message(
    message: Message,
    theme: Any = None,
    syntax_table: Optional[SyntaxTable] = None,
    options: TerminalRendererOptions | None = None,
) -> StyledText:
    """Format a chat message for display.

    Parameters
    ----------
    message : Message
        Message to format
    theme : str, theme object or None, default = None
        Highlighting theme for code blocks in assistant messages
    syntax_table : SyntaxTable or None, default = None
        Syntax definitions for code blocks in assistant messages
    options : TerminalRendererOptions or None, default = None
        Rendering options for assistant messages

    Returns
    -------
    StyledText
        ``<label>: <content>`` followed by a blank line

    """
    role = Role(message.role)
    content = message.content.strip()

    output = OutputBuffer()
    output.append(ROLE_LABELS[role.value], role_label_style(role))
    output.append_plain(": ")

    if role is Role.ASSISTANT:
        logger.debug("Rendering assistant message (%d characters)", len(content))
        output.extend(render(markdown_to_ast(content), theme=theme, syntax_table=syntax_table, options=options))
    else:
        output.append_plain(content)

    output.append_plain("\n\n")
    return output.build()
