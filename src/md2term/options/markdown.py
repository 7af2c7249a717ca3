#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2term/options/markdown.py
"""Configuration options for Markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from md2term.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Parse ``~~text~~`` as strikethrough.
    parse_task_lists : bool, default True
        Parse ``- [ ]`` / ``- [x]`` items as task items.
    parse_tables : bool, default True
        Parse GFM pipe tables.
    parse_footnotes : bool, default True
        Parse footnote references and definitions.
    parse_frontmatter : bool, default True
        Capture a leading ``---``/``+++`` block as a FrontMatter node.

    """

    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax", "cli_name": "no-parse-strikethrough", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes", "cli_name": "no-parse-task-lists", "importance": "core"},
    )
    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse GFM tables", "cli_name": "no-parse-tables", "importance": "advanced"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnotes", "cli_name": "no-parse-footnotes", "importance": "advanced"},
    )
    parse_frontmatter: bool = field(
        default=True,
        metadata={"help": "Capture front matter", "cli_name": "no-parse-frontmatter", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate that every switch is a bool."""
        super().__post_init__()
        self._require_bool(*(f.name for f in fields(self)))
