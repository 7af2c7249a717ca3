"""Pytest configuration and shared fixtures for the md2term test suite.

This module provides shared fixtures, test configuration, and small fake
highlighter components used across the test suite.
"""

from typing import Optional

import pytest

from md2term.highlight import (
    RGBA,
    FontStyle,
    HighlightStyle,
    PygmentsSyntaxTable,
    default_syntax_table,
    load_theme,
)
from md2term.renderers.terminal import TerminalRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


class FakeTokenizer:
    """Tokenizer styling every line with one fixed style."""

    def __init__(self, style: HighlightStyle, fail_on: Optional[str] = None):
        self.style = style
        self.fail_on = fail_on
        self.lines: list[str] = []

    def tokenize(self, line):
        if self.fail_on is not None and self.fail_on in line:
            raise RuntimeError("tokenizer exploded")
        self.lines.append(line)
        return [(self.style, line)]


class FakeSyntaxTable:
    """In-memory syntax table recording the lookups made against it."""

    PLAIN = "plain"

    def __init__(self, tokens=None, first_lines=None, style=None, fail_on=None):
        self.tokens = dict(tokens or {})
        self.first_lines = dict(first_lines or {})
        self.style = style or HighlightStyle(RGBA(2, 0, 0, 0), FontStyle.BOLD)
        self.fail_on = fail_on
        self.opened: list[str] = []
        self.themes: list = []
        self.last_tokenizer: Optional[FakeTokenizer] = None

    def find_by_token(self, token):
        return self.tokens.get(token)

    def find_by_first_line(self, line):
        for prefix, definition in self.first_lines.items():
            if line.startswith(prefix):
                return definition
        return None

    def plain_text(self):
        return self.PLAIN

    def tokenizer(self, definition, theme, source):
        self.opened.append(definition)
        self.themes.append(theme)
        self.last_tokenizer = FakeTokenizer(self.style, fail_on=self.fail_on)
        return self.last_tokenizer


@pytest.fixture
def fake_syntax_table():
    """Provide a fake syntax table knowing 'python' by token and shebang."""
    return FakeSyntaxTable(tokens={"python": "Python"}, first_lines={"#!/usr/bin/env python": "Python"})


@pytest.fixture
def syntax_table() -> PygmentsSyntaxTable:
    """Provide the shared pygments syntax table."""
    return default_syntax_table()


@pytest.fixture
def ansi_theme():
    """Provide the default ANSI palette theme."""
    return load_theme()


@pytest.fixture
def renderer() -> TerminalRenderer:
    """Provide a terminal renderer with default options."""
    return TerminalRenderer()
