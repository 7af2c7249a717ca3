#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the md2term command line interface."""

import io
import logging

import pytest

from md2term.cli import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    main,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo the handler and level changes made by configure_logging."""
    package_logger = logging.getLogger("md2term")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep rich from forcing colour codes into captured output."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nSome **bold** text.\n\n1. one\n2. two\n", encoding="utf-8")
    return path


@pytest.mark.cli
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = create_parser().parse_args([])
        assert args.input == "-"
        assert args.role is None
        assert args.theme == "ansi"
        assert args.no_highlight is False
        assert args.log_level == "WARNING"

    def test_invalid_role_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--role", "robot"])


@pytest.mark.cli
class TestMain:
    """Tests for running the command."""

    def test_render_file(self, markdown_file, capsys) -> None:
        assert main([str(markdown_file)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out == "# Notes\n\nSome bold text.\n\n1. one\n2. two\n\n"

    def test_render_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("*hello*"))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "hello"

    def test_render_stdin_bytes(self, monkeypatch, capsys) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"bad \xff byte"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "bad � byte"

    def test_role_formats_message(self, markdown_file, capsys) -> None:
        assert main([str(markdown_file), "--role", "user"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("You: # Notes")
        assert out.endswith("2. two\n\n")

    def test_assistant_role_renders_markdown(self, markdown_file, capsys) -> None:
        assert main([str(markdown_file), "--role", "assistant"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("Assistant: # Notes\n\nSome bold text.")

    def test_no_highlight(self, tmp_path, capsys) -> None:
        path = tmp_path / "code.md"
        path.write_text("```python\nx = 1\n```\n", encoding="utf-8")
        assert main([str(path), "--no-highlight"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x = 1\n\n"

    def test_named_theme(self, tmp_path, capsys) -> None:
        path = tmp_path / "code.md"
        path.write_text("```python\nx = 1\n```\n", encoding="utf-8")
        assert main([str(path), "--theme", "monokai"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x = 1\n\n"

    def test_unknown_theme(self, markdown_file, capsys) -> None:
        assert main([str(markdown_file), "--theme", "no-such-theme"]) == EXIT_VALIDATION_ERROR
        assert "Unknown code theme" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "missing.md")]) == EXIT_FILE_ERROR
        assert "Cannot read" in capsys.readouterr().err

    def test_log_file(self, markdown_file, tmp_path) -> None:
        log_file = tmp_path / "md2term.log"
        assert main([str(markdown_file), "--log-level", "DEBUG", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert "Logging to file" in log_file.read_text(encoding="utf-8")
