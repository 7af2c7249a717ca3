#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the Markdown to AST converter.

Tests cover:
- Block elements (headings, paragraphs, code, quotes, lists, tables)
- Inline elements (emphasis, strong, code spans, links, images, breaks)
- Strikethrough and task list extensions
- Front matter capture
- Byte input decoding
- Rendering parsed documents end to end

"""

import pytest

from md2term.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    FrontMatter,
    Heading,
    HTMLBlock,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Phase,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableRow,
    TaskItem,
    Text,
    ThematicBreak,
    TreeWalker,
)
from md2term.exceptions import InvalidOptionsError
from md2term.options import MarkdownParserOptions, TerminalRendererOptions
from md2term.parsers.markdown import MarkdownToAstConverter, markdown_to_ast
from md2term.renderers.terminal import render


def _nodes_of(doc, node_type):
    return [node for node, phase in TreeWalker(doc) if phase is Phase.ENTERING and isinstance(node, node_type)]


def _text_of(node):
    return "".join(text.literal for text in _nodes_of(node, Text))


@pytest.mark.unit
class TestBlockParsing:
    """Tests for block-level Markdown."""

    def test_returns_document(self) -> None:
        assert isinstance(markdown_to_ast(""), Document)
        assert markdown_to_ast("").children == []

    def test_heading(self) -> None:
        doc = markdown_to_ast("## Section")
        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert heading.children == [Text(literal="Section")]

    def test_setext_heading(self) -> None:
        heading = markdown_to_ast("Title\n=====").children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1

    def test_paragraphs(self) -> None:
        doc = markdown_to_ast("one\n\ntwo")
        assert [type(child) for child in doc.children] == [Paragraph, Paragraph]

    def test_fenced_code_block(self) -> None:
        block = markdown_to_ast("```python\nx = 1\n```").children[0]
        assert isinstance(block, CodeBlock)
        assert block.info == "python"
        assert block.language == "python"
        assert block.literal == "x = 1\n"

    def test_full_info_string_is_kept(self) -> None:
        block = markdown_to_ast("```rust ignore\nfn main() {}\n```").children[0]
        assert block.info == "rust ignore"
        assert block.language == "rust"

    def test_indented_code_block(self) -> None:
        block = markdown_to_ast("    indented\n").children[0]
        assert isinstance(block, CodeBlock)
        assert block.info == ""

    def test_block_quote(self) -> None:
        quote = markdown_to_ast("> quoted").children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_html_block(self) -> None:
        block = markdown_to_ast("<div>\nhi\n</div>").children[0]
        assert isinstance(block, HTMLBlock)
        assert "<div>" in block.literal

    def test_thematic_break(self) -> None:
        assert isinstance(markdown_to_ast("***").children[0], ThematicBreak)

    def test_table(self) -> None:
        table = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 |").children[0]
        assert isinstance(table, Table)
        assert [row.is_header for row in table.children] == [True, False]
        assert all(isinstance(row, TableRow) and len(row.children) == 2 for row in table.children)

    def test_footnotes(self) -> None:
        doc = markdown_to_ast("text[^1]\n\n[^1]: the note")
        references = _nodes_of(doc, FootnoteReference)
        definitions = [child for child in doc.children if isinstance(child, FootnoteDefinition)]
        assert [ref.identifier for ref in references] == ["1"]
        assert [d.identifier for d in definitions] == ["1"]


@pytest.mark.unit
class TestListParsing:
    """Tests for lists and task lists."""

    def test_bullet_list(self) -> None:
        lst = markdown_to_ast("* a\n* b").children[0]
        assert isinstance(lst, List)
        assert lst.kind == "bullet"
        assert [item.bullet_char for item in lst.children] == ["*", "*"]

    def test_ordered_list_start_and_delimiter(self) -> None:
        lst = markdown_to_ast("3) a\n4) b").children[0]
        assert lst.kind == "ordered"
        assert lst.start == 3
        assert lst.delimiter == "paren"
        assert all(isinstance(item, ListItem) for item in lst.children)

    def test_ordered_list_defaults(self) -> None:
        lst = markdown_to_ast("1. a").children[0]
        assert lst.start == 1
        assert lst.delimiter == "period"

    def test_tight_items_hold_paragraphs(self) -> None:
        item = markdown_to_ast("- a").children[0].children[0]
        assert isinstance(item.children[0], Paragraph)

    def test_task_list_items(self) -> None:
        lst = markdown_to_ast("- [x] done\n- [ ] todo").children[0]
        done, todo = lst.children
        assert isinstance(done, TaskItem) and done.checked
        assert isinstance(todo, TaskItem) and not todo.checked
        assert _text_of(done) == "done"

    def test_task_lists_disabled(self) -> None:
        options = MarkdownParserOptions(parse_task_lists=False)
        lst = markdown_to_ast("- [x] done", options).children[0]
        assert not isinstance(lst.children[0], TaskItem)


@pytest.mark.unit
class TestInlineParsing:
    """Tests for inline Markdown."""

    def _inlines(self, markdown):
        return markdown_to_ast(markdown).children[0].children

    def test_strong_and_emphasis(self) -> None:
        inlines = self._inlines("This is **bold** and *it*.")
        assert any(isinstance(node, Strong) for node in inlines)
        assert any(isinstance(node, Emphasis) for node in inlines)

    def test_code_span(self) -> None:
        assert Code(literal="x = 1") in self._inlines("use `x = 1` here")

    def test_link(self) -> None:
        link = self._inlines("[site](https://example.com)")[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.children == [Text(literal="site")]

    def test_image(self) -> None:
        image = self._inlines("![a cat](cat.png)")[0]
        assert isinstance(image, Image)
        assert image.url == "cat.png"
        assert _text_of(image) == "a cat"

    def test_soft_break(self) -> None:
        assert any(isinstance(node, SoftBreak) for node in self._inlines("one\ntwo"))

    def test_hard_line_break(self) -> None:
        assert any(isinstance(node, LineBreak) for node in self._inlines("one  \ntwo"))

    def test_strikethrough(self) -> None:
        strike = self._inlines("~~gone~~")[0]
        assert isinstance(strike, Strikethrough)
        assert _text_of(strike) == "gone"

    def test_strikethrough_disabled(self) -> None:
        doc = markdown_to_ast("~~gone~~", MarkdownParserOptions(parse_strikethrough=False))
        assert _nodes_of(doc, Strikethrough) == []
        assert _text_of(doc) == "~~gone~~"


@pytest.mark.unit
class TestFrontMatter:
    """Tests for front matter capture."""

    def test_yaml_front_matter(self) -> None:
        doc = markdown_to_ast("---\ntitle: x\n---\n# Heading\n")
        assert doc.children[0] == FrontMatter(literal="---\ntitle: x\n---\n")
        assert isinstance(doc.children[1], Heading)

    def test_toml_front_matter(self) -> None:
        doc = markdown_to_ast("+++\ntitle = 'x'\n+++\nbody")
        assert isinstance(doc.children[0], FrontMatter)
        assert isinstance(doc.children[1], Paragraph)

    def test_unterminated_front_matter_is_markdown(self) -> None:
        doc = markdown_to_ast("---\ntitle: x\n")
        assert not any(isinstance(child, FrontMatter) for child in doc.children)

    def test_front_matter_disabled(self) -> None:
        doc = markdown_to_ast("---\ntitle: x\n---\n", MarkdownParserOptions(parse_frontmatter=False))
        assert not any(isinstance(child, FrontMatter) for child in doc.children)


@pytest.mark.unit
class TestInputHandling:
    """Tests for input decoding and options."""

    def test_bytes_input(self) -> None:
        doc = markdown_to_ast("café".encode("utf-8"))
        assert _text_of(doc) == "café"

    def test_invalid_utf8_is_replaced(self) -> None:
        doc = markdown_to_ast(b"bad \xff byte")
        assert _text_of(doc) == "bad � byte"

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(TerminalRendererOptions())


@pytest.mark.integration
class TestParseAndRender:
    """Rendering parsed Markdown end to end."""

    @pytest.mark.parametrize(
        "markdown,expected",
        [
            ("Hello world", "Hello world"),
            ("# Title\n\nbody", "# Title\n\nbody"),
            ("1. one\n2. two", "1. one\n2. two\n\n"),
            ("5. a\n6. b\n7. c", "5. a\n6. b\n7. c\n\n"),
            ("- a\n  - b", "- a\n  - b\n\n"),
            ("- [x] done\n- [ ] todo", "- [x] done\n- [ ] todo\n\n"),
            ("one\n\ntwo", "one\n\ntwo"),
            ("soft\nbreak", "soft break"),
            ("[site](https://example.com)", "site (https://example.com)"),
            ("```\ncode\n```", "code\n\n"),
            ("> quote\n\nafter", "quote\n\nafter"),
        ],
    )
    def test_plain_output(self, markdown: str, expected: str) -> None:
        options = TerminalRendererOptions(highlight_code=False)
        assert render(markdown_to_ast(markdown), options=options).plain == expected
