#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markdown_events.py
"""Unit tests for MarkdownChainingRenderer driven by raw events.

Tests cover:
- Block separation (headers, paragraphs, lists, quotations, rules)
- Inline formats and line breaks
- Links, images, macros and verbatim
- Tables captured through the printer stack

"""

import logging
from io import StringIO

import pytest
from utils import render_events

from events2md.events import Format, LabelGeneratorRegistry, ListType, ResourceReference, ResourceType
from events2md.exceptions import ReferenceLabelError
from events2md.options import MarkdownRendererOptions
from events2md.renderers.markdown import MarkdownRenderer


def words(listener, text):
    """Emit the words of ``text`` separated by space events."""
    for index, word in enumerate(text.split(" ")):
        if index:
            listener.on_space()
        listener.on_word(word)


def paragraph(listener, text):
    listener.begin_paragraph()
    words(listener, text)
    listener.end_paragraph()


@pytest.mark.unit
class TestBlocks:
    """Tests for block separation."""

    def test_paragraph(self):
        assert render_events(lambda l: paragraph(l, "Hello world")) == "Hello world"

    def test_paragraphs_separated_by_empty_line(self):
        def emit(l):
            paragraph(l, "A")
            paragraph(l, "B")

        assert render_events(emit) == "A\n\nB"

    def test_header(self):
        def emit(l):
            l.begin_header(1)
            words(l, "Title")
            l.end_header(1)
            paragraph(l, "Text")

        assert render_events(emit) == "# Title\n\nText"

    @pytest.mark.parametrize("level,separator", [(2, "\n\n\n"), (3, "\n\n\n"), (4, "\n\n"), (6, "\n\n")])
    def test_header_spacing(self, level, separator):
        def emit(l):
            paragraph(l, "Text")
            l.begin_header(level)
            words(l, "Sub")
            l.end_header(level)

        assert render_events(emit) == f"Text{separator}{'#' * level} Sub"

    def test_header_text_not_escaped_as_line_start(self):
        def emit(l):
            l.begin_header(2)
            l.on_word("1")
            l.on_special_symbol(".")
            l.on_space()
            l.on_word("Intro")
            l.end_header(2)

        assert render_events(emit) == "## 1. Intro"

    def test_line_start_text_escaped(self):
        def emit(l):
            l.begin_paragraph()
            l.on_special_symbol("-")
            l.on_space()
            words(l, "not a list")
            l.end_paragraph()

        assert render_events(emit) == "\\- not a list"

    def test_horizontal_line(self):
        def emit(l):
            paragraph(l, "A")
            l.on_horizontal_line()
            paragraph(l, "B")

        assert render_events(emit) == "A\n\n---\n\nB"

    def test_empty_lines(self):
        def emit(l):
            paragraph(l, "A")
            l.on_empty_lines(1)
            paragraph(l, "B")

        assert render_events(emit) == "A\n\n\nB"

    def test_leading_empty_lines_dropped(self):
        def emit(l):
            l.on_empty_lines(3)
            paragraph(l, "A")

        assert render_events(emit) == "A"

    def test_raw_text_block(self):
        def emit(l):
            paragraph(l, "A")
            l.on_raw_text("<div>*raw*</div>", "html")

        assert render_events(emit) == "A\n\n<div>*raw*</div>"

    def test_raw_text_inline(self):
        def emit(l):
            l.begin_paragraph()
            l.on_word("a")
            l.on_raw_text("<b>", "html")
            l.end_paragraph()

        assert render_events(emit) == "a<b>"

    def test_anchor_has_no_output(self, caplog):
        caplog.set_level(logging.DEBUG, logger="events2md.renderers.markdown")

        def emit(l):
            l.begin_paragraph()
            l.on_id("top")
            l.on_word("A")
            l.end_paragraph()

        assert render_events(emit) == "A"
        assert "top" in caplog.text


@pytest.mark.unit
class TestLists:
    """Tests for lists and definition lists."""

    def test_bulleted_list(self):
        def emit(l):
            l.begin_list(ListType.BULLETED)
            for text in ("A", "B"):
                l.begin_list_item()
                words(l, text)
                l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit) == "*   A\n*   B"

    def test_item_holding_paragraph(self):
        def emit(l):
            paragraph(l, "Intro")
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            l.on_word("A")
            l.end_list_item()
            l.begin_list_item()
            paragraph(l, "B")
            l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit) == "Intro\n\n*   A\n*   B"

    def test_items_after_paragraph_item_separated(self):
        def emit(l):
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            paragraph(l, "A")
            l.end_list_item()
            l.begin_list_item()
            l.on_word("B")
            l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit) == "*   A\n\n*   B"

    def test_numbered_list(self):
        def emit(l):
            l.begin_list(ListType.NUMBERED)
            for text in ("one", "two"):
                l.begin_list_item()
                l.on_word(text)
                l.end_list_item()
            l.end_list(ListType.NUMBERED)

        assert render_events(emit) == "1.  one\n1.  two"

    def test_nested_list_indented(self):
        def emit(l):
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            l.on_word("A")
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            l.on_word("B")
            l.end_list_item()
            l.end_list(ListType.BULLETED)
            l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit) == "*   A\n    *   B"

    def test_list_indent_option(self):
        def emit(l):
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            l.on_word("A")
            l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit, MarkdownRendererOptions(list_indent_width=3)) == "*  A"

    def test_definition_list(self):
        def emit(l):
            l.begin_definition_list()
            for term, description in (("Term", "Desc"), ("Other", "More")):
                l.begin_definition_term()
                l.on_word(term)
                l.end_definition_term()
                l.begin_definition_description()
                l.on_word(description)
                l.end_definition_description()
            l.end_definition_list()

        assert render_events(emit) == "Term\n:   Desc\n\nOther\n:   More"


@pytest.mark.unit
class TestQuotations:
    """Tests for quotations."""

    def test_quotation_lines(self):
        def emit(l):
            l.begin_quotation()
            for text in ("a", "b"):
                l.begin_quotation_line()
                l.on_word(text)
                l.end_quotation_line()
            l.end_quotation()

        assert render_events(emit) == "> a\n> \n> b"

    def test_quotation_after_paragraph(self):
        def emit(l):
            paragraph(l, "P")
            l.begin_quotation()
            l.begin_quotation_line()
            l.on_word("q")
            l.end_quotation_line()
            l.end_quotation()
            paragraph(l, "after")

        assert render_events(emit) == "P\n\n> q\n\nafter"


@pytest.mark.unit
class TestFormats:
    """Tests for inline formats."""

    @pytest.mark.parametrize(
        "text_format,expected",
        [
            (Format.BOLD, "a **b** c"),
            (Format.ITALIC, "a _b_ c"),
            (Format.MONOSPACE, "a `b` c"),
            (Format.STRIKEDOUT, "a <del>b</del> c"),
            (Format.UNDERLINED, "a **b** c"),
            (Format.SUPERSCRIPT, "a ^b^ c"),
            (Format.SUBSCRIPT, "a ~b~ c"),
            (Format.NONE, "a b c"),
        ],
    )
    def test_format_markup(self, text_format, expected):
        def emit(l):
            l.begin_paragraph()
            words(l, "a ")
            l.begin_format(text_format)
            l.on_word("b")
            l.end_format(text_format)
            words(l, " c")
            l.end_paragraph()

        assert render_events(emit) == expected

    def test_superscript_escapes_spaces(self):
        def emit(l):
            l.begin_paragraph()
            l.on_word("x")
            l.begin_format(Format.SUPERSCRIPT)
            words(l, "2 3")
            l.end_format(Format.SUPERSCRIPT)
            words(l, " y z")
            l.end_paragraph()

        assert render_events(emit) == "x^2\\ 3^ y z"

    def test_hard_line_break(self):
        def emit(l):
            l.begin_paragraph()
            l.on_word("a")
            l.on_new_line()
            l.on_word("b")
            l.end_paragraph()

        assert render_events(emit) == "a  \nb"


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for links and images."""

    def link(self, listener, reference, label=None, parameters=None, free_standing=False):
        listener.begin_link(reference, free_standing, parameters)
        if label:
            words(listener, label)
        listener.end_link(reference, free_standing, parameters)

    def test_labelled_link(self):
        def emit(l):
            l.begin_paragraph()
            words(l, "see ")
            self.link(l, ResourceReference("https://example.com"), "the site")
            l.end_paragraph()

        assert render_events(emit) == "see [the site](https://example.com)"

    def test_link_title(self):
        def emit(l):
            l.begin_paragraph()
            self.link(l, ResourceReference("https://example.com"), "x", {"title": "Example"})
            l.end_paragraph()

        assert render_events(emit) == '[x](https://example.com "Example")'

    def test_blank_title_ignored(self):
        def emit(l):
            l.begin_paragraph()
            self.link(l, ResourceReference("https://example.com"), "x", {"title": "  "})
            l.end_paragraph()

        assert render_events(emit) == "[x](https://example.com)"

    def test_link_without_label(self):
        def emit(l):
            l.begin_paragraph()
            self.link(l, ResourceReference("Main.WebHome", ResourceType("doc")))
            l.end_paragraph()

        assert render_events(emit) == "[[Main.WebHome]]"

    def test_typed_reference(self):
        def emit(l):
            l.begin_paragraph()
            self.link(l, ResourceReference("Main.WebHome", ResourceType("doc"), typed=True), "home")
            l.end_paragraph()

        assert render_events(emit) == "[home](doc:Main.WebHome)"

    def test_free_standing_uri(self):
        def emit(l):
            l.begin_paragraph()
            words(l, "go ")
            self.link(l, ResourceReference("https://example.com"), free_standing=True)
            l.end_paragraph()

        assert render_events(emit) == "go https://example.com"

    def test_nested_link_flattened(self):
        def emit(l):
            l.begin_paragraph()
            outer = ResourceReference("https://outer.org")
            l.begin_link(outer, False, None)
            words(l, "outer ")
            self.link(l, ResourceReference("https://inner.org"), "inner")
            l.end_link(outer, False, None)
            l.end_paragraph()

        assert render_events(emit) == "[outer inner](https://outer.org)"

    def test_label_and_reference_escaped(self):
        def emit(l):
            l.begin_paragraph()
            l.begin_link(ResourceReference("https://e.org/a_(b)"), False, None)
            l.on_word("a")
            l.on_special_symbol("[")
            l.on_word("b")
            l.on_special_symbol("]")
            l.end_link(ResourceReference("https://e.org/a_(b)"), False, None)
            l.end_paragraph()

        assert render_events(emit) == "[a\\[b\\]](https://e.org/a_\\(b\\))"

    def test_image_with_alt(self):
        def emit(l):
            l.begin_paragraph()
            l.on_image(ResourceReference("cat.png"), False, {"alt": "A cat", "title": "Cat"})
            l.end_paragraph()

        assert render_events(emit) == '![A cat](cat.png "Cat")'

    def test_image_alt_falls_back_to_reference(self):
        def emit(l):
            l.begin_paragraph()
            l.on_image(ResourceReference("cat.png"), False, None)
            l.end_paragraph()

        assert render_events(emit) == "![cat.png](cat.png)"

    def test_image_alt_from_label_generator(self):
        def emit(l):
            l.begin_paragraph()
            l.on_image(ResourceReference("john@example.com?subject=hi", ResourceType("mailto")), False, None)
            l.end_paragraph()

        assert render_events(emit) == "![john@example.com](john@example.com?subject=hi)"

    def test_failing_label_generator(self):
        def fail(reference):
            raise KeyError(reference.reference)

        registry = LabelGeneratorRegistry({"url": fail})
        listener = MarkdownRenderer(label_generators=registry).create_listener(StringIO())
        listener.begin_paragraph()
        with pytest.raises(ReferenceLabelError):
            listener.on_image(ResourceReference("cat.png"), False, None)


@pytest.mark.unit
class TestMacrosAndVerbatim:
    """Tests for macros and verbatim content."""

    @pytest.mark.parametrize(
        "parameters,content,expected",
        [
            ({}, None, "#[toc]"),
            ({"depth": "2"}, None, "#[toc](depth=2)"),
            ({"title": "T"}, "Hello", '#[toc](title="T" "Hello")'),
            ({}, "Hello", "#[toc](Hello)"),
        ],
    )
    def test_compact_macro(self, parameters, content, expected):
        assert render_events(lambda l: l.on_macro("toc", parameters, content, False)) == expected

    def test_block_macro(self):
        assert render_events(lambda l: l.on_macro("info", {}, "a\nb", False)) == "{{info}}\na\nb{{/info}}"

    def test_block_macro_with_parameters(self):
        rendered = render_events(lambda l: l.on_macro("box", {"title": "x (y)"}, "c)", False))
        assert rendered == '{{box title="x (y)"}}\nc){{/box}}'

    def test_macro_after_paragraph(self):
        def emit(l):
            paragraph(l, "A")
            l.on_macro("toc", {}, None, False)

        assert render_events(emit) == "A\n\n#[toc]"

    def test_inline_macro(self):
        def emit(l):
            l.begin_paragraph()
            words(l, "a ")
            l.on_macro("icon", {"name": "info"}, None, True)
            l.end_paragraph()

        assert render_events(emit) == 'a #[icon](name="info")'

    def test_code_macro(self):
        rendered = render_events(lambda l: l.on_macro("code", {"language": "python"}, "print(1)", False))
        assert rendered == "```python\nprint(1)\n```"

    def test_inline_code_macro(self):
        def emit(l):
            l.begin_paragraph()
            l.on_macro("code", {}, "a`b", True)
            l.end_paragraph()

        assert render_events(emit) == "``a`b``"

    def test_code_macro_id_option(self):
        options = MarkdownRendererOptions(code_macro_id="source")
        assert render_events(lambda l: l.on_macro("source", {}, "x", False), options) == "```\nx\n```"

    def test_inline_verbatim(self):
        def emit(l):
            l.begin_paragraph()
            words(l, "run ")
            l.on_verbatim("ls -l", True)
            l.end_paragraph()

        assert render_events(emit) == "run `ls -l`"

    def test_block_verbatim(self):
        def emit(l):
            paragraph(l, "A")
            l.on_verbatim("x = 1", False, {"language": "python"})

        assert render_events(emit) == "A\n\n```python\nx = 1\n```"

    def test_block_verbatim_in_list_item_is_indented(self):
        def emit(l):
            l.begin_list(ListType.BULLETED)
            l.begin_list_item()
            l.on_word("A")
            l.on_verbatim("x", False)
            l.end_list_item()
            l.end_list(ListType.BULLETED)

        assert render_events(emit) == "*   A\n    \n    ```\n    x\n    ```"


@pytest.mark.unit
class TestTables:
    """Tests for tables rendered from events."""

    def cell(self, listener, text, header=False, parameters=None):
        if header:
            listener.begin_table_head_cell(parameters)
            words(listener, text)
            listener.end_table_head_cell(parameters)
        else:
            listener.begin_table_cell(parameters)
            words(listener, text)
            listener.end_table_cell(parameters)

    def test_table(self):
        def emit(l):
            l.begin_table()
            l.begin_table_row()
            self.cell(l, "Name", header=True)
            l.end_table_row()
            l.begin_table_row()
            self.cell(l, "Ada")
            l.end_table_row()
            l.end_table()

        assert render_events(emit) == "| Name |\n|------|\n| Ada  |\n"

    def test_table_after_paragraph(self):
        def emit(l):
            paragraph(l, "A")
            l.begin_table()
            l.begin_table_row()
            self.cell(l, "x")
            l.end_table_row()
            l.end_table()
            paragraph(l, "B")

        assert render_events(emit) == "A\n\n|---|\n| x |\n\n\nB"

    def test_cell_content_escaped(self):
        def emit(l):
            l.begin_table()
            l.begin_table_row()
            l.begin_table_cell()
            l.on_word("a")
            l.on_special_symbol("|")
            l.on_word("b")
            l.end_table_cell()
            l.end_table_row()
            l.end_table()

        assert render_events(emit) == "|------|\n| a\\|b |\n"

    def test_cell_formats_and_links(self):
        def emit(l):
            l.begin_table()
            l.begin_table_row()
            l.begin_table_cell()
            l.begin_format(Format.BOLD)
            l.on_word("b")
            l.end_format(Format.BOLD)
            l.end_table_cell()
            l.begin_table_cell()
            reference = ResourceReference("u")
            l.begin_link(reference, False, None)
            l.on_word("l")
            l.end_link(reference, False, None)
            l.end_table_cell()
            l.end_table_row()
            l.end_table()

        assert render_events(emit) == "|-------|--------|\n| **b** | [l](u) |\n"

    def test_table_width_option(self):
        def emit(l):
            l.begin_table()
            for left, right in (("aaaaa", "bbb"), ("aaaaa", "cccccccccc"), ("aaaaa", "ddd")):
                l.begin_table_row()
                self.cell(l, left)
                self.cell(l, right)
                l.end_table_row()
            l.end_table()

        rendered = render_events(emit, MarkdownRendererOptions(table_width_stop=18))
        assert rendered.splitlines()[0] == "|-------|-----|"

    def test_consecutive_tables_are_independent(self):
        def table(l, text):
            l.begin_table()
            l.begin_table_row()
            self.cell(l, text)
            l.end_table_row()
            l.end_table()

        def emit(l):
            table(l, "long cell")
            table(l, "x")

        assert render_events(emit) == "|-----------|\n| long cell |\n\n\n|---|\n| x |\n"
