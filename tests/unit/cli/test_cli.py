#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli.py
"""Unit tests for the events2md command-line interface."""

import io
import sys

import pytest

from events2md.ast import Document, Heading, Paragraph, Text, ast_to_json, ast_to_yaml
from events2md.cli import EXIT_ERROR, EXIT_SUCCESS, build_options, create_parser, detect_input_format, main
from events2md.options import MarkdownRendererOptions

SAMPLE_MARKDOWN = (
    "# Sample Document\n"
    "\n"
    "This is a **sample** with a [link](https://example.com).\n"
    "\n"
    "*   First\n"
    "*   Second\n"
    "\n"
    "| Name | Role     |\n"
    "|------|----------|\n"
    "| Ada  | Engineer |\n"
)


@pytest.fixture
def json_input(temp_dir, sample_document):
    path = temp_dir / "doc.json"
    path.write_text(ast_to_json(sample_document, indent=2), encoding="utf-8")
    return path


@pytest.mark.cli
class TestCreateParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args(["doc.json"])
        assert args.input == "doc.json"
        assert args.out is None
        assert args.input_format is None
        assert args.log_level == "WARNING"
        assert not args.trace
        assert args.markdown_table_width_stop is None
        assert args.markdown_strip_trailing_newlines is None

    def test_option_flags_from_fields(self):
        args = create_parser().parse_args(
            [
                "doc.json",
                "--markdown-table-min-padding",
                "2",
                "--markdown-repeated-width-bonus",
                "0.5",
                "--markdown-code-macro-id",
                "source",
            ]
        )
        assert args.markdown_table_min_padding == 2
        assert args.markdown_repeated_width_bonus == 0.5
        assert args.markdown_code_macro_id == "source"

    def test_table_width_alias(self):
        args = create_parser().parse_args(["doc.json", "--table-width", "60"])
        assert args.markdown_table_width_stop == 60

    def test_invalid_input_format(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["doc.json", "--input-format", "xml"])

    def test_input_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


@pytest.mark.cli
class TestDetectInputFormat:
    """Tests for input format detection."""

    @pytest.mark.parametrize(
        "source,expected",
        [("doc.json", "json"), ("doc.yaml", "yaml"), ("DOC.YML", "yaml"), ("-", "json"), ("doc.txt", "json")],
    )
    def test_from_extension(self, source, expected):
        assert detect_input_format(source) == expected

    def test_explicit_wins(self):
        assert detect_input_format("doc.json", "yaml") == "yaml"

    def test_unsupported_explicit(self):
        with pytest.raises(ValueError):
            detect_input_format("doc.json", "xml")


@pytest.mark.cli
class TestBuildOptions:
    """Tests for building renderer options from arguments."""

    def test_no_overrides(self):
        args = create_parser().parse_args(["doc.json"])
        assert build_options(args) == MarkdownRendererOptions()

    def test_overrides(self):
        args = create_parser().parse_args(["doc.json", "--table-width", "60", "--markdown-strip-trailing-newlines"])
        options = build_options(args)
        assert options.table_width_stop == 60
        assert options.strip_trailing_newlines
        assert options.list_indent_width == MarkdownRendererOptions().list_indent_width

    def test_out_of_range(self):
        args = create_parser().parse_args(["doc.json", "--markdown-list-indent-width", "2"])
        with pytest.raises(ValueError):
            build_options(args)


@pytest.mark.cli
class TestMain:
    """Tests for the command-line entry point."""

    def test_json_to_stdout(self, json_input, capsys):
        assert main([str(json_input)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == SAMPLE_MARKDOWN

    def test_output_file(self, json_input, temp_dir):
        out = temp_dir / "doc.md"
        assert main([str(json_input), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == SAMPLE_MARKDOWN

    def test_yaml_input(self, temp_dir, sample_document, capsys):
        path = temp_dir / "doc.yaml"
        path.write_text(ast_to_yaml(sample_document), encoding="utf-8")
        assert main([str(path)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == SAMPLE_MARKDOWN

    def test_stdin(self, monkeypatch, capsys):
        doc = Document(children=[Heading(level=2, content=[Text(content="From stdin")])])
        monkeypatch.setattr(sys, "stdin", io.StringIO(ast_to_json(doc)))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "## From stdin"

    def test_strip_trailing_newlines(self, json_input, capsys):
        assert main([str(json_input), "--markdown-strip-trailing-newlines"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == SAMPLE_MARKDOWN.rstrip("\n")

    def test_narrow_table(self, temp_dir, capsys):
        from events2md.ast import Table, TableCell, TableRow

        rows = [
            TableRow(cells=[TableCell(content=[Text(content=a)]), TableCell(content=[Text(content=b)])])
            for a, b in [("aaaaa", "bbb"), ("aaaaa", "cccccccccc"), ("aaaaa", "ddd")]
        ]
        path = temp_dir / "table.json"
        path.write_text(ast_to_json(Document(children=[Table(rows=rows)])), encoding="utf-8")

        assert main([str(path), "--table-width", "18"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "|-------|-----|"

    def test_rich_output(self, json_input, capsys):
        assert main([str(json_input), "--rich"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Sample Document" in out
        assert "Engineer" in out
        assert "**sample**" not in out

    def test_rich_ignored_with_output_file(self, json_input, temp_dir):
        out = temp_dir / "doc.md"
        assert main([str(json_input), "--rich", "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == SAMPLE_MARKDOWN

    def test_invalid_json(self, temp_dir, capsys):
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "Invalid JSON" in capsys.readouterr().err

    def test_missing_file(self, temp_dir, capsys):
        assert main([str(temp_dir / "missing.json")]) == EXIT_ERROR
        assert capsys.readouterr().err.startswith("Error:")

    def test_invalid_option_value(self, json_input, capsys):
        assert main([str(json_input), "--table-width", "0"]) == EXIT_ERROR
        assert "table_width_stop" in capsys.readouterr().err

    def test_null_heading_level(self, temp_dir, capsys):
        path = temp_dir / "null_level.json"
        path.write_text(
            '{"node_type": "Document", "children": [{"node_type": "Heading", "level": null}]}', encoding="utf-8"
        )
        assert main([str(path)]) == EXIT_ERROR
        assert "Invalid heading" in capsys.readouterr().err

    def test_root_must_be_document(self, temp_dir, capsys):
        path = temp_dir / "para.json"
        path.write_text(ast_to_json(Paragraph(content=[Text(content="x")])), encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "Document" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "events2md" in capsys.readouterr().out
