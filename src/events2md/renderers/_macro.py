#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/_macro.py
"""Markdown syntax for macro calls and code."""

from __future__ import annotations

from typing import Mapping

from events2md.constants import CODE_FENCE, ESCAPE_CHAR
from events2md.renderers._printer import PrintDelegate

QUOTE = '"'


class MarkdownParametersPrinter:
    """Print macro parameters as ``name=value`` pairs.

    Values are quoted unless numeric; the escape character and quotes inside
    values are escaped.

    Examples
    --------
        >>> MarkdownParametersPrinter().print({"width": "10", "title": 'say "hi"'})
        'width=10 title="say \\\\"hi\\\\""'

    """

    def __init__(self, escape_char: str = ESCAPE_CHAR):
        self.escape_char = escape_char

    def print_parameter(self, name: str, value: str) -> str:
        value = value.replace(self.escape_char, self.escape_char * 2)
        value = value.replace(QUOTE, self.escape_char + QUOTE)
        if value.isdecimal():
            return f"{name}={value}"
        return f"{name}={QUOTE}{value}{QUOTE}"

    def print(self, parameters: Mapping[str, str]) -> str:
        """Print all parameters, in order, separated by spaces."""
        return " ".join(
            self.print_parameter(name, value) for name, value in parameters.items() if value is not None
        )


class MarkdownMacroRenderer(PrintDelegate):
    """Write macros and code to the active printer."""

    def __init__(self, printers, parameters_printer: MarkdownParametersPrinter | None = None):
        super().__init__(printers)
        self.parameters_printer = parameters_printer or MarkdownParametersPrinter()

    def render_block_macro(self, id: str, parameters: Mapping[str, str], content: str | None) -> None:
        """Render ``{{id params}}`` + content + ``{{/id}}``, or ``{{id params/}}`` without content."""
        self.print("{{" + id)
        if parameters:
            self.print(" ")
            self.print(self.parameters_printer.print(parameters))

        if not content:
            self.print("/}}")
        else:
            self.print("}}")
            self.print("\n" + content)
            self.print("{{/" + id + "}}")

    def render_markdown_macro(self, id: str, parameters: Mapping[str, str], content: str | None) -> None:
        """Render the compact ``#[id](params "content")`` form.

        Only usable for content without line breaks or closing parentheses.
        """
        self.print("#[" + id + "]")
        if not parameters and not content:
            return

        self.print("(")
        if parameters:
            self.print(self.parameters_printer.print(parameters))
            if content:
                self.print(" ")
                self.print(QUOTE + content + QUOTE)
        else:
            self.print(content or "")
        self.print(")")

    def render_block_code(self, content: str, language: str | None = None) -> None:
        self.print(CODE_FENCE)
        if language:
            self.print(language)
        self.print("\n" + content + "\n")
        self.print(CODE_FENCE)

    def render_inline_code(self, content: str) -> None:
        marker = "``" if "`" in content else "`"
        self.print(marker + content + marker)

    @staticmethod
    def fits_inline_form(content: str | None) -> bool:
        """Whether content can go in the compact macro form."""
        return not content or ("\n" not in content and ")" not in content)
