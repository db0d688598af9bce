#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/ast/events.py
"""Event emission from document trees.

:class:`EventEmitter` walks a document tree and calls the matching
:class:`~events2md.events.listener.Listener` handlers in document order.
Text nodes are split into word, space, special symbol and new line events.

"""

from __future__ import annotations

import re
from typing import Iterable

from events2md.ast.nodes import (
    Anchor,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    EmptyLines,
    FormatSpan,
    Heading,
    HorizontalRule,
    Image,
    Link,
    List,
    ListItem,
    Macro,
    NewLine,
    Node,
    Paragraph,
    Quotation,
    QuotationLine,
    RawText,
    Table,
    TableCell,
    TableRow,
    Text,
    Verbatim,
)
from events2md.ast.visitors import NodeVisitor
from events2md.events.listener import Listener

SPECIAL_SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

_SYMBOL_CLASS = re.escape(SPECIAL_SYMBOLS)
_TEXT_TOKEN = re.compile(r"(\r\n|\r|\n)|( )|([" + _SYMBOL_CLASS + r"])|([^\r\n " + _SYMBOL_CLASS + r"]+)")


def iter_text_events(text: str) -> Iterable[tuple[str, str]]:
    """Split text into ``(kind, value)`` tokens.

    ``\\r\\n``, a lone ``\\r`` and ``\\n`` are all line breaks.
    ``\r\n``, a lone ``\r`` and ``\n`` are all line breaks.

    Examples
    --------
        >>> list(iter_text_events("a-b c"))
        [('word', 'a'), ('special_symbol', '-'), ('word', 'b'), ('space', ' '), ('word', 'c')]

    """
    for match in _TEXT_TOKEN.finditer(text):
        newline, space, symbol, word = match.groups()
        if newline is not None:
            yield "new_line", newline
        elif space is not None:
            yield "space", space
        elif symbol is not None:
            yield "special_symbol", symbol
        elif word is not None:
            yield "word", word


class EventEmitter(NodeVisitor):
    """Visitor turning a document tree into listener events.

    Parameters
    ----------
    listener : Listener
        Receives the events

    Examples
    --------
        >>> from events2md.ast.nodes import Paragraph
        >>> class Recorder(Listener):
        ...     def __init__(self):
        ...         self.words = []
        ...     def on_word(self, word):
        ...         self.words.append(word)
        >>> recorder = Recorder()
        >>> Document(children=[Paragraph(content=[Text("Hello world")])]).accept(EventEmitter(recorder))
        >>> recorder.words
        ['Hello', 'world']

    """

    def __init__(self, listener: Listener):
        self.listener = listener

    def _visit_all(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            node.accept(self)

    def visit_document(self, node: Document) -> None:
        self.listener.begin_document(node.parameters)
        self._visit_all(node.children)
        self.listener.end_document(node.parameters)

    def visit_heading(self, node: Heading) -> None:
        self.listener.begin_header(node.level, node.id, node.parameters)
        self._visit_all(node.content)
        self.listener.end_header(node.level, node.id, node.parameters)

    def visit_paragraph(self, node: Paragraph) -> None:
        self.listener.begin_paragraph(node.parameters)
        self._visit_all(node.content)
        self.listener.end_paragraph(node.parameters)

    def visit_list(self, node: List) -> None:
        self.listener.begin_list(node.list_type, node.parameters)
        self._visit_all(node.items)
        self.listener.end_list(node.list_type, node.parameters)

    def visit_list_item(self, node: ListItem) -> None:
        self.listener.begin_list_item(node.parameters)
        self._visit_all(node.children)
        self.listener.end_list_item(node.parameters)

    def visit_definition_list(self, node: DefinitionList) -> None:
        self.listener.begin_definition_list(node.parameters)
        self._visit_all(node.items)
        self.listener.end_definition_list(node.parameters)

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        self.listener.begin_definition_term()
        self._visit_all(node.content)
        self.listener.end_definition_term()

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        self.listener.begin_definition_description()
        self._visit_all(node.children)
        self.listener.end_definition_description()

    def visit_table(self, node: Table) -> None:
        self.listener.begin_table(node.parameters)
        self._visit_all(node.rows)
        self.listener.end_table(node.parameters)

    def visit_table_row(self, node: TableRow) -> None:
        self.listener.begin_table_row(node.parameters)
        self._visit_all(node.cells)
        self.listener.end_table_row(node.parameters)

    def visit_table_cell(self, node: TableCell) -> None:
        if node.header:
            self.listener.begin_table_head_cell(node.parameters)
            self._visit_all(node.content)
            self.listener.end_table_head_cell(node.parameters)
        else:
            self.listener.begin_table_cell(node.parameters)
            self._visit_all(node.content)
            self.listener.end_table_cell(node.parameters)

    def visit_quotation(self, node: Quotation) -> None:
        self.listener.begin_quotation(node.parameters)
        self._visit_all(node.lines)
        self.listener.end_quotation(node.parameters)

    def visit_quotation_line(self, node: QuotationLine) -> None:
        self.listener.begin_quotation_line()
        self._visit_all(node.content)
        self.listener.end_quotation_line()

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        self.listener.on_horizontal_line(node.parameters)

    def visit_empty_lines(self, node: EmptyLines) -> None:
        self.listener.on_empty_lines(node.count)

    def visit_macro(self, node: Macro) -> None:
        self.listener.on_macro(node.id, node.parameters, node.content, node.inline)

    def visit_verbatim(self, node: Verbatim) -> None:
        self.listener.on_verbatim(node.content, node.inline, node.parameters)

    def visit_raw_text(self, node: RawText) -> None:
        self.listener.on_raw_text(node.content, node.syntax)

    def visit_text(self, node: Text) -> None:
        for kind, value in iter_text_events(node.content):
            if kind == "word":
                self.listener.on_word(value)
            elif kind == "space":
                self.listener.on_space()
            elif kind == "special_symbol":
                self.listener.on_special_symbol(value)
            else:
                self.listener.on_new_line()

    def visit_format_span(self, node: FormatSpan) -> None:
        self.listener.begin_format(node.format, node.parameters)
        self._visit_all(node.content)
        self.listener.end_format(node.format, node.parameters)

    def visit_link(self, node: Link) -> None:
        self.listener.begin_link(node.reference, node.free_standing, node.parameters)
        self._visit_all(node.content)
        self.listener.end_link(node.reference, node.free_standing, node.parameters)

    def visit_image(self, node: Image) -> None:
        self.listener.on_image(node.reference, node.free_standing, node.parameters)

    def visit_new_line(self, node: NewLine) -> None:
        self.listener.on_new_line()

    def visit_anchor(self, node: Anchor) -> None:
        self.listener.on_id(node.name)
