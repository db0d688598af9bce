#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

Visitors separate algorithms (event emission, validation, statistics) from
the node structure itself.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Subclasses implement a ``visit_*`` method for every node type.

    Examples
    --------
    Visitor collecting the text of a document:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...     def visit_text(self, node):
        ...         self.parts.append(node.content)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node."""

    @abstractmethod
    def visit_definition_description(self, node: DefinitionDescription) -> Any:
        """Visit a DefinitionDescription node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_quotation(self, node: Quotation) -> Any:
        """Visit a Quotation node."""

    @abstractmethod
    def visit_quotation_line(self, node: QuotationLine) -> Any:
        """Visit a QuotationLine node."""

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""

    @abstractmethod
    def visit_empty_lines(self, node: EmptyLines) -> Any:
        """Visit an EmptyLines node."""

    @abstractmethod
    def visit_macro(self, node: Macro) -> Any:
        """Visit a Macro node."""

    @abstractmethod
    def visit_verbatim(self, node: Verbatim) -> Any:
        """Visit a Verbatim node."""

    @abstractmethod
    def visit_raw_text(self, node: RawText) -> Any:
        """Visit a RawText node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_format_span(self, node: FormatSpan) -> Any:
        """Visit a FormatSpan node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_new_line(self, node: NewLine) -> Any:
        """Visit a NewLine node."""

    @abstractmethod
    def visit_anchor(self, node: Anchor) -> Any:
        """Visit an Anchor node."""
