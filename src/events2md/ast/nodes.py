#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/ast/nodes.py
"""Document tree node classes.

This module defines the node hierarchy used to describe a document as a
tree. Each node maps to one or a pair of document events; the
:class:`~events2md.ast.events.EventEmitter` visitor walks a tree and emits
those events in document order.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, List, ListItem
    - DefinitionList, DefinitionTerm, DefinitionDescription
    - Table, TableRow, TableCell, Quotation, QuotationLine
    - HorizontalRule, EmptyLines, Macro, Verbatim, RawText

Inline nodes:
    - Text, FormatSpan, Link, Image, NewLine, Anchor
    - Macro, Verbatim and RawText (when inline)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from events2md.events.reference import ResourceReference
from events2md.events.types import Format, ListType


class Node(ABC):
    """Base class for all document tree nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    parameters : dict, default = empty dict
        Document parameters

    """

    children: list[Node] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    id : str or None, default = None
        Heading identifier
    parameters : dict, default = empty dict
        Heading parameters

    """

    level: int
    content: list[Node] = field(default_factory=list)
    id: Optional[str] = None
    parameters: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class List(Node):
    """List node (bulleted or numbered).

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items
    list_type : ListType, default = ListType.BULLETED
        Kind of list
    parameters : dict, default = empty dict
        List parameters

    """

    items: list[ListItem] = field(default_factory=list)
    list_type: ListType = ListType.BULLETED
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node.

    Children may mix inline content with nested blocks (paragraphs, nested
    lists, ...).
    """

    children: list[Node] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class DefinitionTerm(Node):
    """Term of a definition list."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_definition_term(self)


@dataclass
class DefinitionDescription(Node):
    """Description of a definition list term."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_definition_description(self)


@dataclass
class DefinitionList(Node):
    """Definition list node.

    Parameters
    ----------
    items : list of DefinitionTerm or DefinitionDescription, default = empty list
        Terms and descriptions, in document order
    parameters : dict, default = empty dict
        Definition list parameters

    """

    items: list[Union[DefinitionTerm, DefinitionDescription]] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_definition_list(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    header : bool, default = False
        Whether the cell is a header cell
    parameters : dict, default = empty dict
        Cell parameters; ``align`` and ``colspan`` are used by the markdown
        renderer

    """

    content: list[Node] = field(default_factory=list)
    header: bool = False
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Table row node."""

    cells: list[TableCell] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """Table node.

    Header rows are the leading rows whose cells are header cells.
    """

    rows: list[TableRow] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass
class QuotationLine(Node):
    """One line of a quotation; may hold a nested quotation."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_quotation_line(self)


@dataclass
class Quotation(Node):
    """Quotation node made of quotation lines."""

    lines: list[QuotationLine] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_quotation(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule node."""

    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_horizontal_rule(self)


@dataclass
class EmptyLines(Node):
    """Explicit empty lines between blocks."""

    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"EmptyLines count must be positive, got {self.count}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_empty_lines(self)


@dataclass
class Macro(Node):
    """Macro call node.

    Parameters
    ----------
    id : str
        Macro identifier
    parameters : dict, default = empty dict
        Macro parameters, in order
    content : str or None, default = None
        Macro body
    inline : bool, default = False
        Whether the macro sits inside inline content

    """

    id: str
    parameters: dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None
    inline: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_macro(self)


@dataclass
class Verbatim(Node):
    """Verbatim (code) node, inline or standalone."""

    content: str
    inline: bool = False
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_verbatim(self)


@dataclass
class RawText(Node):
    """Text written to the output unmodified.

    Parameters
    ----------
    content : str
        Raw markup
    syntax : str or None, default = None
        Syntax of the raw markup

    """

    content: str
    syntax: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_raw_text(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Text is emitted as word, space, special symbol and new line events.

    Parameters
    ----------
    content : str
        Text content

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class FormatSpan(Node):
    """Formatted inline content (bold, italic, superscript, ...).

    Parameters
    ----------
    format : Format
        Text format
    content : list of Node, default = empty list
        Formatted inline nodes
    parameters : dict, default = empty dict
        Format parameters

    """

    format: Format
    content: list[Node] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_format_span(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    reference : ResourceReference
        Link target
    content : list of Node, default = empty list
        Link label; empty for a link labelled by its target
    free_standing : bool, default = False
        Whether the link is a bare URI written in the text
    parameters : dict, default = empty dict
        Link parameters; ``title`` is recognized

    """

    reference: ResourceReference
    content: list[Node] = field(default_factory=list)
    free_standing: bool = False
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    reference : ResourceReference
        Image source
    free_standing : bool, default = False
        Whether the image is a bare URI written in the text
    parameters : dict, default = empty dict
        Image parameters; ``alt`` and ``title`` are recognized

    """

    reference: ResourceReference
    free_standing: bool = False
    parameters: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class NewLine(Node):
    """Explicit line break."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_new_line(self)


@dataclass
class Anchor(Node):
    """Named anchor."""

    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_anchor(self)
