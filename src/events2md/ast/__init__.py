#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/ast/__init__.py
"""Document trees and their conversion to events.

A document tree is an in-memory description of a document. It is turned
into listener events by :class:`EventEmitter`, and loaded from or saved to
JSON and YAML with the serialization helpers.

Examples
--------
    >>> from events2md.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(content=[Text(content="Hello")])])
    >>> ast_to_dict(doc)["node_type"]
    'Document'

"""

from events2md.ast.events import EventEmitter, iter_text_events
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
from events2md.ast.serialization import (
    ast_to_dict,
    ast_to_json,
    ast_to_yaml,
    dict_to_ast,
    json_to_ast,
    yaml_to_ast,
)
from events2md.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Anchor",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "Document",
    "EmptyLines",
    "FormatSpan",
    "Heading",
    "HorizontalRule",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Macro",
    "NewLine",
    "Node",
    "Paragraph",
    "Quotation",
    "QuotationLine",
    "RawText",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "Verbatim",
    # Traversal
    "EventEmitter",
    "NodeVisitor",
    "iter_text_events",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "ast_to_yaml",
    "dict_to_ast",
    "json_to_ast",
    "yaml_to_ast",
]
