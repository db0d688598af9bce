#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/ast/serialization.py
"""JSON and YAML serialization of document trees.

Each node is represented as a mapping holding a ``node_type`` discriminator
(the node class name) and the node fields. Resource references are nested
mappings with ``reference``, ``type``, ``typed`` and ``parameters`` keys;
formats and list types are stored by value (``"bold"``, ``"numbered"``).

Examples
--------
Serialize a document to JSON:

    >>> from events2md.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
    >>> json_str = ast_to_json(doc)

Load it back:

    >>> json_to_ast(json_str).children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, cast

import yaml

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
from events2md.events.reference import ResourceReference, ResourceType
from events2md.events.types import Format, ListType
from events2md.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _serialize_nodes(nodes: list[Node]) -> list[dict[str, Any]]:
    return [ast_to_dict(node) for node in nodes]


def _serialize_reference(reference: ResourceReference) -> dict[str, Any]:
    return {
        "reference": reference.reference,
        "type": reference.type.scheme,
        "typed": reference.typed,
        "parameters": dict(reference.parameters),
    }


def _serialize_document(node: Document) -> dict[str, Any]:
    return {"node_type": "Document", "children": _serialize_nodes(node.children), "parameters": dict(node.parameters)}


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {
        "node_type": "Heading",
        "level": node.level,
        "content": _serialize_nodes(node.content),
        "id": node.id,
        "parameters": dict(node.parameters),
    }


def _serialize_list(node: List) -> dict[str, Any]:
    return {
        "node_type": "List",
        "list_type": node.list_type.value,
        "items": _serialize_nodes(cast(list[Node], node.items)),
        "parameters": dict(node.parameters),
    }


def _serialize_table_cell(node: TableCell) -> dict[str, Any]:
    return {
        "node_type": "TableCell",
        "content": _serialize_nodes(node.content),
        "header": node.header,
        "parameters": dict(node.parameters),
    }


def _serialize_format_span(node: FormatSpan) -> dict[str, Any]:
    return {
        "node_type": "FormatSpan",
        "format": node.format.value,
        "content": _serialize_nodes(node.content),
        "parameters": dict(node.parameters),
    }


def _serialize_link(node: Link) -> dict[str, Any]:
    return {
        "node_type": "Link",
        "reference": _serialize_reference(node.reference),
        "content": _serialize_nodes(node.content),
        "free_standing": node.free_standing,
        "parameters": dict(node.parameters),
    }


def _serialize_image(node: Image) -> dict[str, Any]:
    return {
        "node_type": "Image",
        "reference": _serialize_reference(node.reference),
        "free_standing": node.free_standing,
        "parameters": dict(node.parameters),
    }


def _serialize_macro(node: Macro) -> dict[str, Any]:
    return {
        "node_type": "Macro",
        "id": node.id,
        "parameters": dict(node.parameters),
        "content": node.content,
        "inline": node.inline,
    }


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Heading: _serialize_heading,
    Paragraph: lambda n: {
        "node_type": "Paragraph",
        "content": _serialize_nodes(n.content),
        "parameters": dict(n.parameters),
    },
    List: _serialize_list,
    ListItem: lambda n: {
        "node_type": "ListItem",
        "children": _serialize_nodes(n.children),
        "parameters": dict(n.parameters),
    },
    DefinitionList: lambda n: {
        "node_type": "DefinitionList",
        "items": _serialize_nodes(n.items),
        "parameters": dict(n.parameters),
    },
    DefinitionTerm: lambda n: {"node_type": "DefinitionTerm", "content": _serialize_nodes(n.content)},
    DefinitionDescription: lambda n: {"node_type": "DefinitionDescription", "children": _serialize_nodes(n.children)},
    Table: lambda n: {"node_type": "Table", "rows": _serialize_nodes(n.rows), "parameters": dict(n.parameters)},
    TableRow: lambda n: {"node_type": "TableRow", "cells": _serialize_nodes(n.cells), "parameters": dict(n.parameters)},
    TableCell: _serialize_table_cell,
    Quotation: lambda n: {
        "node_type": "Quotation",
        "lines": _serialize_nodes(n.lines),
        "parameters": dict(n.parameters),
    },
    QuotationLine: lambda n: {"node_type": "QuotationLine", "content": _serialize_nodes(n.content)},
    HorizontalRule: lambda n: {"node_type": "HorizontalRule", "parameters": dict(n.parameters)},
    EmptyLines: lambda n: {"node_type": "EmptyLines", "count": n.count},
    Macro: _serialize_macro,
    Verbatim: lambda n: {
        "node_type": "Verbatim",
        "content": n.content,
        "inline": n.inline,
        "parameters": dict(n.parameters),
    },
    RawText: lambda n: {"node_type": "RawText", "content": n.content, "syntax": n.syntax},
    Text: lambda n: {"node_type": "Text", "content": n.content},
    FormatSpan: _serialize_format_span,
    Link: _serialize_link,
    Image: _serialize_image,
    NewLine: lambda n: {"node_type": "NewLine"},
    Anchor: lambda n: {"node_type": "Anchor", "name": n.name},
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a dictionary representation.

    Examples
    --------
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")
    return serializer(node)


# Helper functions for deserialization


def _deserialize_nodes(data: dict[str, Any], key: str) -> list[Node]:
    children = data.get(key, [])
    if not isinstance(children, list):
        raise ParsingError(f"Field '{key}' of {data.get('node_type')} must be a list", parsing_stage="structure")
    return [dict_to_ast(child) for child in children]


def _parameters(data: dict[str, Any]) -> dict[str, str]:
    parameters = data.get("parameters") or {}
    if not isinstance(parameters, dict):
        raise ParsingError(f"Parameters of {data.get('node_type')} must be a mapping", parsing_stage="structure")
    # Parameter values are strings; YAML may have loaded numbers or booleans
    return {str(key): str(value) for key, value in parameters.items() if value is not None}


def _deserialize_reference(data: Any) -> ResourceReference:
    if isinstance(data, str):
        return ResourceReference(data)
    if not isinstance(data, dict) or "reference" not in data:
        raise ParsingError(f"Invalid resource reference: {data!r}", parsing_stage="reference")
    return ResourceReference(
        reference=str(data["reference"]),
        type=ResourceType(str(data.get("type", "url"))),
        typed=bool(data.get("typed", False)),
        parameters=_parameters(data),
    )


def _deserialize_enum(enum_type: Any, value: Any, field_name: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        raise ParsingError(f"Invalid {field_name}: {value!r}", parsing_stage="structure", original_error=e) from e


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    try:
        return Heading(
            level=int(data["level"]),
            content=_deserialize_nodes(data, "content"),
            id=data.get("id"),
            parameters=_parameters(data),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ParsingError(f"Invalid heading: {e}", parsing_stage="structure", original_error=e) from e


def _deserialize_empty_lines(data: dict[str, Any]) -> EmptyLines:
    try:
        return EmptyLines(count=int(data.get("count", 1)))
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid empty lines: {e}", parsing_stage="structure", original_error=e) from e


def _deserialize_macro(data: dict[str, Any]) -> Macro:
    content = data.get("content")
    return Macro(
        id=str(data["id"]),
        parameters=_parameters(data),
        content=None if content is None else str(content),
        inline=bool(data.get("inline", False)),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    "Document": lambda d: Document(children=_deserialize_nodes(d, "children"), parameters=_parameters(d)),
    "Heading": _deserialize_heading,
    "Paragraph": lambda d: Paragraph(content=_deserialize_nodes(d, "content"), parameters=_parameters(d)),
    "List": lambda d: List(
        items=cast(list[ListItem], _deserialize_nodes(d, "items")),
        list_type=_deserialize_enum(ListType, d.get("list_type", "bulleted"), "list type"),
        parameters=_parameters(d),
    ),
    "ListItem": lambda d: ListItem(children=_deserialize_nodes(d, "children"), parameters=_parameters(d)),
    "DefinitionList": lambda d: DefinitionList(
        items=cast(list, _deserialize_nodes(d, "items")),
        parameters=_parameters(d),
    ),
    "DefinitionTerm": lambda d: DefinitionTerm(content=_deserialize_nodes(d, "content")),
    "DefinitionDescription": lambda d: DefinitionDescription(children=_deserialize_nodes(d, "children")),
    "Table": lambda d: Table(rows=cast(list[TableRow], _deserialize_nodes(d, "rows")), parameters=_parameters(d)),
    "TableRow": lambda d: TableRow(
        cells=cast(list[TableCell], _deserialize_nodes(d, "cells")),
        parameters=_parameters(d),
    ),
    "TableCell": lambda d: TableCell(
        content=_deserialize_nodes(d, "content"),
        header=bool(d.get("header", False)),
        parameters=_parameters(d),
    ),
    "Quotation": lambda d: Quotation(
        lines=cast(list[QuotationLine], _deserialize_nodes(d, "lines")),
        parameters=_parameters(d),
    ),
    "QuotationLine": lambda d: QuotationLine(content=_deserialize_nodes(d, "content")),
    "HorizontalRule": lambda d: HorizontalRule(parameters=_parameters(d)),
    "EmptyLines": _deserialize_empty_lines,
    "Macro": _deserialize_macro,
    "Verbatim": lambda d: Verbatim(
        content=str(d.get("content", "")),
        inline=bool(d.get("inline", False)),
        parameters=_parameters(d),
    ),
    "RawText": lambda d: RawText(content=str(d.get("content", "")), syntax=d.get("syntax")),
    "Text": lambda d: Text(content=str(d.get("content", ""))),
    "FormatSpan": lambda d: FormatSpan(
        format=_deserialize_enum(Format, d.get("format", "none"), "format"),
        content=_deserialize_nodes(d, "content"),
        parameters=_parameters(d),
    ),
    "Link": lambda d: Link(
        reference=_deserialize_reference(d.get("reference")),
        content=_deserialize_nodes(d, "content"),
        free_standing=bool(d.get("free_standing", False)),
        parameters=_parameters(d),
    ),
    "Image": lambda d: Image(
        reference=_deserialize_reference(d.get("reference")),
        free_standing=bool(d.get("free_standing", False)),
        parameters=_parameters(d),
    ),
    "NewLine": lambda d: NewLine(),
    "Anchor": lambda d: Anchor(name=str(d.get("name", ""))),
}


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ParsingError
        If the dictionary has no or an unknown ``node_type``, or a malformed field

    Examples
    --------
    >>> dict_to_ast({"node_type": "Text", "content": "Hello"}).content
    'Hello'

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Node must be a mapping, got {type(data).__name__}", parsing_stage="structure")

    node_type = data.get("node_type")
    if not node_type:
        raise ParsingError("Dictionary must contain 'node_type' field", parsing_stage="structure")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="structure")

    try:
        return deserializer(data)
    except KeyError as e:
        raise ParsingError(f"{node_type} is missing field {e}", parsing_stage="structure", original_error=e) from e
    except TypeError as e:
        raise ParsingError(f"Malformed {node_type}: {e}", parsing_stage="structure", original_error=e) from e


def _load_versioned(data: Any) -> Node:
    if not isinstance(data, dict):
        raise ParsingError("Document tree root must be a mapping", parsing_stage="structure")
    data = dict(data)
    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. Only schema version {SCHEMA_VERSION} is supported.",
            parsing_stage="schema",
        )
    return dict_to_ast(data)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string to a node.

    A missing ``schema_version`` is read as version 1.

    Raises
    ------
    ParsingError
        If the JSON is malformed or does not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json", original_error=e) from e
    return _load_versioned(data)


def ast_to_yaml(node: Node) -> str:
    """Serialize a node to a YAML string with a schema version."""
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return yaml.safe_dump(versioned_dict, allow_unicode=True, sort_keys=False)


def yaml_to_ast(yaml_str: str) -> Node:
    """Deserialize a YAML string to a node.

    Raises
    ------
    ParsingError
        If the YAML is malformed or does not describe a valid tree

    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML: {e}", parsing_stage="yaml", original_error=e) from e
    logger.debug("Loaded YAML document tree")
    return _load_versioned(data)


__all__ = [
    "ast_to_dict",
    "ast_to_json",
    "ast_to_yaml",
    "dict_to_ast",
    "json_to_ast",
    "yaml_to_ast",
]
