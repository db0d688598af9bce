#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/types.py
"""Enumerations shared by event producers and listeners."""

from __future__ import annotations

from enum import Enum


class Format(Enum):
    """Inline text format of a format span."""

    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKEDOUT = "strikedout"
    UNDERLINED = "underlined"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    MONOSPACE = "monospace"


class ListType(Enum):
    """Kind of list."""

    BULLETED = "bulleted"
    NUMBERED = "numbered"


class Event(Enum):
    """Structural events, used to remember the last completed event."""

    NONE = "none"
    DOCUMENT = "document"
    HEADER = "header"
    PARAGRAPH = "paragraph"
    FORMAT = "format"
    LIST = "list"
    LIST_ITEM = "list_item"
    DEFINITION_LIST = "definition_list"
    DEFINITION_TERM = "definition_term"
    DEFINITION_DESCRIPTION = "definition_description"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    TABLE_HEADER_CELL = "table_header_cell"
    QUOTATION = "quotation"
    QUOTATION_LINE = "quotation_line"
    LINK = "link"
    IMAGE = "image"
    MACRO = "macro"
    VERBATIM_INLINE = "verbatim_inline"
    VERBATIM_STANDALONE = "verbatim_standalone"
    RAW_TEXT = "raw_text"
    HORIZONTAL_LINE = "horizontal_line"
    EMPTY_LINES = "empty_lines"
    WORD = "word"
    SPACE = "space"
    SPECIAL_SYMBOL = "special_symbol"
    NEW_LINE = "new_line"
    ID = "id"
