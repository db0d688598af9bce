#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines the options controlling how document events are
serialized to Markdown.
"""
# src/events2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from events2md.constants import (
    DEFAULT_CODE_MACRO_ID,
    DEFAULT_LIST_INDENT_WIDTH,
    DEFAULT_REPEATED_WIDTH_BONUS,
    DEFAULT_TABLE_MIN_PADDING,
    DEFAULT_TABLE_WIDTH_STOP,
)
from events2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options for serializing document events.

    Parameters
    ----------
    table_width_stop : int, default 100
        Width budget of rendered tables, cell padding included. Column widths
        are narrowed until the table fits, as long as a column has more than
        one candidate width left.
    table_min_padding : int, default 1
        Number of spaces on each side of a table cell.
    repeated_width_bonus : float, default 0.8
        Factor applied to the weight of a cell length each time it repeats in
        a column. Lengths with a lower weight are kept longer when a table is
        narrowed. Must be in (0, 1].
    list_indent_width : int, default 4
        Column width of list and definition markers, and indentation of their
        nested content.
    code_macro_id : str, default "code"
        Identifier of the macro rendered as native fenced or inline code.

    Examples
    --------
    Narrow tables:
        >>> options = MarkdownRendererOptions(table_width_stop=60)

    """

    table_width_stop: int = field(
        default=DEFAULT_TABLE_WIDTH_STOP,
        metadata={"help": "Maximum table width before columns are narrowed", "type": int, "importance": "core"},
    )
    table_min_padding: int = field(
        default=DEFAULT_TABLE_MIN_PADDING,
        metadata={"help": "Spaces on each side of a table cell", "type": int, "importance": "advanced"},
    )
    repeated_width_bonus: float = field(
        default=DEFAULT_REPEATED_WIDTH_BONUS,
        metadata={
            "help": "Weight factor for cell lengths repeated in a column (0 < x <= 1)",
            "type": float,
            "importance": "advanced",
        },
    )
    list_indent_width: int = field(
        default=DEFAULT_LIST_INDENT_WIDTH,
        metadata={"help": "Width of list markers and nested content indentation", "type": int, "importance": "core"},
    )
    code_macro_id: str = field(
        default=DEFAULT_CODE_MACRO_ID,
        metadata={"help": "Macro identifier rendered as native code", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.table_width_stop < 1:
            raise ValueError(f"table_width_stop must be positive, got {self.table_width_stop}")
        if self.table_min_padding < 0:
            raise ValueError(f"table_min_padding must be non-negative, got {self.table_min_padding}")
        if not 0 < self.repeated_width_bonus <= 1:
            raise ValueError(f"repeated_width_bonus must be in (0, 1], got {self.repeated_width_bonus}")
        # Markers need a trailing space to be read as markers
        if self.list_indent_width < 3:
            raise ValueError(f"list_indent_width must be at least 3, got {self.list_indent_width}")
        if not self.code_macro_id:
            raise ValueError("code_macro_id must not be empty")
