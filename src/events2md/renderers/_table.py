#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/_table.py
"""Column layout for markdown tables.

Cells are accumulated row by row while the table events stream in, then the
whole grid is laid out at once when the table ends: column widths depend on
every cell of the column, so nothing can be printed before the last row is
known.

Column widths are chosen with a greedy heuristic. Each column keeps a
histogram of the lengths of its cells, weighted so that a length seen several
times weighs less than a length seen once. While the table is wider than the
width budget, the widest retained length with the highest weight is dropped
from its column. Cells longer than their column overflow into the next cell
of the row, which gives up the same amount of padding.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from events2md.constants import (
    DEFAULT_REPEATED_WIDTH_BONUS,
    DEFAULT_TABLE_MIN_PADDING,
    DEFAULT_TABLE_WIDTH_STOP,
    PARAM_ALIGN,
    PARAM_COLSPAN,
    TableAlignment,
)
from events2md.exceptions import InvalidParameterError, RenderingError

logger = logging.getLogger(__name__)

_ALIGNMENTS: tuple[TableAlignment, ...] = ("left", "right", "center")


def parse_alignment(value: str | None) -> TableAlignment:
    """Parse an ``align`` parameter, case-insensitively.

    Unknown or missing values give ``"default"``.

    Examples
    --------
        >>> parse_alignment("Center")
        'center'
        >>> parse_alignment("justify")
        'default'

    """
    if value is not None:
        lowered = value.strip().lower()
        for alignment in _ALIGNMENTS:
            if lowered == alignment:
                return alignment
    return "default"


def parse_colspan(value: str | None) -> int:
    """Parse a ``colspan`` parameter into a positive integer.

    Raises
    ------
    InvalidParameterError
        If the value is not an integer or is lower than 1

    """
    if value is None:
        return 1
    try:
        colspan = int(str(value).strip())
    except ValueError as e:
        raise InvalidParameterError(PARAM_COLSPAN, value, original_error=e) from e
    if colspan < 1:
        raise InvalidParameterError(PARAM_COLSPAN, value, message=f"colspan must be a positive integer, got {value!r}")
    return colspan


@dataclass
class ColumnHistogram:
    """Weighted lengths observed in one column.

    Attributes
    ----------
    ranks : dict[int, float]
        Cell length to rank weight. A length seen for the first time weighs
        its own value; each repeat multiplies the previous weight by the
        repeated width bonus.

    """

    ranks: dict[int, float] = field(default_factory=dict)

    def record(self, length: int, repeated_width_bonus: float) -> None:
        if length in self.ranks:
            self.ranks[length] = self.ranks[length] * repeated_width_bonus
        else:
            self.ranks[length] = float(length)

    def copy(self) -> ColumnHistogram:
        return ColumnHistogram(dict(self.ranks))

    def largest(self) -> int:
        return max(self.ranks)

    def __len__(self) -> int:
        return len(self.ranks)


class MarkdownTableLayout:
    """Accumulates the cells of one table and renders it as a pipe table.

    Usage is ``begin_row()`` / ``add_cell()`` for every row, then ``render()``
    once, then ``clear()`` before reusing the layout for another table.

    Parameters
    ----------
    width_stop : int, default 100
        Width budget of the rendered table, padding included
    min_padding : int, default 1
        Spaces on each side of a cell
    repeated_width_bonus : float, default 0.8
        Weight factor applied to a cell length each time it repeats in a column

    Examples
    --------
        >>> layout = MarkdownTableLayout()
        >>> layout.begin_row()
        >>> layout.add_cell("Name", is_header=True)
        >>> layout.begin_row()
        >>> layout.add_cell("Ada", is_header=False)
        >>> lines = []
        >>> layout.render(lines.append)
        >>> "".join(lines)
        '| Name |\\n|------|\\n| Ada  |\\n'

    """

    def __init__(
        self,
        width_stop: int = DEFAULT_TABLE_WIDTH_STOP,
        min_padding: int = DEFAULT_TABLE_MIN_PADDING,
        repeated_width_bonus: float = DEFAULT_REPEATED_WIDTH_BONUS,
    ):
        self.width_stop = width_stop
        self.min_padding = min_padding
        self.repeated_width_bonus = repeated_width_bonus
        self.rows: list[list[str | None]] = []
        self.histograms: dict[int, ColumnHistogram] = {}
        self.alignments: dict[int, TableAlignment] = {}
        self.header_rows = 0

    def begin_row(self) -> None:
        """Start a new row."""
        self.rows.append([])
        # Alignment is taken from the first row following the header rows
        if self.is_header_row(len(self.rows) - 2):
            self.alignments.clear()

    def add_cell(self, content: str, is_header: bool, parameters: Mapping[str, str] | None = None) -> None:
        """Append a cell to the current row.

        Parameters
        ----------
        content : str
            Rendered (already escaped) cell content; surrounding whitespace is
            stripped
        is_header : bool
            Whether the cell is a header cell
        parameters : Mapping[str, str], optional
            Cell parameters; ``align`` and ``colspan`` are recognized

        Raises
        ------
        RenderingError
            If no row was started
        InvalidParameterError
            If ``colspan`` is not a positive integer

        """
        if not self.rows:
            raise RenderingError("Table cell added before any table row", rendering_stage="table")

        parameters = parameters or {}
        alignment = parse_alignment(parameters.get(PARAM_ALIGN))
        colspan = parse_colspan(parameters.get(PARAM_COLSPAN))
        content = content.strip()

        self._update_metadata(content, alignment, is_header)

        cells = self.rows[-1]
        cells.append(content)
        # Columns covered by the span hold no content of their own
        cells.extend([None] * (colspan - 1))

    def _update_metadata(self, content: str, alignment: TableAlignment, is_header: bool) -> None:
        row = len(self.rows) - 1
        col = len(self.rows[row])

        if col not in self.alignments:
            self.alignments[col] = alignment

        # Only whole leading rows can be headers
        if is_header and col == 0 and row == self.header_rows:
            self.header_rows = row + 1
        if not is_header and row + 1 == self.header_rows:
            self.header_rows -= 1

        histogram = self.histograms.setdefault(col, ColumnHistogram())
        histogram.record(len(content), self.repeated_width_bonus)

    def is_header_row(self, row: int) -> bool:
        return 0 <= row < self.header_rows

    @property
    def column_count(self) -> int:
        return max((len(cells) for cells in self.rows), default=0)

    def column_histogram(self, col: int) -> dict[int, float]:
        """Return a copy of the length/weight histogram of a column."""
        histogram = self.histograms.get(col)
        return dict(histogram.ranks) if histogram is not None else {}

    def compute_column_widths(self) -> list[int]:
        """Resolve the width of every column, padding included.

        The accumulated histograms are left untouched, so this can be called
        any number of times.

        Returns
        -------
        list of int
            One width per column

        """
        retained = {col: histogram.copy() for col, histogram in self.histograms.items()}
        padding = 2 * self.min_padding

        def table_width() -> int:
            return sum(histogram.largest() + padding for histogram in retained.values())

        while table_width() > self.width_stop:
            max_col = -1
            max_rank = 0.0
            for col in sorted(retained):
                histogram = retained[col]
                if len(histogram) < 2:
                    continue
                rank = histogram.ranks[histogram.largest()]
                if rank > max_rank:
                    max_rank = rank
                    max_col = col
            if max_col < 0:
                logger.debug("Table is %d wide, above %d, but cannot be narrowed", table_width(), self.width_stop)
                break
            dropped = retained[max_col].largest()
            del retained[max_col].ranks[dropped]
            logger.debug("Dropped width %d from table column %d", dropped, max_col)

        widths = []
        for col in range(self.column_count):
            histogram = retained.get(col)
            widths.append((histogram.largest() if histogram is not None else 0) + padding)
        return widths

    def _render_header_divider(self, widths: list[int], print: Callable[[str], None]) -> None:
        print("|")
        for col, width in enumerate(widths):
            alignment = self.alignments.get(col, "default")
            line = ["-"] * width
            if line and alignment in ("left", "center"):
                line[0] = ":"
            if line and alignment in ("right", "center"):
                line[-1] = ":"
            print("".join(line))
            print("|")
        print("\n")

    def render(self, print: Callable[[str], None]) -> None:
        """Render the accumulated table.

        Parameters
        ----------
        print : callable
            Receives the markup, piece by piece

        """
        widths = self.compute_column_widths()
        pad = " " * self.min_padding
        header_printed = False

        for row, cells in enumerate(self.rows):
            if not header_printed and not self.is_header_row(row):
                self._render_header_divider(widths, print)
                header_printed = True

            print("|")
            overflow = 0
            col = 0
            while col < len(cells):
                cell = cells[col] or ""
                padding_size = widths[col] - overflow
                colspan = 1
                while col + 1 < len(cells) and cells[col + 1] is None:
                    padding_size += widths[col + 1]
                    colspan += 1
                    col += 1

                content = (pad + cell).ljust(padding_size - self.min_padding) + pad
                print(content)
                print("|" * colspan)

                overflow = max(len(cell) - padding_size, 0)
                col += 1

            print("\n")

        # No data row followed the headers, so close them with the divider anyway.
        # Without it the block would not read as a table.
        if not header_printed and self.rows:
            self._render_header_divider(widths, print)

    def clear(self) -> None:
        """Forget the accumulated table."""
        self.rows.clear()
        self.histograms.clear()
        self.alignments.clear()
        self.header_rows = 0
