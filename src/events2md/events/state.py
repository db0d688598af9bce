#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/state.py
"""Render state tracking.

The markdown produced for an event depends on where the event occurs: a
``-`` at the start of a list item must be escaped, a line break inside a
paragraph is a hard break, a ``|`` inside a table divides columns, and so
on. :class:`BlockStateListener` observes the event stream and maintains a
:class:`RenderContext` describing the current nesting; renderers placed after
it in a :class:`~events2md.events.chain.ListenerChain` read that context.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from events2md.events.listener import Listener, Parameters
from events2md.events.reference import ResourceReference
from events2md.events.types import Event, Format, ListType


@dataclass
class ListState:
    """State of one (possibly nested) list.

    Parameters
    ----------
    kind : ListType
        Bulleted or numbered
    item_index : int, default -1
        Index of the current item; -1 before the first item

    """

    kind: ListType
    item_index: int = -1


@dataclass
class RenderContext:
    """Nesting state of a render session.

    All counters are incremented on the begin event and decremented on the
    matching end event, so they are back to zero once a balanced event stream
    has been consumed.

    """

    list_stack: list[ListState] = field(default_factory=list)
    link_depth: int = 0
    table_depth: int = 0
    quotation_depth: int = 0
    inline_depth: int = 0
    definition_list_depth: int = 0
    cell_row: int = -1
    cell_column: int = -1
    previous_event: Event = Event.NONE

    @property
    def list_depth(self) -> int:
        return len(self.list_stack)

    @property
    def current_list(self) -> ListState | None:
        return self.list_stack[-1] if self.list_stack else None

    @property
    def list_item_index(self) -> int:
        """Index of the current list item, or -1 outside of a list."""
        current = self.current_list
        return current.item_index if current is not None else -1

    @property
    def in_line(self) -> bool:
        """Whether events are part of inline content (paragraph, header, cell, ...)."""
        return self.inline_depth > 0

    @property
    def in_table(self) -> bool:
        return self.table_depth > 0

    @property
    def in_link(self) -> bool:
        return self.link_depth > 0

    @property
    def in_quotation(self) -> bool:
        return self.quotation_depth > 0


class BlockStateListener(Listener):
    """Listener keeping a :class:`RenderContext` up to date.

    Parameters
    ----------
    context : RenderContext, optional
        Context to update. A new one is created when omitted.

    """

    def __init__(self, context: RenderContext | None = None):
        self.context = context if context is not None else RenderContext()

    def _enter_inline(self) -> None:
        self.context.inline_depth += 1

    def _leave_inline(self, event: Event) -> None:
        self.context.inline_depth -= 1
        self.context.previous_event = event

    def end_document(self, parameters: Parameters | None = None) -> None:
        self.context.previous_event = Event.DOCUMENT

    def begin_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self._enter_inline()

    def end_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self._leave_inline(Event.HEADER)

    def begin_paragraph(self, parameters: Parameters | None = None) -> None:
        self._enter_inline()

    def end_paragraph(self, parameters: Parameters | None = None) -> None:
        self._leave_inline(Event.PARAGRAPH)

    def end_format(self, format: Format, parameters: Parameters | None = None) -> None:
        self.context.previous_event = Event.FORMAT

    def begin_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        self.context.list_stack.append(ListState(list_type))

    def end_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        self.context.list_stack.pop()
        self.context.previous_event = Event.LIST

    def begin_list_item(self, parameters: Parameters | None = None) -> None:
        current = self.context.current_list
        if current is not None:
            current.item_index += 1
        self._enter_inline()

    def end_list_item(self, parameters: Parameters | None = None) -> None:
        self._leave_inline(Event.LIST_ITEM)

    def begin_definition_list(self, parameters: Parameters | None = None) -> None:
        self.context.definition_list_depth += 1

    def end_definition_list(self, parameters: Parameters | None = None) -> None:
        self.context.definition_list_depth -= 1
        self.context.previous_event = Event.DEFINITION_LIST

    def begin_definition_term(self) -> None:
        self._enter_inline()

    def end_definition_term(self) -> None:
        self._leave_inline(Event.DEFINITION_TERM)

    def begin_definition_description(self) -> None:
        self._enter_inline()

    def end_definition_description(self) -> None:
        self._leave_inline(Event.DEFINITION_DESCRIPTION)

    def begin_table(self, parameters: Parameters | None = None) -> None:
        self.context.table_depth += 1
        self.context.cell_row = -1
        self.context.cell_column = -1

    def end_table(self, parameters: Parameters | None = None) -> None:
        self.context.table_depth -= 1
        self.context.previous_event = Event.TABLE

    def begin_table_row(self, parameters: Parameters | None = None) -> None:
        self.context.cell_row += 1
        self.context.cell_column = -1

    def end_table_row(self, parameters: Parameters | None = None) -> None:
        self.context.previous_event = Event.TABLE_ROW

    def begin_table_cell(self, parameters: Parameters | None = None) -> None:
        self.context.cell_column += 1
        self._enter_inline()

    def end_table_cell(self, parameters: Parameters | None = None) -> None:
        self._leave_inline(Event.TABLE_CELL)

    def begin_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self.context.cell_column += 1
        self._enter_inline()

    def end_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self._leave_inline(Event.TABLE_HEADER_CELL)

    def begin_quotation(self, parameters: Parameters | None = None) -> None:
        self.context.quotation_depth += 1

    def end_quotation(self, parameters: Parameters | None = None) -> None:
        self.context.quotation_depth -= 1
        self.context.previous_event = Event.QUOTATION

    def begin_quotation_line(self) -> None:
        self._enter_inline()

    def end_quotation_line(self) -> None:
        self._leave_inline(Event.QUOTATION_LINE)

    def begin_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self.context.link_depth += 1

    def end_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self.context.link_depth -= 1
        self.context.previous_event = Event.LINK

    def on_image(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self.context.previous_event = Event.IMAGE

    def on_macro(self, id: str, parameters: Parameters | None, content: str | None, inline: bool) -> None:
        self.context.previous_event = Event.MACRO

    def on_verbatim(self, content: str, inline: bool, parameters: Parameters | None = None) -> None:
        self.context.previous_event = Event.VERBATIM_INLINE if inline else Event.VERBATIM_STANDALONE

    def on_raw_text(self, text: str, syntax: str | None = None) -> None:
        self.context.previous_event = Event.RAW_TEXT

    def on_horizontal_line(self, parameters: Parameters | None = None) -> None:
        self.context.previous_event = Event.HORIZONTAL_LINE

    def on_empty_lines(self, count: int) -> None:
        self.context.previous_event = Event.EMPTY_LINES

    def on_word(self, word: str) -> None:
        self.context.previous_event = Event.WORD

    def on_space(self) -> None:
        self.context.previous_event = Event.SPACE

    def on_special_symbol(self, symbol: str) -> None:
        self.context.previous_event = Event.SPECIAL_SYMBOL

    def on_new_line(self) -> None:
        self.context.previous_event = Event.NEW_LINE

    def on_id(self, name: str) -> None:
        self.context.previous_event = Event.ID
