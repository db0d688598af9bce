#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/chain.py
"""Ordered dispatch of events to a list of listeners.

A :class:`ListenerChain` is itself a :class:`Listener`: every event it
receives is forwarded to each listener of the chain. The dispatch order
depends on the kind of event:

- ``begin_*`` events go first to last, so that state trackers placed before
  the renderer have already entered the construct when it is rendered;
- ``end_*`` and ``on_*`` events go last to first, so that the renderer sees
  the state as it is *inside* the construct before the trackers leave it.

Examples
--------
    >>> from events2md.events.state import BlockStateListener
    >>> state = BlockStateListener()
    >>> chain = ListenerChain([state])
    >>> chain.begin_paragraph()
    >>> state.context.in_line
    True

"""

from __future__ import annotations

from typing import Iterable

from events2md.events.listener import Listener, Parameters
from events2md.events.reference import ResourceReference
from events2md.events.types import Format, ListType


class ListenerChain(Listener):
    """Listener forwarding every event to an ordered list of listeners.

    Parameters
    ----------
    listeners : iterable of Listener, optional
        Initial listeners, in begin-event order

    """

    def __init__(self, listeners: Iterable[Listener] | None = None):
        self.listeners: list[Listener] = list(listeners or [])

    def add_listener(self, listener: Listener) -> None:
        """Append a listener at the end of the chain."""
        self.listeners.append(listener)

    def _forward(self, method: str, *args) -> None:
        for listener in self.listeners:
            getattr(listener, method)(*args)

    def _backward(self, method: str, *args) -> None:
        for listener in reversed(self.listeners):
            getattr(listener, method)(*args)

    def begin_document(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_document", parameters)

    def end_document(self, parameters: Parameters | None = None) -> None:
        self._backward("end_document", parameters)

    def begin_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self._forward("begin_header", level, id, parameters)

    def end_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self._backward("end_header", level, id, parameters)

    def begin_paragraph(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_paragraph", parameters)

    def end_paragraph(self, parameters: Parameters | None = None) -> None:
        self._backward("end_paragraph", parameters)

    def begin_format(self, format: Format, parameters: Parameters | None = None) -> None:
        self._forward("begin_format", format, parameters)

    def end_format(self, format: Format, parameters: Parameters | None = None) -> None:
        self._backward("end_format", format, parameters)

    def begin_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        self._forward("begin_list", list_type, parameters)

    def end_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        self._backward("end_list", list_type, parameters)

    def begin_list_item(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_list_item", parameters)

    def end_list_item(self, parameters: Parameters | None = None) -> None:
        self._backward("end_list_item", parameters)

    def begin_definition_list(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_definition_list", parameters)

    def end_definition_list(self, parameters: Parameters | None = None) -> None:
        self._backward("end_definition_list", parameters)

    def begin_definition_term(self) -> None:
        self._forward("begin_definition_term")

    def end_definition_term(self) -> None:
        self._backward("end_definition_term")

    def begin_definition_description(self) -> None:
        self._forward("begin_definition_description")

    def end_definition_description(self) -> None:
        self._backward("end_definition_description")

    def begin_table(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_table", parameters)

    def end_table(self, parameters: Parameters | None = None) -> None:
        self._backward("end_table", parameters)

    def begin_table_row(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_table_row", parameters)

    def end_table_row(self, parameters: Parameters | None = None) -> None:
        self._backward("end_table_row", parameters)

    def begin_table_cell(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_table_cell", parameters)

    def end_table_cell(self, parameters: Parameters | None = None) -> None:
        self._backward("end_table_cell", parameters)

    def begin_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_table_head_cell", parameters)

    def end_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self._backward("end_table_head_cell", parameters)

    def begin_quotation(self, parameters: Parameters | None = None) -> None:
        self._forward("begin_quotation", parameters)

    def end_quotation(self, parameters: Parameters | None = None) -> None:
        self._backward("end_quotation", parameters)

    def begin_quotation_line(self) -> None:
        self._forward("begin_quotation_line")

    def end_quotation_line(self) -> None:
        self._backward("end_quotation_line")

    def begin_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self._forward("begin_link", reference, free_standing, parameters)

    def end_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self._backward("end_link", reference, free_standing, parameters)

    def on_image(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self._backward("on_image", reference, free_standing, parameters)

    def on_macro(self, id: str, parameters: Parameters | None, content: str | None, inline: bool) -> None:
        self._backward("on_macro", id, parameters, content, inline)

    def on_verbatim(self, content: str, inline: bool, parameters: Parameters | None = None) -> None:
        self._backward("on_verbatim", content, inline, parameters)

    def on_raw_text(self, text: str, syntax: str | None = None) -> None:
        self._backward("on_raw_text", text, syntax)

    def on_horizontal_line(self, parameters: Parameters | None = None) -> None:
        self._backward("on_horizontal_line", parameters)

    def on_empty_lines(self, count: int) -> None:
        self._backward("on_empty_lines", count)

    def on_word(self, word: str) -> None:
        self._backward("on_word", word)

    def on_space(self) -> None:
        self._backward("on_space")

    def on_special_symbol(self, symbol: str) -> None:
        self._backward("on_special_symbol", symbol)

    def on_new_line(self) -> None:
        self._backward("on_new_line")

    def on_id(self, name: str) -> None:
        self._backward("on_id", name)
