#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/listener.py
"""Listener interface for structural document events.

A document is described to a renderer as a flat stream of events: paired
``begin_*`` / ``end_*`` calls for containers (document, header, list, table,
link, ...) and single ``on_*`` calls for leaves (word, space, image, macro,
...). Producers (such as :class:`events2md.ast.events.EventEmitter`) call
these methods in document order; consumers subclass :class:`Listener` and
override the handlers they care about.

Event producers are responsible for balance: every ``begin_*`` call is
matched by the corresponding ``end_*`` call with the same arguments, and
containers are properly nested.

"""

from __future__ import annotations

from typing import Mapping

from events2md.events.reference import ResourceReference
from events2md.events.types import Format, ListType

Parameters = Mapping[str, str]


class Listener:
    """Base class for document event listeners.

    Every handler is a no-op, so subclasses only override what they need.

    Examples
    --------
    Count the words of a document:

        >>> class WordCounter(Listener):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def on_word(self, word):
        ...         self.count += 1

    """

    # Containers

    def begin_document(self, parameters: Parameters | None = None) -> None:
        pass

    def end_document(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        """Start a section header of the given level (1-6)."""

    def end_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        pass

    def begin_paragraph(self, parameters: Parameters | None = None) -> None:
        pass

    def end_paragraph(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_format(self, format: Format, parameters: Parameters | None = None) -> None:
        """Start an inline format span (bold, italic, ...)."""

    def end_format(self, format: Format, parameters: Parameters | None = None) -> None:
        pass

    def begin_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        pass

    def end_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        pass

    def begin_list_item(self, parameters: Parameters | None = None) -> None:
        pass

    def end_list_item(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_definition_list(self, parameters: Parameters | None = None) -> None:
        pass

    def end_definition_list(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_definition_term(self) -> None:
        pass

    def end_definition_term(self) -> None:
        pass

    def begin_definition_description(self) -> None:
        pass

    def end_definition_description(self) -> None:
        pass

    def begin_table(self, parameters: Parameters | None = None) -> None:
        pass

    def end_table(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_table_row(self, parameters: Parameters | None = None) -> None:
        pass

    def end_table_row(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_table_cell(self, parameters: Parameters | None = None) -> None:
        """Start a data cell. ``align`` and ``colspan`` parameters are recognized."""

    def end_table_cell(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_table_head_cell(self, parameters: Parameters | None = None) -> None:
        """Start a header cell. ``align`` and ``colspan`` parameters are recognized."""

    def end_table_head_cell(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_quotation(self, parameters: Parameters | None = None) -> None:
        pass

    def end_quotation(self, parameters: Parameters | None = None) -> None:
        pass

    def begin_quotation_line(self) -> None:
        pass

    def end_quotation_line(self) -> None:
        pass

    def begin_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        """Start a link.

        Parameters
        ----------
        reference : ResourceReference
            Link target
        free_standing : bool
            True for a bare URI written directly in the text (no label)
        parameters : Mapping[str, str], optional
            Link parameters; ``title`` is recognized

        """

    def end_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        pass

    # Leaves

    def on_image(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        """Emit an image. ``alt`` and ``title`` parameters are recognized."""

    def on_macro(self, id: str, parameters: Parameters | None, content: str | None, inline: bool) -> None:
        """Emit a macro call.

        Parameters
        ----------
        id : str
            Macro identifier
        parameters : Mapping[str, str] or None
            Macro parameters, in order
        content : str or None
            Macro body
        inline : bool
            Whether the macro sits inside inline content

        """

    def on_verbatim(self, content: str, inline: bool, parameters: Parameters | None = None) -> None:
        pass

    def on_raw_text(self, text: str, syntax: str | None = None) -> None:
        """Emit text that is written to the output unmodified."""

    def on_horizontal_line(self, parameters: Parameters | None = None) -> None:
        pass

    def on_empty_lines(self, count: int) -> None:
        pass

    def on_word(self, word: str) -> None:
        pass

    def on_space(self) -> None:
        pass

    def on_special_symbol(self, symbol: str) -> None:
        pass

    def on_new_line(self) -> None:
        pass

    def on_id(self, name: str) -> None:
        """Emit an anchor."""
