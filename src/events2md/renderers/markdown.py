#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/markdown.py
"""Markdown rendering from document events.

This module provides two renderers:

- :class:`MarkdownChainingRenderer`, an event listener that writes markdown
  as events arrive. It reads the render state maintained by a
  :class:`~events2md.events.state.BlockStateListener` placed before it in a
  :class:`~events2md.events.chain.ListenerChain`.
- :class:`MarkdownRenderer`, which renders a whole document tree by
  emitting its events into such a chain.

Content whose final form depends on what follows (link labels, table cells)
is captured in pushed printers and placed once the construct ends. Document
text is written as delayed output and escaped when flushed.

"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TextIO

from events2md.ast.events import EventEmitter
from events2md.ast.nodes import Document
from events2md.constants import (
    BULLETED_LIST_MARKER,
    DEFINITION_DESCRIPTION_MARKER,
    HARD_LINE_BREAK,
    HORIZONTAL_RULE,
    MAJOR_HEADER_LEVEL_LIMIT,
    NUMBERED_LIST_MARKER,
    PARAM_LANGUAGE,
    QUOTATION_PREFIX,
)
from events2md.events.chain import ListenerChain
from events2md.events.listener import Listener, Parameters
from events2md.events.reference import LabelGeneratorRegistry, ReferenceSerializer, ResourceReference
from events2md.events.state import BlockStateListener, RenderContext
from events2md.events.types import Event, Format, ListType
from events2md.options.markdown import MarkdownRendererOptions
from events2md.renderers._macro import MarkdownMacroRenderer
from events2md.renderers._printer import MarkdownPrinter, PrinterStack
from events2md.renderers._resource import MarkdownResourceRenderer
from events2md.renderers._table import MarkdownTableLayout
from events2md.renderers.base import BaseRenderer
from events2md.utils.io_utils import OutputDestination

logger = logging.getLogger(__name__)

# Opening markup of each format; closing markup is the same unless listed below
_FORMAT_OPEN: dict[Format, str] = {
    Format.BOLD: "**",
    Format.ITALIC: "_",
    Format.MONOSPACE: "`",
    Format.SUPERSCRIPT: "^",
    Format.SUBSCRIPT: "~",
    Format.STRIKEDOUT: "<del>",
    # No markdown underline; bold is the closest
    Format.UNDERLINED: "**",
}

_FORMAT_CLOSE: dict[Format, str] = {
    Format.SUPERSCRIPT: "^",
    Format.SUBSCRIPT: "~",
    Format.STRIKEDOUT: "</del>",
}

_SPACE_ESCAPING_FORMATS = frozenset({Format.SUPERSCRIPT, Format.SUBSCRIPT})


class MarkdownChainingRenderer(Listener):
    """Event listener writing markdown.

    Must be placed after a :class:`BlockStateListener` sharing the same
    :class:`RenderContext` in a :class:`ListenerChain`.

    Parameters
    ----------
    context : RenderContext
        Render state maintained by the block state listener
    printers : PrinterStack
        Output printers; the root printer holds the document output
    options : MarkdownRendererOptions, optional
        Rendering options
    reference_serializer : ReferenceSerializer, optional
        Serializer for link and image references
    label_generators : LabelGeneratorRegistry, optional
        Alt text generators for images

    """

    def __init__(
        self,
        context: RenderContext,
        printers: PrinterStack,
        options: MarkdownRendererOptions | None = None,
        reference_serializer: ReferenceSerializer | None = None,
        label_generators: LabelGeneratorRegistry | None = None,
    ):
        self.context = context
        self.printers = printers
        self.options = options or MarkdownRendererOptions()
        self.list_indent = " " * self.options.list_indent_width
        self.resource_renderer = MarkdownResourceRenderer(printers, reference_serializer, label_generators)
        self.macro_renderer = MarkdownMacroRenderer(printers)
        self.table_layout = MarkdownTableLayout(
            width_stop=self.options.table_width_stop,
            min_padding=self.options.table_min_padding,
            repeated_width_bonus=self.options.repeated_width_bonus,
        )
        self._paragraph_preceded = False

    # Print methods

    @property
    def printer(self) -> MarkdownPrinter:
        return self.printers.active

    def print(self, text: str) -> None:
        self.printer.print(text)

    def print_delayed(self, text: str) -> None:
        self.printer.print_delayed(text)

    def print_new_line(self) -> None:
        self.print("\n")

    def print_empty_lines(self, count: int) -> None:
        """Separate blocks with ``count`` empty lines."""
        self.print("\n" * (count + 1))

    def print_empty_line(self) -> None:
        self.print_empty_lines(1)

    def _pop_captured(self) -> str:
        return self.printers.pop().getvalue()

    # Document

    def end_document(self, parameters: Parameters | None = None) -> None:
        self.printer.flush()

    # Header

    def begin_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self.print_empty_lines(2 if level < MAJOR_HEADER_LEVEL_LIMIT else 1)
        self.print("#" * level + " ")

    def end_header(self, level: int, id: str | None = None, parameters: Parameters | None = None) -> None:
        self.printer.flush()

    # Paragraph

    def begin_paragraph(self, parameters: Parameters | None = None) -> None:
        self.print_empty_line()
        self._paragraph_preceded = True

    def end_paragraph(self, parameters: Parameters | None = None) -> None:
        self.printer.flush()

    # Format

    def begin_format(self, format: Format, parameters: Parameters | None = None) -> None:
        markup = _FORMAT_OPEN.get(format)
        if markup is None:
            return
        self.print(markup)
        if format in _SPACE_ESCAPING_FORMATS:
            self.printer.escape_spaces = True

    def end_format(self, format: Format, parameters: Parameters | None = None) -> None:
        markup = _FORMAT_CLOSE.get(format)
        if markup is None:
            self.begin_format(format, parameters)
            return
        self.print(markup)
        if format in _SPACE_ESCAPING_FORMATS:
            self.printer.escape_spaces = False

    # Lists

    def begin_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        if self.context.list_depth == 1:
            self.print_empty_line()
        else:
            self.print_new_line()
        self._paragraph_preceded = False

    def end_list(self, list_type: ListType, parameters: Parameters | None = None) -> None:
        self.printer.flush()

    def begin_list_item(self, parameters: Parameters | None = None) -> None:
        if self.context.list_item_index > 0:
            self.print_new_line()
            # Items holding paragraphs are separated by an empty line
            if self._paragraph_preceded:
                self.print_new_line()

        current = self.context.current_list
        if current is not None and current.kind is ListType.NUMBERED:
            marker = NUMBERED_LIST_MARKER
        else:
            marker = BULLETED_LIST_MARKER
        self.print(marker.ljust(len(self.list_indent)))
        self.printer.push_line_prefix(self.list_indent)

        self._paragraph_preceded = False
        self.printer.suppress_leading_newlines()

    def end_list_item(self, parameters: Parameters | None = None) -> None:
        self.printer.pop_line_prefix()

    # Definition lists

    def begin_definition_term(self) -> None:
        self.print_empty_line()

    def end_definition_term(self) -> None:
        self.print_new_line()

    def begin_definition_description(self) -> None:
        self.print(DEFINITION_DESCRIPTION_MARKER.ljust(len(self.list_indent)))
        self.printer.push_line_prefix(self.list_indent)

    def end_definition_description(self) -> None:
        self.printer.flush()
        self.printer.pop_line_prefix()

    # Tables

    def begin_table(self, parameters: Parameters | None = None) -> None:
        self.printer.on_new_line = False

    def end_table(self, parameters: Parameters | None = None) -> None:
        self.print_empty_line()
        self.table_layout.render(self.print)
        self.table_layout.clear()

    def begin_table_row(self, parameters: Parameters | None = None) -> None:
        self.table_layout.begin_row()

    def begin_table_cell(self, parameters: Parameters | None = None) -> None:
        self.printers.push()

    def end_table_cell(self, parameters: Parameters | None = None) -> None:
        self.table_layout.add_cell(self._pop_captured(), False, parameters)

    def begin_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self.printers.push()

    def end_table_head_cell(self, parameters: Parameters | None = None) -> None:
        self.table_layout.add_cell(self._pop_captured(), True, parameters)

    # Quotations

    def begin_quotation(self, parameters: Parameters | None = None) -> None:
        self.print_new_line()
        self.printer.push_line_prefix(QUOTATION_PREFIX)
        self.print_new_line()
        self.printer.suppress_leading_newlines()

    def end_quotation(self, parameters: Parameters | None = None) -> None:
        self.printer.pop_line_prefix()

    def begin_quotation_line(self) -> None:
        if self.context.previous_event is not Event.QUOTATION:
            self.print_empty_line()

    def end_quotation_line(self) -> None:
        self.printer.flush()

    # Links and images

    def begin_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self.printer.flush()
        # Markdown has no nested links: only the outermost one captures its label
        if self.context.link_depth < 2 and not free_standing:
            self.printers.push()

    def end_link(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        if free_standing:
            self.resource_renderer.render_free_standing_uri(reference)
        elif self.context.link_depth == 1:
            label = self._pop_captured()
            self.resource_renderer.render_link_reference(reference, label, parameters)

    def on_image(
        self, reference: ResourceReference, free_standing: bool, parameters: Parameters | None = None
    ) -> None:
        self.resource_renderer.render_image_reference(reference, parameters)

    # Macros and verbatim

    def on_macro(self, id: str, parameters: Parameters | None, content: str | None, inline: bool) -> None:
        parameters = parameters or {}
        if not inline:
            self.print_empty_line()

        if id == self.options.code_macro_id:
            if inline:
                self.macro_renderer.render_inline_code(content or "")
            else:
                self.macro_renderer.render_block_code(content or "", parameters.get(PARAM_LANGUAGE))
        elif self.macro_renderer.fits_inline_form(content):
            self.macro_renderer.render_markdown_macro(id, parameters, content)
        else:
            self.macro_renderer.render_block_macro(id, parameters, content)

    def on_verbatim(self, content: str, inline: bool, parameters: Parameters | None = None) -> None:
        if inline:
            self.macro_renderer.render_inline_code(content)
        else:
            self.print_empty_line()
            self.macro_renderer.render_block_code(content, (parameters or {}).get(PARAM_LANGUAGE))

    def on_raw_text(self, text: str, syntax: str | None = None) -> None:
        if not self.context.in_line:
            self.print_empty_line()
        self.print(text)

    # Leaves

    def on_horizontal_line(self, parameters: Parameters | None = None) -> None:
        self.print_empty_line()
        self.print(HORIZONTAL_RULE)

    def on_empty_lines(self, count: int) -> None:
        self.print("\n" * count)

    def on_new_line(self) -> None:
        if self.context.in_line:
            self.print(HARD_LINE_BREAK)
        else:
            self.print_new_line()

    def on_word(self, word: str) -> None:
        self.print_delayed(word)

    def on_space(self) -> None:
        self.print_delayed(" ")

    def on_special_symbol(self, symbol: str) -> None:
        self.print_delayed(symbol)

    def on_id(self, name: str) -> None:
        logger.debug("Anchor '%s' has no markdown syntax, skipped", name)


class MarkdownRenderer(BaseRenderer):
    """Render document trees to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options
    reference_serializer : ReferenceSerializer, optional
        Serializer for link and image references
    label_generators : LabelGeneratorRegistry, optional
        Alt text generators for images

    Examples
    --------
    Basic usage:

        >>> from events2md.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> print(MarkdownRenderer().render_to_string(doc))
        # Title

    Driving the renderer with events:

        >>> from io import StringIO
        >>> output = StringIO()
        >>> listener = MarkdownRenderer().create_listener(output)
        >>> listener.begin_paragraph()
        >>> listener.on_word("Hello")
        >>> listener.end_paragraph()
        >>> output.getvalue()
        'Hello'

    """

    def __init__(
        self,
        options: MarkdownRendererOptions | None = None,
        reference_serializer: ReferenceSerializer | None = None,
        label_generators: LabelGeneratorRegistry | None = None,
    ):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self.reference_serializer = reference_serializer
        self.label_generators = label_generators

    def create_listener(self, output: TextIO) -> ListenerChain:
        """Create a listener writing the markdown of the events it receives.

        Parameters
        ----------
        output : TextIO
            Text stream receiving the markdown

        Returns
        -------
        ListenerChain
            Chain of a block state listener and a markdown chaining renderer
            sharing one render context

        """
        context = RenderContext()
        printers = PrinterStack(context, output)
        renderer = MarkdownChainingRenderer(
            context,
            printers,
            self.options,
            reference_serializer=self.reference_serializer,
            label_generators=self.label_generators,
        )
        return ListenerChain([BlockStateListener(context), renderer])

    def render_to_string(self, doc: Document) -> str:
        """Render a document tree to a markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text

        """
        output = StringIO()
        listener = self.create_listener(output)
        doc.accept(EventEmitter(listener))

        markdown = output.getvalue()
        if self.options.strip_trailing_newlines:
            markdown = markdown.rstrip("\n")
        return markdown

    def render(self, doc: Document, output: OutputDestination) -> None:
        """Render a document tree to markdown and write it to output.

        Parameters
        ----------
        doc : Document
            Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_to_string(doc), output)
