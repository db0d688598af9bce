#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/_printer.py
"""Buffered output for the markdown renderer.

Two kinds of writes reach a :class:`MarkdownPrinter`:

- markup (``**``, ``#``, list markers, ...) written with :meth:`MarkdownPrinter.print`,
  which goes straight to the output;
- document text (words, spaces, symbols) written with
  :meth:`MarkdownPrinter.print_delayed`, which is held back until the next
  flush so that escaping sees the whole run of text at once.

Line prefixes (list indentation, ``> `` for quotations) are re-emitted after
every line break. Leading line breaks are dropped while suppression is armed,
which lets block constructs ask for blank lines without caring whether they
start the output.

:class:`PrinterStack` holds the printer the renderer currently writes to.
Capture printers are pushed to gather content whose final placement is not
known yet (link labels, table cells) and popped once it is.

"""

from __future__ import annotations

import logging
import re
from collections import deque
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, TextIO

from events2md.events.state import RenderContext
from events2md.exceptions import RenderingError
from events2md.utils.escape import EscapeContext, escape_markdown

logger = logging.getLogger(__name__)

_NEWLINE_SPLIT = re.compile(r"(\n)")


class MarkdownPrinter:
    """Printer for one output level.

    Parameters
    ----------
    context : RenderContext
        Shared render state, read at flush time to build the escape context
    sink : TextIO, optional
        Where output goes. An in-memory buffer is used when omitted.
    on_new_line : bool, default True
        Whether output starts at the beginning of a line

    Attributes
    ----------
    on_new_line : bool
        True when the last written character was a line break
    escape_spaces : bool
        Whether spaces and tabs of delayed text are escaped on flush
    flush_count : int
        Number of times pending text went through escaping

    """

    def __init__(self, context: RenderContext, sink: TextIO | None = None, on_new_line: bool = True):
        self._context = context
        self._sink: TextIO = sink if sink is not None else StringIO()
        self._pending: list[str] = []
        self._line_prefixes: deque[str] = deque()
        self._page_blank = True
        self._suppress_newlines = True
        self.on_new_line = on_new_line
        self.escape_spaces = False
        self.flush_count = 0

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    @property
    def line_prefixes(self) -> tuple[str, ...]:
        return tuple(self._line_prefixes)

    def print(self, text: str) -> None:
        """Write markup verbatim, after flushing pending text."""
        self.flush()
        self._print_internal(text)

    def println(self, text: str) -> None:
        self.print(text + "\n")

    def print_delayed(self, text: str) -> None:
        """Queue document text; it is escaped on the next flush."""
        self._pending.append(text)

    def flush(self) -> None:
        """Escape pending text and write it out.

        Every pending span is escaped exactly once: it leaves the pending
        queue before being escaped and is never queued again.
        """
        if not self._pending:
            return
        text = "".join(self._pending)
        self._pending.clear()
        escaped = escape_markdown(text, self.escape_context())
        self.flush_count += 1
        self._print_internal(escaped)

    def escape_context(self) -> EscapeContext:
        """Build the escape context from the render state and this printer's flags."""
        return EscapeContext(
            in_line=self._context.in_line,
            in_table=self._context.in_table,
            on_new_line=self.on_new_line,
            escape_spaces=self.escape_spaces,
        )

    def push_line_prefix(self, prefix: str) -> None:
        self._line_prefixes.append(prefix)

    def pop_line_prefix(self) -> str:
        return self._line_prefixes.pop()

    def suppress_leading_newlines(self) -> None:
        """Drop line breaks written before the next non-empty output."""
        self._suppress_newlines = True

    def getvalue(self) -> str:
        """Return everything written so far (pending text excluded).

        Raises
        ------
        RenderingError
            If the printer writes to an external sink that cannot be read back

        """
        if isinstance(self._sink, StringIO):
            return self._sink.getvalue()
        raise RenderingError("Printer output is not held in memory", rendering_stage="printer")

    def _print_line_prefixes(self) -> None:
        for prefix in self._line_prefixes:
            self._sink.write(prefix)

    def _print_internal(self, text: str) -> None:
        if self._suppress_newlines:
            text = text.lstrip("\n")

        if self._page_blank and text:
            self._print_line_prefixes()
            self._page_blank = False

        if "\n" in text:
            for token in _NEWLINE_SPLIT.split(text):
                if not token:
                    continue
                self._sink.write(token)
                if token == "\n":
                    self._print_line_prefixes()
        else:
            self._sink.write(text)

        if text:
            self.on_new_line = text.endswith("\n")
            self._suppress_newlines = False


class PrinterStack:
    """Stack of printers; writes always go to the top one.

    Parameters
    ----------
    context : RenderContext
        Shared render state handed to every printer
    sink : TextIO, optional
        Output of the root printer

    Examples
    --------
        >>> stack = PrinterStack(RenderContext())
        >>> stack.push()
        >>> stack.active.print("label")
        >>> stack.pop().getvalue()
        'label'

    """

    def __init__(self, context: RenderContext, sink: TextIO | None = None):
        self._context = context
        self._printers: list[MarkdownPrinter] = [MarkdownPrinter(context, sink)]

    @property
    def active(self) -> MarkdownPrinter:
        return self._printers[-1]

    @property
    def root(self) -> MarkdownPrinter:
        return self._printers[0]

    @property
    def depth(self) -> int:
        """Number of capture printers above the root."""
        return len(self._printers) - 1

    def push(self) -> None:
        """Activate a new capture printer, starting on the line state of the current one."""
        printer = MarkdownPrinter(self._context, on_new_line=self.active.on_new_line)
        self._printers.append(printer)

    def pop(self) -> MarkdownPrinter:
        """Flush and deactivate the active capture printer.

        Returns
        -------
        MarkdownPrinter
            The popped printer, holding the captured output

        Raises
        ------
        RenderingError
            If only the root printer is left

        """
        if len(self._printers) == 1:
            raise RenderingError("Cannot pop the root printer", rendering_stage="printer")
        printer = self._printers[-1]
        printer.flush()
        self._printers.pop()
        return printer

    @contextmanager
    def capture(self) -> Iterator[MarkdownPrinter]:
        """Push a capture printer for the duration of the block.

        The printer is popped (and thus flushed) on every exit path.

        Examples
        --------
            >>> stack = PrinterStack(RenderContext())
            >>> with stack.capture() as printer:
            ...     printer.print_delayed("*a*")
            >>> printer.getvalue()
            '\\\\*a*'

        """
        self.push()
        printer = self.active
        try:
            yield printer
        finally:
            if self._printers and self._printers[-1] is printer:
                self.pop()
            else:
                logger.debug("Capture printer already popped when leaving capture block")


class PrintDelegate:
    """Base for helper renderers writing markup to the active printer of a stack."""

    def __init__(self, printers: PrinterStack):
        self.printers = printers

    def print(self, text: str) -> None:
        self.printers.active.print(text)
