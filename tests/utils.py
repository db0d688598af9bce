"""Test utilities for events2md test suite.

This module provides a listener recording the events it receives, helpers
to render event sequences and document trees, and temporary directory
handling.
"""

import shutil
import tempfile
from io import StringIO
from pathlib import Path
from typing import Callable

from events2md.ast.nodes import Document
from events2md.events.chain import ListenerChain
from events2md.events.listener import Listener
from events2md.options import MarkdownRendererOptions
from events2md.renderers.markdown import MarkdownRenderer


def _recording_handler(event_name: str):
    def handler(self, *args):
        self.events.append((event_name, args))
        self.log.append((self.name, event_name))

    handler.__name__ = event_name
    return handler


class EventRecorder(Listener):
    """Listener recording ``(handler name, args)`` for every event received.

    Recorders sharing a ``log`` list also record the dispatch order across
    listeners as ``(recorder name, handler name)``.
    """

    def __init__(self, name: str = "recorder", log: list | None = None):
        self.name = name
        self.events: list = []
        self.log = log if log is not None else []

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


for _event_name in dir(Listener):
    if _event_name.startswith(("begin_", "end_", "on_")):
        setattr(EventRecorder, _event_name, _recording_handler(_event_name))


def render_events(emit: Callable[[ListenerChain], None], options: MarkdownRendererOptions | None = None) -> str:
    """Render the events sent by ``emit`` to a fresh markdown listener."""
    output = StringIO()
    listener = MarkdownRenderer(options).create_listener(output)
    emit(listener)
    return output.getvalue()


def render_document(doc: Document, options: MarkdownRendererOptions | None = None) -> str:
    return MarkdownRenderer(options).render_to_string(doc)


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
