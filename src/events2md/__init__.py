"""events2md - serialize document events to Markdown.

events2md receives a document as a stream of events (begin/end of headers,
paragraphs, lists, tables, links, words, spaces, ...) and writes Markdown as
the events arrive. Text is escaped so that it reads back as plain text,
tables are laid out with aligned columns within a width budget, and nested
structures (lists, quotations, links inside tables) are handled through a
stack of output buffers.

Key Features
------------
- Streaming listener API with a state tracker chained before the renderer
- Context-aware escaping of markdown-significant characters
- Column width fitting for tables with colspan and alignment support
- Document trees, loadable from JSON or YAML, for offline rendering

Requirements
------------
- Python 3.10+
- PyYAML for YAML input
- rich for terminal previews in the command-line tool

Examples
--------
Rendering a document tree:

    >>> from events2md import MarkdownRenderer
    >>> from events2md.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(content=[Text(content="*bold*")])])
    >>> MarkdownRenderer().render_to_string(doc)
    '\\\\*bold*'

Driving the renderer with events:

    >>> from io import StringIO
    >>> output = StringIO()
    >>> listener = MarkdownRenderer().create_listener(output)
    >>> listener.begin_document()
    >>> listener.begin_header(1)
    >>> listener.on_word("Title")
    >>> listener.end_header(1)
    >>> listener.end_document()
    >>> output.getvalue()
    '# Title'

See Also
--------
events2md.events : Listener interface and render state
events2md.ast : Document tree nodes and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "events2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from events2md.events import (  # noqa: E402
    BlockStateListener,
    Listener,
    ListenerChain,
    RenderContext,
    ResourceReference,
    ResourceType,
)
from events2md.exceptions import (  # noqa: E402
    Events2MdError,
    InvalidOptionsError,
    InvalidParameterError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from events2md.options import MarkdownRendererOptions  # noqa: E402
from events2md.renderers import MarkdownChainingRenderer, MarkdownRenderer  # noqa: E402

__all__ = [
    "__version__",
    # Rendering
    "MarkdownRenderer",
    "MarkdownChainingRenderer",
    "MarkdownRendererOptions",
    # Events
    "BlockStateListener",
    "Listener",
    "ListenerChain",
    "RenderContext",
    "ResourceReference",
    "ResourceType",
    # Exceptions
    "Events2MdError",
    "InvalidOptionsError",
    "InvalidParameterError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
