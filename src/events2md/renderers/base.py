#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that document renderers inherit
from. The BaseRenderer provides a consistent interface for turning an
events2md document tree into text output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from events2md.ast.nodes import Document
from events2md.exceptions import InvalidOptionsError
from events2md.options.base import BaseRendererOptions
from events2md.utils.io_utils import OutputDestination, write_text


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "RENDERED"
        ...
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: OutputDestination) -> None:
        """Render the document to the specified output.

        Parameters
        ----------
        doc : Document
            Document tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputDestination) -> None:
        """Write text output to a file path or stream.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> print(buffer.getvalue())
            # Hello

        """
        write_text(text, output)
