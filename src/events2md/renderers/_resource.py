#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/_resource.py
"""Markdown syntax for links and images.

Links with a label render as inline links ``[label](reference "title")``,
links without one as wiki links ``[[reference]]``. Images render as
``![alt](reference "title")``; when no ``alt`` parameter is given the alt
text is computed by the label generator registered for the reference
scheme, or falls back to the raw reference.

"""

from __future__ import annotations

import logging
from typing import Mapping

from events2md.constants import PARAM_ALT, PARAM_TITLE
from events2md.events.reference import (
    DefaultReferenceSerializer,
    LabelGeneratorRegistry,
    ReferenceSerializer,
    ResourceReference,
)
from events2md.renderers._printer import PrintDelegate, PrinterStack
from events2md.utils.escape import escape_label, escape_reference

logger = logging.getLogger(__name__)


class MarkdownResourceRenderer(PrintDelegate):
    """Write links and images to the active printer.

    Parameters
    ----------
    printers : PrinterStack
        Printers of the render session
    reference_serializer : ReferenceSerializer, optional
        Turns references into text. Defaults to :class:`DefaultReferenceSerializer`.
    label_generators : LabelGeneratorRegistry, optional
        Alt text generators for images. Defaults to the built-in registry.

    """

    def __init__(
        self,
        printers: PrinterStack,
        reference_serializer: ReferenceSerializer | None = None,
        label_generators: LabelGeneratorRegistry | None = None,
    ):
        super().__init__(printers)
        self.reference_serializer = reference_serializer or DefaultReferenceSerializer()
        self.label_generators = label_generators or LabelGeneratorRegistry()

    def serialize(self, reference: ResourceReference) -> str:
        return self.reference_serializer.serialize(reference)

    def _print_target(self, reference: ResourceReference, title: str | None) -> None:
        self.print("(" + escape_reference(self.serialize(reference)))
        if title and title.strip():
            self.print(' "' + title + '"')
        self.print(")")

    def render_link_reference(
        self, reference: ResourceReference, label: str, parameters: Mapping[str, str] | None = None
    ) -> None:
        """Render a link around an already rendered label.

        Parameters
        ----------
        reference : ResourceReference
            Link target
        label : str
            Rendered label markup; empty for a wiki link
        parameters : Mapping[str, str], optional
            Link parameters; ``title`` is recognized

        """
        parameters = parameters or {}
        if label:
            self.print("[" + escape_label(label) + "]")
            self._print_target(reference, parameters.get(PARAM_TITLE))
        else:
            self.print("[[" + escape_label(self.serialize(reference)) + "]]")

    def render_free_standing_uri(self, reference: ResourceReference) -> None:
        self.print(self.serialize(reference))

    def render_image_reference(self, reference: ResourceReference, parameters: Mapping[str, str] | None = None) -> None:
        """Render an image, computing the alt text when none is given."""
        parameters = parameters or {}
        alt = parameters.get(PARAM_ALT)
        if not alt or not alt.strip():
            alt = self.compute_alt_text(reference)

        self.print("![" + escape_label(alt) + "]")
        self._print_target(reference, parameters.get(PARAM_TITLE))

    def compute_alt_text(self, reference: ResourceReference) -> str:
        """Compute the alt text of an image from its reference.

        Raises
        ------
        ReferenceLabelError
            If the label generator registered for the reference scheme fails

        """
        return self.label_generators.generate_label(reference)
