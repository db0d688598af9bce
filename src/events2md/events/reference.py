#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/reference.py
"""Resource references carried by link and image events.

A resource reference names the target of a link or an image: a URL, a
wiki document, an attachment, a mail address, ... It is made of the raw
reference text and a resource type (its scheme). Turning a reference back
into text is the job of a reference serializer; computing a human readable
label for it (used as the alt text of images without one) is the job of a
URI label generator registered for the reference scheme.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Protocol

from events2md.exceptions import ReferenceLabelError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceType:
    """Type of a resource reference, identified by its scheme name."""

    scheme: str

    def __str__(self) -> str:
        return self.scheme


URL = ResourceType("url")
DOCUMENT = ResourceType("doc")
PAGE = ResourceType("page")
SPACE = ResourceType("space")
ATTACHMENT = ResourceType("attach")
MAILTO = ResourceType("mailto")
IMAGE = ResourceType("image")
PATH = ResourceType("path")
UNC = ResourceType("unc")
DATA = ResourceType("data")
UNKNOWN = ResourceType("unknown")


@dataclass
class ResourceReference:
    """Reference to a resource targeted by a link or an image.

    Parameters
    ----------
    reference : str
        Raw reference text (e.g. ``https://example.com`` or ``Space.Page``)
    type : ResourceType, default = URL
        Resource type
    typed : bool, default = False
        Whether the type was given explicitly in the source (``doc:Page``);
        typed references are serialized with their scheme prefix
    parameters : dict, default = empty dict
        Reference-level parameters (e.g. a query string or an anchor)

    """

    reference: str
    type: ResourceType = URL
    typed: bool = False
    parameters: dict[str, str] = field(default_factory=dict)


class ReferenceSerializer(Protocol):
    """Turns a resource reference back into reference text."""

    def serialize(self, reference: ResourceReference) -> str:
        """Return the textual form of ``reference``."""
        ...


class DefaultReferenceSerializer:
    """Serialize references as ``scheme:reference`` when typed, else as-is.

    Examples
    --------
        >>> serializer = DefaultReferenceSerializer()
        >>> serializer.serialize(ResourceReference("Main.WebHome", ResourceType("doc"), typed=True))
        'doc:Main.WebHome'

    """

    def serialize(self, reference: ResourceReference) -> str:
        """Return the textual form of ``reference``."""
        if reference.typed:
            return f"{reference.type.scheme}:{reference.reference}"
        return reference.reference


URILabelGenerator = Callable[[ResourceReference], str]


def mailto_label(reference: ResourceReference) -> str:
    """Use the mail address without its query string as the label."""
    address = reference.reference
    index = address.find("?")
    if index > -1:
        address = address[:index]
    return address


DEFAULT_LABEL_GENERATORS: Mapping[str, URILabelGenerator] = {
    "mailto": mailto_label,
}


class LabelGeneratorRegistry:
    """Registry of URI label generators keyed by reference scheme.

    Parameters
    ----------
    generators : Mapping[str, URILabelGenerator] or None
        Initial generators. Defaults to the built-in ``mailto`` generator.

    """

    def __init__(self, generators: Mapping[str, URILabelGenerator] | None = None):
        self._generators: dict[str, URILabelGenerator] = dict(
            DEFAULT_LABEL_GENERATORS if generators is None else generators
        )

    def register(self, scheme: str, generator: URILabelGenerator) -> None:
        """Register (or replace) the generator for ``scheme``."""
        self._generators[scheme] = generator

    def get(self, scheme: str) -> URILabelGenerator | None:
        return self._generators.get(scheme)

    def generate_label(self, reference: ResourceReference) -> str:
        """Compute a label for ``reference``.

        Falls back to the raw reference text when no generator is registered
        for the reference scheme.

        Raises
        ------
        ReferenceLabelError
            If the registered generator fails

        """
        scheme = reference.type.scheme
        generator = self._generators.get(scheme)
        if generator is None:
            logger.debug("No label generator for scheme '%s', using raw reference", scheme)
            return reference.reference

        try:
            label = generator(reference)
        except Exception as e:
            raise ReferenceLabelError(scheme, reference.reference, original_error=e) from e
        if label is None:
            raise ReferenceLabelError(scheme, reference.reference)
        return label
