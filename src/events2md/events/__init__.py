#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/events/__init__.py
"""Document event model: listener interface, dispatch chain and render state."""

from events2md.events.chain import ListenerChain
from events2md.events.listener import Listener, Parameters
from events2md.events.reference import (
    DefaultReferenceSerializer,
    LabelGeneratorRegistry,
    ReferenceSerializer,
    ResourceReference,
    ResourceType,
)
from events2md.events.state import BlockStateListener, ListState, RenderContext
from events2md.events.types import Event, Format, ListType

__all__ = [
    "BlockStateListener",
    "DefaultReferenceSerializer",
    "Event",
    "Format",
    "LabelGeneratorRegistry",
    "ListState",
    "ListType",
    "Listener",
    "ListenerChain",
    "Parameters",
    "ReferenceSerializer",
    "RenderContext",
    "ResourceReference",
    "ResourceType",
]
