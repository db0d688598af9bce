#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/renderers/__init__.py
"""Renderers producing markdown from document events and trees."""

from events2md.renderers.base import BaseRenderer
from events2md.renderers.markdown import MarkdownChainingRenderer, MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "MarkdownChainingRenderer",
    "MarkdownRenderer",
]
