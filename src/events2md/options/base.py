"""Base classes for renderer options.

This module defines the foundation classes for the renderer options used
throughout the events2md rendering pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from events2md.constants import DEFAULT_STRIP_TRAILING_NEWLINES


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    strip_trailing_newlines : bool, default=False
        Whether to remove line breaks at the very end of the rendered output.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    strip_trailing_newlines: bool = field(
        default=DEFAULT_STRIP_TRAILING_NEWLINES,
        metadata={
            "help": "Remove trailing line breaks from the rendered output",
            "importance": "advanced",
        },
    )
