"""Base classes for parser and renderer options.

Options are frozen dataclasses. Every field carries a ``help`` string in its
metadata, values are checked in ``__post_init__`` and modified copies are made
with :meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

from md2term.constants import ANSI_PALETTE_SIZE

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated; the copy is validated
            again by ``__post_init__``

        """
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls) -> dict[str, str]:
        """Map each option name to the help text in its field metadata."""
        return {f.name: f.metadata.get("help", "") for f in fields(cls)}


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define their options as frozen dataclass fields and extend
    ``__post_init__`` with their own checks, calling ``super()`` first.

    """

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""

    def _require_ansi_index(self, *names: str) -> None:
        """Raise ValueError unless each named field is a palette index."""
        for name in names:
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value < ANSI_PALETTE_SIZE:
                raise ValueError(f"{name} must be an ANSI colour index 0-{ANSI_PALETTE_SIZE - 1}, got {value!r}")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""

    def _require_bool(self, *names: str) -> None:
        """Raise ValueError unless each named field is a bool."""
        for name in names:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be True or False, got {value!r}")
