#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/styles.py
"""Terminal style model and the style composer.

A :class:`StyleFrame` describes one layer of styling: a set of text effects
plus foreground and background colour descriptors. Colours may be
``inherit``, in which case the layer below decides. :class:`StyleStack`
keeps the frames opened by the nodes currently being rendered and merges
them on demand into the effective style at the current traversal point.

Colours are kept to what a character-cell terminal can always show: the
terminal's own default colour or one of the 16 palette entries.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from rich.color import Color as RichColor
from rich.style import Style as RichStyle

from md2term.constants import ANSI_PALETTE_SIZE


class Effect(Enum):
    """Text effect supported by the terminal renderer."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    DIM = "dim"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True)
class Color:
    """Colour descriptor for one channel of a style frame.

    Parameters
    ----------
    ansi : int or None, default = None
        Palette index 0-15, or None for a non-palette descriptor
    inherit : bool, default = False
        When True the descriptor defers to the frames below it

    Notes
    -----
    ``Color()`` is the terminal default colour. Use the named constructors
    rather than the fields directly.

    """

    ansi: Optional[int] = None
    inherit: bool = False

    def __post_init__(self) -> None:
        """Validate the palette index."""
        if self.ansi is not None and not 0 <= self.ansi < ANSI_PALETTE_SIZE:
            raise ValueError(f"ANSI colour index must be 0-{ANSI_PALETTE_SIZE - 1}, got {self.ansi}")
        if self.ansi is not None and self.inherit:
            raise ValueError("An inherited colour cannot carry a palette index")

    @classmethod
    def terminal_default(cls) -> Color:
        return cls()

    @classmethod
    def inherit_parent(cls) -> Color:
        return cls(inherit=True)

    @classmethod
    def from_ansi(cls, index: int) -> Color:
        return cls(ansi=index)

    @property
    def is_default(self) -> bool:
        return self.ansi is None and not self.inherit

    def to_rich(self) -> RichColor:
        """Convert a resolved descriptor to a rich colour."""
        if self.inherit:
            raise ValueError("Cannot convert an inherited colour; resolve the style first")
        if self.ansi is None:
            return RichColor.default()
        return RichColor.from_ansi(self.ansi)


INHERIT = Color.inherit_parent()
TERMINAL_DEFAULT = Color.terminal_default()


@dataclass(frozen=True)
class StyleFrame:
    """One layer of styling.

    Parameters
    ----------
    effects : frozenset of Effect, default = empty
        Effects switched on by this layer
    foreground : Color, default = inherit
        Foreground colour descriptor
    background : Color, default = inherit
        Background colour descriptor

    """

    effects: frozenset[Effect] = field(default_factory=frozenset)
    foreground: Color = INHERIT
    background: Color = INHERIT

    @classmethod
    def of(cls, *effects: Effect, foreground: Color = INHERIT, background: Color = INHERIT) -> StyleFrame:
        """Build a frame from individual effects.

        Examples
        --------
        >>> StyleFrame.of(Effect.BOLD, foreground=Color.from_ansi(4)).effects
        frozenset({<Effect.BOLD: 'bold'>})

        """
        return cls(effects=frozenset(effects), foreground=foreground, background=background)

    def has(self, effect: Effect) -> bool:
        return effect in self.effects

    def to_rich(self) -> RichStyle:
        """Convert a resolved frame to a rich style.

        Inherited colours are treated as the terminal default.
        """
        foreground = TERMINAL_DEFAULT if self.foreground.inherit else self.foreground
        background = TERMINAL_DEFAULT if self.background.inherit else self.background
        return RichStyle(
            bold=True if Effect.BOLD in self.effects else None,
            italic=True if Effect.ITALIC in self.effects else None,
            underline=True if Effect.UNDERLINE in self.effects else None,
            dim=True if Effect.DIM in self.effects else None,
            strike=True if Effect.STRIKETHROUGH in self.effects else None,
            color=foreground.to_rich(),
            bgcolor=background.to_rich(),
        )


# Ambient style: no effects, terminal default colours
DEFAULT_STYLE = StyleFrame(foreground=TERMINAL_DEFAULT, background=TERMINAL_DEFAULT)


def merge_frames(frames: Iterable[StyleFrame]) -> StyleFrame:
    """Merge frames bottom-to-top into one resolved style.

    Effect sets are unioned. Each colour channel takes the most recently
    pushed value that is not ``inherit``, falling back to the terminal
    default.

    Parameters
    ----------
    frames : iterable of StyleFrame
        Frames ordered from bottom (oldest) to top (newest)

    Returns
    -------
    StyleFrame
        Resolved frame with no inherited colours

    """
    effects: set[Effect] = set()
    foreground = TERMINAL_DEFAULT
    background = TERMINAL_DEFAULT
    for frame in frames:
        effects.update(frame.effects)
        if not frame.foreground.inherit:
            foreground = frame.foreground
        if not frame.background.inherit:
            background = frame.background
    return StyleFrame(effects=frozenset(effects), foreground=foreground, background=background)


class StyleStack:
    """Stack of active style frames.

    Examples
    --------
    >>> stack = StyleStack()
    >>> stack.push(StyleFrame.of(Effect.BOLD))
    >>> stack.push(StyleFrame.of(Effect.ITALIC))
    >>> sorted(e.value for e in stack.effective().effects)
    ['bold', 'italic']
    >>> _ = stack.pop()
    >>> _ = stack.pop()
    >>> stack.effective() == DEFAULT_STYLE
    True

    """

    def __init__(self) -> None:
        self._frames: list[StyleFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def push(self, frame: StyleFrame) -> None:
        self._frames.append(frame)

    def pop(self) -> StyleFrame:
        """Remove and return the most recently pushed frame.

        Raises
        ------
        IndexError
            If the stack is empty

        """
        return self._frames.pop()

    def effective(self) -> StyleFrame:
        """Return the merged style of all active frames."""
        if not self._frames:
            return DEFAULT_STYLE
        return merge_frames(self._frames)
