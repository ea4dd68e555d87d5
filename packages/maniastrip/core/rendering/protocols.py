"""Renderer protocols for each visual category.

Each category of visual element (notes, bar lines, the time axis, the
background) is drawn by a pluggable renderer held in the option set.
A renderer turns a domain object into primitives positioned in the
template's local coordinate space. The note color policy is pluggable
the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from maniastrip.core.models.chart import Note
from maniastrip.core.models.primitives import LinePrimitive, RectPrimitive, TextPrimitive

if TYPE_CHECKING:
    from maniastrip.core.models.context import LayoutContext

PrimitiveList = list[RectPrimitive | LinePrimitive | TextPrimitive]


@runtime_checkable
class ColorSelector(Protocol):
    """Maps (column count, note) to a display color."""

    def select(self, columns: int, note: Note) -> str:
        """Return the color for a note.

        Raises:
            UnsupportedKeysError: If the column count is not supported.
            InvalidColumnError: If the note column is out of range.
        """
        ...


@runtime_checkable
class NoteRenderer(Protocol):
    """Draws a single note (tap or hold)."""

    def render(self, ctx: LayoutContext, note: Note) -> PrimitiveList:
        ...


@runtime_checkable
class BarLineRenderer(Protocol):
    """Draws one bar line at a downbeat timestamp (ms)."""

    def render(self, ctx: LayoutContext, time_ms: float) -> PrimitiveList:
        ...


@runtime_checkable
class AxisRenderer(Protocol):
    """Draws the time axis (ticks and labels) for the whole window."""

    def render(self, ctx: LayoutContext) -> PrimitiveList:
        ...


@runtime_checkable
class BackgroundRenderer(Protocol):
    """Draws the canvas background."""

    def render(self, ctx: LayoutContext) -> PrimitiveList:
        ...


__all__ = [
    "AxisRenderer",
    "BackgroundRenderer",
    "BarLineRenderer",
    "ColorSelector",
    "NoteRenderer",
    "PrimitiveList",
]
