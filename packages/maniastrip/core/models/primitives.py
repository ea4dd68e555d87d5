"""Geometric primitives produced by element renderers.

Primitives are positioned in the template's local coordinate space:
x runs across the strip (lanes, then the optional axis column) and
y runs along time, 0 at the window start.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RectPrimitive(BaseModel):
    """Axis-aligned rectangle, filled and optionally rounded."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    fill: str
    rx: float = Field(default=0.0, ge=0)


class LinePrimitive(BaseModel):
    """Stroked line segment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = Field(default=1.0, gt=0)


class TextPrimitive(BaseModel):
    """Text label anchored at (x, y).

    Attributes:
        flip_y: Counter-flip the glyphs vertically so the label reads
            upright inside a y-flipped document.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    fill: str
    font_size: float = Field(default=10.0, gt=0)
    font_weight: str = "normal"
    anchor: Literal["start", "middle", "end"] = "start"
    flip_y: bool = False


__all__ = [
    "LinePrimitive",
    "RectPrimitive",
    "TextPrimitive",
]
