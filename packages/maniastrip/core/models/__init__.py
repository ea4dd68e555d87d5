"""Domain models: chart input, shared enums and geometric primitives.

The layout context lives in ``maniastrip.core.models.context`` and is
imported from there directly (it depends on the option tree).
"""

from maniastrip.core.models.chart import Chart, Note, TimingPoint
from maniastrip.core.models.enum import BarLineStyle, NoteAlign, StripMode, TimeDirection
from maniastrip.core.models.primitives import (
    LinePrimitive,
    RectPrimitive,
    TextPrimitive,
)

__all__ = [
    "BarLineStyle",
    "Chart",
    "LinePrimitive",
    "Note",
    "NoteAlign",
    "RectPrimitive",
    "StripMode",
    "TextPrimitive",
    "TimeDirection",
    "TimingPoint",
]
