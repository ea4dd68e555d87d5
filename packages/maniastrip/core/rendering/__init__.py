"""Rendering - renderer protocols and the default element renderers.

The document assembler and the top-level renderer live in
``maniastrip.core.rendering.document`` and ``maniastrip.core.rendering.renderer``.
"""

from maniastrip.core.rendering.elements import (
    DefaultBarLineRenderer,
    RectBackgroundRenderer,
    RectNoteRenderer,
    SecondsAxisRenderer,
)
from maniastrip.core.rendering.protocols import (
    AxisRenderer,
    BackgroundRenderer,
    BarLineRenderer,
    ColorSelector,
    NoteRenderer,
    PrimitiveList,
)

__all__ = [
    "AxisRenderer",
    "BackgroundRenderer",
    "BarLineRenderer",
    "ColorSelector",
    "DefaultBarLineRenderer",
    "NoteRenderer",
    "PrimitiveList",
    "RectBackgroundRenderer",
    "RectNoteRenderer",
    "SecondsAxisRenderer",
]
