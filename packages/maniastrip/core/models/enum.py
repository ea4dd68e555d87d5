"""Enums shared by the option tree, the resolver and the renderers."""

from enum import Enum


class StripMode(str, Enum):
    """Strategy used to choose the strip count.

    Attributes:
        NUM: Use ``strip.num`` directly.
        TIME: Fixed duration per strip (``strip.time`` ms).
        RATIO: Search the count whose canvas aspect ratio best matches ``strip.ratio``.
    """

    NUM = "num"
    TIME = "time"
    RATIO = "ratio"


class TimeDirection(str, Enum):
    """Direction in which time increases on the canvas."""

    UP = "up"
    DOWN = "down"


class NoteAlign(str, Enum):
    """Vertical placement of a note glyph relative to its timestamp.

    Attributes:
        START: Glyph begins at the timestamp.
        CENTER: Glyph is centered on the timestamp.
    """

    START = "start"
    CENTER = "center"


class BarLineStyle(str, Enum):
    """Bar line drawing style.

    Attributes:
        RECT: Filled thin rectangle.
        LINE: Stroked line.
    """

    RECT = "rect"
    LINE = "line"
