"""maniastrip core - render rhythm-game charts as strip-tiled SVG documents.

Example:
    >>> from maniastrip.core import Chart, Note, TimingPoint, render
    >>> chart = Chart(
    ...     columns=4,
    ...     notes=[Note(column=1, start=1000)],
    ...     timing_points=[TimingPoint(time=0, bpm=120, meter=4)],
    ... )
    >>> svg = render(chart, {"strip": {"num": 2}})
"""

from maniastrip.core.config.options import RenderOptions, resolve_options
from maniastrip.core.errors import (
    ConfigError,
    EmptyTimingDataError,
    InvalidColumnError,
    StripChartError,
    UnsupportedKeysError,
)
from maniastrip.core.layout.barlines import generate_bar_lines
from maniastrip.core.layout.resolver import resolve_layout
from maniastrip.core.models.chart import Chart, Note, TimingPoint
from maniastrip.core.models.context import LayoutContext
from maniastrip.core.rendering.renderer import ChartRenderer, RenderResult, render
from maniastrip.core.theming.selector import LaneColorSelector

__all__ = [
    "Chart",
    "ChartRenderer",
    "ConfigError",
    "EmptyTimingDataError",
    "InvalidColumnError",
    "LaneColorSelector",
    "LayoutContext",
    "Note",
    "RenderOptions",
    "RenderResult",
    "StripChartError",
    "TimingPoint",
    "UnsupportedKeysError",
    "generate_bar_lines",
    "render",
    "resolve_layout",
    "resolve_options",
]
