"""Configuration - render option tree and file loaders."""

from maniastrip.core.config.loader import (
    detect_format,
    load_chart,
    load_config,
    load_options,
)
from maniastrip.core.config.options import (
    STRIP_NUM_MAX,
    AxisOptions,
    AxisTierStyle,
    BackgroundOptions,
    BarLineOptions,
    LayoutOptions,
    NoteOptions,
    OptionsOverride,
    RenderOptions,
    StripOptions,
    TimeOptions,
    merge_options,
    resolve_options,
    validate_options,
)

__all__ = [
    # Loaders
    "detect_format",
    "load_chart",
    "load_config",
    "load_options",
    # Option tree
    "STRIP_NUM_MAX",
    "AxisOptions",
    "AxisTierStyle",
    "BackgroundOptions",
    "BarLineOptions",
    "LayoutOptions",
    "NoteOptions",
    "OptionsOverride",
    "RenderOptions",
    "StripOptions",
    "TimeOptions",
    "merge_options",
    "resolve_options",
    "validate_options",
]
