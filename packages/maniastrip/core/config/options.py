"""Render option tree.

Every field has a documented default and can be overridden on its own:
overrides are deep-merged onto the defaults, so a partial override of
one sub-tree never clobbers its siblings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from maniastrip.core.errors import ConfigError
from maniastrip.core.models.enum import BarLineStyle, NoteAlign, StripMode, TimeDirection
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
)
from maniastrip.core.theming.selector import LaneColorSelector
from maniastrip.core.utils.merge import deep_merge, model_to_tree

logger = logging.getLogger(__name__)

STRIP_NUM_MAX = 50


class _OptionsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)


class BackgroundOptions(_OptionsModel):
    """Canvas background."""

    enabled: bool = Field(default=True, description="Whether to render the background")
    color: str = Field(default="#000000", description="Background fill color")
    renderer: BackgroundRenderer = Field(default_factory=RectBackgroundRenderer)


class NoteOptions(_OptionsModel):
    """Note glyph geometry and coloring."""

    width: float = Field(default=20.0, gt=0, description="Column width in px")
    height: float = Field(default=6.0, gt=0, description="Tap note height in px")
    rx: float = Field(default=2.0, ge=0, description="Corner radius in px")
    align: NoteAlign = Field(default=NoteAlign.START)
    hold_body_width: float | None = Field(
        default=None,
        gt=0,
        description="Hold body width in px; None draws holds as one rectangle",
    )
    hold_body_color: str | None = Field(
        default=None, description="Hold body color; None reuses the note color"
    )
    color_selector: ColorSelector = Field(default_factory=LaneColorSelector)
    renderer: NoteRenderer = Field(default_factory=RectNoteRenderer)


class TimeOptions(_OptionsModel):
    """Time window and time-to-space scale."""

    start: float | Literal["auto"] = Field(default="auto", description="Window start in ms")
    end: float | Literal["auto"] = Field(default="auto", description="Window end in ms")
    scale: float = Field(default=0.1, gt=0, description="Vertical scale in px per ms")
    direction: TimeDirection = Field(default=TimeDirection.UP)


class BarLineOptions(_OptionsModel):
    """Bar line appearance."""

    height: float = Field(default=1.0, gt=0, description="Bar line thickness in px")
    color: str = Field(default="#85F000")
    style: BarLineStyle = Field(default=BarLineStyle.RECT)
    renderer: BarLineRenderer = Field(default_factory=DefaultBarLineRenderer)


class AxisTierStyle(_OptionsModel):
    """Tick and label style for one axis tier (minute or second)."""

    color: str = "#808080"
    tick_length: float = Field(default=6.0, ge=0)
    stroke_width: float = Field(default=1.0, gt=0)
    font_size: float = Field(default=8.0, gt=0)
    font_weight: str = "normal"


class AxisOptions(_OptionsModel):
    """Optional time axis drawn to the right of the lanes."""

    enabled: bool = False
    width: float = Field(default=24.0, gt=0, description="Axis column width in px")
    minute: AxisTierStyle = Field(
        default_factory=lambda: AxisTierStyle(
            color="#FFFFFF",
            tick_length=12.0,
            stroke_width=2.0,
            font_size=10.0,
            font_weight="bold",
        )
    )
    second: AxisTierStyle = Field(default_factory=AxisTierStyle)
    renderer: AxisRenderer = Field(default_factory=SecondsAxisRenderer)


class StripOptions(_OptionsModel):
    """Strip-count strategy and spacing.

    ``num``, ``time`` and ``ratio`` are only read by their own mode;
    range checks happen when the layout is resolved.
    """

    mode: StripMode = Field(default=StripMode.NUM)
    num: int | None = Field(default=8, description="Number of strips (mode=num)")
    time: float | None = Field(default=30_000.0, description="Duration per strip in ms (mode=time)")
    ratio: float | None = Field(
        default=16 / 9, description="Target canvas width/height (mode=ratio)"
    )
    spacing: float = Field(default=30.0, ge=0, description="Gap between strips in px")


class LayoutOptions(_OptionsModel):
    """Document-level margins, scale and optional target size."""

    margin: tuple[float, float] = Field(default=(10.0, 10.0), description="Margin [x, y] in px")
    final_scale: tuple[float, float] = Field(
        default=(1.0, 1.0), description="Scale [x, y] applied to the whole document"
    )
    target_size: tuple[float, float] | None = Field(
        default=None, description="Fit the canvas into [width, height] px"
    )

    @field_validator("margin")
    @classmethod
    def _validate_margin(cls, v: tuple[float, float]) -> tuple[float, float]:
        if v[0] < 0 or v[1] < 0:
            raise ValueError(f"margin must be >= 0, got {v}")
        return v

    @field_validator("final_scale")
    @classmethod
    def _validate_final_scale(cls, v: tuple[float, float]) -> tuple[float, float]:
        if v[0] <= 0 or v[1] <= 0:
            raise ValueError(f"final_scale must be > 0, got {v}")
        return v


class RenderOptions(_OptionsModel):
    """Complete option set for a render call."""

    background: BackgroundOptions = Field(default_factory=BackgroundOptions)
    note: NoteOptions = Field(default_factory=NoteOptions)
    time: TimeOptions = Field(default_factory=TimeOptions)
    barline: BarLineOptions = Field(default_factory=BarLineOptions)
    axis: AxisOptions = Field(default_factory=AxisOptions)
    strip: StripOptions = Field(default_factory=StripOptions)
    layout: LayoutOptions = Field(default_factory=LayoutOptions)


OptionsOverride = Mapping[str, Any] | RenderOptions | None


def resolve_options(overrides: OptionsOverride = None) -> RenderOptions:
    """Merge overrides onto the default option tree.

    Plain mappings merge key-wise into the matching sub-tree; lists,
    tuples, scalars, model instances and renderer objects replace the
    default wholesale. A complete RenderOptions is returned unchanged.

    Args:
        overrides: Partial nested mapping, a RenderOptions, or None.

    Returns:
        Validated RenderOptions.

    Raises:
        ConfigError: If an override names an unknown field or fails validation.

    Example:
        >>> opts = resolve_options({"strip": {"num": 4}})
        >>> opts.strip.num, opts.strip.spacing
        (4, 30.0)
    """
    if overrides is None:
        return RenderOptions()
    if isinstance(overrides, RenderOptions):
        return overrides

    logger.debug("Merging option overrides for sections: %s", sorted(overrides))
    merged = deep_merge(model_to_tree(RenderOptions()), overrides)
    return validate_options(merged)


def merge_options(base: RenderOptions, overrides: Mapping[str, Any]) -> RenderOptions:
    """Apply a partial override on top of an existing option set."""
    merged = deep_merge(model_to_tree(base), overrides)
    return validate_options(merged)


def validate_options(data: Mapping[str, Any]) -> RenderOptions:
    """Validate a complete option tree, mapping failures to ConfigError."""
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "options"
        raise ConfigError(field, first["msg"], first.get("input")) from e


__all__ = [
    "STRIP_NUM_MAX",
    "AxisOptions",
    "AxisTierStyle",
    "BackgroundOptions",
    "BarLineOptions",
    "BarLineStyle",
    "LayoutOptions",
    "NoteAlign",
    "NoteOptions",
    "OptionsOverride",
    "RenderOptions",
    "StripMode",
    "StripOptions",
    "TimeDirection",
    "TimeOptions",
    "merge_options",
    "resolve_options",
    "validate_options",
]
