"""Resolved layout context.

The context is derived fresh for every render call from the chart and
the merged option set. It is immutable once built: every renderer reads
geometry from it, none writes to it.
"""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field, model_validator

from maniastrip.core.config.options import STRIP_NUM_MAX, RenderOptions, merge_options
from maniastrip.core.models.chart import Chart
from maniastrip.core.models.enum import StripMode, TimeDirection
from maniastrip.core.utils.math import is_positive_finite


class StripGeometry(BaseModel):
    """Pixel geometry for a given strip count (before document scaling).

    Attributes:
        strip_count: Number of strips.
        strip_width: Width of one strip (lanes plus optional axis column).
        strip_height: Height of one strip.
        spacing: Gap between adjacent strips.
        content_width: Width of all strips and gaps.
        content_height: Height of the tiled content (one strip).
        margin: Margin [x, y] around the content.
        total_width: content_width plus both x margins.
        total_height: content_height plus both y margins.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strip_count: int = Field(ge=1, le=STRIP_NUM_MAX)
    strip_width: float
    strip_height: float
    spacing: float = Field(ge=0)
    content_width: float
    content_height: float
    margin: tuple[float, float]
    total_width: float
    total_height: float

    def aspect_ratio(self, final_scale: tuple[float, float] = (1.0, 1.0)) -> float:
        """Canvas width/height once the document scale is applied."""
        return (self.total_width * final_scale[0]) / (self.total_height * final_scale[1])

    def with_margin(self, margin: tuple[float, float]) -> StripGeometry:
        """Copy with new margins and recomputed totals."""
        return self.model_copy(
            update={
                "margin": margin,
                "total_width": self.content_width + 2 * margin[0],
                "total_height": self.content_height + 2 * margin[1],
            }
        )


class LayoutContext(BaseModel):
    """Fully resolved layout for one render call.

    Attributes:
        chart: The chart being rendered.
        options: Merged option set.
        start: Window start (ms).
        end: Window end (ms).
        lane_width: Width of the note lanes (columns * note width).
        geometry: Strip and canvas geometry after any target-size fit.
        final_scale: Effective document scale [x, y].
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    chart: Chart
    options: RenderOptions
    start: float
    end: float
    lane_width: float
    geometry: StripGeometry
    final_scale: tuple[float, float]

    @model_validator(mode="after")
    def _validate_invariants(self) -> LayoutContext:
        """Validate window ordering and that every dimension is finite and positive."""
        if not self.end > self.start:
            raise ValueError(f"Window end ({self.end}) must be greater than start ({self.start})")
        dimensions = {
            "lane_width": self.lane_width,
            "strip_width": self.geometry.strip_width,
            "strip_height": self.geometry.strip_height,
            "content_width": self.geometry.content_width,
            "content_height": self.geometry.content_height,
            "total_width": self.geometry.total_width,
            "total_height": self.geometry.total_height,
            "final_scale_x": self.final_scale[0],
            "final_scale_y": self.final_scale[1],
        }
        for name, value in dimensions.items():
            if not is_positive_finite(value):
                raise ValueError(f"{name} must be finite and > 0, got {value}")
        return self

    @property
    def columns(self) -> int:
        return self.chart.columns

    @property
    def time_scale(self) -> float:
        return self.options.time.scale

    @property
    def direction(self) -> TimeDirection:
        return self.options.time.direction

    @property
    def strip_count(self) -> int:
        return self.geometry.strip_count

    @property
    def strip_width(self) -> float:
        return self.geometry.strip_width

    @property
    def strip_height(self) -> float:
        return self.geometry.strip_height

    @property
    def strip_duration(self) -> float:
        """Time span (ms) covered by one strip."""
        return (self.end - self.start) / self.geometry.strip_count

    @property
    def margin(self) -> tuple[float, float]:
        return self.geometry.margin

    @property
    def total_width(self) -> float:
        return self.geometry.total_width

    @property
    def total_height(self) -> float:
        return self.geometry.total_height

    @property
    def canvas_width(self) -> float:
        return self.geometry.total_width * self.final_scale[0]

    @property
    def canvas_height(self) -> float:
        return self.geometry.total_height * self.final_scale[1]

    def time_to_y(self, time_ms: float) -> float:
        """Template y coordinate (px) of a timestamp."""
        return (time_ms - self.start) * self.options.time.scale

    def strip_interval(self, index: int) -> tuple[float, float]:
        """Time interval [start, end) revealed by strip ``index``."""
        duration = self.strip_duration
        return (self.start + index * duration, self.start + (index + 1) * duration)

    def pinned_options(self) -> RenderOptions:
        """Options with this context's window and strip count made explicit.

        Resolving the chart again with these options reproduces the same
        geometry.
        """
        return merge_options(
            self.options,
            {
                "time": {"start": self.start, "end": self.end},
                "strip": {"mode": StripMode.NUM, "num": self.strip_count},
            },
        )


__all__ = [
    "LayoutContext",
    "StripGeometry",
]
