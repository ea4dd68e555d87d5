"""Chart renderer: top-level entry point of the render pipeline.

Orchestrates the full pipeline:
  Chart + overrides -> RenderOptions -> LayoutContext -> primitives -> SVG
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from maniastrip.core.config.options import OptionsOverride, RenderOptions, resolve_options
from maniastrip.core.errors import ConfigError
from maniastrip.core.layout.barlines import generate_bar_lines
from maniastrip.core.layout.resolver import resolve_layout
from maniastrip.core.models.chart import Chart
from maniastrip.core.models.context import LayoutContext
from maniastrip.core.rendering.document import SvgDocumentAssembler
from maniastrip.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


class RenderResult(BaseModel):
    """Result of rendering one chart.

    Attributes:
        svg: The SVG document.
        context: Layout context the document was built from.
        note_count: Number of notes drawn.
        barline_count: Number of bar lines drawn.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    svg: str
    context: LayoutContext
    note_count: int = Field(ge=0)
    barline_count: int = Field(ge=0)

    @property
    def strip_count(self) -> int:
        return self.context.strip_count


class ChartRenderer:
    """Renders charts into strip-tiled SVG documents.

    Options are merged once at construction; the renderer keeps no
    per-chart state, so one instance can render any number of charts.

    Usage:
        >>> renderer = ChartRenderer({"strip": {"mode": "time", "time": 20000}})
        >>> result = renderer.render(chart)
        >>> result.svg.startswith("<svg")
        True
    """

    def __init__(
        self,
        options: OptionsOverride = None,
        assembler: SvgDocumentAssembler | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            options: Partial option override, full RenderOptions, or None for defaults.
            assembler: Document assembler. Defaults to an indented SVG assembler.

        Raises:
            ConfigError: If the override is invalid.
        """
        self._options = resolve_options(options)
        self._assembler = assembler or SvgDocumentAssembler()

    @property
    def options(self) -> RenderOptions:
        return self._options

    def layout(self, chart: Chart | Mapping[str, Any]) -> LayoutContext:
        """Resolve the layout context without drawing anything."""
        return resolve_layout(coerce_chart(chart), self._options)

    @log_performance
    def render(self, chart: Chart | Mapping[str, Any]) -> RenderResult:
        """Render a chart.

        Args:
            chart: Chart model or a mapping that validates as one.

        Returns:
            RenderResult with the SVG document and its layout context.

        Raises:
            ConfigError: Invalid options, window or chart mapping.
            UnsupportedKeysError: Column count has no lane layout.
            InvalidColumnError: A note column is outside the lane layout.
        """
        ctx = self.layout(chart)
        opts = ctx.options

        notes = [
            primitive
            for note in ctx.chart.notes
            for primitive in opts.note.renderer.render(ctx, note)
        ]

        bar_times = generate_bar_lines(ctx.chart.timing_points, ctx.start, ctx.end)
        barlines = [
            primitive
            for time_ms in bar_times
            for primitive in opts.barline.renderer.render(ctx, time_ms)
        ]

        axis = opts.axis.renderer.render(ctx) if opts.axis.enabled else []
        background = opts.background.renderer.render(ctx) if opts.background.enabled else []

        svg = self._assembler.assemble(
            ctx,
            notes=notes,
            barlines=barlines,
            axis=axis,
            background=background,
        )

        logger.info(
            "Rendered %dK chart: %d notes, %d bar lines, %d strips, %sx%s px",
            ctx.columns,
            len(ctx.chart.notes),
            len(bar_times),
            ctx.strip_count,
            f"{ctx.canvas_width:g}",
            f"{ctx.canvas_height:g}",
        )

        return RenderResult(
            svg=svg,
            context=ctx,
            note_count=len(ctx.chart.notes),
            barline_count=len(bar_times),
        )


def coerce_chart(chart: Chart | Mapping[str, Any]) -> Chart:
    """Validate a mapping into a Chart; Chart instances pass through.

    Raises:
        ConfigError: If the mapping is not a valid chart.
    """
    if isinstance(chart, Chart):
        return chart
    try:
        return Chart.model_validate(chart)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigError(f"chart.{field}" if field else "chart", first["msg"]) from e


def render(chart: Chart | Mapping[str, Any], overrides: OptionsOverride = None) -> str:
    """Render a chart to an SVG string.

    Args:
        chart: Chart model or mapping.
        overrides: Partial nested option override (deep-merged onto defaults).

    Returns:
        SVG markup.

    Example:
        >>> svg = render(chart, {"strip": {"mode": "ratio", "ratio": 1.5}})
    """
    return ChartRenderer(overrides).render(chart).svg


__all__ = [
    "ChartRenderer",
    "RenderResult",
    "coerce_chart",
    "render",
]
