"""Time-window and strip resolver.

Derives the layout context for a render call:

1. Resolve the time window ``[start, end]`` (explicit or from chart data).
2. Choose the strip count with the configured strategy (num/time/ratio).
3. Compute strip and canvas pixel dimensions.
4. Optionally fit the canvas into a target size.

Everything here is pure: the same chart and options always yield the
same context.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from pydantic import ValidationError

from maniastrip.core.config.options import STRIP_NUM_MAX, RenderOptions
from maniastrip.core.errors import ConfigError, EmptyTimingDataError
from maniastrip.core.layout.fit import fit_to_target, validate_target_size
from maniastrip.core.models.chart import Chart
from maniastrip.core.models.context import LayoutContext, StripGeometry
from maniastrip.core.models.enum import StripMode
from maniastrip.core.utils.math import clamp, is_positive_finite

logger = logging.getLogger(__name__)

STRIP_RATIO_MAX = 20.0


def resolve_window(chart: Chart, options: RenderOptions) -> tuple[float, float]:
    """Resolve the visible time window.

    Precedence for each bound: explicit option, then the chart's own
    ``start``/``end``, then auto. Auto start is
    ``max(0, timing_points[0].time)``; auto end is the latest note time
    (``start`` when there are no notes) plus the note height expressed
    in time, so the last glyph is not clipped.

    Raises:
        EmptyTimingDataError: If start is auto and the chart has no timing points.
        ConfigError: If the resolved end is not after the start.
    """
    time_opts = options.time

    if time_opts.start != "auto":
        start = float(time_opts.start)
    elif chart.start is not None:
        start = chart.start
    else:
        if not chart.timing_points:
            raise EmptyTimingDataError()
        start = max(0.0, chart.timing_points[0].time)

    if time_opts.end != "auto":
        end = float(time_opts.end)
    elif chart.end is not None:
        end = chart.end
    else:
        end = max((note.last_time for note in chart.notes), default=start)
        end += options.note.height / time_opts.scale

    if not (math.isfinite(start) and math.isfinite(end)):
        raise ConfigError("time", "window bounds must be finite", (start, end))
    if end <= start:
        raise ConfigError(
            "time.end", f"window end must be greater than window start ({start:g})", end
        )
    return start, end


def compute_layout(
    chart: Chart,
    options: RenderOptions,
    start: float,
    end: float,
    strip_count: int,
) -> StripGeometry:
    """Compute strip and canvas dimensions for a strip count.

    Args:
        chart: Chart being rendered (column count).
        options: Merged options (note width, axis, spacing, margins, scale).
        start: Window start (ms).
        end: Window end (ms).
        strip_count: Number of strips.

    Returns:
        StripGeometry with the configured margins.
    """
    strip_width = chart.columns * options.note.width
    if options.axis.enabled:
        strip_width += options.axis.width
    strip_height = (end - start) * options.time.scale / strip_count
    spacing = options.strip.spacing
    margin = options.layout.margin

    content_width = strip_count * strip_width + (strip_count - 1) * spacing
    content_height = strip_height

    return StripGeometry(
        strip_count=strip_count,
        strip_width=strip_width,
        strip_height=strip_height,
        spacing=spacing,
        content_width=content_width,
        content_height=content_height,
        margin=margin,
        total_width=content_width + 2 * margin[0],
        total_height=content_height + 2 * margin[1],
    )


def search_strip_count(
    target_ratio: float,
    ratio_for: Callable[[int], float],
    max_count: int = STRIP_NUM_MAX,
) -> int:
    """Find the strip count whose canvas aspect ratio best matches a target.

    Counts are tried in order 1, 2, 3, ... ``max_count``; the aspect ratio
    is non-decreasing in the count. At the first count whose ratio
    reaches the target, the previous count wins only if it is strictly
    closer (``target - prev < cur - target``); on a tie the larger count
    is kept. If no count reaches the target, ``max_count`` is returned.

    Args:
        target_ratio: Desired width/height.
        ratio_for: Canvas aspect ratio for a given count.
        max_count: Largest count to try.

    Returns:
        Chosen strip count.
    """
    prev_ratio: float | None = None
    for count in range(1, max_count + 1):
        ratio = ratio_for(count)
        if ratio >= target_ratio:
            if prev_ratio is not None and (target_ratio - prev_ratio) < (ratio - target_ratio):
                return count - 1
            return count
        prev_ratio = ratio
    return max_count


def resolve_strip_count(
    chart: Chart,
    options: RenderOptions,
    start: float,
    end: float,
) -> tuple[int, float]:
    """Choose the strip count using the configured strategy.

    Returns:
        Tuple of (strip count, window end). Only ``time`` mode changes the
        end: it is re-expanded so every strip spans exactly ``strip.time``.

    Raises:
        ConfigError: If the mode's parameter is missing or out of range.
    """
    strip = options.strip

    if strip.mode == StripMode.NUM:
        if strip.num is None:
            raise ConfigError("strip.num", "required when strip.mode is 'num'")
        if not 1 <= strip.num <= STRIP_NUM_MAX:
            raise ConfigError("strip.num", f"must be between 1 and {STRIP_NUM_MAX}", strip.num)
        return strip.num, end

    if strip.mode == StripMode.TIME:
        if strip.time is None:
            raise ConfigError("strip.time", "required when strip.mode is 'time'")
        if not is_positive_finite(strip.time):
            raise ConfigError("strip.time", "must be a positive duration in ms", strip.time)
        needed = math.ceil((end - start) / strip.time)
        count = clamp(needed, 1, STRIP_NUM_MAX)
        if count != needed:
            logger.warning(
                "Strip count %d clamped to %d (strip.time=%gms); window truncated",
                needed,
                count,
                strip.time,
            )
        return count, start + count * strip.time

    if strip.mode == StripMode.RATIO:
        if strip.ratio is None:
            raise ConfigError("strip.ratio", "required when strip.mode is 'ratio'")
        if not 0 < strip.ratio <= STRIP_RATIO_MAX:
            raise ConfigError(
                "strip.ratio", f"must be in (0, {STRIP_RATIO_MAX:g}]", strip.ratio
            )
        final_scale = options.layout.final_scale
        count = search_strip_count(
            strip.ratio,
            lambda n: compute_layout(chart, options, start, end, n).aspect_ratio(final_scale),
        )
        logger.debug("Ratio search for %.4g chose %d strips", strip.ratio, count)
        return count, end

    raise ConfigError("strip.mode", "unsupported strip mode", strip.mode)


def resolve_layout(chart: Chart, options: RenderOptions) -> LayoutContext:
    """Resolve the full layout context for a render call.

    Args:
        chart: Chart to render.
        options: Merged option set.

    Returns:
        Immutable LayoutContext.

    Raises:
        ConfigError: On any invalid option or window.
    """
    target_size = options.layout.target_size
    if target_size is not None:
        validate_target_size(target_size)

    start, end = resolve_window(chart, options)
    strip_count, end = resolve_strip_count(chart, options, start, end)
    geometry = compute_layout(chart, options, start, end, strip_count)

    final_scale = options.layout.final_scale
    if target_size is not None:
        geometry, final_scale = fit_to_target(geometry, final_scale, target_size)

    try:
        ctx = LayoutContext(
            chart=chart,
            options=options,
            start=start,
            end=end,
            lane_width=chart.columns * options.note.width,
            geometry=geometry,
            final_scale=final_scale,
        )
    except ValidationError as e:
        raise ConfigError("layout", f"degenerate layout: {e.errors()[0]['msg']}") from e

    logger.debug(
        "Resolved layout: window=[%g, %g]ms strips=%d strip=%gx%g canvas=%gx%g",
        ctx.start,
        ctx.end,
        ctx.strip_count,
        ctx.strip_width,
        ctx.strip_height,
        ctx.canvas_width,
        ctx.canvas_height,
    )
    return ctx


__all__ = [
    "STRIP_RATIO_MAX",
    "compute_layout",
    "resolve_layout",
    "resolve_strip_count",
    "resolve_window",
    "search_strip_count",
]
