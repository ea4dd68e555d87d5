"""Default element renderers.

Each renderer turns one domain object into primitives in template
coordinates: x = 0 is the left edge of column 0, y = 0 is the window
start and y grows with time at ``time.scale`` px per ms.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from maniastrip.core.models.chart import Note
from maniastrip.core.models.enum import BarLineStyle, NoteAlign, TimeDirection
from maniastrip.core.models.primitives import LinePrimitive, RectPrimitive, TextPrimitive
from maniastrip.core.rendering.protocols import PrimitiveList

if TYPE_CHECKING:
    from maniastrip.core.models.context import LayoutContext

# Gap between an axis tick and its label, px
_LABEL_GAP = 2.0


class RectNoteRenderer:
    """Draws notes as rounded rectangles.

    Taps use the configured note height. Holds span their full duration;
    when ``note.hold_body_width`` is set they are drawn as a cap of note
    height plus a narrower body running from the end of the cap to the
    hold end.
    """

    def render(self, ctx: LayoutContext, note: Note) -> PrimitiveList:
        opts = ctx.options.note
        color = opts.color_selector.select(ctx.columns, note)
        x = note.column * opts.width
        y = ctx.time_to_y(note.start)
        if opts.align == NoteAlign.CENTER:
            y -= opts.height / 2

        if note.end is None:
            return [_column_rect(x, y, opts.width, opts.height, opts.rx, color)]

        hold_height = (note.end - note.start) * ctx.time_scale
        if opts.align == NoteAlign.CENTER:
            hold_height += opts.height

        if opts.hold_body_width is None:
            return [_column_rect(x, y, opts.width, hold_height, opts.rx, color)]

        primitives: PrimitiveList = []
        cap_end = y + opts.height
        residual = hold_height - opts.height
        if residual > 0:
            body_width = min(opts.hold_body_width, opts.width)
            primitives.append(
                RectPrimitive(
                    x=x + (opts.width - body_width) / 2,
                    y=cap_end,
                    width=body_width,
                    height=residual,
                    fill=opts.hold_body_color or color,
                )
            )
        primitives.append(_column_rect(x, y, opts.width, opts.height, opts.rx, color))
        return primitives


class DefaultBarLineRenderer:
    """Draws a bar line across all lanes, filled or stroked per ``barline.style``."""

    def render(self, ctx: LayoutContext, time_ms: float) -> PrimitiveList:
        opts = ctx.options.barline
        y = ctx.time_to_y(time_ms)
        if opts.style == BarLineStyle.LINE:
            return [
                LinePrimitive(
                    x1=0.0,
                    y1=y,
                    x2=ctx.lane_width,
                    y2=y,
                    stroke=opts.color,
                    stroke_width=opts.height,
                )
            ]
        return [
            RectPrimitive(x=0.0, y=y, width=ctx.lane_width, height=opts.height, fill=opts.color)
        ]


class SecondsAxisRenderer:
    """Draws one tick and label per whole second of the window.

    Whole minutes use the ``axis.minute`` style and are labeled with the
    minute count; other seconds use ``axis.second`` and are labeled with
    the second within the minute.
    """

    def render(self, ctx: LayoutContext) -> PrimitiveList:
        axis = ctx.options.axis
        x0 = ctx.lane_width
        flip = ctx.direction == TimeDirection.UP

        primitives: PrimitiveList = []
        for second in range(math.ceil(ctx.start / 1000), math.floor(ctx.end / 1000) + 1):
            time_ms = second * 1000.0
            if time_ms >= ctx.end:
                break
            is_minute = second % 60 == 0
            style = axis.minute if is_minute else axis.second
            label = str(second // 60) if is_minute else str(second % 60)
            y = ctx.time_to_y(time_ms)

            primitives.append(
                LinePrimitive(
                    x1=x0,
                    y1=y,
                    x2=x0 + style.tick_length,
                    y2=y,
                    stroke=style.color,
                    stroke_width=style.stroke_width,
                )
            )
            primitives.append(
                TextPrimitive(
                    x=x0 + style.tick_length + _LABEL_GAP,
                    y=y,
                    text=label,
                    fill=style.color,
                    font_size=style.font_size,
                    font_weight=style.font_weight,
                    flip_y=flip,
                )
            )
        return primitives


class RectBackgroundRenderer:
    """Fills the whole canvas with ``background.color``."""

    def render(self, ctx: LayoutContext) -> PrimitiveList:
        return [
            RectPrimitive(
                x=0.0,
                y=0.0,
                width=ctx.canvas_width,
                height=ctx.canvas_height,
                fill=ctx.options.background.color,
            )
        ]


def _column_rect(
    x: float, y: float, width: float, height: float, rx: float, fill: str
) -> RectPrimitive:
    return RectPrimitive(x=x, y=y, width=width, height=height, rx=rx, fill=fill)


__all__ = [
    "DefaultBarLineRenderer",
    "RectBackgroundRenderer",
    "RectNoteRenderer",
    "SecondsAxisRenderer",
]
