"""SVG document assembly.

The chart is drawn once into a shared template (``#origin``) in strip-0
coordinates. Each strip is a ``<use>`` of that template, translated so
its slice of time lands in its own column and clipped to exactly one
strip's rectangle. A document-level transform applies the final scale
and, for upward time, flips the y axis.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from maniastrip.core.models.context import LayoutContext
from maniastrip.core.models.enum import TimeDirection
from maniastrip.core.models.primitives import LinePrimitive, RectPrimitive, TextPrimitive
from maniastrip.core.utils.formatting import format_number as fmt

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
TEMPLATE_ID = "origin"

PrimitiveSeq = Sequence[RectPrimitive | LinePrimitive | TextPrimitive]


class SvgDocumentAssembler:
    """Builds the SVG document from primitives and the layout context.

    Example:
        >>> assembler = SvgDocumentAssembler()
        >>> svg = assembler.assemble(ctx, notes=note_prims, barlines=bar_prims)
    """

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent

    def assemble(
        self,
        ctx: LayoutContext,
        notes: PrimitiveSeq = (),
        barlines: PrimitiveSeq = (),
        axis: PrimitiveSeq = (),
        background: PrimitiveSeq = (),
    ) -> str:
        """Assemble the complete SVG document.

        Args:
            ctx: Resolved layout context.
            notes: Note primitives (template coordinates).
            barlines: Bar line primitives (template coordinates).
            axis: Axis primitives (template coordinates).
            background: Background primitives (canvas coordinates).

        Returns:
            SVG markup string.
        """
        root = self._build_tree(ctx, notes, barlines, axis, background)
        if self._indent:
            ET.indent(root, space=self._indent, level=0)
        return ET.tostring(root, encoding="unicode")

    def _build_tree(
        self,
        ctx: LayoutContext,
        notes: PrimitiveSeq,
        barlines: PrimitiveSeq,
        axis: PrimitiveSeq,
        background: PrimitiveSeq,
    ) -> ET.Element:
        width = fmt(ctx.canvas_width)
        height = fmt(ctx.canvas_height)
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": width,
                "height": height,
                "viewBox": f"0 0 {width} {height}",
            },
        )

        defs = ET.SubElement(root, "defs")
        template = ET.SubElement(defs, "g", {"id": TEMPLATE_ID})
        self._append_group(template, "notes", notes)
        self._append_group(template, "barlines", barlines)
        if axis:
            self._append_group(template, "axis", axis)

        clip_paths = ET.SubElement(defs, "g", {"id": "clip-paths"})
        for index in range(ctx.strip_count):
            clip_paths.append(self._build_clip_path(ctx, index))

        for primitive in background:
            root.append(primitive_to_element(primitive))

        strips = ET.SubElement(root, "g", {"transform": self._document_transform(ctx)})
        for index in range(ctx.strip_count):
            strips.append(self._build_strip(ctx, index))

        logger.debug(
            "Assembled SVG: %d note, %d bar line, %d axis primitives over %d strips",
            len(notes),
            len(barlines),
            len(axis),
            ctx.strip_count,
        )
        return root

    @staticmethod
    def _append_group(parent: ET.Element, group_id: str, primitives: PrimitiveSeq) -> None:
        group = ET.SubElement(parent, "g", {"id": group_id})
        for primitive in primitives:
            group.append(primitive_to_element(primitive))

    @staticmethod
    def _build_clip_path(ctx: LayoutContext, index: int) -> ET.Element:
        """Clip region covering strip ``index`` in template coordinates."""
        clip = ET.Element("clipPath", {"id": f"strip-{index}"})
        ET.SubElement(
            clip,
            "rect",
            {
                "x": "0",
                "y": fmt(index * ctx.strip_height),
                "width": fmt(ctx.strip_width),
                "height": fmt(ctx.strip_height),
            },
        )
        return clip

    @staticmethod
    def _build_strip(ctx: LayoutContext, index: int) -> ET.Element:
        """Translated, clipped instance of the template for strip ``index``."""
        margin_x, margin_y = ctx.margin
        offset_x = margin_x + index * (ctx.strip_width + ctx.geometry.spacing)
        offset_y = margin_y - index * ctx.strip_height
        return ET.Element(
            "use",
            {
                "href": f"#{TEMPLATE_ID}",
                "transform": f"translate({fmt(offset_x)}, {fmt(offset_y)})",
                "clip-path": f"url(#strip-{index})",
            },
        )

    @staticmethod
    def _document_transform(ctx: LayoutContext) -> str:
        scale_x, scale_y = ctx.final_scale
        if ctx.direction == TimeDirection.DOWN:
            return f"scale({fmt(scale_x)}, {fmt(scale_y)})"
        return f"scale({fmt(scale_x)}, {fmt(-scale_y)}) translate(0, {fmt(-ctx.total_height)})"


def primitive_to_element(primitive: RectPrimitive | LinePrimitive | TextPrimitive) -> ET.Element:
    """Convert a primitive into its SVG element."""
    if isinstance(primitive, RectPrimitive):
        attrs = {
            "x": fmt(primitive.x),
            "y": fmt(primitive.y),
            "width": fmt(primitive.width),
            "height": fmt(primitive.height),
        }
        if primitive.rx > 0:
            attrs["rx"] = fmt(primitive.rx)
        attrs["fill"] = primitive.fill
        return ET.Element("rect", attrs)

    if isinstance(primitive, LinePrimitive):
        return ET.Element(
            "line",
            {
                "x1": fmt(primitive.x1),
                "y1": fmt(primitive.y1),
                "x2": fmt(primitive.x2),
                "y2": fmt(primitive.y2),
                "stroke": primitive.stroke,
                "stroke-width": fmt(primitive.stroke_width),
            },
        )

    if isinstance(primitive, TextPrimitive):
        if primitive.flip_y:
            attrs = {
                "transform": f"translate({fmt(primitive.x)}, {fmt(primitive.y)}) scale(1, -1)"
            }
        else:
            attrs = {"x": fmt(primitive.x), "y": fmt(primitive.y)}
        attrs.update(
            {
                "fill": primitive.fill,
                "font-size": fmt(primitive.font_size),
                "font-family": "sans-serif",
                "dominant-baseline": "middle",
            }
        )
        if primitive.font_weight != "normal":
            attrs["font-weight"] = primitive.font_weight
        if primitive.anchor != "start":
            attrs["text-anchor"] = primitive.anchor
        element = ET.Element("text", attrs)
        element.text = primitive.text
        return element

    raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")


__all__ = [
    "SVG_NAMESPACE",
    "TEMPLATE_ID",
    "SvgDocumentAssembler",
    "primitive_to_element",
]
