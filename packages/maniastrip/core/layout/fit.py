"""Fit-to-target-size adjustment.

Shrinks the document scale (never grows it) so the canvas fits inside a
target box, then grows the margins so the canvas fills the box exactly.
Slack always becomes margin, never extra content scale.
"""

from __future__ import annotations

import logging
import math

from maniastrip.core.errors import ConfigError
from maniastrip.core.models.context import StripGeometry

logger = logging.getLogger(__name__)

TARGET_SIZE_MIN = 32.0
TARGET_SIZE_MAX = 20_000.0


def validate_target_size(target_size: tuple[float, float]) -> None:
    """Check both target dimensions lie in [32, 20000] px.

    Raises:
        ConfigError: If either dimension is out of range.
    """
    for axis, value in zip(("width", "height"), target_size, strict=True):
        if not (math.isfinite(value) and TARGET_SIZE_MIN <= value <= TARGET_SIZE_MAX):
            raise ConfigError(
                "layout.target_size",
                f"target {axis} must be between {TARGET_SIZE_MIN:g} and {TARGET_SIZE_MAX:g} px",
                value,
            )


def fit_to_target(
    geometry: StripGeometry,
    final_scale: tuple[float, float],
    target_size: tuple[float, float],
) -> tuple[StripGeometry, tuple[float, float]]:
    """Fit the canvas into ``target_size``.

    The configured scale is multiplied by
    ``k = min(1, target_w / (total_w * sx), target_h / (total_h * sy))``,
    which for a uniform scale ``s`` equals ``min(s, target_w / total_w,
    target_h / total_h)``. Each margin then becomes
    ``max(configured, (target / scale - content) / 2)`` and the totals are
    recomputed.

    Args:
        geometry: Geometry with the configured margins.
        final_scale: Configured document scale [x, y].
        target_size: Target canvas [width, height] in px.

    Returns:
        Tuple of (fitted geometry, effective scale).
    """
    validate_target_size(target_size)
    target_w, target_h = target_size
    scale_x, scale_y = final_scale

    k = min(
        1.0,
        target_w / (geometry.total_width * scale_x),
        target_h / (geometry.total_height * scale_y),
    )
    fitted_scale = (scale_x * k, scale_y * k)

    margin_x, margin_y = geometry.margin
    margin = (
        max(margin_x, (target_w / fitted_scale[0] - geometry.content_width) / 2),
        max(margin_y, (target_h / fitted_scale[1] - geometry.content_height) / 2),
    )
    fitted = geometry.with_margin(margin)

    logger.debug(
        "Fitted canvas to %gx%g: scale %s -> %s, margin %s -> %s",
        target_w,
        target_h,
        final_scale,
        fitted_scale,
        geometry.margin,
        margin,
    )
    return fitted, fitted_scale


__all__ = [
    "TARGET_SIZE_MAX",
    "TARGET_SIZE_MIN",
    "fit_to_target",
    "validate_target_size",
]
