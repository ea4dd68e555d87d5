"""Shared utilities for maniastrip."""

from maniastrip.core.utils.formatting import format_number
from maniastrip.core.utils.math import clamp, is_positive_finite
from maniastrip.core.utils.merge import deep_merge, model_to_tree

__all__ = [
    "clamp",
    "deep_merge",
    "format_number",
    "is_positive_finite",
    "model_to_tree",
]
