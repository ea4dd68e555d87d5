"""Layout - time window, strip count, canvas geometry and bar lines."""

from maniastrip.core.layout.barlines import generate_bar_lines
from maniastrip.core.layout.fit import fit_to_target, validate_target_size
from maniastrip.core.layout.resolver import (
    compute_layout,
    resolve_layout,
    resolve_strip_count,
    resolve_window,
    search_strip_count,
)

__all__ = [
    "compute_layout",
    "fit_to_target",
    "generate_bar_lines",
    "resolve_layout",
    "resolve_strip_count",
    "resolve_window",
    "search_strip_count",
    "validate_target_size",
]
