"""Theming - lane roles, palettes and note color selection."""

from maniastrip.core.theming.lanes import (
    DEFAULT_KEY_LAYOUTS,
    DEFAULT_PALETTE,
    LaneRole,
    supported_key_counts,
)
from maniastrip.core.theming.selector import LaneColorSelector

__all__ = [
    "DEFAULT_KEY_LAYOUTS",
    "DEFAULT_PALETTE",
    "LaneColorSelector",
    "LaneRole",
    "supported_key_counts",
]
