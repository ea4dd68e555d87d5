"""Lane roles and the default per-key-count lane layouts.

Columns are colored by symmetric role: the layout table maps each
supported column count to one role per column, and a palette maps each
role to a color.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType


class LaneRole(str, Enum):
    """Symmetric color role of a column.

    Attributes:
        PRIMARY: Outer/odd lanes (white by convention).
        SECONDARY: Inner/even lanes (blue by convention).
        MIDDLE: Center lane(s).
        EDGE: Outermost lanes on wide layouts (scratch/edge keys).
    """

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    MIDDLE = "MIDDLE"
    EDGE = "EDGE"


_P = LaneRole.PRIMARY
_S = LaneRole.SECONDARY
_M = LaneRole.MIDDLE
_E = LaneRole.EDGE

DEFAULT_PALETTE: Mapping[LaneRole, str] = MappingProxyType(
    {
        LaneRole.PRIMARY: "#FFFFFF",
        LaneRole.SECONDARY: "#5EAEFF",
        LaneRole.MIDDLE: "#FFEC5E",
        LaneRole.EDGE: "#FF3F00",
    }
)

DEFAULT_KEY_LAYOUTS: Mapping[int, Sequence[LaneRole]] = MappingProxyType(
    {
        4: (_P, _S, _S, _P),
        5: (_P, _S, _M, _S, _P),
        6: (_P, _S, _P, _P, _S, _P),
        7: (_P, _S, _P, _M, _P, _S, _P),
        8: (_P, _S, _P, _M, _M, _P, _S, _P),
        9: (_E, _P, _S, _P, _M, _P, _S, _P, _E),
        10: (_E, _P, _S, _P, _M, _M, _P, _S, _P, _E),
    }
)


def supported_key_counts(
    layouts: Mapping[int, Sequence[LaneRole]] = DEFAULT_KEY_LAYOUTS,
) -> list[int]:
    """List column counts that have a lane layout."""
    return sorted(layouts)


__all__ = [
    "DEFAULT_KEY_LAYOUTS",
    "DEFAULT_PALETTE",
    "LaneRole",
    "supported_key_counts",
]
