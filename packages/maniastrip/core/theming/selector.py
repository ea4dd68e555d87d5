"""Default color selection policy for notes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from maniastrip.core.errors import InvalidColumnError, UnsupportedKeysError
from maniastrip.core.models.chart import Note
from maniastrip.core.theming.lanes import DEFAULT_KEY_LAYOUTS, DEFAULT_PALETTE, LaneRole


class LaneColorSelector:
    """Colors a note by the lane role of its column.

    Args:
        palette: Role -> color mapping. Roles missing from a custom
            palette fall back to the default palette.
        layouts: Column count -> per-column roles.

    Example:
        >>> selector = LaneColorSelector()
        >>> selector.select(4, Note(column=0, start=0))
        '#FFFFFF'
    """

    def __init__(
        self,
        palette: Mapping[LaneRole, str] | None = None,
        layouts: Mapping[int, Sequence[LaneRole]] | None = None,
    ) -> None:
        self._palette = {**DEFAULT_PALETTE, **(palette or {})}
        self._layouts = dict(layouts) if layouts is not None else dict(DEFAULT_KEY_LAYOUTS)

    def role_for(self, columns: int, column: int) -> LaneRole:
        """Resolve the lane role of a column.

        Raises:
            UnsupportedKeysError: If ``columns`` has no layout.
            InvalidColumnError: If ``column`` is outside the layout.
        """
        layout = self._layouts.get(columns)
        if layout is None:
            raise UnsupportedKeysError(columns)
        if not 0 <= column < len(layout):
            raise InvalidColumnError(column, columns)
        return layout[column]

    def select(self, columns: int, note: Note) -> str:
        return self._palette[self.role_for(columns, note.column)]

    @property
    def supported_key_counts(self) -> list[int]:
        return sorted(self._layouts)


__all__ = [
    "LaneColorSelector",
]
