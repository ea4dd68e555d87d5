"""Unit tests for lane roles and the default color selector."""

from __future__ import annotations

import pytest

from maniastrip.core.errors import InvalidColumnError, StripChartError, UnsupportedKeysError
from maniastrip.core.models.chart import Note
from maniastrip.core.theming.lanes import (
    DEFAULT_KEY_LAYOUTS,
    DEFAULT_PALETTE,
    LaneRole,
    supported_key_counts,
)
from maniastrip.core.theming.selector import LaneColorSelector


def _note(column: int) -> Note:
    return Note(column=column, start=0)


class TestLaneLayouts:
    """Tests for the built-in lane layouts."""

    def test_supported_counts(self) -> None:
        assert supported_key_counts() == [4, 5, 6, 7, 8, 9, 10]

    @pytest.mark.parametrize("columns", sorted(DEFAULT_KEY_LAYOUTS))
    def test_layout_length_and_symmetry(self, columns: int) -> None:
        layout = DEFAULT_KEY_LAYOUTS[columns]
        assert len(layout) == columns
        assert list(layout) == list(reversed(layout))

    def test_every_role_has_a_color(self) -> None:
        assert set(DEFAULT_PALETTE) == set(LaneRole)


class TestLaneColorSelector:
    """Tests for LaneColorSelector."""

    def test_4k_edges_share_color(self) -> None:
        selector = LaneColorSelector()
        assert selector.select(4, _note(0)) == selector.select(4, _note(3)) == "#FFFFFF"
        assert selector.select(4, _note(1)) == "#5EAEFF"

    def test_7k_middle_column(self) -> None:
        selector = LaneColorSelector()
        assert selector.role_for(7, 3) == LaneRole.MIDDLE
        assert selector.select(7, _note(3)) == "#FFEC5E"

    def test_10k_edge_role(self) -> None:
        selector = LaneColorSelector()
        assert selector.role_for(10, 0) == LaneRole.EDGE
        assert selector.select(10, _note(9)) == "#FF3F00"

    @pytest.mark.parametrize("columns", [1, 3, 11])
    def test_unsupported_keys(self, columns: int) -> None:
        with pytest.raises(UnsupportedKeysError, match=f"Unsupported keys: {columns}"):
            LaneColorSelector().select(columns, _note(0))

    def test_invalid_column(self) -> None:
        with pytest.raises(InvalidColumnError) as exc_info:
            LaneColorSelector().select(4, _note(4))
        assert str(exc_info.value) == "Invalid column: 4 for 4K"
        assert exc_info.value.column == 4
        assert exc_info.value.columns == 4

    def test_errors_share_base(self) -> None:
        assert issubclass(UnsupportedKeysError, StripChartError)
        assert issubclass(InvalidColumnError, KeyError)

    def test_custom_palette_falls_back(self) -> None:
        selector = LaneColorSelector(palette={LaneRole.PRIMARY: "#000001"})
        assert selector.select(4, _note(0)) == "#000001"
        assert selector.select(4, _note(1)) == "#5EAEFF"

    def test_custom_layouts(self) -> None:
        selector = LaneColorSelector(layouts={2: (LaneRole.MIDDLE, LaneRole.MIDDLE)})
        assert selector.supported_key_counts == [2]
        assert selector.select(2, _note(1)) == "#FFEC5E"
        with pytest.raises(UnsupportedKeysError):
            selector.select(4, _note(0))
