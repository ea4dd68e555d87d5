"""Unit tests for bar line generation."""

from __future__ import annotations

from maniastrip.core.layout.barlines import generate_bar_lines
from maniastrip.core.models.chart import TimingPoint


def _tp(time: float, bpm: float, meter: int = 4) -> TimingPoint:
    return TimingPoint(time=time, bpm=bpm, meter=meter)


class TestGenerateBarLines:
    """Tests for generate_bar_lines."""

    def test_single_regime(self) -> None:
        """120 BPM 4/4 bars are 2000ms; the window end is exclusive for the last regime."""
        assert generate_bar_lines([_tp(0, 120)], 0, 4000) == [0, 2000]

    def test_no_timing_points(self) -> None:
        assert generate_bar_lines([], 0, 10_000) == []

    def test_tempo_change_restarts_grid(self) -> None:
        points = [_tp(0, 120), _tp(3000, 60)]
        assert generate_bar_lines(points, 0, 10_000) == [0, 2000, 3000, 7000]

    def test_unsorted_input(self) -> None:
        points = [_tp(3000, 60), _tp(0, 120)]
        assert generate_bar_lines(points, 0, 10_000) == [0, 2000, 3000, 7000]

    def test_start_filters(self) -> None:
        points = [_tp(0, 120), _tp(3000, 60)]
        assert generate_bar_lines(points, 2500, 10_000) == [3000, 7000]

    def test_meter(self) -> None:
        """3/4 at 120 BPM gives 1500ms bars."""
        assert generate_bar_lines([_tp(0, 120, 3)], 0, 5000) == [0, 1500, 3000, 4500]

    def test_end_inclusive_inside_earlier_regime(self) -> None:
        points = [_tp(0, 120), _tp(5000, 120)]
        assert generate_bar_lines(points, 0, 4000) == [0, 2000, 4000]

    def test_equal_times_keep_input_order(self) -> None:
        """The first of two points at the same time owns an empty regime."""
        points = [_tp(0, 120), _tp(0, 60)]
        assert generate_bar_lines(points, 0, 10_000) == [0, 4000, 8000]

    def test_negative_offset(self) -> None:
        assert generate_bar_lines([_tp(-500, 120)], 0, 6000) == [1500, 3500, 5500]

    def test_deterministic(self) -> None:
        points = [_tp(0, 173), _tp(12_345, 91, 7)]
        assert generate_bar_lines(points, 0, 60_000) == generate_bar_lines(points, 0, 60_000)
