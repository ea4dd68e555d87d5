"""Unit tests for the chart data model."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from maniastrip.core.models.chart import Chart, Note, TimingPoint


class TestNote:
    """Tests for the Note model."""

    def test_tap(self) -> None:
        note = Note(column=1, start=1000)
        assert note.end is None
        assert note.is_hold is False
        assert note.last_time == 1000

    def test_hold(self) -> None:
        note = Note(column=2, start=2000, end=3000)
        assert note.is_hold is True
        assert note.last_time == 3000

    def test_hold_must_end_after_start(self) -> None:
        with pytest.raises(ValidationError, match="must be greater than start"):
            Note(column=0, start=2000, end=2000)

    def test_negative_column_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Note(column=-1, start=0)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_start_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            Note(column=0, start=value)

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_end_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            Note(column=0, start=1000, end=value)

    def test_frozen(self) -> None:
        note = Note(column=0, start=0)
        with pytest.raises(ValidationError):
            note.start = 10  # type: ignore[misc]


class TestTimingPoint:
    """Tests for the TimingPoint model."""

    def test_bar_duration(self) -> None:
        """120 BPM 4/4: 500ms per beat, 2000ms per bar."""
        tp = TimingPoint(time=0, bpm=120, meter=4)
        assert tp.beat_duration_ms == 500
        assert tp.bar_duration_ms == 2000

    def test_meter_defaults_to_four(self) -> None:
        assert TimingPoint(time=0, bpm=60).meter == 4

    @pytest.mark.parametrize("bpm", [0, -120])
    def test_bpm_must_be_positive(self, bpm: float) -> None:
        with pytest.raises(ValidationError):
            TimingPoint(time=0, bpm=bpm, meter=4)

    def test_meter_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            TimingPoint(time=0, bpm=120, meter=0)

    @pytest.mark.parametrize("bpm", [math.inf, math.nan])
    def test_non_finite_bpm_rejected(self, bpm: float) -> None:
        """An infinite tempo would make the bar duration zero."""
        with pytest.raises(ValidationError):
            TimingPoint(time=0, bpm=bpm, meter=4)

    @pytest.mark.parametrize("time", [math.inf, -math.inf, math.nan])
    def test_non_finite_time_rejected(self, time: float) -> None:
        with pytest.raises(ValidationError):
            TimingPoint(time=time, bpm=120, meter=4)


class TestChart:
    """Tests for the Chart model."""

    def test_lists_become_tuples(self, simple_chart: Chart) -> None:
        assert isinstance(simple_chart.notes, tuple)
        assert isinstance(simple_chart.timing_points, tuple)
        assert len(simple_chart.notes) == 2

    def test_from_mapping(self) -> None:
        chart = Chart.model_validate(
            {
                "columns": 7,
                "notes": [{"column": 3, "start": 500, "end": 900}],
                "timing_points": [{"time": 0, "bpm": 180, "meter": 4}],
            }
        )
        assert chart.notes[0] == Note(column=3, start=500, end=900)
        assert chart.start is None and chart.end is None

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Chart.model_validate({"columns": 4, "keys": 4})

    def test_columns_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Chart(columns=0)

    @pytest.mark.parametrize("field", ["start", "end"])
    def test_non_finite_window_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Chart.model_validate({"columns": 4, field: math.nan})
