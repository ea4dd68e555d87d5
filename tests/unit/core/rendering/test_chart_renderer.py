"""Unit tests for ChartRenderer and the render() entry point."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from maniastrip.core.config.options import RenderOptions
from maniastrip.core.errors import (
    ConfigError,
    EmptyTimingDataError,
    InvalidColumnError,
    StripChartError,
    UnsupportedKeysError,
)
from maniastrip.core.models.chart import Chart, Note, TimingPoint
from maniastrip.core.models.context import LayoutContext
from maniastrip.core.models.primitives import RectPrimitive
from maniastrip.core.rendering.document import SVG_NAMESPACE
from maniastrip.core.rendering.renderer import ChartRenderer, RenderResult, coerce_chart, render

NS = f"{{{SVG_NAMESPACE}}}"

SIMPLE_CHART_DATA = {
    "columns": 4,
    "notes": [{"column": 1, "start": 1000}, {"column": 2, "start": 2000, "end": 3000}],
    "timing_points": [{"time": 0, "bpm": 60, "meter": 4}],
}


class _MarkerNoteRenderer:
    """Draws every note as a fixed-size marker at its column."""

    def render(self, ctx: LayoutContext, note: Note) -> list[RectPrimitive]:
        return [
            RectPrimitive(
                x=note.column * 10,
                y=ctx.time_to_y(note.start),
                width=1,
                height=1,
                fill="#FF00FF",
            )
        ]


class TestChartRenderer:
    """Tests for ChartRenderer."""

    def test_result(self, simple_chart: Chart) -> None:
        result = ChartRenderer().render(simple_chart)
        assert isinstance(result, RenderResult)
        assert result.note_count == 2
        assert result.barline_count == 1
        assert result.strip_count == 8
        assert result.svg.startswith("<svg")

    def test_options_merged_once(self) -> None:
        renderer = ChartRenderer({"strip": {"num": 2}})
        assert isinstance(renderer.options, RenderOptions)
        assert renderer.options.strip.num == 2
        assert renderer.options.strip.spacing == 30

    def test_invalid_options_fail_at_construction(self) -> None:
        with pytest.raises(ConfigError, match="strip.mode"):
            ChartRenderer({"strip": {"mode": "spiral"}})

    def test_layout(self, simple_chart: Chart) -> None:
        ctx = ChartRenderer({"strip": {"num": 3}}).layout(simple_chart)
        assert ctx.strip_count == 3
        assert ctx.chart is simple_chart

    def test_reusable(self, simple_chart: Chart, long_chart: Chart) -> None:
        renderer = ChartRenderer()
        first = renderer.render(simple_chart).svg
        renderer.render(long_chart)
        assert renderer.render(simple_chart).svg == first

    def test_custom_note_renderer(self, simple_chart: Chart) -> None:
        renderer = ChartRenderer({"note": {"renderer": _MarkerNoteRenderer()}})
        root = ET.fromstring(renderer.render(simple_chart).svg)
        notes = root.find(".//*[@id='notes']")
        assert notes is not None
        assert [rect.get("fill") for rect in notes] == ["#FF00FF", "#FF00FF"]
        assert [rect.get("x") for rect in notes] == ["10", "20"]

    def test_unsupported_keys(self) -> None:
        chart = Chart(
            columns=11,
            notes=(Note(column=0, start=0),),
            timing_points=(TimingPoint(time=0, bpm=120),),
        )
        with pytest.raises(UnsupportedKeysError):
            ChartRenderer().render(chart)

    def test_invalid_column(self) -> None:
        chart = Chart(
            columns=4,
            notes=(Note(column=4, start=0),),
            timing_points=(TimingPoint(time=0, bpm=120),),
        )
        with pytest.raises(InvalidColumnError):
            ChartRenderer().render(chart)

    def test_empty_timing_data(self) -> None:
        chart = Chart(columns=4, notes=(Note(column=0, start=0),))
        with pytest.raises(EmptyTimingDataError):
            ChartRenderer().render(chart)

    def test_explicit_window_without_timing_data(self) -> None:
        chart = Chart(columns=4, notes=(Note(column=0, start=0),))
        result = ChartRenderer({"time": {"start": 0, "end": 1000}}).render(chart)
        assert result.barline_count == 0
        assert result.note_count == 1

    def test_notes_outside_window_still_emitted(self, simple_chart: Chart) -> None:
        """Out-of-window notes stay in the template; clipping hides them."""
        result = ChartRenderer({"time": {"start": 0, "end": 1500}}).render(simple_chart)
        root = ET.fromstring(result.svg)
        notes = root.find(".//*[@id='notes']")
        assert notes is not None
        assert len(notes) == 2

    def test_info_log(self, simple_chart: Chart, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="maniastrip"):
            ChartRenderer().render(simple_chart)
        assert "Rendered 4K chart: 2 notes, 1 bar lines, 8 strips" in caplog.text


class TestRenderFunction:
    """Tests for the render() convenience entry point."""

    def test_mapping_chart(self, simple_chart: Chart) -> None:
        assert render(SIMPLE_CHART_DATA) == render(simple_chart)

    def test_overrides(self, simple_chart: Chart) -> None:
        root = ET.fromstring(render(simple_chart, {"strip": {"num": 2}}))
        assert len(root.findall(f".//{NS}use")) == 2

    def test_round_trip_geometry(self) -> None:
        root = ET.fromstring(render(SIMPLE_CHART_DATA))
        notes = root.find(".//*[@id='notes']")
        assert notes is not None
        ys = [(rect.get("y"), rect.get("height")) for rect in notes]
        assert ys == [("100", "6"), ("200", "100")]

    def test_ratio_mode(self, long_chart: Chart) -> None:
        root = ET.fromstring(render(long_chart, {"strip": {"mode": "ratio", "ratio": 1.0}}))
        ratio = float(root.get("width")) / float(root.get("height"))
        assert 0.5 < ratio < 2.0

    def test_errors_share_base(self) -> None:
        with pytest.raises(StripChartError):
            render(
                {
                    "columns": 3,
                    "notes": [{"column": 0, "start": 0}],
                    "timing_points": [{"time": 0, "bpm": 120}],
                }
            )


class TestCoerceChart:
    """Tests for coerce_chart."""

    def test_chart_passes_through(self, simple_chart: Chart) -> None:
        assert coerce_chart(simple_chart) is simple_chart

    def test_invalid_mapping(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            coerce_chart({"columns": 4, "notes": [{"column": 0}]})
        assert exc_info.value.field == "chart.notes.0.start"

    def test_invalid_hold(self) -> None:
        with pytest.raises(ConfigError, match="chart.notes.0"):
            coerce_chart(
                {"columns": 4, "notes": [{"column": 0, "start": 10, "end": 5}]}
            )

    def test_infinite_tempo(self) -> None:
        data = {**SIMPLE_CHART_DATA, "timing_points": [{"time": 0, "bpm": float("inf")}]}
        with pytest.raises(ConfigError) as exc_info:
            render(data)
        assert exc_info.value.field == "chart.timing_points.0.bpm"

    def test_nan_note_start(self) -> None:
        data = {
            **SIMPLE_CHART_DATA,
            "notes": [{"column": 1, "start": 1000}, {"column": 0, "start": float("nan")}],
        }
        with pytest.raises(ConfigError) as exc_info:
            render(data)
        assert exc_info.value.field == "chart.notes.1.start"
