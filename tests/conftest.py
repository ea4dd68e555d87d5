"""Shared pytest fixtures for maniastrip tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from maniastrip.core.config.options import RenderOptions, resolve_options
from maniastrip.core.models.chart import Chart, Note, TimingPoint

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# Chart Fixtures
# ============================================================================


@pytest.fixture
def simple_chart() -> Chart:
    """4K chart: one tap at 1000ms, one hold 2000-3000ms, 60 BPM 4/4 from 0ms."""
    return Chart(
        columns=4,
        notes=[
            Note(column=1, start=1000),
            Note(column=2, start=2000, end=3000),
        ],
        timing_points=[TimingPoint(time=0, bpm=60, meter=4)],
    )


@pytest.fixture
def long_chart() -> Chart:
    """7K chart, 120 BPM, one note per beat for 60 seconds."""
    return Chart(
        columns=7,
        notes=[Note(column=i % 7, start=i * 500.0) for i in range(120)],
        timing_points=[TimingPoint(time=0, bpm=120, meter=4)],
    )


@pytest.fixture
def default_options() -> RenderOptions:
    return resolve_options()
