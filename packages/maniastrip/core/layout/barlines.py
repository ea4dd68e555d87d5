"""Bar line (downbeat) timestamp generation."""

from __future__ import annotations

from collections.abc import Sequence

from maniastrip.core.models.chart import TimingPoint


def generate_bar_lines(
    timing_points: Sequence[TimingPoint],
    start: float,
    end: float,
) -> list[float]:
    """Generate downbeat timestamps for the given window.

    Timing points are sorted by time (stable, so points sharing a
    timestamp keep their input order). Each point owns the regime up to
    the next point's time, or up to ``end`` for the last one. Within a
    regime, downbeats step from the point's own time by one bar
    (``60000 / bpm * meter`` ms) while the time is before the regime end
    and not past ``end``; only times at or after ``start`` are kept.

    Regimes are independent: a tempo change starts a fresh bar grid at
    its own time, and results are concatenated without deduplication.

    Args:
        timing_points: Tempo/meter changes in any order.
        start: Window start (ms).
        end: Window end (ms).

    Returns:
        Downbeat timestamps in ms.

    Example:
        >>> generate_bar_lines([TimingPoint(time=0, bpm=120, meter=4)], 0, 4000)
        [0.0, 2000.0]
    """
    points = sorted(timing_points, key=lambda tp: tp.time)
    result: list[float] = []

    for i, tp in enumerate(points):
        regime_end = points[i + 1].time if i + 1 < len(points) else end
        bar_duration = tp.bar_duration_ms

        bar_index = 0
        current = float(tp.time)
        while current < regime_end and current <= end:
            if current >= start:
                result.append(current)
            bar_index += 1
            current = tp.time + bar_index * bar_duration

    return result


__all__ = [
    "generate_bar_lines",
]
