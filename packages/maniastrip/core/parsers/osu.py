"""osu!mania beatmap parser.

Reads the text-based ``.osu`` format into a Chart:

- ``[General] Mode`` must be 3 (mania) when present.
- ``[Difficulty] CircleSize`` is the column count.
- Uninherited ``[TimingPoints]`` become TimingPoints
  (``bpm = 60000 / beatLength``); inherited (slider velocity) points are skipped.
- ``[HitObjects]`` become Notes; ``column = floor(x * columns / 512)``,
  and objects with type bit 128 are holds whose end time leads the
  extras field.
"""

from __future__ import annotations

import math
from pathlib import Path

from maniastrip.core.models.chart import Chart, Note, TimingPoint
from maniastrip.core.utils.logging import get_logger
from maniastrip.core.utils.math import is_positive_finite

logger = get_logger(__name__)

MANIA_MODE = 3
HOLD_TYPE_BIT = 128
PLAYFIELD_WIDTH = 512
DEFAULT_METER = 4


class OsuManiaParser:
    """Parser for osu!mania beatmaps (.osu).

    Example:
        >>> parser = OsuManiaParser()
        >>> chart = parser.parse("song [7K Hard].osu")
        >>> chart.columns
        7
    """

    def parse(self, file_path: Path | str) -> Chart:
        """Parse a beatmap file from disk.

        Args:
            file_path: Path to the .osu file

        Returns:
            Parsed Chart

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the beatmap is malformed or not a mania map
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Beatmap file not found: {file_path}")

        logger.debug(f"Parsing beatmap file: {file_path}")
        # utf-8-sig strips the BOM some editors write
        content = file_path.read_text(encoding="utf-8-sig")
        try:
            return self.parse_string(content)
        except ValueError as e:
            raise ValueError(f"Invalid beatmap {file_path}: {e}") from e

    def parse_string(self, content: str) -> Chart:
        """Parse beatmap text.

        Args:
            content: Full .osu file content

        Returns:
            Parsed Chart

        Raises:
            ValueError: If the beatmap is malformed or not a mania map
        """
        sections = self._split_sections(content)

        general = self._parse_key_values(sections.get("General", []))
        mode = general.get("Mode")
        if mode is not None and mode.strip() != str(MANIA_MODE):
            raise ValueError(f"Not an osu!mania beatmap (Mode: {mode.strip()})")

        difficulty = self._parse_key_values(sections.get("Difficulty", []))
        if "CircleSize" not in difficulty:
            raise ValueError("Missing [Difficulty] CircleSize (column count)")
        columns = int(float(difficulty["CircleSize"]))
        if columns < 1:
            raise ValueError(f"Invalid column count: {columns}")

        timing_points = [
            tp
            for line_no, line in sections.get("TimingPoints", [])
            if (tp := self._parse_timing_point(line_no, line)) is not None
        ]
        notes = [
            self._parse_hit_object(line_no, line, columns)
            for line_no, line in sections.get("HitObjects", [])
        ]

        logger.debug(
            f"Parsed {columns}K beatmap: {len(notes)} notes, {len(timing_points)} timing points"
        )
        return Chart(columns=columns, notes=tuple(notes), timing_points=tuple(timing_points))

    @staticmethod
    def _split_sections(content: str) -> dict[str, list[tuple[int, str]]]:
        """Group non-empty, non-comment lines by [Section], keeping line numbers."""
        sections: dict[str, list[tuple[int, str]]] = {}
        current: list[tuple[int, str]] | None = None
        for line_no, raw in enumerate(content.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("//"):
                continue
            if line.startswith("[") and line.endswith("]"):
                current = sections.setdefault(line[1:-1], [])
                continue
            if current is not None:
                current.append((line_no, line))
        return sections

    @staticmethod
    def _parse_key_values(lines: list[tuple[int, str]]) -> dict[str, str]:
        values: dict[str, str] = {}
        for _, line in lines:
            key, sep, value = line.partition(":")
            if sep:
                values[key.strip()] = value.strip()
        return values

    @staticmethod
    def _parse_timing_point(line_no: int, line: str) -> TimingPoint | None:
        """Parse ``time,beatLength,meter,sampleSet,sampleIndex,volume,uninherited,effects``.

        Returns None for inherited points.
        """
        fields = line.split(",")
        if len(fields) < 2:
            raise ValueError(f"line {line_no}: malformed timing point: {line!r}")
        try:
            time = float(fields[0])
            beat_length = float(fields[1])
            meter = int(fields[2]) if len(fields) > 2 and fields[2] else DEFAULT_METER
            uninherited = fields[6] != "0" if len(fields) > 6 else beat_length > 0
            if not math.isfinite(time):
                raise ValueError("non-finite time")
        except ValueError as e:
            raise ValueError(f"line {line_no}: malformed timing point: {line!r}") from e

        if not uninherited:
            return None
        if not is_positive_finite(beat_length):
            raise ValueError(f"line {line_no}: beat length must be positive: {line!r}")
        return TimingPoint(time=time, bpm=60_000.0 / beat_length, meter=max(meter, 1))

    @staticmethod
    def _parse_hit_object(line_no: int, line: str, columns: int) -> Note:
        """Parse ``x,y,time,type,hitSound,extras``."""
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"line {line_no}: malformed hit object: {line!r}")
        try:
            x = float(fields[0])
            start = float(fields[2])
            object_type = int(fields[3])
            end: float | None = None
            if object_type & HOLD_TYPE_BIT:
                if len(fields) < 6:
                    raise ValueError("hold without end time")
                end = float(fields[5].split(":", 1)[0])
            values = (x, start) if end is None else (x, start, end)
            if not all(math.isfinite(v) for v in values):
                raise ValueError("non-finite value")
        except ValueError as e:
            raise ValueError(f"line {line_no}: malformed hit object: {line!r}") from e

        column = min(max(math.floor(x * columns / PLAYFIELD_WIDTH), 0), columns - 1)
        if end is not None and end <= start:
            logger.warning(f"line {line_no}: hold ends before it starts; drawn as a tap")
            end = None
        return Note(column=column, start=start, end=end)


__all__ = [
    "OsuManiaParser",
]
