"""Chart data model.

A chart is the caller-supplied input to a render call: the column count,
the note list and the tempo/meter changes. All models are immutable and
reject non-finite numbers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Note(BaseModel):
    """A single note event.

    A tap has no ``end``; a hold has an ``end`` strictly after ``start``.

    Attributes:
        column: 0-based column (lane) index.
        start: Start time in milliseconds.
        end: End time in milliseconds (holds only).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    column: int = Field(ge=0, description="0-based column index")
    start: float = Field(description="Start time in ms")
    end: float | None = Field(default=None, description="Hold end time in ms")

    @model_validator(mode="after")
    def _validate_hold(self) -> Note:
        """Validate that a hold ends after it starts."""
        if self.end is not None and self.end <= self.start:
            raise ValueError(
                f"Hold note end ({self.end}) must be greater than start ({self.start})"
            )
        return self

    @property
    def is_hold(self) -> bool:
        return self.end is not None

    @property
    def last_time(self) -> float:
        """Latest timestamp covered by this note."""
        return self.end if self.end is not None else self.start


class TimingPoint(BaseModel):
    """Tempo/meter regime starting at ``time``.

    The regime extends until the next timing point (by ascending time)
    or to the window end for the last one.

    Attributes:
        time: Regime start in milliseconds.
        bpm: Beats per minute.
        meter: Beats per bar (time signature numerator).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    time: float = Field(description="Regime start in ms")
    bpm: float = Field(gt=0, description="Beats per minute")
    meter: int = Field(default=4, ge=1, description="Beats per bar")

    @property
    def beat_duration_ms(self) -> float:
        return 60_000.0 / self.bpm

    @property
    def bar_duration_ms(self) -> float:
        return self.beat_duration_ms * self.meter


class Chart(BaseModel):
    """Rhythm-game chart to render.

    Attributes:
        columns: Number of columns (keys).
        notes: Note events.
        timing_points: Tempo/meter changes.
        start: Optional explicit window start (ms).
        end: Optional explicit window end (ms).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    columns: int = Field(ge=1, description="Number of columns (keys)")
    notes: tuple[Note, ...] = Field(default=(), description="Note events")
    timing_points: tuple[TimingPoint, ...] = Field(
        default=(), description="Tempo/meter changes"
    )
    start: float | None = Field(default=None, description="Explicit window start in ms")
    end: float | None = Field(default=None, description="Explicit window end in ms")


__all__ = [
    "Chart",
    "Note",
    "TimingPoint",
]
