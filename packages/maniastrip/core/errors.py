"""Error taxonomy for chart rendering.

Every failure raised by the render pipeline derives from StripChartError,
so callers can catch the whole family with one handler. Each error carries
structured context (field name, offending value) for diagnosis.
"""

from __future__ import annotations

from typing import Any


class StripChartError(Exception):
    """Base class for all maniastrip errors."""


class ConfigError(StripChartError, ValueError):
    """Raised when the option set or chart window cannot be resolved.

    Attributes:
        field: Dotted option path that failed (e.g. "strip.num").
        value: The offending value (None when the field is missing).
        reason: What specifically went wrong.
    """

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        self.field = field
        self.reason = reason
        self.value = value
        message = f"{field}: {reason}"
        if value is not None:
            message += f" (got {value!r})"
        super().__init__(message)


class EmptyTimingDataError(ConfigError):
    """Raised when the window start must be derived but no timing points exist."""

    def __init__(self) -> None:
        super().__init__(
            "time.start",
            "cannot derive window start: chart has no timing points "
            "and no explicit start was given",
        )


class UnsupportedKeysError(StripChartError, KeyError):
    """Raised when a column count has no lane layout entry.

    Attributes:
        columns: The unsupported column count.
    """

    def __init__(self, columns: int) -> None:
        self.columns = columns
        super().__init__(f"Unsupported keys: {columns}")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidColumnError(StripChartError, KeyError):
    """Raised when a note column lies outside the lane layout.

    Attributes:
        column: The offending column index.
        columns: The chart's column count.
    """

    def __init__(self, column: int, columns: int) -> None:
        self.column = column
        self.columns = columns
        super().__init__(f"Invalid column: {column} for {columns}K")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "ConfigError",
    "EmptyTimingDataError",
    "InvalidColumnError",
    "StripChartError",
    "UnsupportedKeysError",
]
