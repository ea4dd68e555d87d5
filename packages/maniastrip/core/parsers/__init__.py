"""Chart file parsers."""

from maniastrip.core.parsers.osu import OsuManiaParser

__all__ = [
    "OsuManiaParser",
]
