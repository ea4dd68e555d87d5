"""Loading charts and option overrides from JSON and YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from maniastrip.core.config.options import RenderOptions, resolve_options
from maniastrip.core.models.chart import Chart
from maniastrip.core.parsers.osu import OsuManiaParser

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("options.json")
        'json'
        >>> detect_format("options.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration mapping.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Top level of {path} must be a mapping, got {type(content).__name__}")
    return content


def load_options(path: str | Path) -> RenderOptions:
    """Load an option override file and merge it onto the defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the content is invalid (ConfigError for bad options)
    """
    raw = load_config(path)
    logger.debug("Loaded option overrides from %s", path)
    return resolve_options(raw)


def load_chart(path: str | Path) -> Chart:
    """Load a chart from .osu, .json, .yaml or .yml.

    JSON/YAML charts follow the Chart model:
    ``{columns, notes: [{column, start, end?}], timing_points: [{time, bpm, meter}]}``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is malformed
    """
    path = Path(path)
    if path.suffix.lower() == ".osu":
        return OsuManiaParser().parse(path)

    raw = load_config(path)
    try:
        chart = Chart.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid chart in {path}: {e}") from e
    logger.debug("Loaded %dK chart with %d notes from %s", chart.columns, len(chart.notes), path)
    return chart


__all__ = [
    "detect_format",
    "load_chart",
    "load_config",
    "load_options",
]
