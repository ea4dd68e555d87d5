"""Command-line interface for maniastrip.

Renders a chart file (.osu, .json, .yaml) to a strip-tiled SVG.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from maniastrip.core.config.loader import load_chart, load_config
from maniastrip.core.config.options import merge_options, resolve_options
from maniastrip.core.errors import StripChartError
from maniastrip.core.models.enum import StripMode, TimeDirection
from maniastrip.core.rendering.renderer import ChartRenderer
from maniastrip.core.utils.logging import configure_logging

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect option overrides given as command-line flags."""
    overrides: dict[str, Any] = {}

    strip: dict[str, Any] = {}
    if args.strip_mode is not None:
        strip["mode"] = args.strip_mode
    if args.strip_num is not None:
        strip["num"] = args.strip_num
    if args.strip_time is not None:
        strip["time"] = args.strip_time
    if args.ratio is not None:
        strip["ratio"] = args.ratio
    if strip:
        overrides["strip"] = strip

    if args.direction is not None:
        overrides["time"] = {"direction": args.direction}
    if args.axis:
        overrides["axis"] = {"enabled": True}
    if args.target_size is not None:
        overrides["layout"] = {"target_size": tuple(args.target_size)}

    return overrides


def run_render(args: argparse.Namespace) -> int:
    """Render one chart file. Returns the process exit code."""
    configure_logging(level=args.log_level, structured=args.log_json)

    chart_path = Path(args.chart).resolve()
    output_path = Path(args.out).resolve() if args.out else chart_path.with_suffix(".svg")

    if not chart_path.exists():
        console.print(f"[red]ERROR: Chart file not found: {chart_path}[/red]")
        return 1

    try:
        options = resolve_options(load_config(args.options)) if args.options else resolve_options()
        options = merge_options(options, build_overrides(args))
        chart = load_chart(chart_path)
        result = ChartRenderer(options).render(chart)
    except (StripChartError, ValueError, FileNotFoundError) as e:
        logger.debug("Render failed", exc_info=True)
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.svg, encoding="utf-8")

    ctx = result.context
    console.print(f"[green]✅ Rendered[/green] {chart_path.name} -> {output_path}")
    console.print(
        f"   Columns: {ctx.columns}  Notes: {result.note_count}  "
        f"Bar lines: {result.barline_count}"
    )
    console.print(
        f"   Strips: {ctx.strip_count}  Window: {ctx.start:g}-{ctx.end:g}ms  "
        f"Canvas: {ctx.canvas_width:g}x{ctx.canvas_height:g}px"
    )
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="maniastrip",
        description="maniastrip - render rhythm-game charts as strip-tiled SVG",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("render", help="Render a chart to SVG")
    run.add_argument("chart", help="Chart file (.osu, .json, .yaml, .yml)")
    run.add_argument("-o", "--out", help="Output SVG path (default: chart path with .svg)")
    run.add_argument("--options", help="Option override file (.json, .yaml, .yml)")
    run.add_argument(
        "--strip-mode",
        choices=[mode.value for mode in StripMode],
        help="Strip count strategy",
    )
    run.add_argument("--strip-num", type=int, help="Number of strips (mode=num)")
    run.add_argument("--strip-time", type=float, help="Duration per strip in ms (mode=time)")
    run.add_argument("--ratio", type=float, help="Target width/height (mode=ratio)")
    run.add_argument(
        "--target-size",
        type=float,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        help="Fit the canvas into WIDTH x HEIGHT px",
    )
    run.add_argument("--axis", action="store_true", help="Draw the time axis")
    run.add_argument(
        "--direction",
        choices=[direction.value for direction in TimeDirection],
        help="Direction in which time increases",
    )
    run.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    run.add_argument("--log-json", action="store_true", help="Emit structured JSON logs")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "render":
        sys.exit(run_render(args))


if __name__ == "__main__":
    main()
