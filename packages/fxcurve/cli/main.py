"""Command-line interface for fxcurve.

Generates, manipulates and inspects 160-frame effect animation curves.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from fxcurve.core.config.loader import configure_logging, load_app_config
from fxcurve.core.config.models import AppConfig
from fxcurve.core.curves.codec import curve_to_bytes, parse_curve_table
from fxcurve.core.curves.generator import (
    generate_from_params,
    generate_preset,
    get_default_registry,
    manipulate,
)
from fxcurve.core.curves.library import CurveLibrary
from fxcurve.core.curves.models import CURVE_LENGTH, AnimCurve, Curve
from fxcurve.core.curves.modifiers import CurveModifier
from fxcurve.core.curves.presets import CurvePreset
from fxcurve.core.curves.render import (
    format_ascii_plot,
    format_curve_dump,
    format_preview,
    format_value_table,
)
from fxcurve.core.curves.stats import CurveStats
from fxcurve.core.utils.json import dumps_json, write_json

console = Console()
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("dump", "table", "plot", "preview", "hex", "json")

# CLI flag -> GeneratorParams field
_PARAM_FLAGS = (
    "start_frame",
    "end_frame",
    "start_val",
    "end_val",
    "power",
    "strength",
    "cycles",
    "phase",
    "teeth",
    "pulses",
    "duty_cycle",
)


def _echo(text: str = "") -> None:
    """Print plain text without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _error(message: str) -> None:
    console.print(f"[red]ERROR:[/red] {escape(message)}", soft_wrap=True)


def _apply_manipulations(curve: Curve, args: argparse.Namespace) -> Curve:
    """Apply requested manipulations in a fixed order: invert, reverse, scale, shift."""
    if args.invert:
        curve = manipulate(CurveModifier.INVERT, curve)
    if args.reverse:
        curve = manipulate(CurveModifier.REVERSE, curve)
    if args.scale is not None:
        curve = manipulate(CurveModifier.SCALE, curve, factor=args.scale, midpoint=args.midpoint)
    if args.shift is not None:
        curve = manipulate(CurveModifier.SHIFT, curve, offset=args.shift)
    return curve


def _render(
    curve: Curve, fmt: str, config: AppConfig, end_frame: int, suffix: str = ""
) -> list[str]:
    """Render a curve in one of the output formats."""
    if fmt == "table":
        return format_value_table(curve, values_per_row=config.render.values_per_row)
    if fmt == "plot":
        return format_ascii_plot(curve, end_frame, max_columns=config.render.max_plot_columns)
    if fmt == "preview":
        return [format_preview(curve)]
    if fmt == "hex":
        data = curve_to_bytes(curve)
        return [data[i : i + 16].hex(" ") for i in range(0, len(data), 16)]
    if fmt == "json":
        return [dumps_json(curve)]

    lines = format_curve_dump(curve, 1, end_frame, suffix)
    lines.append(CurveStats.from_curve(curve).summary())
    return lines


def _write_output(curve: Curve, out: Path, source: str) -> None:
    """Write a curve as a JSON document with its stats (``.json``) or as its raw 160 bytes."""
    validated = AnimCurve(samples=curve)
    if out.suffix.lower() == ".json":
        document = {
            "source": source,
            "samples": validated.samples,
            "stats": CurveStats.from_curve(validated.samples),
        }
        write_json(out, document)
    else:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(validated.to_bytes())
    logger.info("Wrote curve to %s", out)


def _emit(
    curve: Curve, args: argparse.Namespace, config: AppConfig, source: str, end_frame: float
) -> None:
    plot_end = int(end_frame) if math.isfinite(end_frame) else CURVE_LENGTH
    for line in _render(curve, args.format, config, plot_end, suffix=f"({source})"):
        _echo(line)
    if args.out:
        _write_output(curve, Path(args.out), source)


def cmd_list(args: argparse.Namespace, config: AppConfig) -> int:
    """List families, presets and modifiers."""
    console.print("[bold]Families:[/bold]")
    for spec in get_default_registry().specs():
        hold = "" if spec.windowed else "  (no window)"
        _echo(f"  {spec.curve_id:<16} {spec.label}{hold}")

    console.print("[bold]Presets:[/bold]")
    for preset in CurvePreset:
        _echo(f"  {preset.value}")

    console.print("[bold]Modifiers:[/bold]")
    for modifier in CurveModifier:
        _echo(f"  {modifier.value}")
    return 0


def cmd_generate(args: argparse.Namespace, config: AppConfig) -> int:
    """Generate a curve from a family."""
    overrides: dict[str, Any] = {
        name: getattr(args, name) for name in _PARAM_FLAGS if getattr(args, name) is not None
    }
    params = config.generator.model_copy(update=overrides)
    logger.debug("Generator params: %s", params)

    curve = generate_from_params(args.family, params)
    curve = _apply_manipulations(curve, args)

    _emit(curve, args, config, CurveLibrary(args.family).label, params.end_frame)
    return 0


def cmd_preset(args: argparse.Namespace, config: AppConfig) -> int:
    """Generate a preset over a timing window."""
    start_frame = (
        args.start_frame if args.start_frame is not None else config.generator.start_frame
    )
    end_frame = args.end_frame if args.end_frame is not None else config.generator.end_frame

    curve = generate_preset(args.name, start_frame, end_frame)
    curve = _apply_manipulations(curve, args)

    _emit(curve, args, config, args.name, end_frame)
    return 0


def cmd_inspect(args: argparse.Namespace, config: AppConfig) -> int:
    """Parse a curve table from a file and print each curve."""
    path = Path(args.file)
    if not path.exists():
        _error(f"File not found: {path}")
        return 1

    curves = parse_curve_table(path.read_bytes(), args.offset)
    console.print(f"[bold]{len(curves)} curves[/bold] in {escape(str(path))}", soft_wrap=True)

    indices = range(len(curves)) if args.index is None else [args.index - 1]
    for i in indices:
        if not 0 <= i < len(curves):
            _error(f"Curve {i + 1} out of range (1-{len(curves)})")
            return 1
        curve = curves[i]
        if args.format == "dump":
            for line in format_curve_dump(curve, i + 1):
                _echo(line)
        _echo(f"{i + 1:3d} {format_preview(curve)} {CurveStats.from_curve(curve).summary()}")
    return 0


def _add_window_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start-frame", type=float, help="First frame of the window")
    parser.add_argument("--end-frame", type=float, help="End of the window (exclusive)")


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--invert", action="store_true", help="Invert values (255 - v)")
    parser.add_argument("--reverse", action="store_true", help="Reverse in time")
    parser.add_argument("--scale", type=float, help="Scale values around --midpoint")
    parser.add_argument("--midpoint", type=float, default=128, help="Scale midpoint")
    parser.add_argument("--shift", type=float, help="Add an offset to every value")
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default="dump", help="Output format (default: dump)"
    )
    parser.add_argument("--out", help="Write the curve to FILE (.json, otherwise raw bytes)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="fxcurve",
        description="fxcurve - 160-frame effect animation curve generator",
    )
    p.add_argument("--config", help="Path to app config (.yaml/.yml/.json)")
    p.add_argument("--log-level", help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List families, presets and modifiers")

    gen = sub.add_parser("generate", help="Generate a curve from a family")
    gen.add_argument("family", choices=[f.value for f in CurveLibrary])
    _add_window_args(gen)
    gen.add_argument("--start-val", type=float, help="Start / min / low / constant value")
    gen.add_argument("--end-val", type=float, help="End / max / high value")
    gen.add_argument("--power", type=float, help="Ease exponent")
    gen.add_argument("--strength", type=float, help="Exponential steepness")
    gen.add_argument("--cycles", type=float, help="Sine/triangle cycles")
    gen.add_argument("--phase", type=float, help="Sine/triangle phase (0-1)")
    gen.add_argument("--teeth", type=float, help="Sawtooth ramps")
    gen.add_argument("--pulses", type=float, help="Pulse count")
    gen.add_argument("--duty-cycle", type=float, help="Pulse duty cycle (0-1)")
    _add_output_args(gen)

    preset = sub.add_parser("preset", help="Generate a preset over a timing window")
    preset.add_argument("name", choices=[p.value for p in CurvePreset])
    _add_window_args(preset)
    _add_output_args(preset)

    inspect = sub.add_parser("inspect", help="Print the curves of a curve table file")
    inspect.add_argument("file", help="Binary file holding a curve table")
    inspect.add_argument(
        "--offset", type=lambda s: int(s, 0), default=0, help="Table offset (e.g. 0x40)"
    )
    inspect.add_argument("--index", type=int, help="1-based curve number to show")
    inspect.add_argument("--format", choices=("summary", "dump"), default="summary")

    return p


_COMMANDS = {
    "list": cmd_list,
    "generate": cmd_generate,
    "preset": cmd_preset,
    "inspect": cmd_inspect,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_app_config(args.config)
        if args.log_level:
            config = config.model_copy(
                update={
                    "logging": config.logging.model_validate(
                        {**config.logging.model_dump(), "level": args.log_level.upper()}
                    )
                }
            )
    except (FileNotFoundError, ValueError, ValidationError) as e:
        _error(f"Could not load config: {e}")
        return 1

    configure_logging(config)

    try:
        return _COMMANDS[args.cmd](args, config)
    except (ValueError, ValidationError, OSError) as e:
        logger.debug("Command '%s' failed", args.cmd, exc_info=True)
        _error(str(e))
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
