"""
IconShade CLI — writes active/inactive recolored variants of an SVG icon.

Usage:
  iconshade --icon black --fill "#ff0000"
  iconshade --input path/to/icon.svg --stroke "#00ffcc" --output recolored.svg
  iconshade -i icon.svg -f "#3366ff" --no-inactive --overwrite
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from iconshade.color.value import validate_color_input
from iconshade.config import settings
from iconshade.engine.generator import generate_variants_from_text
from iconshade.errors import IconShadeError

logger = logging.getLogger(__name__)

PRESET_DIR = Path(__file__).parent / "presets"
ICON_PRESETS = {
    "black": PRESET_DIR / "black.svg",
    "line": PRESET_DIR / "line.svg",
}


class CliError(Exception):
    """User-facing CLI failure (bad flags, missing files, refused overwrite)."""


@dataclass
class OutputPlan:
    directory: Path
    base_name: str
    extension: str

    def path_for(self, variant_name: str) -> Path:
        return self.directory / f"{self.base_name}-{variant_name}{self.extension}"


def _color_arg(value: str) -> str:
    try:
        return validate_color_input(value)
    except IconShadeError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _mix_arg(value: str) -> float:
    try:
        mix = float(value)
    except ValueError:
        mix = float("nan")
    if not 0 <= mix <= 1:
        raise argparse.ArgumentTypeError("--inactive-mix expects a number between 0 and 1")
    return mix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconshade",
        description=(
            "Generate an active icon and an inactive icon (desaturated pastel that keeps "
            "the base hue, on a rounded background) from one SVG and one accent color."
        ),
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", help="Path to an SVG file")
    source.add_argument("--icon", choices=sorted(ICON_PRESETS), help="Use a bundled icon preset")
    parser.add_argument("-o", "--output", help="Output file base path (variant suffixes added automatically)")
    parser.add_argument("-f", "--fill", type=_color_arg, help="Fill color hex or 'none'")
    parser.add_argument("-s", "--stroke", type=_color_arg, help="Stroke color hex or 'none'")
    parser.add_argument("--overwrite", action="store_true", help="Replace output files that already exist")
    parser.add_argument(
        "--no-preserve-fill-none",
        dest="preserve_fill_none",
        action="store_false",
        help="Allow replacing fill declarations set to 'none'",
    )
    parser.add_argument(
        "--no-preserve-stroke-none",
        dest="preserve_stroke_none",
        action="store_false",
        help="Allow replacing stroke declarations set to 'none'",
    )
    parser.add_argument(
        "--no-inactive",
        dest="generate_inactive",
        action="store_false",
        help="Skip generating the inactive icon variant",
    )
    parser.add_argument(
        "--inactive-mix",
        type=_mix_arg,
        default=None,
        help=f"Desaturation/lightening strength, 0-1 (default {settings.default_inactive_mix})",
    )
    parser.add_argument("--corner-radius", type=float, default=None, help="Inactive background corner radius")
    parser.add_argument("--inset-ratio", type=float, default=None, help="Inactive background inset ratio, 0-0.9")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _sanitize_for_suffix(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value, flags=re.IGNORECASE).strip("-")


def _create_suffix(fill: str | None, stroke: str | None) -> str:
    parts = []
    if fill:
        parts.append(f"fill-{_sanitize_for_suffix(fill)}")
    if stroke:
        parts.append(f"stroke-{_sanitize_for_suffix(stroke)}")
    return "-".join(parts) or "recolored"


def resolve_input(args: argparse.Namespace) -> Path:
    if args.icon:
        return ICON_PRESETS[args.icon]
    path = Path(args.input).resolve()
    if not path.exists():
        raise CliError(f"File not found: {path}")
    if not path.is_file():
        raise CliError(f"{path} is not a file.")
    return path


def plan_output(args: argparse.Namespace, input_path: Path) -> OutputPlan:
    if args.output:
        target = Path(args.output).resolve()
        extension = target.suffix or input_path.suffix or ".svg"
        base = target.name[: -len(target.suffix)] if target.suffix else target.name
        return OutputPlan(directory=target.parent, base_name=base, extension=extension)

    extension = input_path.suffix or ".svg"
    base = f"{input_path.stem}-{_create_suffix(args.fill, args.stroke)}"
    return OutputPlan(directory=Path(settings.output_dir).resolve(), base_name=base, extension=extension)


def run(args: argparse.Namespace) -> list[Path]:
    """Generate and write variants; returns the written paths."""
    input_path = resolve_input(args)
    svg_content = input_path.read_text(encoding="utf-8")
    logger.debug("Read %s (%d chars)", input_path, len(svg_content))

    variants = generate_variants_from_text(
        svg_content,
        fill=args.fill,
        stroke=args.stroke,
        defaults=settings.variant_defaults(),
        preserve_fill_none=args.preserve_fill_none,
        preserve_stroke_none=args.preserve_stroke_none,
        generate_inactive=args.generate_inactive,
        inactive_mix=args.inactive_mix,
        corner_radius=args.corner_radius,
        inset_ratio=args.inset_ratio,
    )

    plan = plan_output(args, input_path)
    logger.debug("Writing to %s as %s-<variant>%s", plan.directory, plan.base_name, plan.extension)
    targets = [(plan.path_for(v.name), v) for v in variants]
    # Check every target before writing anything so a refusal leaves no partial set.
    if not args.overwrite:
        for path, _ in targets:
            if path.exists():
                raise CliError(f"Output file already exists: {path}. Use --overwrite to replace it.")

    plan.directory.mkdir(parents=True, exist_ok=True)
    written = []
    for path, variant in targets:
        path.write_text(variant.svg, encoding="utf-8")
        written.append(path)
        try:
            shown = path.relative_to(Path.cwd())
        except ValueError:
            shown = path
        print(f"Created {shown}")
    return written


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not args.fill and not args.stroke:
        parser.error("Provide at least one of --fill or --stroke")

    try:
        run(args)
    except (CliError, IconShadeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
