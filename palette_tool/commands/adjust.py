"""Nudge every colour of a palette by hue, saturation and brightness offsets.

Hue is in degrees (-180..180) and wraps around the wheel. Saturation and
brightness are percentages (-100..100) added to the HSL saturation and
lightness, clamped at 0% and 100%. Values outside those ranges are rejected.

Offsets apply to the hex currently stored in each entry, so they compound:
--ticks N applies the same offsets N times in a row, the way a slider does
while it is dragged. Every entry's name is regenerated.

PALETTE is an exported palette JSON file, or - to read it from stdin.

Example:
    palette-tool adjust palette.json --hue 30
    palette-tool generate --json | palette-tool adjust - --saturation -20 --json
    palette-tool adjust palette.json --brightness 5 --ticks 4 -o brighter.json
"""

from palette_tool.core.engine import apply_adjustment
from palette_tool.core.report import load_palette
from palette_tool.core.types import AdjustmentVector, Command, Report

command = Command(
    name='adjust',
    help='Shift hue/saturation/brightness of every colour in a palette.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('palette', help='Exported palette JSON file, or - for stdin')
    parser.add_argument('--hue', type=float, default=0, help='Hue rotation in degrees (-180..180)')
    parser.add_argument('--saturation', type=float, default=0, help='Saturation offset in percent (-100..100)')
    parser.add_argument('--brightness', type=float, default=0, help='Lightness offset in percent (-100..100)')
    parser.add_argument('--ticks', type=int, default=1, help='Apply the offsets this many times (default 1)')


@command.run
def run(report: Report, args, settings) -> None:
    if args.ticks < 1:
        raise ValueError(f'--ticks must be at least 1, got {args.ticks}')
    adjustment = AdjustmentVector(hue=args.hue, saturation=args.saturation, brightness=args.brightness)
    palette = load_palette(args.palette)
    for _ in range(args.ticks):
        palette = apply_adjustment(palette, adjustment)
    report.palette = palette
    if adjustment.is_zero:
        report.note('zero adjustment: colours unchanged, names regenerated')
