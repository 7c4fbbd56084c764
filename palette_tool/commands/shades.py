"""Derive a shade ramp: the same colour at stepped lightness.

Slot i of an N-step ramp is the base lightened by (i - N//2) * 20 points on
the 0-100 lightness scale, so five steps give -40, -20, 0, +20, +40. The
middle shade is the base itself. Offsets past black or white clamp, so very
dark or very light colours repeat at the ends of the ramp.

TARGET is a colour string (#hex, rgb(), hsl(), hsv()), or, with --index, an
exported palette file (or -) whose slot I is used as the base.

Example:
    palette-tool shades '#808080'
    palette-tool shades 'hsl(200, 70%, 50%)' --steps 7 --json
    palette-tool shades palette.json --index 2
"""

from palette_tool.core.engine import derive_shades, shades_for_entry
from palette_tool.core.parser import parse_color
from palette_tool.core.report import load_palette
from palette_tool.core.types import Command, Report

command = Command(
    name='shades',
    help='Derive a lightness ramp from a colour or a palette slot.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('target', help='Colour string, or palette file when --index is given')
    parser.add_argument('-i', '--index', type=int, default=None, help='Palette slot to use as the base')
    parser.add_argument('--steps', type=int, default=None, help='Ramp length (default: PALETTE_SHADE_STEPS or 5)')


@command.run
def run(report: Report, args, settings) -> None:
    steps = args.steps if args.steps is not None else settings.shade_steps
    if args.index is None:
        base = parse_color(args.target).to_hex_string()
        report.shades = derive_shades(base, steps)
    else:
        palette = load_palette(args.target)
        report.shades = shades_for_entry(palette, args.index, steps)
        base = palette[args.index].hex
    report.base = base
