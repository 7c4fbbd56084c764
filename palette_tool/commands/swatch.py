"""Render a palette to a PNG image.

Draws one square per colour, left to right in palette order. --shades adds
each colour's shade ramp (PALETTE_SHADE_STEPS long, default 5) underneath.

Example:
    palette-tool swatch palette.json palette.png
    palette-tool generate --seed 7 --json | palette-tool swatch - out.png --size 64 --shades
"""

from palette_tool.core.report import load_palette
from palette_tool.core.swatch import render_swatch
from palette_tool.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render a palette (and optionally its shades) to a PNG file.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('palette', help='Exported palette JSON file, or - for stdin')
    parser.add_argument('output', help='PNG path to write')
    parser.add_argument('--size', type=int, default=120, help='Swatch edge in pixels (default 120)')
    parser.add_argument('--shades', action='store_true', help='Draw each colour\'s shade ramp underneath')


@command.run
def run(report: Report, args, settings) -> None:
    palette = load_palette(args.palette)
    image = render_swatch(palette, size=args.size, shade_steps=settings.shade_steps if args.shades else 0)
    image.save(args.output, format='PNG')
    report.details = {
        'swatch': args.output,
        'size': f'{image.width}×{image.height}',
        'colours': len(palette),
    }
