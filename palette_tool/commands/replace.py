"""Replace the colour of one palette slot.

All formats and the name of that slot are rebuilt from the new colour;
every other slot is left exactly as it was.

Example:
    palette-tool replace palette.json 0 '#ff8800' -o palette.json
"""

from palette_tool.core.engine import replace_color
from palette_tool.core.report import load_palette
from palette_tool.core.types import Command, Report

command = Command(
    name='replace',
    help='Set a new colour for one palette slot.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('palette', help='Exported palette JSON file, or - for stdin')
    parser.add_argument('index', type=int, help='Slot to replace (0-based)')
    parser.add_argument('color', help='New colour string')


@command.run
def run(report: Report, args, settings) -> None:
    report.palette = replace_color(load_palette(args.palette), args.index, args.color)
