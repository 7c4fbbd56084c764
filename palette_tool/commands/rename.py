"""Give one palette slot a custom name. Its colour is not touched.

Note that `adjust` regenerates every name, custom ones included.

Example:
    palette-tool rename palette.json 1 'Brand Orange' -o palette.json
"""

from palette_tool.core.engine import rename_entry
from palette_tool.core.report import load_palette
from palette_tool.core.types import Command, Report

command = Command(
    name='rename',
    help='Rename one palette slot.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('palette', help='Exported palette JSON file, or - for stdin')
    parser.add_argument('index', type=int, help='Slot to rename (0-based)')
    parser.add_argument('name', help='New name')


@command.run
def run(report: Report, args, settings) -> None:
    report.palette = rename_entry(load_palette(args.palette), args.index, args.name)
