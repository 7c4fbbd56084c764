"""Show a colour in every supported format, with its heuristic name.

Accepts #rgb and #rrggbb (with or without #), rgb()/rgba(), hsl()/hsla()
and hsv()/hsva(). Unparseable input is an error, never silently black.
A translucent colour also shows its hex8 form; hex alone is always opaque.

Example:
    palette-tool convert '#1e90ff'
    palette-tool convert 'hsl(120, 40%, 80%)' --json
"""

from palette_tool.core.engine import generate_color_name
from palette_tool.core.parser import parse_color
from palette_tool.core.types import Command, Report

command = Command(
    name='convert',
    help='Print hex/rgb/hsl/hsv/cmyk forms and the name of a colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', help='Colour string')


@command.run
def run(report: Report, args, settings) -> None:
    color = parse_color(args.color)
    report.details = {
        'name': generate_color_name(color),
        'hex': color.to_hex_string(),
        'rgb': color.to_rgb_string(),
        'hsl': color.to_hsl_string(),
        'hsv': color.to_hsv_string(),
        'cmyk': color.to_cmyk_string(),
    }
    if color.a < 1.0:
        report.details['hex8'] = color.to_hex8_string()
