"""Generate a fresh palette from one random base hue.

The base colour has saturation 70% and lightness 50%. Each following slot
is the base spun by a further 30 degrees, so a five-colour palette covers
120 degrees of the wheel whatever the seed.

Defaults come from PALETTE_SIZE / PALETTE_SEED (environment or .env);
--count and --seed override them. A fixed seed always gives the same palette.

Example:
    palette-tool generate
    palette-tool generate --count 7 --seed 42 --json
    palette-tool generate --seed 1 -o palette.json
"""

import numpy as np

from palette_tool.core.engine import generate_initial_palette
from palette_tool.core.types import Command, Report

command = Command(
    name='generate',
    help='Generate a new palette from a random base hue.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('-n', '--count', type=int, default=None, help='Number of colours (default: PALETTE_SIZE or 5)')
    parser.add_argument('-s', '--seed', type=int, default=None, help='Random seed for the base hue')


@command.run
def run(report: Report, args, settings) -> None:
    count = args.count if args.count is not None else settings.size
    seed = args.seed if args.seed is not None else settings.seed
    report.palette = generate_initial_palette(count, np.random.default_rng(seed))
