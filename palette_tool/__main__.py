"""palette-tool — Generate, adjust, name and shade colour palettes.

Usage: palette-tool <command> [args] [options]

Commands are auto-discovered from palette_tool/commands/.
Each command module's docstring is its documentation.
Run `palette-tool help <command>` for full module docs.

Palettes move between commands as exported JSON documents (an array of
{hex, name, rgb, hsl, hsv, cmyk} objects). Use --json to print one, -o to
write one, and - as a palette argument to read one from stdin.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys
from pathlib import Path

from palette_tool import registry
from palette_tool.core.env import load_env, load_settings
from palette_tool.core.errors import PaletteError
from palette_tool.core.report import export_palette, format_json, format_text
from palette_tool.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'palette_tool.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  palette-tool generate --seed 42\n'
        '  palette-tool generate --json -o palette.json\n'
        '  palette-tool adjust palette.json --hue 30 --saturation -10\n'
        '  palette-tool generate --json | palette-tool adjust - --brightness 10 --ticks 3\n'
        '  palette-tool shades "#808080"\n'
        '  palette-tool shades palette.json --index 2 --steps 7\n'
        '  palette-tool convert "hsl(200, 70%, 50%)"\n'
        '  palette-tool replace palette.json 0 "#ff8800" -o palette.json\n'
        '  palette-tool rename palette.json 0 "Brand Orange" -o palette.json\n'
        '  palette-tool swatch palette.json palette.png --shades\n'
        '  palette-tool help adjust\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PALETTE_SIZE         colours per generated palette (default 5)\n'
        '  PALETTE_SEED         fixed seed for the random base hue\n'
        '  PALETTE_SHADE_STEPS  shade ramp length (default 5)\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-tool',
        description='Generate, adjust, name and shade colour palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.add_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out', metavar='PATH', help='Also write the JSON result to PATH')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: palette-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _write_out(report: Report, path: str) -> None:
    if report.palette is not None:
        export_palette(report.palette, path)
    else:
        Path(path).write_text(format_json(report) + '\n', encoding='utf-8')
    print(f'palette-tool: wrote {path}', file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'palette-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        settings = load_settings()
        report = Report(command=args.command)
        registry.get(args.command).execute(report, args, settings)
        if args.out:
            _write_out(report, args.out)
    except (PaletteError, ValueError, IndexError, OSError) as e:
        print(f'palette-tool: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
