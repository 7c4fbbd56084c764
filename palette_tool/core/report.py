"""Report builder — text and JSON output, plus reading exported palettes back.

The JSON export is an array of entries, each with hex, name, rgb, hsl, hsv
and cmyk, indented by two spaces and written as UTF-8.
"""

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from palette_tool.core.engine import make_entry
from palette_tool.core.errors import InvalidColorFormat, InvalidPaletteDocument
from palette_tool.core.types import PaletteEntry, Report


def palette_to_json(palette: Sequence[PaletteEntry]) -> str:
    """Serialise a palette in the export format."""
    return json.dumps([entry.to_dict() for entry in palette], indent=2, ensure_ascii=False)


def export_palette(palette: Sequence[PaletteEntry], path: str | Path) -> Path:
    """Write the export document to path and return it."""
    path = Path(path)
    path.write_text(palette_to_json(palette) + '\n', encoding='utf-8')
    return path


def parse_palette_json(text: str) -> list[PaletteEntry]:
    """Read an export document back into entries.

    Only hex and name are trusted; the other formats are recomputed from hex
    so they always agree with it.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidPaletteDocument(f'not valid JSON: {e}') from e
    if not isinstance(data, list):
        raise InvalidPaletteDocument('palette document must be a JSON array')

    palette = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or 'hex' not in item:
            raise InvalidPaletteDocument(f'entry {i} must be an object with a "hex" field')
        name = item.get('name')
        if name is not None and not isinstance(name, str):
            raise InvalidPaletteDocument(f'entry {i}: name must be a string')
        try:
            palette.append(make_entry(item['hex'], name=name))
        except InvalidColorFormat as e:
            raise InvalidPaletteDocument(f'entry {i}: {e}') from e
    return palette


def load_palette(source: str | Path) -> list[PaletteEntry]:
    """Load an exported palette from a file path, or stdin when source is '-'."""
    if str(source) == '-':
        return parse_palette_json(sys.stdin.read())
    path = Path(source)
    if not path.is_file():
        raise InvalidPaletteDocument(f'palette file not found: {source}')
    return parse_palette_json(path.read_text(encoding='utf-8'))


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.palette is not None:
        lines.append(f'palette-tool {report.command}: {len(report.palette)} colours')
        lines.append('')
        for i, entry in enumerate(report.palette):
            lines.append(f'── {i} {entry.name}  {entry.hex}')
            lines.append(f'  {entry.rgb}  {entry.hsl}  {entry.hsv}  {entry.cmyk}')
        lines.append('')

    if report.shades:
        header = f'shades of {report.base}' if report.base else 'shades'
        lines.append(f'{header} (darkest → lightest):')
        for shade in report.shades:
            marker = '  ← base' if shade == report.base else ''
            lines.append(f'  {shade}{marker}')
        lines.append('')

    for key, value in report.details.items():
        lines.append(f'{key:<6} {value}')

    for note in report.notes:
        lines.append(note)
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON: the export array when there is a palette."""
    if report.palette is not None:
        return palette_to_json(report.palette)
    obj: dict[str, Any] = {}
    if report.shades:
        obj['base'] = report.base
        obj['shades'] = report.shades
    obj.update({k: v for k, v in report.details.items() if k not in obj})
    return json.dumps(obj, indent=2, ensure_ascii=False)

