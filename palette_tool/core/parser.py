"""Regex-based parser for CSS-like colour strings.

Accepts:
  #rgb  #rrggbb   (the # is optional, always opaque)
  rgb(255, 0, 0)    rgba(255, 0, 0, 0.5)    rgb(100%, 0%, 0%)
  hsl(0, 100%, 50%) hsla(0deg, 100%, 50%, 0.5)
  hsv(0, 100%, 100%) hsva(...)

Components are separated either by commas or by whitespace, with an optional
`/ alpha` tail. Empty comma fields are rejected.
Anything else raises InvalidColorFormat — never silently black.
"""

import re

from palette_tool.core.colour import ColorValue
from palette_tool.core.errors import InvalidColorFormat

_NUM = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?'

_FUNC_RE = re.compile(
    r'^(rgba?|hsla?|hsva?)\(\s*(.*?)\s*\)$',
    re.IGNORECASE,
)
_ARG_RE = re.compile(rf'^({_NUM})(%|deg)?$', re.IGNORECASE)


def parse_color(text: str | ColorValue) -> ColorValue:
    """Parse any supported colour string. A ColorValue is returned unchanged."""
    if isinstance(text, ColorValue):
        return text
    if not isinstance(text, str):
        raise InvalidColorFormat(f'colour must be a string, got {text!r}')
    stripped = text.strip()
    if not stripped:
        raise InvalidColorFormat('empty colour string')

    m = _FUNC_RE.match(stripped)
    if not m:
        return ColorValue.from_hex(stripped)

    func = m.group(1).lower()
    args = _split_args(m.group(2), text)
    if len(args) not in (3, 4):
        raise InvalidColorFormat(f'{func}() takes 3 or 4 arguments: {text!r}')
    # rgb(1, 2, 3, 0.5) is tolerated like rgba(); only the arity matters
    alpha = _alpha(args[3], text) if len(args) == 4 else 1.0

    if func.startswith('rgb'):
        r, g, b = (_channel(a, text) for a in args[:3])
        return ColorValue.from_rgb(r, g, b, alpha)

    hue = _hue(args[0], text)
    x = _fraction(args[1], text)
    y = _fraction(args[2], text)
    if func.startswith('hsl'):
        return ColorValue.from_hsl(hue, x, y, alpha)
    return ColorValue.from_hsv(hue, x, y, alpha)


def _split_args(inner: str, text: str) -> list[tuple[float, str]]:
    """Split '1, 2, 3' / '1 2 3 / 0.5' into (number, unit) pairs."""
    body, slash, alpha = inner.partition('/')
    if ',' in body:
        parts = [p.strip() for p in body.split(',')]
    else:
        parts = body.split()
    if slash:
        parts.append(alpha.strip())
    out = []
    for part in parts:
        m = _ARG_RE.match(part)
        if not m:
            raise InvalidColorFormat(f'bad component {part!r} in {text!r}')
        out.append((float(m.group(1)), (m.group(2) or '').lower()))
    return out


def _channel(arg: tuple[float, str], text: str) -> float:
    value, unit = arg
    if unit == '%':
        value = value * 255.0 / 100.0
    elif unit:
        raise InvalidColorFormat(f'unexpected unit {unit!r} in {text!r}')
    return value


def _hue(arg: tuple[float, str], text: str) -> float:
    value, unit = arg
    if unit not in ('', 'deg'):
        raise InvalidColorFormat(f'hue must be degrees in {text!r}')
    return value


def _fraction(arg: tuple[float, str], text: str) -> float:
    """'50%' -> 0.5. A bare number <= 1 is already a fraction, otherwise a percentage."""
    value, unit = arg
    if unit == '%':
        return value / 100.0
    if unit:
        raise InvalidColorFormat(f'unexpected unit {unit!r} in {text!r}')
    return value if value <= 1.0 else value / 100.0


def _alpha(arg: tuple[float, str], text: str) -> float:
    value, unit = arg
    if unit == '%':
        return value / 100.0
    if unit:
        raise InvalidColorFormat(f'unexpected unit {unit!r} in {text!r}')
    return value
