"""Immutable colour value with conversions between hex, RGB, HSL, HSV and CMYK.

The canonical form is red/green/blue as floats on the 0-255 scale plus an
alpha channel in [0, 1]. Every other representation is derived on demand.
Hue is always reported in degrees in [0, 360); saturation, lightness and
value are fractions in [0, 1].

CMYK is presentation only: it is never parsed back into a colour.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace

from palette_tool.core.errors import InvalidColorFormat

_HEX_RE = re.compile(r'^#?([0-9a-f]{3}|[0-9a-f]{6})$', re.IGNORECASE)


def round_half_up(x: float) -> int:
    """Round like a browser does: .5 always goes up (Python's round() is banker's)."""
    return int(math.floor(x + 0.5))


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def wrap_hue(h: float) -> float:
    """Reduce any angle into [0, 360)."""
    h = h % 360.0
    # -1e-17 % 360 == 360.0 in floating point
    return 0.0 if h >= 360.0 else h


def _is_number(x: object) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and math.isfinite(x)


def _check_fraction(name: str, x: object) -> float:
    if not _is_number(x) or not 0.0 <= x <= 1.0:
        raise InvalidColorFormat(f'{name} must be a number in [0, 1], got {x!r}')
    return float(x)


def _check_hue(x: object) -> float:
    if not _is_number(x):
        raise InvalidColorFormat(f'hue must be a finite number, got {x!r}')
    return wrap_hue(float(x))


def _fmt_alpha(a: float) -> str:
    return f'{round_half_up(a * 100) / 100:g}'


@dataclass(frozen=True)
class ColorValue:
    """A single colour. Build one with the from_* constructors, not directly."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'a'):
            if not _is_number(getattr(self, name)):
                raise InvalidColorFormat(f'channel {name} must be a finite number, got {getattr(self, name)!r}')

    # --- constructors ---

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> ColorValue:
        """Build from 0-255 channels and a 0-1 alpha."""
        for name, v in (('red', r), ('green', g), ('blue', b)):
            if not _is_number(v) or not 0.0 <= v <= 255.0:
                raise InvalidColorFormat(f'{name} must be a number in [0, 255], got {v!r}')
        return cls(float(r), float(g), float(b), _check_fraction('alpha', a))

    @classmethod
    def from_hex(cls, text: str) -> ColorValue:
        """Parse #rgb or #rrggbb (the # is optional). Hex colours are always opaque."""
        if not isinstance(text, str):
            raise InvalidColorFormat(f'hex colour must be a string, got {text!r}')
        m = _HEX_RE.match(text.strip())
        if not m:
            raise InvalidColorFormat(f'not a hex colour: {text!r}')
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        return cls(float(r), float(g), float(b))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> ColorValue:  # noqa: E741
        """Build from hue in degrees (any angle, wrapped) and s/l fractions."""
        return _from_hsl(_check_hue(h), _check_fraction('saturation', s), _check_fraction('lightness', l), a)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> ColorValue:
        """Build from hue in degrees (any angle, wrapped) and s/v fractions."""
        h = _check_hue(h)
        s = _check_fraction('saturation', s)
        v = _check_fraction('value', v)
        c = v * s
        r, g, b = _sector_rgb(h, c, v - c)
        return cls(r * 255.0, g * 255.0, b * 255.0, _check_fraction('alpha', a))

    # --- views ---

    def _unit(self) -> tuple[float, float, float]:
        return (
            clamp01(self.r / 255.0),
            clamp01(self.g / 255.0),
            clamp01(self.b / 255.0),
        )

    def to_rgb(self) -> tuple[int, int, int]:
        """Rounded 0-255 channels."""
        r, g, b = self._unit()
        return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))

    def to_hsl(self) -> tuple[float, float, float]:
        """(hue degrees, saturation, lightness)."""
        r, g, b = self._unit()
        mx, mn = max(r, g, b), min(r, g, b)
        chroma = mx - mn
        l = (mx + mn) / 2.0  # noqa: E741
        s = 0.0 if chroma == 0 else chroma / (1.0 - abs(2.0 * l - 1.0))
        return (_hue(r, g, b, mx, chroma), clamp01(s), clamp01(l))

    def to_hsv(self) -> tuple[float, float, float]:
        """(hue degrees, saturation, value)."""
        r, g, b = self._unit()
        mx = max(r, g, b)
        chroma = mx - min(r, g, b)
        s = 0.0 if mx == 0 else chroma / mx
        return (_hue(r, g, b, mx, chroma), clamp01(s), mx)

    def to_cmyk(self) -> tuple[float, float, float, float]:
        """Subtractive approximation; each component in [0, 1]."""
        r, g, b = self._unit()
        k = 1.0 - max(r, g, b)
        if k >= 1.0:
            return (0.0, 0.0, 0.0, 1.0)
        return (
            (1.0 - r - k) / (1.0 - k),
            (1.0 - g - k) / (1.0 - k),
            (1.0 - b - k) / (1.0 - k),
            k,
        )

    def to_hex_string(self) -> str:
        r, g, b = self.to_rgb()
        return f'#{r:02x}{g:02x}{b:02x}'

    def to_hex8_string(self) -> str:
        return f'{self.to_hex_string()}{round_half_up(clamp01(self.a) * 255):02x}'

    def to_rgb_string(self) -> str:
        r, g, b = self.to_rgb()
        if self.a >= 1.0:
            return f'rgb({r}, {g}, {b})'
        return f'rgba({r}, {g}, {b}, {_fmt_alpha(self.a)})'

    def to_hsl_string(self) -> str:
        h, s, l = self.to_hsl()  # noqa: E741
        return _polar_string('hsl', h, s, l, self.a)

    def to_hsv_string(self) -> str:
        h, s, v = self.to_hsv()
        return _polar_string('hsv', h, s, v, self.a)

    def to_cmyk_string(self) -> str:
        c, m, y, k = (round_half_up(x * 100) for x in self.to_cmyk())
        return f'cmyk({c}%, {m}%, {y}%, {k}%)'

    # --- transformations ---

    def spin(self, degrees: float) -> ColorValue:
        """Rotate the hue, keeping saturation and lightness."""
        h, s, l = self.to_hsl()  # noqa: E741
        return _from_hsl(_check_hue(h + degrees), s, l, self.a)

    def lighten(self, percent: float = 10) -> ColorValue:
        """Add percent (0-100 scale) to lightness and clamp. Negative darkens."""
        h, s, l = self.to_hsl()  # noqa: E741
        return _from_hsl(h, s, clamp01(l + percent / 100.0), self.a)

    def clamp(self) -> ColorValue:
        r, g, b = self._unit()
        return ColorValue(r * 255.0, g * 255.0, b * 255.0, clamp01(self.a))

    def clone(self) -> ColorValue:
        return replace(self)

    def __str__(self) -> str:
        return self.to_hex_string()


def _from_hsl(h: float, s: float, l: float, a: float) -> ColorValue:  # noqa: E741
    l = clamp01(l)  # noqa: E741
    c = (1.0 - abs(2.0 * l - 1.0)) * clamp01(s)
    r, g, b = _sector_rgb(h, c, l - c / 2.0)
    return ColorValue(r * 255.0, g * 255.0, b * 255.0, _check_fraction('alpha', a))


def _hue(r: float, g: float, b: float, mx: float, chroma: float) -> float:
    """Hue in degrees from the max channel and chroma (0 for greys)."""
    if chroma == 0:
        return 0.0
    if mx == r:
        sector = ((g - b) / chroma) % 6.0
    elif mx == g:
        sector = (b - r) / chroma + 2.0
    else:
        sector = (r - g) / chroma + 4.0
    return wrap_hue(sector * 60.0)


def _sector_rgb(h: float, c: float, m: float) -> tuple[float, float, float]:
    """Unit RGB from hue degrees, chroma and the lightness/value offset m."""
    hp = h / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[int(hp) % 6]
    return (clamp01(r + m), clamp01(g + m), clamp01(b + m))


def _polar_string(prefix: str, h: float, x: float, y: float, a: float) -> str:
    hue = round_half_up(h) % 360
    body = f'{hue}, {round_half_up(x * 100)}%, {round_half_up(y * 100)}%'
    if a >= 1.0:
        return f'{prefix}({body})'
    return f'{prefix}a({body}, {_fmt_alpha(a)})'
