"""Stateless palette algorithms: generation, naming, bulk adjustment, shade ramps.

Every function takes the current palette (or a colour) and returns new
values and keeps no state between calls. The engine never logs or touches
files; the caller owns the palette.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from palette_tool.core.colour import ColorValue, clamp01, wrap_hue
from palette_tool.core.errors import EmptyPalette
from palette_tool.core.parser import parse_color
from palette_tool.core.types import AdjustmentVector, PaletteEntry

DEFAULT_COUNT = 5
DEFAULT_STEPS = 5

BASE_SATURATION = 0.7
BASE_LIGHTNESS = 0.5
HUE_STEP = 30

# Lightness points (0-100 scale) between neighbouring shades.
SHADE_STEP = 20

# 'Pink' is never selected: hue % 360 / 60 only reaches indices 0-5.
HUE_NAMES = ('Red', 'Orange', 'Yellow', 'Green', 'Blue', 'Purple', 'Pink')


def generate_color_name(color: ColorValue | str) -> str:
    """Describe a colour as e.g. 'Light Muted Blue' or 'Vibrant Red'."""
    return name_for_hsl(*parse_color(color).to_hsl())


def name_for_hsl(h: float, s: float, l: float) -> str:  # noqa: E741
    """Heuristic name from hue degrees and s/l fractions.

    Six 60-degree hue sectors starting at Red (0), then a saturation word
    split at 0.5 and an optional Light (> 0.7) / Dark (< 0.3) prefix.
    """
    hue_name = HUE_NAMES[int((h % 360) // 60)]
    saturation = 'Vibrant' if s > 0.5 else 'Muted'
    if l > 0.7:
        lightness = 'Light'
    elif l < 0.3:
        lightness = 'Dark'
    else:
        lightness = ''
    return f'{lightness} {saturation} {hue_name}'.strip()


def make_entry(color: ColorValue | str, name: str | None = None) -> PaletteEntry:
    """Build a palette entry with every derived format computed from one colour.

    Entries are opaque: any alpha is dropped so the cached strings always
    describe the six-digit hex.
    """
    color = replace(parse_color(color), a=1.0)
    return PaletteEntry(
        hex=color.to_hex_string(),
        name=generate_color_name(color) if name is None else name,
        rgb=color.to_rgb_string(),
        hsl=color.to_hsl_string(),
        hsv=color.to_hsv_string(),
        cmyk=color.to_cmyk_string(),
    )


def generate_initial_palette(
    count: int = DEFAULT_COUNT,
    rng: np.random.Generator | None = None,
) -> list[PaletteEntry]:
    """Draw one random base hue and step it by a fixed 30 degrees per slot.

    The step does not depend on count, so five entries span 120 degrees
    rather than the whole wheel.
    """
    if count < 1:
        raise EmptyPalette(f'palette needs at least one entry, got count={count}')
    if rng is None:
        rng = np.random.default_rng()
    base = ColorValue.from_hsl(float(rng.uniform(0.0, 360.0)), BASE_SATURATION, BASE_LIGHTNESS)
    return [make_entry(base.spin(i * HUE_STEP)) for i in range(count)]


def adjust_color(hex_value: str, adjustment: AdjustmentVector) -> ColorValue:
    """Apply one adjustment to a stored hex: hue wraps, saturation/lightness clamp."""
    h, s, l = ColorValue.from_hex(hex_value).to_hsl()  # noqa: E741
    return ColorValue.from_hsl(
        wrap_hue(h + adjustment.hue),
        clamp01(s + adjustment.saturation / 100),
        clamp01(l + adjustment.brightness / 100),
    )


def apply_adjustment(palette: Sequence[PaletteEntry], adjustment: AdjustmentVector) -> list[PaletteEntry]:
    """Return a new palette with the adjustment applied to each stored hex.

    Adjustments compound: calling this again with the same vector moves the
    colours again, the way each tick of a dragged slider does. Names are
    regenerated.
    """
    return [make_entry(adjust_color(entry.hex, adjustment)) for entry in palette]


def shade_offsets(steps: int = DEFAULT_STEPS) -> list[float]:
    """Lightness offsets (0-100 scale) used by derive_shades."""
    if steps < 1:
        raise ValueError(f'steps must be at least 1, got {steps}')
    half = steps // 2
    return [float((i - half) * SHADE_STEP) for i in range(steps)]


def derive_shades(color: ColorValue | str, steps: int = DEFAULT_STEPS) -> list[str]:
    """Lightness ramp around a colour, darkest first.

    Neighbouring shades are SHADE_STEP (20) lightness points apart, so five
    steps give -40, -20, 0, +20, +40. Editors that scale the step by 50
    instead (lighten(factor * 50) with factor = (i - 2) * 0.2) produce a
    narrower -20..+20 ramp; that narrower ramp is deliberately not used here.
    Offsets past black or white clamp, so very dark or very light bases repeat
    at the ends.
    """
    base = parse_color(color)
    return [base.lighten(offset).to_hex_string() for offset in shade_offsets(steps)]


def shades_for_entry(palette: Sequence[PaletteEntry], index: int, steps: int = DEFAULT_STEPS) -> list[str]:
    _check_slot(palette, index)
    return derive_shades(palette[index].hex, steps)


def replace_color(palette: Sequence[PaletteEntry], index: int, color: ColorValue | str) -> list[PaletteEntry]:
    """Swap one slot's colour; formats and name are rebuilt for that slot only."""
    _check_slot(palette, index)
    entry = make_entry(color)
    return [entry if i == index else e for i, e in enumerate(palette)]


def rename_entry(palette: Sequence[PaletteEntry], index: int, name: str) -> list[PaletteEntry]:
    _check_slot(palette, index)
    renamed = replace(palette[index], name=name)
    return [renamed if i == index else e for i, e in enumerate(palette)]


def _check_slot(palette: Sequence[PaletteEntry], index: int) -> None:
    if not palette:
        raise EmptyPalette('palette is empty')
    if not 0 <= index < len(palette):
        raise IndexError(f'palette index {index} out of range (0-{len(palette) - 1})')
