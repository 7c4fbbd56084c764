"""Render a palette as a PNG swatch strip.

One square column per entry. With shade_steps > 0 each column also gets its
shade ramp underneath, darkest at the top, as bands a quarter of the swatch
tall.
"""

from collections.abc import Sequence

import numpy as np
from PIL import Image

from palette_tool.core.colour import ColorValue
from palette_tool.core.engine import derive_shades
from palette_tool.core.errors import EmptyPalette
from palette_tool.core.types import PaletteEntry


def _rgb(hex_value: str) -> tuple[int, int, int]:
    return ColorValue.from_hex(hex_value).to_rgb()


def render_swatch(palette: Sequence[PaletteEntry], size: int = 120, shade_steps: int = 0) -> Image.Image:
    if not palette:
        raise EmptyPalette('cannot render an empty palette')
    if size < 4:
        raise ValueError(f'swatch size must be at least 4 pixels, got {size}')

    band = size // 4
    width = size * len(palette)
    height = size + band * shade_steps
    arr = np.zeros((height, width, 3), dtype=np.uint8)

    for i, entry in enumerate(palette):
        x1, x2 = i * size, (i + 1) * size
        arr[:size, x1:x2] = _rgb(entry.hex)
        if shade_steps:
            for j, shade in enumerate(derive_shades(entry.hex, shade_steps)):
                y1 = size + j * band
                arr[y1 : y1 + band, x1:x2] = _rgb(shade)

    return Image.fromarray(arr)
