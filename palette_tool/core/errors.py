"""Exception types raised by the colour model and palette engine.

All of them derive from PaletteError so a caller can catch the whole family,
and from ValueError so plain `except ValueError` keeps working.
"""


class PaletteError(Exception):
    """Base class for palette-tool errors."""


class InvalidColorFormat(PaletteError, ValueError):
    """A hex/RGB/HSL/HSV value could not be parsed or is out of range."""


class OutOfRangeAdjustment(PaletteError, ValueError):
    """An adjustment component lies outside its documented bounds."""


class EmptyPalette(PaletteError, ValueError):
    """An operation that needs at least one entry got none."""


class InvalidPaletteDocument(PaletteError, ValueError):
    """An exported palette document could not be read back."""
