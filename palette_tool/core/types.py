"""Shared types for palette-tool: PaletteEntry, AdjustmentVector, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from palette_tool.core.errors import OutOfRangeAdjustment

HUE_LIMIT = 180
PERCENT_LIMIT = 100

EXPORT_FIELDS = ('hex', 'name', 'rgb', 'hsl', 'hsv', 'cmyk')


@dataclass(frozen=True)
class PaletteEntry:
    """One named palette slot with its alternate formats cached at creation.

    The four derived strings always describe `hex`; build entries with
    engine.make_entry() rather than by hand.
    """

    hex: str
    name: str
    rgb: str
    hsl: str
    hsv: str
    cmyk: str

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in EXPORT_FIELDS}


@dataclass(frozen=True)
class AdjustmentVector:
    """Collective palette nudge: hue in degrees, saturation/brightness in percent."""

    hue: float = 0
    saturation: float = 0
    brightness: float = 0

    def __post_init__(self) -> None:
        _check_bound('hue', self.hue, HUE_LIMIT)
        _check_bound('saturation', self.saturation, PERCENT_LIMIT)
        _check_bound('brightness', self.brightness, PERCENT_LIMIT)

    @property
    def is_zero(self) -> bool:
        return self.hue == 0 and self.saturation == 0 and self.brightness == 0


def _check_bound(name: str, value: Any, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
        raise OutOfRangeAdjustment(f'{name} must be a number, got {value!r}')
    if not -limit <= value <= limit:
        raise OutOfRangeAdjustment(f'{name} must be in [-{limit}, {limit}], got {value}')


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='shades', help='Derive a shade ramp')

        @command.arguments
        def add_arguments(parser):
            ...

        @command.run
        def run(report, args, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    @property
    def runnable(self) -> bool:
        return self._run_fn is not None

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any, settings: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args, settings)


@dataclass
class Report:
    """Accumulates a command's results for text/JSON output."""

    command: str = ''
    palette: list[PaletteEntry] | None = None
    shades: list[str] = field(default_factory=list)
    base: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)

    def note(self, message: str) -> None:
        """Add a one-line remark shown under the text output."""
        self.notes.append(message)
