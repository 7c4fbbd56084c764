"""Command discovery and registration.

Imports every module in palette_tool/commands/ and registers the `command`
object it defines. A command must have a run function, a unique name, and
must not shadow the built-in `help` subcommand.
"""

import importlib
import pkgutil

from palette_tool.core.types import Command

RESERVED_NAMES = frozenset({'help'})

_registry: dict[str, Command] = {}


def register(cmd: Command) -> Command:
    """Add a command to the registry, rejecting incomplete or clashing ones."""
    if not cmd.runnable:
        raise RuntimeError(f'Command {cmd.name!r} has no run function')
    if cmd.name in RESERVED_NAMES:
        raise ValueError(f'Command name {cmd.name!r} is reserved')
    existing = _registry.get(cmd.name)
    if existing is not None and existing is not cmd:
        raise ValueError(f'Command {cmd.name!r} is defined twice')
    _registry[cmd.name] = cmd
    return cmd


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import palette_tool.commands as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'{pkg.__name__}.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            register(cmd)

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
