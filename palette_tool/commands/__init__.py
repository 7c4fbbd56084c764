"""CLI commands for palette-tool.

Each module here defines a module-level `command` (a core.types.Command)
and is picked up by palette_tool.registry.discover(). Modules whose name
starts with an underscore are skipped. The module docstring is what
`palette-tool help <command>` prints.
"""
