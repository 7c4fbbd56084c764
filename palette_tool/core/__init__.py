"""palette_tool.core — Foundation layer.

Contains the colour model, colour string parser, palette engine, types,
settings and export formatting.
This module has NO dependencies on palette_tool.commands or palette_tool.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
