"""Command lookup, here-document input, line reading and text, byte and list helpers."""

__version__ = "0.1.0"