"""Helpers for ASCII characters, byte buffers, stream output, linked lists, line reading and X11 colours."""

__version__ = "0.1.0"