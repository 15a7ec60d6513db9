"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

from typing import TextIO


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def put_char(c: int | str, stream: TextIO) -> None:
    """Write the single character ``c`` (a character or its code) to ``stream``."""
    stream.write(_char(c))


def put_str(text: str | None, stream: TextIO) -> None:
    """Write ``text`` to ``stream``; a missing text writes nothing."""
    if text is not None:
        stream.write(text)


def put_endl(text: str | None, stream: TextIO) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is not None:
        stream.write(text)
        stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    stream.write(str(n))