"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Any, AnyStr

DEFAULT_BUFFER_SIZE = 64


class LineReader:
    """Reads lines from streams, keeping each stream's unread remainder separately."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[Any, Any] = {}

    def read_line(self, stream: IO[AnyStr]) -> AnyStr | None:
        """Return the next line of ``stream``, newline included, or None at the end.

        The last line of a stream without a final newline is returned as is.
        Text and binary streams are both accepted.
        """
        buf = self._pending.pop(stream, None)
        at_eof = False
        while buf is None or self._newline(buf) not in buf:
            chunk = stream.read(self.buffer_size)
            if chunk is None:
                chunk = b"" if isinstance(buf, bytes) else ""
            if buf is None:
                buf = chunk[:0]
            if not chunk:
                at_eof = True
                break
            buf += chunk
        cut = buf.find(self._newline(buf))
        if cut >= 0:
            line = buf[:cut + 1]
            self._pending[stream] = buf[cut + 1:]
        else:
            line = buf
        if at_eof and not line:
            return None
        return line

    @staticmethod
    def _newline(buf: AnyStr) -> AnyStr:
        return b"\n" if isinstance(buf, (bytes, bytearray)) else "\n"


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order, newlines included."""
    reader = LineReader()
    while (line := reader.read_line(stream)) is not None:
        yield line