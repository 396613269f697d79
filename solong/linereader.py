"""Reading a stream line by line, stopping at the first blank line."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


class LineReader(Generic[AnyStr]):
    """Return the lines of a stream one at a time.

    Lines come back without their trailing newline. An empty line or the
    end of the stream yields None; reading may continue past an empty
    line with the next call.
    """

    def __init__(self, stream: IO[AnyStr]) -> None:
        self.stream = stream

    def next_line(self) -> AnyStr | None:
        """Return the next line without its newline, or None."""
        line = self.stream.readline()
        newline = "\n" if isinstance(line, str) else b"\n"
        if line.endswith(newline):
            line = line[:-1]
        return line or None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Return the lines of ``stream`` up to the first blank line or the end."""
    return list(LineReader(stream))