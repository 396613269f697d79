"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from solong.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer.

    Raises OverflowError for a value outside that range.
    """
    _target(stream).write(itoa(n))