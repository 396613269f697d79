"""Reading images in the XPM format.

Pixels are 32-bit values of the form 0xAARRGGBB. The alpha byte holds
transparency, not opacity: a colour defined as ``None`` becomes
``TRANSPARENT`` (0xFF000000) and every other colour has an alpha of 0.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from solong.chars import atoi
from solong.colors import lookup_color

TRANSPARENT = 0xFF000000

_NAME_BUFFER = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_HEX_NUMBER = re.compile(r"[ \t\n\r\v\f]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised for XPM data that cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` is a 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Return the first index of ``token`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (begin := _find_unquoted(text, opener)) != -1:
        end = text.find(closer, begin + len(opener))
        stop = len(text) if end < 0 else end + len(closer)
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with
    the newline that ends them. The length of the text is kept.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the colour value of an XPM colour specification.

    ``#RRGGBB`` is read as a hexadecimal number. Otherwise ``name`` and,
    when given, the following word ``end`` are joined by a space and
    looked up among the named colours, ignoring case. An unknown name
    gives 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return _to_int32(-value if sign == "-" else value)
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _parse(lines: Iterator[str]) -> XpmImage:
    def next_line(what: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    replace = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour in definition {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour in definition {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if replace:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is shorter than {width} pixels")
        rows.append(
            tuple(
                _pixel(colors.get(line[start:start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def _pixel(color: int) -> int:
    if color == -1:
        return TRANSPARENT
    return color & 0xFFFFFFFF


def xpm_from_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM array, one per line."""
    return _parse(iter(lines))


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    cleaned = strip_comments(text)
    return _parse(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as stream:
        return parse_xpm(stream.read())