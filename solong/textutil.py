"""String helpers with the conventions of the game's C string library.

A quirk carries through several of these helpers. ``strlen`` treats a
newline as the end of the text, just as it treats a NUL character. The
helpers built on it, ``substr``, ``strtrim``, ``strlcpy`` and
``strlcat``, therefore stop at the first newline too.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TERMINATORS = ("\0", "\n")


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL or newline."""
    return next(
        (index for index, ch in enumerate(text) if ch in _TERMINATORS),
        len(text),
    )


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``len(text)``.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``len(text)``.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` within the first ``length`` characters.

    An empty needle is found at index 0. A match must lie wholly inside
    the first ``length`` characters.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters of two strings.

    Returns the difference of the first pair of unequal character codes;
    the end of a string counts as code 0. Returns 0 when they agree.
    """
    _check_non_negative(length=length)
    for index in range(length):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    Only the part before the first newline is used; a start beyond it
    gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    visible = text[: strlen(text)]
    if start > len(visible):
        return ""
    return visible[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined."""
    return first + second


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters in ``charset`` from both ends of ``text``.

    Leading characters are removed first. The rest is then cut at its
    first newline and trailing characters are removed. With no charset,
    the text is returned unchanged.
    """
    if charset is None:
        return text
    rest = text.lstrip(charset)
    return rest[: strlen(rest)].rstrip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each item of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the length of ``src`` up to its first
    newline, which is the size the copy wanted.
    """
    _check_non_negative(size=size)
    if size == 0:
        return "", strlen(src)
    return src[: size - 1], strlen(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters.

    Both strings are measured up to their first newline. When the buffer
    is no longer than ``dst``, ``dst`` is returned unchanged with the
    length of ``src`` plus ``size``. Otherwise returns the joined text
    that fits and the length the full result would have.
    """
    _check_non_negative(size=size)
    base = dst[: strlen(dst)]
    if size <= len(base):
        return dst, strlen(src) + size
    appended = src[: size - 1 - len(base)]
    result = base + appended
    return result, len(result) + strlen(src[len(appended):])