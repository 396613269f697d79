"""Character classification and integer/text conversion."""

from __future__ import annotations

import operator
import re

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_ATOI_PATTERN = re.compile(r"[ \n\t\r\v\f]*([+-]?)([0-9]*)")


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a 32-bit two's complement integer."""
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is.

    A string comes back as a string, an integer as an integer.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is.

    A string comes back as a string, an integer as an integer.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return _wrap_int(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)