"""Character classification and case conversion for ASCII characters.

Every function accepts either a one-character string or an integer
character code. Classification functions return a bool; case conversion
returns a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _like(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 0o177


def is_print(c: Char) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 0o40 <= _code(c) <= 0o176


def is_space(c: Char) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + ord("a") - ord("A"))
    return c


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code + ord("A") - ord("a"))
    return c