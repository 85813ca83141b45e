"""Conversions between integers and their decimal text."""

from __future__ import annotations

from itertools import takewhile

from fractol.ft.ctype import is_digit, is_space


def atoi(text: str) -> int:
    """Parse a decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up to
    the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: is_digit(ch), rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


__all__ = ["atoi", "itoa", "is_space"]