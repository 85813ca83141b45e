"""Numeric helpers: bounded integer parsing, decimal parsing, interpolation and sorting."""

from __future__ import annotations

import re
from bisect import bisect_right
from itertools import takewhile
from typing import List, MutableSequence, Sequence

from fractol.ft.ctype import is_digit

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(.*)", re.DOTALL)
_FRACTION = re.compile(r"([0-9]*)(.*)", re.DOTALL)


def abs_int(a: int) -> int:
    """Return the absolute value of ``a``."""
    return -a if a < 0 else a


def atoi_signal(text: str) -> int:
    """Parse a 32-bit signed decimal integer.

    Leading spaces (only the space character) are skipped, one optional sign is
    read, then digits up to the first non-digit. Raises OverflowError when the
    value does not fit a 32-bit signed integer.
    """
    rest = text.lstrip(" ")
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest)).lstrip("0")
    limit = -INT_MIN if negative else INT_MAX
    if len(digits) > len(str(limit)) or (digits and int(digits) > limit):
        bound = INT_MIN if negative else INT_MAX
        raise OverflowError(f"{text!r} is out of range; nearest value is {bound}")
    value = int(digits) if digits else 0
    return -value if negative else value


def atod_signal(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    Leading whitespace and one optional sign are accepted. Text made only of
    an integer part yields its unsigned magnitude. After the integer part only
    the end of the text or a ``.`` may follow; the fractional digits must be
    followed by whitespace or the end of the text. Anything else raises
    ValueError.
    """
    match = _DECIMAL.fullmatch(text)
    assert match is not None
    sign_text, int_digits, rest = match.groups()
    result = 0.0
    for digit in int_digits:
        result = result * 10 + int(digit)
    if not rest:
        return result
    if rest[0] != ".":
        raise ValueError(f"malformed number: {text!r}")
    fraction_match = _FRACTION.fullmatch(rest[1:])
    assert fraction_match is not None
    frac_digits, tail = fraction_match.groups()
    fraction = 0.0
    place = 0.1
    for digit in frac_digits:
        fraction += int(digit) * place
        place *= 0.1
    if tail and tail[0] not in " \t\n\v\f\r":
        raise ValueError(f"malformed number: {text!r}")
    sign = -1 if sign_text == "-" else 1
    return sign * (result + fraction)


def lerp(target: float, old: Sequence[float], new: Sequence[float]) -> float:
    """Map ``target`` from the range ``old`` linearly onto the range ``new``."""
    old_start, old_end = old
    new_start, new_end = new
    return (new_end - new_start) * ((target - old_start) / (old_end - old_start)) + new_start


def max_int(a: int, b: int) -> int:
    """Return the larger of two integers."""
    return b if b > a else a


def min_int(a: int, b: int) -> int:
    """Return the smaller of two integers."""
    return b if b < a else a


def mod(a: int, b: int) -> int:
    """Return ``a`` modulo ``b`` with the sign of ``b``."""
    return a % b


def insertion_sort(items: MutableSequence) -> None:
    """Sort ``items`` in ascending order, in place and stably."""
    for end in range(1, len(items)):
        current = items[end]
        position = bisect_right(items, current, 0, end)
        if position < end:
            items[position + 1 : end + 1] = items[position:end]
            items[position] = current


def _partition(items: MutableSequence, low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for current in range(low, high):
        if items[current] < pivot:
            items[store], items[current] = items[current], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quicksort(items: MutableSequence, low: int, high: int) -> None:
    """Sort ``items[low:high + 1]`` in place, using the last element as pivot."""
    pending: List[tuple] = [(low, high)]
    while pending:
        start, stop = pending.pop()
        if start < stop:
            pivot = _partition(items, start, stop)
            pending.append((start, pivot - 1))
            pending.append((pivot + 1, stop))