"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT_MASK) - 2**31


def uns_itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(n & _UINT_MASK)


def hex_itoa(n: int, specifier: str) -> str:
    """Return ``n`` as 32-bit unsigned hexadecimal; ``'X'`` gives upper-case digits."""
    if specifier not in ("x", "X"):
        raise ValueError(f"specifier must be 'x' or 'X', got {specifier!r}")
    return format(n & _UINT_MASK, specifier)


def ptoa(address: Optional[int]) -> str:
    """Return ``address`` as ``0x`` followed by lower-case hex, or ``(nil)`` for none."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _POINTER_MASK, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return "%" + spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return uns_itoa(value)
    if spec in "xX":
        return hex_itoa(value, spec)
    if value is None or isinstance(value, int):
        return ptoa(value)
    return ptoa(id(value))


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    Unknown conversions are kept as written. A ``%`` at the very end of the
    format raises ValueError; running out of arguments raises TypeError. For
    ``%p`` an object that is not an integer is shown by its identity.
    """
    pieces = []
    remaining = iter(args)
    start = 0
    while (cursor := fmt.find("%", start)) >= 0:
        pieces.append(fmt[start:cursor])
        if cursor + 1 >= len(fmt):
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(fmt[cursor + 1], remaining))
        start = cursor + 2
    pieces.append(fmt[start:])
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the number of bytes written."""
    data = format_printf(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        view = view[os.write(1, view):]
    return len(data)