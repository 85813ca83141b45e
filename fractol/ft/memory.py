"""Byte-buffer helpers: fill, allocate, copy, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadBuffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: ReadBuffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(f"length {length} exceeds buffer of size {len(buffer)}")


def mem_set(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    mem_set(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_cpy(
    dst: Optional[Buffer], src: Optional[ReadBuffer], length: int
) -> Optional[Buffer]:
    """Copy the first ``length`` bytes of ``src`` into ``dst`` and return ``dst``.

    When both buffers are None, nothing is copied and None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both dst and src must be buffers")
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(buffer: Buffer, dst: int, src: int, length: int) -> Buffer:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, buffer)
    if max(dst, src) + length > len(buffer):
        raise IndexError("move reaches past the end of the buffer")
    buffer[dst : dst + length] = bytes(buffer[src : src + length])
    return buffer


def mem_chr(data: ReadBuffer, value: int, length: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` in the first ``length`` bytes, or None."""
    _check_length(length, data)
    target = value & 0xFF
    index = bytes(data[:length]).find(target)
    return None if index < 0 else index


def mem_cmp(first: ReadBuffer, second: ReadBuffer, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0