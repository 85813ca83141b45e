"""String helpers with NUL-terminated semantics where the operation calls for it.

Text arguments may be ``str`` or byte strings. A NUL character (``"\\0"`` or
byte 0) ends the logical string, as it does for C strings. Positions are
returned as indices, and "not found" is ``None``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Union

Text = Union[str, bytes, bytearray]
Char = Union[str, int]


def _terminated_length(s: Union[Text, list]) -> int:
    terminator = "\0" if isinstance(s, (str, list)) else 0
    try:
        return s.index(terminator)
    except ValueError:
        return len(s)


def _target(s: Text, c: Char) -> Union[str, int]:
    if isinstance(c, str) and len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if isinstance(s, str):
        return c if isinstance(c, str) else chr(c)
    return ord(c) & 0xFF if isinstance(c, str) else c & 0xFF


def _is_terminator(target: Union[str, int]) -> bool:
    return target == "\0" or target == 0


def _codes(s: Text) -> List[int]:
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    return list(s)


def _as_bytes(s: Union[str, bytes, bytearray]) -> bytes:
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    return data[:_terminated_length(data)]


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return _terminated_length(s)


def strchr(s: Optional[Text], c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator (the string length).
    """
    if s is None:
        return None
    target = _target(s, c)
    end = strlen(s)
    if _is_terminator(target):
        return end
    index = s.find(target, 0, end)
    return None if index < 0 else index


def strrchr(s: Text, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator (the string length).
    """
    target = _target(s, c)
    end = strlen(s)
    if _is_terminator(target):
        return end
    index = s.rfind(target, 0, end)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair.

    Comparison stops at the end of ``s1``; characters are compared as unsigned codes.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for c1, c2 in zip_longest(_codes(s1)[:n], _codes(s2)[:n], fillvalue=0):
        if c1 == 0 or c1 != c2:
            return c1 - c2
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Find ``needle`` inside the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = needle[:strlen(needle)]
    if not needle:
        return 0
    text = haystack[:strlen(haystack)]
    index = text.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(dst: bytearray, src: Union[str, bytes, bytearray], dstsize: int) -> int:
    """Copy ``src`` into ``dst`` holding at most ``dstsize`` bytes, NUL included.

    Returns the length of ``src``; a result of ``dstsize`` or more means truncation.
    """
    if dstsize < 0 or dstsize > len(dst):
        raise ValueError(f"dstsize {dstsize} does not fit a buffer of {len(dst)} bytes")
    data = _as_bytes(src)
    if dstsize:
        count = min(len(data), dstsize - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Union[str, bytes, bytearray], dstsize: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``dstsize`` bytes.

    Returns the length of the string it tried to build. When ``dstsize`` is not
    larger than the current length, nothing is written and ``len(src) + dstsize``
    is returned.
    """
    if dstsize < 0 or dstsize > len(dst):
        raise ValueError(f"dstsize {dstsize} does not fit a buffer of {len(dst)} bytes")
    dstlen = strlen(dst)
    data = _as_bytes(src)
    if dstsize <= dstlen:
        return len(data) + dstsize
    count = min(len(data), dstsize - 1 - dstlen)
    dst[dstlen : dstlen + count] = data[:count]
    dst[dstlen + count] = 0
    return len(data) + dstlen


def strdup(s: Optional[Text]) -> Optional[Text]:
    """Return an independent copy of ``s``, or None for None."""
    if s is None:
        return None
    if isinstance(s, bytearray):
        return bytearray(s)
    return s


def substr(s: Optional[Text], start: int, length: int) -> Optional[Text]:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = s[:strlen(s)]
    if start >= len(text):
        return text[:0]
    return text[start : start + length]


def strjoin(s1: Optional[Text], s2: Optional[Text]) -> Optional[Text]:
    """Concatenate two strings.

    A missing second string gives None; a missing first string gives the second.
    """
    if s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buffer: Union[list, bytearray], func: Callable[[int, object], object]) -> None:
    """Replace each item before the NUL terminator by ``func(index, item)``, in place."""
    for index in range(_terminated_length(buffer)):
        buffer[index] = func(index, buffer[index])