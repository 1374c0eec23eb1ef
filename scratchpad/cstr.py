"""Byte-buffer and C-string helpers.

Strings follow C conventions. Content ends at the first NUL, whether it is a
``"\\0"`` character or a ``0`` byte. Buffers are any objects that support the
buffer protocol. Writable operations change them in place.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]
Text = Union[str, bytes, bytearray, memoryview]

__all__ = [
    "atoi",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
    "strcat",
    "strlen",
    "strspn",
    "strstr",
    "tokenize",
]

_FIRST_NUMBER_CHAR = re.compile(r"[-0-9]")
_SIGNED_DIGITS = re.compile(r"(-?)([0-9]*)")


def _until_nul(text):
    """Return ``text`` cut at its first NUL terminator."""
    if isinstance(text, memoryview):
        text = bytes(text)
    nul = "\0" if isinstance(text, str) else b"\0"
    return text.split(nul, 1)[0]


def _byte_view(buffer, *, writable: bool = False) -> memoryview:
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if writable and view.readonly:
        raise TypeError("buffer is read-only")
    return view


def _check_span(length: int, start: int, size: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if start < 0:
        raise ValueError("offset must not be negative")
    if start + length > size:
        raise ValueError(
            f"span of {length} bytes at offset {start} exceeds buffer of {size} bytes"
        )


def atoi(text: Text) -> int:
    """Parse the first integer in ``text``.

    Characters before the first digit or ``-`` are skipped. A ``-`` found
    there makes the number negative. Parsing stops at the first non-digit.
    The result is 0 when there are no digits.
    """
    if not isinstance(text, str):
        text = bytes(text).decode("latin-1")
    text = _until_nul(text)
    start = _FIRST_NUMBER_CHAR.search(text)
    if start is None:
        return 0
    match = _SIGNED_DIGITS.match(text, start.start())
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign else value


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns 0 when they are equal. Otherwise returns the difference between
    the first two bytes that differ, as unsigned values.
    """
    a = _byte_view(first)
    b = _byte_view(second)
    _check_span(length, 0, min(len(a), len(b)))
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, length: int):
    """Copy ``length`` bytes from the start of ``src`` to the start of ``dst``."""
    target = _byte_view(dst, writable=True)
    source = _byte_view(src)
    _check_span(length, 0, min(len(target), len(source)))
    target[:length] = source[:length]
    return dst


def memmove(buffer, dst: int, src: int, length: int):
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    The source and destination may overlap.
    """
    view = _byte_view(buffer, writable=True)
    _check_span(length, src, len(view))
    _check_span(length, dst, len(view))
    view[dst : dst + length] = bytes(view[src : src + length])
    return buffer


def memset(buffer, value: int, length: int):
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    view = _byte_view(buffer, writable=True)
    _check_span(length, 0, len(view))
    view[:length] = bytes([value & 0xFF]) * length
    return buffer


def strcat(dst: bytearray, src: BytesLike) -> bytearray:
    """Append the string in ``src`` to the string in ``dst``, then a NUL.

    The new text is written over ``dst`` from its terminator on, or from its
    end if it has none. ``dst`` grows when it is too short.
    """
    if not isinstance(dst, bytearray):
        raise TypeError("destination must be a bytearray")
    end = dst.find(0)
    if end < 0:
        end = len(dst)
    piece = bytes(_until_nul(bytes(src))) + b"\0"
    dst[end : end + len(piece)] = piece
    return dst


def strlen(data: Text) -> int:
    """Return the number of bytes before the first NUL.

    A ``str`` is counted in UTF-8 bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return len(_until_nul(data))


def strspn(text: Text, accept: Text) -> int:
    """Return the length of the leading part of ``text`` made only of characters in ``accept``."""
    allowed = set(_until_nul(accept))
    count = 0
    for ch in _until_nul(text):
        if ch not in allowed:
            break
        count += 1
    return count


def strstr(haystack: Text, needle: Text) -> int | None:
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or None.

    An empty needle is found at index 0.
    """
    needle = _until_nul(needle)
    haystack = _until_nul(haystack)
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def tokenize(text: Text, delimiters: Text) -> Iterator:
    """Yield the pieces of ``text`` between single delimiter characters.

    Adjacent delimiters yield empty tokens. A trailing empty piece is not
    yielded, and neither is an empty input.
    """
    text = _until_nul(text)
    delims = set(_until_nul(delimiters))
    start = 0
    for position, ch in enumerate(text):
        if ch in delims:
            yield text[start:position]
            start = position + 1
    if start < len(text):
        yield text[start:]