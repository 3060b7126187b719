"""Copying and filling of mutable byte buffers.

Destinations are writable bytes-like objects such as ``bytearray`` or a
``memoryview`` over one. Each function returns its destination.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
Source = Union[bytes, bytearray, memoryview]


def _require(buffer, n: int, role: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buffer):
        raise ValueError(f"{role} holds fewer than {n} bytes")


def _cstring(src: Source) -> bytes:
    raw = bytes(src)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def memcpy(dest: Buffer, src: Source, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _require(dest, n, "destination")
    _require(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: Source, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _require(dest, n, "destination")
    _require(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    _require(buffer, n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def strcpy(dest: Buffer, src: Source) -> Buffer:
    """Copy the NUL-terminated string in ``src``, terminator included, into ``dest``."""
    payload = _cstring(src) + b"\0"
    _require(dest, len(payload), "destination")
    dest[: len(payload)] = payload
    return dest


def strncpy(dest: Buffer, src: Source, n: int) -> Buffer:
    """Copy at most ``n`` characters of ``src`` into ``dest``, padding with NUL to ``n``.

    No terminator is written when ``src`` has ``n`` or more characters.
    """
    _require(dest, n, "destination")
    payload = _cstring(src)[:n]
    dest[:n] = payload + b"\0" * (n - len(payload))
    return dest


def _cstr(buffer) -> bytes:
    """Return ``buffer`` up to its first NUL."""
    return _cstring(buffer)