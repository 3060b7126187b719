"""Length and span measurements over NUL-terminated strings (``str`` or bytes-like)."""

from __future__ import annotations

from typing import Union

CString = Union[str, bytes, bytearray, memoryview]


def _terminated(data: CString) -> Union[str, bytes]:
    """Return ``data`` cut at its first NUL."""
    if isinstance(data, str):
        return data.split("\0", 1)[0]
    return bytes(data).split(b"\0", 1)[0]


def strlen(data: CString) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_terminated(data))


def _span(data: CString, chars: CString, inside: bool) -> int:
    text = _terminated(data)
    pool = _terminated(chars)
    return next(
        (i for i, unit in enumerate(text) if (unit in pool) != inside), len(text)
    )


def strcspn(data: CString, reject: CString) -> int:
    """Return the length of the leading run of ``data`` with no character from ``reject``."""
    return _span(data, reject, inside=False)


def strspn(data: CString, accept: CString) -> int:
    """Return the length of the leading run of ``data`` made only of characters from ``accept``."""
    return _span(data, accept, inside=True)