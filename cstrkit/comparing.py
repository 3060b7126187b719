"""Comparisons of strings and byte buffers in the manner of C.

Results are the difference of the first differing characters; zero means equal.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import List, Optional, Union

CString = Union[str, bytes, bytearray, memoryview]


def _units(data: CString) -> List[int]:
    """Character codes, with bytes read as signed ``char`` values."""
    if isinstance(data, str):
        return [ord(ch) for ch in data]
    return [b - 256 if b > 127 else b for b in bytes(data)]


def strcmp(first: Optional[CString], second: Optional[CString]) -> int:
    """Compare two NUL-terminated strings; ``None`` on either side gives 1."""
    if first is None or second is None:
        return 1
    pairs = zip_longest(_units(first), _units(second), fillvalue=0)
    return next((a - b for a, b in pairs if a == 0 or a != b), 0)


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values."""
    if isinstance(first, str) or isinstance(second, str):
        raise TypeError("memcmp compares bytes-like objects, not text")
    a, b = bytes(first), bytes(second)
    if n < 0 or n > len(a) or n > len(b):
        raise ValueError(f"byte count {n} is out of range for the buffers")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def strncmp(first: CString, second: CString, n: int) -> int:
    """Compare ``n`` positions of two strings, reading past their ends as NUL."""
    if n < 0:
        raise ValueError("character count must not be negative")
    pairs = zip_longest(_units(first)[:n], _units(second)[:n], fillvalue=0)
    return next((a - b for a, b in pairs if a != b), 0)