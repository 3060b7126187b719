"""C-style string and memory routines for str, bytes and bytearray objects."""

__version__ = "0.1.0"
__all__ = ["measuring", "comparing", "copying"]