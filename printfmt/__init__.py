"""printf-style formatting with width, precision and flags, plus character, string and output helpers."""

__version__ = "0.1.0"
__all__ = ["spec", "conversions", "printer", "chars", "strutil", "output"]