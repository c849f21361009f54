"""Minimal printf-style formatting with a fixed set of conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]