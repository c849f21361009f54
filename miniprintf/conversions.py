"""Renderers for the individual conversions understood by the formatter."""

from __future__ import annotations

_UINT_MODULUS = 1 << 32
_INT_MIN = -(1 << 31)
_POINTER_MODULUS = 1 << 64
_NULL_STRING = "(null)"


def _to_unsigned(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit unsigned integer."""
    return value % _UINT_MODULUS


def _to_signed(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    return (value - _INT_MIN) % _UINT_MODULUS + _INT_MIN


def format_char(ch: int | str) -> str:
    """Render a single character.

    An integer is reduced to one byte, as only the low byte is emitted.
    A string must be exactly one character long.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected an int or a one-character str, got {type(ch).__name__}")
    return chr(ch % 256)


def format_hex(value: int, case: str) -> str:
    """Render ``value`` as a 32-bit unsigned hexadecimal number.

    ``case`` is ``"x"`` for lower-case digits or ``"X"`` for upper-case ones.
    """
    if case not in ("x", "X"):
        raise ValueError(f"hex case must be 'x' or 'X', got {case!r}")
    return format(_to_unsigned(value), case)


def format_int(value: int) -> str:
    """Render ``value`` as a 32-bit signed decimal number."""
    return str(_to_signed(value))


def format_unsigned(value: int) -> str:
    """Render ``value`` as a 32-bit unsigned decimal number."""
    return str(_to_unsigned(value))


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits.

    ``None`` is the null address and renders as ``0x0``.
    """
    if address is None:
        address = 0
    return "0x" + format(address % _POINTER_MODULUS, "x")


def format_string(text: str | None) -> str:
    """Render a string; ``None`` renders as ``(null)``.

    The text ends at the first NUL character, if there is one.
    """
    if text is None:
        return _NULL_STRING
    return text.split("\0", 1)[0]