"""A small printf supporting the conversions ``cspdiuxX%``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)

_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def _render(form: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(form.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            yield "%"
            return
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # "%%" yields a percent sign; an unknown conversion yields its letter.
            yield spec
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion '%{spec}'") from None
        yield converter(value)


def format_text(form: str, *args: Any) -> str:
    """Return ``form`` with its conversions replaced by the rendered ``args``."""
    return "".join(_render(form, args))


def printf(form: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(form, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)