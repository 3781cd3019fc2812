"""Formatted output and small writers for text streams."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterable, List, Optional, TextIO

from basekit.numbers import itoa

GREEN = "\033[32;1m"
RESET = "\033[0m"

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from None


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def to_hex(number: int, uppercase: bool = False) -> str:
    """Hexadecimal digits of a non-negative number, without prefix."""
    number = operator.index(number)
    if number < 0:
        raise ValueError("hexadecimal conversion needs a non-negative number")
    digits = _HEX_UPPER if uppercase else _HEX_LOWER
    out: List[str] = []
    while True:
        number, remainder = divmod(number, 16)
        out.append(digits[remainder])
        if not number:
            break
    return "".join(reversed(out))


def pointer_repr(address: int) -> str:
    """An address written as '0x' followed by lower-case hex digits."""
    return "0x" + to_hex(operator.index(address) & _POINTER_MASK)


def _convert(conversion: str, value: Any) -> str:
    if conversion in "di":
        return itoa(_signed32(_as_int(value, conversion)))
    if conversion == "u":
        return itoa(_as_int(value, conversion) & _UINT_MASK)
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value, conversion) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return pointer_repr(_as_int(value, conversion))
    return to_hex(_as_int(value, conversion) & _UINT_MASK, conversion == "X")


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions %d %i %u %c %s %p %x %X and %% in template.

    An unknown conversion, a lone trailing '%' or too few arguments raise
    ValueError.
    """
    pieces: List[str] = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, "")
        if conversion == "%":
            pieces.append("%")
            continue
        if not conversion or conversion not in "diucspxX":
            raise ValueError(f"unsupported conversion %{conversion}")
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(
                f"not enough arguments for %{conversion}"
            ) from None
        pieces.append(_convert(conversion, value))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted template to stream; returns the characters written."""
    text = format_string(template, *args)
    _stream(stream).write(text)
    return len(text)


def print_table(
    items: Optional[Iterable[str]],
    title: str,
    stream: Optional[TextIO] = None,
) -> None:
    """Write items one per line between a coloured title and end marker."""
    out = _stream(stream)
    out.write(f"{GREEN}--- {title} ---\n{RESET}")
    for item in items or ():
        out.write(f"{item}\n")
    out.write(f"{GREEN}--- END ---\n{RESET}")


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _stream(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write text and return its length; a missing text raises ValueError."""
    if text is None:
        raise ValueError("text must not be None")
    _stream(stream).write(text)
    return len(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    _stream(stream).write(text + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write number in decimal."""
    _stream(stream).write(itoa(operator.index(number)))