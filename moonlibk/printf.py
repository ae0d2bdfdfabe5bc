"""A small printf engine: ``sprintf``, ``snprintf`` and callback output.

Supported conversions are ``d i u x X o b c s p f F e E g G`` and ``%%``,
with the flags ``0 - + space #``, a width and a precision (either may be
``*``), and the length modifiers ``hh h l ll t j z``.  Integer arguments
are truncated to the width of the C type the length modifier selects.
An unknown conversion character is written out as itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from moonlibk.numfmt import (
    Flags,
    format_exponential,
    format_fixed,
    format_integer,
)

__all__ = ["vsnprintf", "sprintf", "snprintf", "fctprintf"]

_POINTER_WIDTH = 16

_FLAG_CHARS = {
    "0": Flags.ZEROPAD,
    "-": Flags.LEFT,
    "+": Flags.PLUS,
    " ": Flags.SPACE,
    "#": Flags.HASH,
}

_BASES = {"x": 16, "X": 16, "o": 8, "b": 2, "d": 10, "i": 10, "u": 10}


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _as_int(value: Any) -> int:
    if isinstance(value, int):
        return int(value)
    raise TypeError(f"integer argument expected, got {type(value).__name__}")


def _as_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"number argument expected, got {type(value).__name__}")


def _as_char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError("character argument must be an int or a one-character string")


def _as_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    if not isinstance(value, str):
        raise TypeError(f"string argument expected, got {type(value).__name__}")
    return value.split("\0", 1)[0]


class _Arguments:
    """Hands out the variadic arguments one at a time."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._iter: Iterator[Any] = iter(args)

    def next(self) -> Any:
        try:
            return next(self._iter)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        pos += 1
    return int(fmt[start:pos]), pos


def _convert_integer(spec: str, args: _Arguments, precision: int,
                     width: int, flags: Flags) -> str:
    base = _BASES[spec]
    if base == 10:
        flags &= ~Flags.HASH
    if spec == "X":
        flags |= Flags.UPPERCASE
    if spec not in "di":
        flags &= ~(Flags.PLUS | Flags.SPACE)
    if flags & Flags.PRECISION:
        flags &= ~Flags.ZEROPAD

    raw = _as_int(args.next())
    if flags & (Flags.LONG | Flags.LONG_LONG):
        bits = 64
    elif flags & Flags.CHAR:
        bits = 8
    elif flags & Flags.SHORT:
        bits = 16
    else:
        bits = 32

    if spec in "di":
        value = _wrap_signed(raw, bits)
        return format_integer(abs(value), value < 0, base, precision, width, flags)
    value = _wrap_unsigned(raw, bits)
    return format_integer(value, False, base, precision, width, flags)


def _pad_field(body: str, width: int, flags: Flags) -> str:
    if flags & Flags.LEFT:
        return body.ljust(width)
    return body.rjust(width)


def _render(fmt: str, arguments: Iterable[Any]) -> str:
    args = _Arguments(arguments)
    out: list[str] = []
    pos = 0
    length = len(fmt)

    while pos < length:
        char = fmt[pos]
        if char != "%":
            out.append(char)
            pos += 1
            continue
        pos += 1

        flags = Flags.NONE
        while pos < length and fmt[pos] in _FLAG_CHARS:
            flags |= _FLAG_CHARS[fmt[pos]]
            pos += 1

        width = 0
        if pos < length and fmt[pos].isdigit() and fmt[pos] in "0123456789":
            width, pos = _read_number(fmt, pos)
        elif pos < length and fmt[pos] == "*":
            star = _wrap_signed(_as_int(args.next()), 32)
            if star < 0:
                flags |= Flags.LEFT
                width = -star
            else:
                width = star
            pos += 1

        precision = 0
        if pos < length and fmt[pos] == ".":
            flags |= Flags.PRECISION
            pos += 1
            if pos < length and fmt[pos] in "0123456789":
                precision, pos = _read_number(fmt, pos)
            elif pos < length and fmt[pos] == "*":
                star = _wrap_signed(_as_int(args.next()), 32)
                precision = star if star > 0 else 0
                pos += 1

        if pos < length:
            modifier = fmt[pos]
            if modifier == "l":
                flags |= Flags.LONG
                pos += 1
                if pos < length and fmt[pos] == "l":
                    flags |= Flags.LONG_LONG
                    pos += 1
            elif modifier == "h":
                flags |= Flags.SHORT
                pos += 1
                if pos < length and fmt[pos] == "h":
                    flags |= Flags.CHAR
                    pos += 1
            elif modifier in "tjz":
                flags |= Flags.LONG
                pos += 1

        if pos >= length:
            break
        spec = fmt[pos]
        pos += 1

        if spec in _BASES:
            out.append(_convert_integer(spec, args, precision, width, flags))
        elif spec in "fF":
            if spec == "F":
                flags |= Flags.UPPERCASE
            out.append(format_fixed(_as_float(args.next()), precision, width, flags))
        elif spec in "eEgG":
            if spec in "gG":
                flags |= Flags.ADAPT_EXP
            if spec in "EG":
                flags |= Flags.UPPERCASE
            out.append(format_exponential(_as_float(args.next()), precision,
                                          width, flags))
        elif spec == "c":
            out.append(_pad_field(_as_char(args.next()), width, flags))
        elif spec == "s":
            text = _as_text(args.next())
            if flags & Flags.PRECISION:
                text = text[:precision]
            out.append(_pad_field(text, width, flags))
        elif spec == "p":
            flags |= Flags.ZEROPAD | Flags.UPPERCASE
            address = _wrap_unsigned(_as_int(args.next()), 64)
            out.append(format_integer(address, False, 16, precision,
                                      _POINTER_WIDTH, flags))
        else:
            out.append(spec)

    return "".join(out)


def vsnprintf(fmt: str, args: Iterable[Any]) -> str:
    """Format *args*, given as one sequence, according to *fmt*."""
    return _render(fmt, args)


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the whole result."""
    return _render(fmt, args)


def snprintf(count: int, fmt: str, *args: Any) -> tuple[str, int]:
    """Format into a buffer of *count* characters, terminator included.

    Returns the stored text, at most ``count - 1`` characters, and the
    length the full output would have had.  A returned length of *count*
    or more means the text was truncated.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    full = _render(fmt, args)
    return full[:max(count - 1, 0)], len(full)


def fctprintf(out: Callable[[str], Any], fmt: str, *args: Any) -> int:
    """Send each formatted character to *out*; return the output length.

    NUL characters are counted but not passed to *out*.
    """
    full = _render(fmt, args)
    for char in full:
        if char != "\0":
            out(char)
    return len(full)