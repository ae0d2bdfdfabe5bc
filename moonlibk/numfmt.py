"""Low-level number formatting used by the printf family.

Each function renders a single already-decoded argument into a string,
honouring the flag, width and precision rules of the tiny printf engine.
Conversion buffers are limited to 32 characters, so extremely wide zero
padding is truncated at that length.
"""

from __future__ import annotations

import enum
import math
import struct

__all__ = ["Flags", "format_integer", "format_fixed", "format_exponential"]

BUFFER_SIZE = 32
DEFAULT_FLOAT_PRECISION = 6
MAX_FLOAT = 1e9

_POW10 = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000, 1000000000)
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class Flags(enum.IntFlag):
    """Conversion flags collected while parsing a format specifier."""

    NONE = 0
    ZEROPAD = 1 << 0
    LEFT = 1 << 1
    PLUS = 1 << 2
    SPACE = 1 << 3
    HASH = 1 << 4
    UPPERCASE = 1 << 5
    CHAR = 1 << 6
    SHORT = 1 << 7
    LONG = 1 << 8
    LONG_LONG = 1 << 9
    PRECISION = 1 << 10
    ADAPT_EXP = 1 << 11


def _out_rev(buf: list[str], width: int, flags: Flags) -> str:
    """Emit *buf* reversed, with space padding up to *width*."""
    parts: list[str] = []
    if not (flags & Flags.LEFT) and not (flags & Flags.ZEROPAD):
        parts.append(" " * max(0, width - len(buf)))
    parts.append("".join(reversed(buf)))
    text = "".join(parts)
    if flags & Flags.LEFT and len(text) < width:
        text += " " * (width - len(text))
    return text


def _append_sign(buf: list[str], negative: bool, flags: Flags) -> None:
    if len(buf) < BUFFER_SIZE:
        if negative:
            buf.append("-")
        elif flags & Flags.PLUS:
            buf.append("+")
        elif flags & Flags.SPACE:
            buf.append(" ")


def _ntoa_format(buf: list[str], negative: bool, base: int, prec: int,
                 width: int, flags: Flags) -> str:
    if not (flags & Flags.LEFT):
        if width and flags & Flags.ZEROPAD and (
                negative or flags & (Flags.PLUS | Flags.SPACE)):
            width -= 1
        while len(buf) < prec and len(buf) < BUFFER_SIZE:
            buf.append("0")
        while flags & Flags.ZEROPAD and len(buf) < width and len(buf) < BUFFER_SIZE:
            buf.append("0")

    if flags & Flags.HASH:
        if not (flags & Flags.PRECISION) and buf and (len(buf) == prec or len(buf) == width):
            buf.pop()
            if buf and base == 16:
                buf.pop()
        if len(buf) < BUFFER_SIZE:
            if base == 16:
                buf.append("X" if flags & Flags.UPPERCASE else "x")
            elif base == 2:
                buf.append("b")
        if len(buf) < BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _out_rev(buf, width, flags)


def format_integer(value: int, negative: bool, base: int, precision: int,
                   width: int, flags: Flags | int) -> str:
    """Render the magnitude *value* in *base*, with the sign given by *negative*."""
    if value < 0:
        raise ValueError("value must be a non-negative magnitude")
    if base < 2 or base > 36:
        raise ValueError("base must be between 2 and 36")
    flags = Flags(flags)
    if not value:
        flags &= ~Flags.HASH

    letter = ord("A" if flags & Flags.UPPERCASE else "a")
    buf: list[str] = []
    if not (flags & Flags.PRECISION) or value:
        while True:
            value, digit = divmod(value, base)
            buf.append(chr(ord("0") + digit) if digit < 10 else chr(letter + digit - 10))
            if not value or len(buf) >= BUFFER_SIZE:
                break

    return _ntoa_format(buf, negative, base, precision, width, flags)


def format_fixed(value: float, precision: int, width: int, flags: Flags | int) -> str:
    """Render *value* in fixed-point notation (the ``%f`` conversion)."""
    flags = Flags(flags)
    value = float(value)

    if math.isnan(value):
        return _out_rev(list("nan"), width, flags)
    if math.isinf(value):
        if value < 0:
            return _out_rev(list("fni-"), width, flags)
        text = "fni+" if flags & Flags.PLUS else "fni"
        return _out_rev(list(text), width, flags)

    if value > MAX_FLOAT or value < -MAX_FLOAT:
        return format_exponential(value, precision, width, flags)

    negative = value < 0
    if negative:
        value = 0 - value

    prec = precision if flags & Flags.PRECISION else DEFAULT_FLOAT_PRECISION
    buf: list[str] = []
    while len(buf) < BUFFER_SIZE and prec > 9:
        buf.append("0")
        prec -= 1

    whole = int(value)
    tmp = (value - whole) * _POW10[prec]
    frac = int(tmp)
    diff = tmp - frac

    if diff > 0.5:
        frac += 1
        if frac >= _POW10[prec]:
            frac = 0
            whole += 1
    elif diff < 0.5:
        pass
    elif frac == 0 or frac & 1:
        frac += 1

    if prec == 0:
        diff = value - whole
        if (not (diff < 0.5) or diff > 0.5) and whole & 1:
            whole += 1
    else:
        count = prec
        while len(buf) < BUFFER_SIZE:
            count = (count - 1) & _U32
            buf.append(chr(48 + frac % 10))
            frac //= 10
            if not frac:
                break
        while len(buf) < BUFFER_SIZE and count > 0:
            count -= 1
            buf.append("0")
        if len(buf) < BUFFER_SIZE:
            buf.append(".")

    while len(buf) < BUFFER_SIZE:
        buf.append(chr(48 + whole % 10))
        whole //= 10
        if not whole:
            break

    if not (flags & Flags.LEFT) and flags & Flags.ZEROPAD:
        if width and (negative or flags & (Flags.PLUS | Flags.SPACE)):
            width -= 1
        while len(buf) < width and len(buf) < BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _out_rev(buf, width, flags)


def _bits_to_double(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & _U64))[0]


def _double_to_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def format_exponential(value: float, precision: int, width: int,
                       flags: Flags | int) -> str:
    """Render *value* in exponential notation (``%e``, or ``%g`` with ADAPT_EXP)."""
    flags = Flags(flags)
    value = float(value)

    if math.isnan(value) or math.isinf(value):
        return format_fixed(value, precision, width, flags)

    negative = value < 0
    if negative:
        value = -value

    prec = precision if flags & Flags.PRECISION else DEFAULT_FLOAT_PRECISION

    bits = _double_to_bits(value)
    exp2 = ((bits >> 52) & 0x7FF) - 1023
    mantissa = _bits_to_double((bits & ((1 << 52) - 1)) | (1023 << 52))
    expval = int(0.1760912590558 + exp2 * 0.301029995663981
                 + (mantissa - 1.5) * 0.289529654602168)
    exp2 = int(expval * 3.321928094887362 + 0.5)
    z = expval * 2.302585092994046 - exp2 * 0.6931471805599453
    z2 = z * z
    scale = _bits_to_double(((exp2 + 1023) & _U64) << 52)
    scale *= 1 + 2 * z / (2 - z + (z2 / (6 + (z2 / (10 + z2 / 14)))))
    if value < scale:
        expval -= 1
        scale /= 10

    minwidth = 4 if -100 < expval < 100 else 5

    if flags & Flags.ADAPT_EXP:
        if 1e-4 <= value < 1e6:
            prec = prec - expval - 1 if prec > expval else 0
            flags |= Flags.PRECISION
            minwidth = 0
            expval = 0
        elif prec > 0 and flags & Flags.PRECISION:
            prec -= 1

    fwidth = width - minwidth if width > minwidth else 0
    if flags & Flags.LEFT and minwidth:
        fwidth = 0

    if expval:
        value /= scale

    text = format_fixed(-value if negative else value, prec, fwidth,
                        flags & ~Flags.ADAPT_EXP)

    if minwidth:
        text += "E" if flags & Flags.UPPERCASE else "e"
        text += format_integer(abs(expval), expval < 0, 10, 0, minwidth - 1,
                               Flags.ZEROPAD | Flags.PLUS)
        if flags & Flags.LEFT and len(text) < width:
            text += " " * (width - len(text))
    return text