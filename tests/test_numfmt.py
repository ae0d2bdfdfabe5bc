import math

import pytest

from moonlibk.numfmt import Flags, format_exponential, format_fixed, format_integer


def test_integer_uppercase_hex():
    assert format_integer(48879, False, 16, 0, 0, Flags.UPPERCASE) == format(48879, "X")


@pytest.mark.parametrize("value", [1, 42, 9999])
def test_negative_integer(value):
    assert format_integer(value, True, 10, 0, 0, Flags.NONE) == "%d" % -value


@pytest.mark.parametrize("value,negative", [(42, False), (42, True), (7, False)])
def test_integer_zero_pad_width(value, negative):
    signed = -value if negative else value
    assert format_integer(value, negative, 10, 0, 6, Flags.ZEROPAD) == "%06d" % signed


@pytest.mark.parametrize("value,negative", [(42, False), (42, True)])
def test_integer_left_justified(value, negative):
    signed = -value if negative else value
    assert format_integer(value, negative, 10, 0, 6, Flags.LEFT) == "%-6d" % signed


@pytest.mark.parametrize("value,negative", [(42, False), (42, True)])
def test_integer_right_justified(value, negative):
    signed = -value if negative else value
    result = format_integer(value, negative, 10, 0, 6, Flags.NONE)
    assert result == "%6d" % signed
    assert len(result) == 6


def test_integer_plus_and_space():
    assert format_integer(5, False, 10, 0, 0, Flags.PLUS) == "%+d" % 5
    assert format_integer(5, False, 10, 0, 0, Flags.SPACE) == "% d" % 5
    assert format_integer(5, False, 10, 0, 0, Flags.PLUS | Flags.SPACE) == "%+d" % 5


def test_integer_precision_pads_digits():
    result = format_integer(42, False, 10, 5, 0, Flags.PRECISION)
    assert result == "%.5d" % 42


def test_zero_with_zero_precision_is_empty():
    assert format_integer(0, False, 10, 0, 0, Flags.PRECISION) == ""


def test_hash_prefix_hex_and_octal():
    assert format_integer(255, False, 16, 0, 0, Flags.HASH) == "0x" + format(255, "x")
    assert format_integer(255, False, 16, 0, 0, Flags.HASH | Flags.UPPERCASE) == "0X" + format(255, "X")
    assert format_integer(8, False, 8, 0, 0, Flags.HASH) == "0" + format(8, "o")
    assert format_integer(5, False, 2, 0, 0, Flags.HASH) == "0b" + format(5, "b")


def test_hash_dropped_for_zero():
    assert format_integer(0, False, 16, 0, 0, Flags.HASH) == format(0, "x")


def test_integer_accepts_plain_int_flags():
    assert format_integer(42, False, 10, 0, 6, int(Flags.ZEROPAD)) == "%06d" % 42


def test_integer_rejects_negative_magnitude():
    with pytest.raises(ValueError):
        format_integer(-1, False, 10, 0, 0, Flags.NONE)


@pytest.mark.parametrize("value", [3.14159, 2.71828, -0.5, 123.456, 0.125, 999.25])
@pytest.mark.parametrize("prec", [1, 2, 3, 6])
def test_fixed_matches_builtin(value, prec):
    assert format_fixed(value, prec, 0, Flags.PRECISION) == "%.*f" % (prec, value)


def test_fixed_default_precision_is_six():
    assert format_fixed(3.14159, 0, 0, Flags.NONE) == "%f" % 3.14159


@pytest.mark.parametrize("value", [1.5, 2.5, 1.2, 1.7, 3.2])
def test_fixed_zero_precision(value):
    assert format_fixed(value, 0, 0, Flags.PRECISION) == "%.0f" % value


def test_fixed_rollover():
    assert format_fixed(0.99, 1, 0, Flags.PRECISION) == "%.1f" % 0.99


def test_fixed_precision_above_nine():
    assert format_fixed(0.5, 12, 0, Flags.PRECISION) == "%.12f" % 0.5


def test_fixed_zero_pad_negative():
    assert format_fixed(-3.5, 2, 8, Flags.ZEROPAD | Flags.PRECISION) == "%08.2f" % -3.5


def test_fixed_width_and_left():
    right = format_fixed(3.5, 2, 10, Flags.PRECISION)
    left = format_fixed(3.5, 2, 10, Flags.PRECISION | Flags.LEFT)
    assert right == "%10.2f" % 3.5
    assert left == "%-10.2f" % 3.5
    assert len(right) == len(left) == 10


def test_fixed_plus_sign():
    assert format_fixed(2.25, 2, 0, Flags.PRECISION | Flags.PLUS) == "%+.2f" % 2.25


def test_fixed_special_values():
    assert format_fixed(math.nan, 6, 0, Flags.NONE) == "nan"
    assert format_fixed(math.inf, 6, 0, Flags.NONE) == "inf"
    assert format_fixed(-math.inf, 6, 0, Flags.NONE) == "-inf"
    assert format_fixed(math.inf, 6, 0, Flags.PLUS) == "+inf"
    assert format_fixed(math.nan, 6, 5, Flags.NONE) == "  nan"


def test_fixed_large_value_switches_to_exponential():
    assert format_fixed(1.5e10, 6, 0, Flags.NONE) == "%e" % 1.5e10


@pytest.mark.parametrize("value", [12345.678, 0.000123, 1.5e10, -2.5e-7, 6.02e23])
def test_exponential_matches_builtin(value):
    assert format_exponential(value, 0, 0, Flags.NONE) == "%e" % value


def test_exponential_uppercase():
    assert format_exponential(12345.678, 0, 0, Flags.UPPERCASE) == "%E" % 12345.678


def test_exponential_precision():
    assert format_exponential(12345.678, 2, 0, Flags.PRECISION) == "%.2e" % 12345.678


def test_exponential_large_exponent_width():
    assert format_exponential(1.5e200, 0, 0, Flags.NONE) == "%e" % 1.5e200


def test_exponential_left_pads_to_width():
    result = format_exponential(12345.678, 0, 20, Flags.LEFT)
    assert result == "%-20e" % 12345.678
    assert len(result) == 20


def test_exponential_right_pads_to_width():
    result = format_exponential(12345.678, 0, 20, Flags.NONE)
    assert result == "%20e" % 12345.678


def test_exponential_special_values_delegate():
    assert format_exponential(math.nan, 6, 0, Flags.NONE) == format_fixed(math.nan, 6, 0, Flags.NONE)
    assert format_exponential(-math.inf, 6, 0, Flags.NONE) == "-inf"


def test_adaptive_large_value_uses_exponent():
    result = format_exponential(1.5e10, 0, 0, Flags.ADAPT_EXP)
    assert result == "%e" % 1.5e10


def test_adaptive_in_range_has_no_exponent():
    result = format_exponential(1234.5, 0, 0, Flags.ADAPT_EXP)
    assert "e" not in result
    assert float(result) == pytest.approx(1234.5)