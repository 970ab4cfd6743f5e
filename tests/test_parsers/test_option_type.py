import pytest

from argwalk.parser import OptionType


@pytest.mark.parametrize(
    "value, expected",
    [
        ("int", OptionType.INT),
        ("INT", OptionType.INT),
        ("string", OptionType.STR),
        ("SHRT", OptionType.SHRT),
        ("flt", OptionType.FLT),
        ("double", OptionType.DBL),
        (int, OptionType.INT),
        (float, OptionType.DBL),
        (str, OptionType.STR),
    ],
)
def test_option_type_coercion(value, expected):
    assert OptionType(value) is expected


def test_option_type_invalid():
    with pytest.raises(ValueError):
        OptionType("complex")
    with pytest.raises(ValueError):
        OptionType(list)


def test_option_type_limits():
    assert OptionType.UCHAR.limits == (0, 255)
    assert OptionType.SCHAR.limits == (-128, 127)
    assert OptionType.INT.limits == (-(2**31), 2**31 - 1)
    assert OptionType.ULONG.limits == (0, 2**64 - 1)
    assert OptionType.STR.limits is None
    assert OptionType.CHAR.limits is None


def test_option_type_families():
    assert OptionType.USHRT.is_integer and OptionType.USHRT.is_unsigned
    assert OptionType.LDBL.is_float and OptionType.LDBL.is_numeric
    assert not OptionType.STR.is_numeric
    assert not OptionType.CHAR.is_numeric
