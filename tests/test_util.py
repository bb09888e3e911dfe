import pytest

from havenapi.util import format_byte_size


@pytest.mark.parametrize("b", [0, 1, 42, 999])
def test_below_one_unit_is_plain_bytes(b):
    assert format_byte_size(b) == f"{b} B"


def test_one_kilobyte():
    assert format_byte_size(1000) == "1.0 kB"


def test_fractional_megabytes():
    assert format_byte_size(1_500_000) == "1.5 MB"


@pytest.mark.parametrize("power", [1, 2, 3, 4, 5, 6])
def test_unit_suffix_progression(power):
    result = format_byte_size(10 ** (3 * power))
    assert result == "1.0 " + "kMGTPE"[power - 1] + "B"


def test_value_just_below_next_unit_stays_in_lower_unit():
    assert format_byte_size(999_999).endswith(" kB")