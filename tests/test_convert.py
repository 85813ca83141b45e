import pytest

from fractol.ft.convert import atoi, itoa


def test_atoi_plain():
    assert atoi("42") == 42


def test_atoi_whitespace_sign_and_trailing_text():
    assert atoi("  -17abc") == -17
    assert atoi("\t\n\v\f\r 7") == 7
    assert atoi("+8") == 8


def test_atoi_stops_at_first_non_digit():
    assert atoi("1 2") == 1


def test_atoi_without_digits():
    assert atoi("") == 0
    assert atoi("+-5") == 0
    assert atoi("abc") == 0


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, -1, 9, 10, -10, 12345, 2147483647, -2147483648])
def test_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_rejects_text():
    with pytest.raises(TypeError):
        itoa("5")