import pytest

from fractol.ft.printf import format_printf, hex_itoa, printf, ptoa, uns_itoa


def test_plain_text_unchanged():
    assert format_printf("no conversions here") == "no conversions here"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_printf("%c%c", "A", ord("b")) == "Ab"


def test_signed_integers():
    assert format_printf("%d %i", 42, -7) == "42 -7"
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_signed_integer_wraps_to_32_bits():
    assert format_printf("%d", 2**32 + 5) == "5"


def test_unsigned_wraps():
    assert uns_itoa(-1) == "4294967295"
    assert format_printf("%u", 123) == "123"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 0xDEADBEEF, 0xFFFFFFFF])
def test_hex_round_trip(n):
    lower = hex_itoa(n, "x")
    upper = hex_itoa(n, "X")
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_rejects_other_specifiers():
    with pytest.raises(ValueError):
        hex_itoa(10, "d")


def test_pointer_null():
    assert ptoa(None) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0x7FFF12345678])
def test_pointer_round_trip(address):
    text = ptoa(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_pointer_of_object_uses_identity():
    obj = object()
    assert int(format_printf("%p", obj)[2:], 16) == id(obj)


def test_unknown_conversion_kept():
    assert format_printf("%q and %s", "x") == "%q and x"


def test_trailing_percent_is_an_error():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_missing_argument_is_an_error():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_printf_writes_to_stdout(capfd):
    count = printf("value=%d %s\n", 5, "ok")
    out, _ = capfd.readouterr()
    assert out == "value=5 ok\n"
    assert count == len(out.encode("utf-8"))