import pytest

from fractview.numbers import create_rgb, is_valid_number, parse_float


def test_parse_integer():
    assert parse_float("42") == 42.0


def test_parse_negative_fraction():
    assert parse_float("-0.7") == pytest.approx(-0.7)


def test_parse_default_julia_imaginary():
    assert parse_float("0.27015") == pytest.approx(0.27015)


def test_parse_plus_sign():
    assert parse_float("+3") == 3.0


def test_parse_stops_at_garbage():
    assert parse_float("12abc") == 12.0


def test_parse_empty_is_zero():
    assert parse_float("") == 0.0


def test_parse_leading_dot():
    assert parse_float("-.5") == pytest.approx(-0.5)


@pytest.mark.parametrize("text", ["1", "-0.33", "+.5", "5.", "0.27015", "-0.7"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["", None, "-", "+", ".", "1.2.3", "abc", "1e5", " 1", "1-", "--1"]
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_valid_numbers_parse_back():
    for text in ["12.5", "-3.25", "+7"]:
        assert is_valid_number(text)
        assert parse_float(text) == pytest.approx(float(text))


def test_create_rgb_white():
    assert create_rgb(255, 255, 255) == 0xFFFFFF


def test_create_rgb_masks_channels():
    assert create_rgb(257, 511, 256) == create_rgb(1, 255, 0)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (12, 200, 99), (255, 1, 128)])
def test_create_rgb_round_trip(rgb):
    packed = create_rgb(*rgb)
    assert ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == rgb