import pytest

from wirefdf.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("dark slate", 0x2F4F4F),
        ("light goldenrod", 0xFAFAD2),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_lookup_known_names(name, value):
    assert lookup_color(name) == value


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghost white")


def test_lookup_unknown_gives_none():
    assert lookup_color("no such colour") is None


@pytest.mark.parametrize("n", range(0, 101))
def test_gray_and_grey_agree(n):
    assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("dodger blue") == lookup_color("dodgerblue")


def test_parse_hex_spec():
    assert parse_color("#ff8000") == 0xFF8000
    assert parse_color("#FFFFFF") == 0xFFFFFF


def test_parse_hex_with_prefix_and_trailing_junk():
    assert parse_color("#0x1a") == 0x1A
    assert parse_color("#1azz") == 0x1A


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_wraps_to_signed_32_bit():
    assert parse_color("#ffffffff") == -1


def test_parse_joins_two_words():
    assert parse_color("light", "blue") == lookup_color("light blue")
    assert parse_color("Medium", "Sea") == 0x3CB371


def test_parse_plain_name():
    assert parse_color("tomato") == 0xFF6347
    assert parse_color("None") == -1


def test_parse_unknown_name_gives_black():
    assert parse_color("nonexistent") == 0
    assert parse_color("red", "nonexistent") == 0


def test_hex_spec_ignores_extra():
    assert parse_color("#00ff00", "ignored") == lookup_color("green")