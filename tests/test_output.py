import io

import pytest

from wirefdf.output import put_char, put_endl, put_nbr, put_str


def test_put_char_accepts_character():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_accepts_code():
    out = io.StringIO()
    put_char(ord("Q"), out)
    assert out.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text_verbatim():
    out = io.StringIO()
    put_str("hello world", out)
    put_str("!", out)
    assert out.getvalue() == "hello world!"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 10, 12345, -1, -42, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_minimum_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())