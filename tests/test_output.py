import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_str():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_int_uses_low_byte():
    buf = io.StringIO()
    put_char(ord("A") + 256, buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(TypeError):
        put_char("ab", io.StringIO())


def test_put_str_and_none():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(None, buf)
    assert buf.getvalue() == "hello"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    put_endl(None, buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min_text():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("out", None)
    assert capsys.readouterr().out == "out"