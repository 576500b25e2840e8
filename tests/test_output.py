import io

import pytest

from ftprint.output import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def buf():
    return io.StringIO()


def test_put_char_str(buf):
    put_char("a", buf)
    assert buf.getvalue() == "a"


def test_put_char_int(buf):
    put_char(65, buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string(buf):
    with pytest.raises(TypeError):
        put_char("ab", buf)


def test_put_str_writes_text(buf):
    put_str("asd", buf)
    assert buf.getvalue() == "asd"


def test_put_str_none_writes_nothing(buf):
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_str_stops_at_nul(buf):
    put_str("ab\0cd", buf)
    assert buf.getvalue() == "ab"


def test_put_endl_appends_newline(buf):
    put_endl("hi", buf)
    assert buf.getvalue() == "hi\n"


def test_put_endl_none_writes_nothing(buf):
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n,expected", [(0, "0"), (-42, "-42"), (-2147483648, "-2147483648"), (2147483647, "2147483647")])
def test_put_nbr_values(buf, n, expected):
    put_nbr(n, buf)
    assert buf.getvalue() == expected


def test_put_nbr_out_of_range(buf):
    with pytest.raises(OverflowError):
        put_nbr(2**31, buf)


def test_default_stream_is_stdout(capsys):
    put_str("out", None)
    put_nbr(7)
    put_endl("")
    assert capsys.readouterr().out == "out7\n"


def test_successive_writes_accumulate(buf):
    put_char("x", buf)
    put_str("yz", buf)
    put_nbr(-1, buf)
    assert buf.getvalue() == "xyz-1"