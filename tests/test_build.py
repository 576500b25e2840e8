import pytest

from ftprint.build import split, strdup, striteri, strjoin, strmapi, strtrim, substr


def test_strdup_copies_text():
    assert strdup("hello") == "hello"


def test_strdup_stops_at_nul():
    assert strdup("ab\0cd") == "ab"


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_within_bounds_is_contained_in_source():
    source = "tripouille"
    piece = substr(source, 2, 4)
    assert len(piece) == 4
    assert source.find(piece) == 2


def test_substr_length_clamped_to_end():
    assert substr("hello", 0, 100) == "hello"
    assert substr("hello", 3, 100) == substr("hello", 3, 2)


def test_substr_start_past_end_gives_empty():
    assert substr("abc", 5, 1) == ""
    assert substr("", 0, 5) == ""


def test_substr_zero_length_gives_empty():
    assert substr("abc", 1, 0) == ""


@pytest.mark.parametrize("start,length", [(-1, 1), (0, -1)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("abc", start, length)


def test_strjoin_empty_left():
    assert strjoin("", "42") == "42"


def test_strjoin_concatenates():
    joined = strjoin("ab", "cd")
    assert joined.startswith("ab")
    assert joined.endswith("cd")
    assert len(joined) == 4


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_example():
    assert strtrim("   xxxtripouille   xxx", " x") == "tripouille"


def test_strtrim_empty_inputs():
    assert strtrim("", "") == ""


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xaxbx", "x") == "axb"


def test_split_single_word():
    assert split("a", " ") == ["a"]


def test_split_drops_empty_runs():
    words = split("  hello  world ", " ")
    assert all(words)
    assert all(" " not in word for word in words)
    assert " ".join(words) == "hello world"


def test_split_empty_string():
    assert split("", " ") == []


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_accepts_int_separator():
    assert split("a,b", ord(",")) == split("a,b", ",")


def test_split_nul_separator_gives_whole_text():
    assert split("ab cd", "\0") == ["ab cd"]


def test_strmapi_uses_index():
    assert strmapi("1234", lambda i, c: chr(ord(c) + i)) == "1357"


def test_strmapi_int_result_and_length():
    result = strmapi("abc", lambda i, c: ord(c))
    assert result == "abc"


def test_strmapi_rejects_bad_result():
    with pytest.raises(TypeError):
        strmapi("abc", lambda i, c: "too long")


def test_striteri_modifies_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, c: c.upper())
    assert result is chars
    assert "".join(chars) == "ABC"


def test_striteri_none_keeps_item():
    chars = list("abc")
    striteri(chars, lambda i, c: None)
    assert chars == list("abc")


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    seen = []
    striteri(chars, lambda i, c: seen.append(i))
    assert seen == [0, 1]
    assert chars == list("ab\0cd")


def test_striteri_on_bytearray():
    buf = bytearray(b"ab")
    striteri(buf, lambda i, c: c - 32)
    assert buf == bytearray(b"AB")


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: c)