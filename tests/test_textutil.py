import pytest

from solong.textutil import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_whole_text():
    assert strlen("Hello World") == len("Hello World")


def test_strlen_stops_at_newline_and_nul():
    assert strlen("abc\ndef") == len("abc")
    assert strlen("ab\0cd") == len("ab")
    assert strlen("") == 0


def test_strchr_finds_first():
    text = "Hello World"
    assert strchr(text, "o") == text.index("o")
    assert strchr(text, "a") is None


def test_strchr_nul_finds_terminator():
    assert strchr("Hello", "\0") == len("Hello")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    text = "Hello World"
    assert strrchr(text, "o") == text.rindex("o")
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_within_limit():
    assert strnstr("abcdef", "cd", 6) == "abcdef".index("cd")


def test_strnstr_match_must_fit_limit():
    assert strnstr("abcdef", "cd", 3) is None
    assert strnstr("abcdef", "cd", 4) == "abcdef".index("cd")
    assert strnstr("abcdef", "xy", 6) is None


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abd", "abc", 2) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 3) == -(ord("d") - ord("c"))


def test_strncmp_shorter_string_ends():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_clamps_length():
    assert substr("hello world", 6, 100) == "world"


def test_substr_stops_at_newline():
    assert substr("ab\ncd", 0, 10) == "ab"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("where is my ", "cat") == "where is my cat"
    assert strjoin("", "") == ""


def test_strtrim_source_example():
    assert strtrim("ttttHello Fatemarttt", "tH") == "ello Fatemar"


def test_strtrim_spaces_and_all_trimmed():
    assert strtrim("  x  ", " ") == "x"
    assert strtrim("xxxx", "x") == ""


def test_strtrim_cuts_at_newline():
    assert strtrim("xabx\nxx", "x") == "ab"


def test_strtrim_no_charset():
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_source_example():
    assert split("  HI  HELLO BYE   ! ", " ") == ["HI", "HELLO", "BYE", "!"]


def test_split_round_trip():
    words = ["alpha", "beta", "gamma"]
    text = ",,".join(words) + ","
    assert split(text, ",") == words


def test_split_empty_and_bad_separator():
    assert split("", " ") == []
    assert split("   ", " ") == []
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strmapi_uppercase():
    assert strmapi("hello.", lambda i, c: c.upper()) == "HELLO."


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_striteri_mutates_in_place():
    chars = list("abc")
    seen = []

    def shout(index, ch):
        seen.append(index)
        return ch.upper()

    assert striteri(chars, shout) is None
    assert chars == ["A", "B", "C"]
    assert seen == [0, 1, 2]


def test_strlcpy_truncates():
    copied, total = strlcpy("World", 5)
    assert copied == "World"[:4]
    assert total == len("World")


def test_strlcpy_zero_size():
    assert strlcpy("World", 0) == ("", len("World"))


def test_strlcpy_length_stops_at_newline():
    assert strlcpy("ab\ncd", 10) == ("ab\ncd", len("ab"))


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_strlcat_truncates_but_reports_full_length():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert total == len("ab") + len("cdef")


def test_strlcat_buffer_too_small():
    assert strlcat("abc", "de", 2) == ("abc", len("de") + 2)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)