import io

from solong.linereader import LineReader, read_lines


def test_lines_come_without_newline():
    reader = LineReader(io.StringIO("111\n1P1\n"))
    assert reader.next_line() == "111"
    assert reader.next_line() == "1P1"
    assert reader.next_line() is None


def test_last_line_without_newline_is_returned():
    assert read_lines(io.StringIO("ab\ncd")) == ["ab", "cd"]


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None
    assert read_lines(io.StringIO("")) == []


def test_blank_line_ends_iteration():
    assert read_lines(io.StringIO("111\n\n222\n")) == ["111"]


def test_reading_continues_after_blank_line():
    reader = LineReader(io.StringIO("111\n\n222\n"))
    assert reader.next_line() == "111"
    assert reader.next_line() is None
    assert reader.next_line() == "222"
    assert reader.next_line() is None


def test_iteration_matches_read_lines():
    text = "1111\n1PC1\n1E01\n1111\n"
    assert list(LineReader(io.StringIO(text))) == read_lines(io.StringIO(text))
    assert read_lines(io.StringIO(text)) == text.splitlines()


def test_binary_stream():
    assert read_lines(io.BytesIO(b"11\n1P\n")) == [b"11", b"1P"]


def test_carriage_return_is_kept():
    assert read_lines(io.StringIO("ab\r\n")) == ["ab\r"]