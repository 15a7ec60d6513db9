import io

import pytest

from wirefdf.lines import LineReader, iter_lines


def read_all(reader, stream):
    lines = []
    while (line := reader.read_line(stream)) is not None:
        lines.append(line)
    return lines


def test_lines_keep_newlines_and_last_line_without():
    reader = LineReader()
    stream = io.StringIO("a\nb\nc")
    assert reader.read_line(stream) == "a\n"
    assert reader.read_line(stream) == "b\n"
    assert reader.read_line(stream) == "c"
    assert reader.read_line(stream) is None


def test_trailing_newline_then_end():
    reader = LineReader()
    stream = io.StringIO("x\n")
    assert reader.read_line(stream) == "x\n"
    assert reader.read_line(stream) is None


def test_empty_stream_gives_none():
    assert LineReader().read_line(io.StringIO("")) is None


def test_blank_lines_are_returned():
    reader = LineReader()
    assert read_all(reader, io.StringIO("\n\n")) == ["\n", "\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 64, 1000])
def test_buffer_size_does_not_change_result(size):
    text = "0 1 2\n3 4 5\n\nlong line with several words\nend"
    lines = read_all(LineReader(size), io.StringIO(text))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_binary_stream():
    reader = LineReader(4)
    stream = io.BytesIO(b"first\nsecond")
    assert read_all(reader, stream) == [b"first\n", b"second"]


def test_streams_keep_separate_state():
    reader = LineReader(8)
    one = io.StringIO("a1\na2\n")
    two = io.StringIO("b1\nb2\n")
    assert reader.read_line(one) == "a1\n"
    assert reader.read_line(two) == "b1\n"
    assert reader.read_line(one) == "a2\n"
    assert reader.read_line(two) == "b2\n"
    assert reader.read_line(one) is None
    assert reader.read_line(two) is None


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_iter_lines_round_trip():
    text = "10 20 30\n40 50 60\n70 80 90\n"
    assert "".join(iter_lines(io.StringIO(text))) == text
    assert list(iter_lines(io.StringIO(text))) == text.splitlines(keepends=True)


def test_iter_lines_empty():
    assert list(iter_lines(io.StringIO(""))) == []