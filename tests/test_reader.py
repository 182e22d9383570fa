import pytest

from kplc.reader import Reader


def _drain(reader):
    chars = []
    while reader.current_char is not None:
        chars.append(reader.current_char)
        reader.read_char()
    return "".join(chars)


def test_initial_state_reads_first_char():
    reader = Reader("abc")
    assert reader.current_char == "a"
    assert reader.line_no == 1
    assert reader.col_no == 1


def test_read_char_returns_and_stores_next():
    reader = Reader("abc")
    assert reader.read_char() == "b"
    assert reader.current_char == "b"
    assert reader.col_no == 2


def test_newline_resets_column_and_advances_line():
    reader = Reader("a\nb")
    assert reader.read_char() == "\n"
    assert reader.line_no == 2
    assert reader.col_no == 0
    assert reader.read_char() == "b"
    assert (reader.line_no, reader.col_no) == (2, 1)


def test_end_of_input_is_none_and_column_still_moves():
    reader = Reader("x")
    col_before = reader.col_no
    assert reader.read_char() is None
    assert reader.current_char is None
    assert reader.col_no == col_before + 1
    assert reader.read_char() is None


def test_empty_text():
    reader = Reader("")
    assert reader.current_char is None
    assert reader.line_no == 1


@pytest.mark.parametrize("text", ["", "PROGRAM X;", "a\nb\n\nc", "tab\there\r\n"])
def test_round_trip(text):
    assert _drain(Reader(text)) == text


def test_line_count_matches_newlines():
    text = "one\ntwo\nthree\n"
    reader = Reader(text)
    _drain(reader)
    assert reader.line_no == 1 + text.count("\n")


def test_from_file(tmp_path):
    path = tmp_path / "prog.kpl"
    path.write_text("BEGIN\nEND.", encoding="latin-1")
    reader = Reader.from_file(path)
    assert reader.current_char == "B"
    assert _drain(reader) == "BEGIN\nEND."


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Reader.from_file(tmp_path / "missing.kpl")