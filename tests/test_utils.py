from unittest import mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sparkmaths.utils import Timer, read_file, split_string


def test_split_simple():
    assert split_string("a,b,c", ",") == ["a", "b", "c"]


def test_split_keeps_empty_fields():
    parts = split_string(",a,,b,", ",")
    assert parts == ["", "a", "", "b", ""]


def test_split_empty_string_gives_one_empty_field():
    assert split_string("", ",") == [""]


def test_split_without_delimiter_returns_whole():
    assert split_string("hello", ",") == ["hello"]


def test_split_rejects_multichar_delimiter():
    with pytest.raises(ValueError):
        split_string("a,b", ",,")


@given(st.text(), st.characters())
def test_split_round_trip(text, delimiter):
    parts = split_string(text, delimiter)
    assert delimiter.join(parts) == text
    assert all(delimiter not in part for part in parts)
    assert len(parts) == text.count(delimiter) + 1


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "shader.vert"
    path.write_text("line one\nline two\n")
    assert read_file(path) == "line one\nline two\n"
    assert read_file(str(path)) == "line one\nline two\n"


def test_read_file_stops_at_nul(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("before\0after")
    assert read_file(path) == "before"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_elapsed_is_in_milliseconds():
    with mock.patch("time.perf_counter", side_effect=[10.0, 10.5]):
        timer = Timer()
        assert timer.elapsed() == pytest.approx(500.0)


def test_reset_restarts_timer():
    with mock.patch("time.perf_counter", side_effect=[0.0, 2.0, 2.25]):
        timer = Timer()
        timer.reset()
        assert timer.elapsed() == pytest.approx(250.0)


def test_elapsed_is_monotonic_and_non_negative():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert first >= 0.0
    assert second >= first