"""Tests for the line buffer."""

import pytest
from lined.document import Document


def test_empty_document_has_one_empty_line():
    assert Document().lines == [""]
    assert Document([]).lines == [""]
    assert Document([]).line_count() == 1


def test_line_access_and_replacement():
    doc = Document(["one", "two"])
    assert doc.line_at(1) == "two"
    doc.set_line(0, "uno")
    assert doc.lines == ["uno", "two"]


def test_lines_is_a_copy():
    doc = Document(["a"])
    doc.lines.append("b")
    assert doc.line_count() == 1


def test_insert_line_in_middle_and_at_end():
    doc = Document(["a", "c"])
    doc.insert_line(1, "b")
    doc.insert_line(3, "d")
    assert doc.lines == ["a", "b", "c", "d"]


def test_remove_line():
    doc = Document(["a", "b", "c"])
    doc.remove_line(1)
    assert doc.lines == ["a", "c"]


def test_removing_only_line_leaves_empty_line():
    doc = Document(["only"])
    doc.remove_line(0)
    assert doc.lines == [""]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_index_is_rejected(index):
    doc = Document(["a", "b"])
    with pytest.raises(IndexError):
        doc.line_at(index)
    with pytest.raises(IndexError):
        doc.set_line(index, "x")
    with pytest.raises(IndexError):
        doc.remove_line(index)


def test_insert_line_past_end_is_rejected():
    doc = Document(["a"])
    with pytest.raises(IndexError):
        doc.insert_line(2, "x")


def test_split_at_middle():
    doc = Document(["helloworld"])
    doc.split_at(0, 5)
    assert doc.lines == ["hello", "world"]


def test_split_at_end_creates_empty_line():
    doc = Document(["hello", "next"])
    doc.split_at(0, 5)
    assert doc.lines == ["hello", "", "next"]


def test_split_at_start_moves_whole_line_down():
    doc = Document(["hello"])
    doc.split_at(0, 0)
    assert doc.lines == ["", "hello"]


def test_merge_with_previous():
    doc = Document(["foo", "bar", "baz"])
    assert doc.merge_with_previous(1) is True
    assert doc.lines == ["foobar", "baz"]


def test_merge_first_line_is_invalid():
    doc = Document(["foo", "bar"])
    assert doc.merge_with_previous(0) is False
    assert doc.lines == ["foo", "bar"]


@pytest.mark.parametrize("line,x", [("abcdef", 0), ("abcdef", 3), ("abcdef", 6), ("", 0)])
def test_split_then_merge_restores_line(line, x):
    doc = Document(["before", line, "after"])
    doc.split_at(1, x)
    doc.merge_with_previous(2)
    assert doc.lines == ["before", line, "after"]


def test_insert_char():
    doc = Document(["cat"])
    doc.insert_char(0, 0, "x")
    assert doc.line_at(0) == "xcat"
    doc.insert_char(0, 4, "!")
    assert doc.line_at(0) == "xcat!"


def test_remove_char():
    doc = Document(["abc"])
    assert doc.remove_char(0, 2) is True
    assert doc.line_at(0) == "ac"


def test_remove_char_at_column_zero_is_invalid():
    doc = Document(["abc"])
    assert doc.remove_char(0, 0) is False
    assert doc.line_at(0) == "abc"
