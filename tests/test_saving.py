"""Test loading and atomic saving of documents."""

import errno
import os
from unittest.mock import patch

import pytest
from lined.constants import Keys
from lined.errors import LoadError, SaveError
from lined.persistence import FilePersistence, join_lines, split_content

from helpers import make_editor, press


@pytest.fixture
def persistence():
    return FilePersistence()


def test_split_content():
    assert split_content("") == [""]
    assert split_content("one\ntwo\n") == ["one", "two"]
    assert split_content("one\ntwo") == ["one", "two"]
    assert split_content("one\n\n") == ["one", ""]
    assert split_content("\n") == [""]


def test_join_lines_terminates_every_line():
    assert join_lines(["one", "two"]) == "one\ntwo\n"
    assert join_lines([""]) == "\n"


def test_load_reads_lines(tmp_path, persistence):
    path = tmp_path / "doc.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    assert persistence.load(str(path)) == ["alpha", "beta"]


def test_load_empty_file(tmp_path, persistence):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert persistence.load(str(path)) == [""]


def test_load_missing_file(tmp_path, persistence):
    path = tmp_path / "missing.txt"
    with pytest.raises(LoadError, match="File not found"):
        persistence.load(str(path))


def test_load_rejects_invalid_utf8(tmp_path, persistence):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(LoadError, match="not valid UTF-8"):
        persistence.load(str(path))


def test_save_writes_trailing_newline(tmp_path, persistence):
    path = tmp_path / "out.txt"
    persistence.save(str(path), ["First line", "Second line"])
    assert path.read_text(encoding="utf-8") == "First line\nSecond line\n"


def test_save_overwrites_and_round_trips(tmp_path, persistence):
    path = tmp_path / "doc.txt"
    path.write_text("Old content", encoding="utf-8")
    lines = ["New content", "", "ünïcödé"]
    persistence.save(str(path), lines)
    assert persistence.load(str(path)) == lines


def test_save_leaves_no_temp_files(tmp_path, persistence):
    path = tmp_path / "doc.txt"
    persistence.save(str(path), ["a"])
    persistence.save(str(path), ["b"])
    assert os.listdir(tmp_path) == ["doc.txt"]


def test_permission_error_keeps_original(tmp_path, persistence):
    path = tmp_path / "doc.txt"
    path.write_text("Original content\n", encoding="utf-8")
    with patch("lined.persistence.tempfile.NamedTemporaryFile",
               side_effect=PermissionError("denied")):
        with pytest.raises(SaveError, match="Permission denied"):
            persistence.save(str(path), ["New content"])
    assert path.read_text(encoding="utf-8") == "Original content\n"


def test_disk_full_discards_temp_file(tmp_path, persistence):
    path = tmp_path / "doc.txt"
    path.write_text("Original content\n", encoding="utf-8")
    with patch("lined.persistence.os.fsync",
               side_effect=OSError(errno.ENOSPC, "No space left on device")):
        with pytest.raises(SaveError, match="No space left on device"):
            persistence.save(str(path), ["New content"])
    assert os.listdir(tmp_path) == ["doc.txt"]
    assert path.read_text(encoding="utf-8") == "Original content\n"


def test_save_into_missing_directory(tmp_path, persistence):
    path = tmp_path / "nowhere" / "doc.txt"
    with pytest.raises(SaveError, match="Cannot save to"):
        persistence.save(str(path), ["x"])


def test_editor_load_and_save(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("hello\nworld\n", encoding="utf-8")
    editor = make_editor(persistence=FilePersistence())
    editor.load_file(str(path))
    assert editor.document.lines == ["hello", "world"]
    assert editor.filename == str(path)
    assert (editor.cursor.x, editor.cursor.y) == (0, 0)

    editor.enter_insert_mode()
    editor.insert_char("!")
    assert editor.save() is True
    assert path.read_text(encoding="utf-8") == "!hello\nworld\n"
    assert editor.status_text() == f"Saved to {path}"


def test_editor_load_failure_propagates(tmp_path):
    editor = make_editor(persistence=FilePersistence())
    with pytest.raises(LoadError):
        editor.load_file(str(tmp_path / "missing.txt"))
    assert editor.filename is None


def test_quit_writes_nothing_and_reload_starts_at_origin(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    editor = make_editor(persistence=FilePersistence())
    editor.load_file(str(path))
    editor.running = True
    press(editor, Keys.ARROW_DOWN, Keys.END, ":", "q", Keys.ENTER)
    assert not editor.running
    assert os.listdir(tmp_path) == ["doc.txt"]
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"

    reopened = make_editor(persistence=FilePersistence())
    reopened.load_file(str(path))
    assert (reopened.cursor.x, reopened.cursor.y) == (0, 0)
