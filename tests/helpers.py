"""Test doubles and key helpers for the editor tests."""

from lined.editor import Editor
from lined.interfaces import KeySource, Renderer, Persistence
from lined.keyboard import KeyEvent, KeyType
from lined.document import Document
from lined.errors import LoadError


class QueueKeySource(KeySource):
    """In-memory key source fed from a list of events."""

    def __init__(self, events=None):
        self.events = list(events or [])

    def get_key_event(self):
        if not self.events:
            raise AssertionError("key queue exhausted")
        return self.events.pop(0)


class RecordingRenderer(Renderer):
    """Renderer that records every frame instead of painting it."""

    def __init__(self):
        self.frames = []
        self.setup_calls = 0
        self.cleanup_calls = 0

    def setup(self):
        self.setup_calls += 1

    def cleanup(self):
        self.cleanup_calls += 1

    def render(self, lines, cursor_x, cursor_y, status):
        self.frames.append((list(lines), cursor_x, cursor_y, status))

    @property
    def last_status(self):
        return self.frames[-1][3]


class MemoryPersistence(Persistence):
    """Persistence backed by a dict of path -> lines."""

    def __init__(self, files=None, fail_save=None):
        self.files = dict(files or {})
        self.fail_save = fail_save

    def load(self, path):
        if path not in self.files:
            raise LoadError(f"Error: File not found: {path}")
        return list(self.files[path])

    def save(self, path, lines):
        if self.fail_save is not None:
            raise self.fail_save
        self.files[path] = list(lines)


def keys(*names):
    """Build key events: single characters are typed, other names are special keys."""
    events = []
    for name in names:
        if len(name) == 1:
            events.append(KeyEvent.char(name))
        else:
            events.append(KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=name))
    return events


def typed(text):
    return [KeyEvent.char(ch) for ch in text]


def press(editor, *names):
    for event in keys(*names):
        editor.handle_key_event(event)


def type_text(editor, text):
    for event in typed(text):
        editor.handle_key_event(event)


def make_editor(lines=None, width=80, height=24, cursor=None, **kwargs):
    editor = Editor(RecordingRenderer(), QueueKeySource(), width, height, **kwargs)
    if lines is not None:
        editor.document = Document(lines)
    if cursor is not None:
        editor.cursor.move_to(*cursor)
    return editor


