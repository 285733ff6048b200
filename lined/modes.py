"""Modal key interpretation: normal, command, insert and search modes.

Each mode decides what a key event means and calls editor operations. Modes
switch by handing the editor a new mode instance, so per-mode state (the
command buffer, the search query) lives and dies with the mode.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import EditorConstants, Keys
from .cursor import CursorState
from .search import SearchDirection

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class Mode(ABC):
    """Base class for editor modes."""

    name: str = "mode"

    @abstractmethod
    def handle_key(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Interpret one key event."""

    @abstractmethod
    def status_text(self, editor: 'Editor') -> str:
        """Status line content while this mode is active."""


class NormalMode(Mode):
    name = "normal"

    def handle_key(self, editor, key_event):
        if key_event.is_printable and key_event.value == EditorConstants.COMMAND_PROMPT:
            editor.set_mode(CommandMode())
            return
        editor.command_registry.execute(editor, key_event)

    def status_text(self, editor):
        return EditorConstants.NORMAL_STATUS.format(
            editor.document.line_count(), editor.cursor.x, editor.cursor.y)


@dataclass
class CommandMode(Mode):
    """Accumulates a ':' command until Enter or Escape."""

    buffer: str = EditorConstants.COMMAND_PROMPT
    name = "command"

    def handle_key(self, editor, key_event):
        if key_event.is_key(Keys.ESCAPE):
            self.buffer = ""
            editor.set_mode(NormalMode())
        elif key_event.is_key(Keys.ENTER):
            editor.set_mode(NormalMode())
            editor.execute_command_line(self.buffer, key_event)
        elif key_event.is_key(Keys.BACKSPACE):
            # The leading prompt is never removed
            if len(self.buffer) > len(EditorConstants.COMMAND_PROMPT):
                self.buffer = self.buffer[:-1]
        elif key_event.is_printable:
            self.buffer += key_event.value

    def status_text(self, editor):
        return self.buffer


class InsertMode(Mode):
    name = "insert"

    def handle_key(self, editor, key_event):
        if key_event.is_key(Keys.ESCAPE):
            editor.set_mode(NormalMode())
            return
        if editor.command_registry.execute(editor, key_event, allow_edits=True):
            editor.modified = True

    def status_text(self, editor):
        return EditorConstants.INSERT_STATUS


@dataclass
class SearchMode(Mode):
    """Incremental search that previews matches by moving the cursor.

    Enter and Escape both put the cursor back where it was when the mode
    was entered.
    """

    saved_cursor: CursorState
    query: str = ""
    direction: SearchDirection = SearchDirection.FORWARD
    name = "search"

    def handle_key(self, editor, key_event):
        if key_event.is_key(Keys.ENTER) or key_event.is_key(Keys.ESCAPE):
            editor.cursor.restore_state(self.saved_cursor)
            editor.set_mode(NormalMode())
            return

        if key_event.is_key(Keys.BACKSPACE):
            self.query = self.query[:-1]
        elif key_event.is_key(Keys.ARROW_DOWN) or key_event.is_key(Keys.ARROW_RIGHT):
            self.direction = SearchDirection.FORWARD
        elif key_event.is_key(Keys.ARROW_UP) or key_event.is_key(Keys.ARROW_LEFT):
            self.direction = SearchDirection.BACKWARD
        elif key_event.is_printable:
            self.query += key_event.value
        else:
            return

        if self.query:
            editor.find(self.query, self.direction)

    def status_text(self, editor):
        return self.query
