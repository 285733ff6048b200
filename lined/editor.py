"""Main editor controller for the line editor."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .cursor import Cursor
from .document import Document
from .errors import SaveError, UnknownCommandError
from .interfaces import KeySource, Persistence, Renderer
from .keyboard import KeyEvent, create_keyboard_handler
from .modes import InsertMode, Mode, NormalMode, SearchMode
from .persistence import FilePersistence
from .search import SearchDirection, SearchMatch, search
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Editor:
    """Modal line editor application controller.

    Owns the document, the cursor and the viewport. The viewport listens to
    the cursor, so every move re-clamps the scroll offsets before the next
    render reads them.
    """

    def __init__(self, renderer: Renderer, key_source: KeySource, width: int, height: int,
                 persistence: Optional[Persistence] = None):
        """Initialize the editor components.

        Args:
            renderer: Paints the visible window and status line
            key_source: Supplies key events
            width: Viewport width in columns
            height: Viewport height in rows
            persistence: Document storage (defaults to files on disk)
        """
        self.renderer = renderer
        self.key_source = key_source
        self.persistence = persistence or FilePersistence()
        self.document = Document()
        self.cursor = Cursor()
        self.viewport = Viewport(width, height)
        self.viewport.attach_to_cursor(self.cursor)
        self.command_registry = CommandRegistry()
        self.mode: Mode = NormalMode()
        self.running = False
        self.filename: Optional[str] = None
        self.modified = False
        self.status_message: Optional[str] = None

    @classmethod
    def for_terminal(cls, terminal) -> "Editor":
        """Create an editor drawing to and reading from a TerminalInterface."""
        return cls(terminal, create_keyboard_handler(terminal),
                   terminal.width, terminal.height)

    def run(self):
        """Run the main editor loop until quit."""
        self.renderer.setup()
        self.running = True
        try:
            self.render()
            while self.running:
                key_event = self.key_source.get_key_event()
                if key_event is None:
                    continue
                self.handle_key_event(key_event)
                if self.running:
                    self.render()
        except KeyboardInterrupt:
            logger.info("Interrupted, leaving editor")
            self.running = False
        finally:
            self.renderer.cleanup()

    def render(self):
        """Paint the viewport using the offsets left by the last cursor move."""
        lines = self.viewport.visible_lines(self.document)
        screen_x, screen_y = self.viewport.to_screen(self.cursor.x, self.cursor.y)
        self.renderer.render(lines, screen_x, screen_y, self.status_text())

    def status_text(self) -> str:
        if self.status_message:
            return self.status_message
        return self.mode.status_text(self)

    def handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event in the current mode.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Messages last until the next key press
        self.status_message = None
        self.mode.handle_key(self, key_event)

    def set_mode(self, mode: Mode):
        logger.debug(f"Mode {self.mode.name} -> {mode.name}")
        self.mode = mode

    def enter_insert_mode(self):
        self.set_mode(InsertMode())

    def enter_search_mode(self):
        self.set_mode(SearchMode(saved_cursor=self.cursor.save_state()))

    def execute_command_line(self, text: str, key_event: KeyEvent):
        """Run a ':' command, reporting unknown commands on the status line."""
        try:
            self.command_registry.execute_line(self, text, key_event)
        except UnknownCommandError as e:
            logger.debug(f"Unknown command {text!r}")
            self.status_message = str(e)

    # Movement

    def _current_line_length(self) -> int:
        return self.document.line_length(self.cursor.y)

    def move_cursor_down(self):
        y = self.cursor.y
        if y < self.document.line_count() - 1:
            self.cursor.move_to(min(self.cursor.x, self.document.line_length(y + 1)), y + 1)

    def move_cursor_up(self):
        y = self.cursor.y
        if y > 0:
            self.cursor.move_to(min(self.cursor.x, self.document.line_length(y - 1)), y - 1)

    def move_cursor_left(self):
        if self.cursor.x > 0:
            self.cursor.move_by(-1, 0)
        elif self.cursor.y > 0:
            y = self.cursor.y - 1
            self.cursor.move_to(self.document.line_length(y), y)

    def move_cursor_right(self):
        if self.cursor.x < self._current_line_length():
            self.cursor.move_by(1, 0)
        elif self.cursor.y + 1 < self.document.line_count():
            self.cursor.move_to(0, self.cursor.y + 1)

    def move_beginning_of_line(self):
        self.cursor.move_to(0, self.cursor.y)

    def move_end_of_line(self):
        self.cursor.move_to(self._current_line_length(), self.cursor.y)

    # Editing

    def insert_char(self, ch: str):
        self.document.insert_char(self.cursor.y, self.cursor.x, ch)
        self.cursor.move_by(1, 0)

    def delete_backward(self) -> bool:
        """Delete left of the cursor, joining lines at column 0.

        Returns:
            True if the document changed
        """
        x, y = self.cursor.x, self.cursor.y
        if x > 0:
            self.document.remove_char(y, x)
            self.cursor.move_by(-1, 0)
            return True
        if y > 0:
            join_x = self.document.line_length(y - 1)
            self.document.merge_with_previous(y)
            self.cursor.move_to(join_x, y - 1)
            return True
        return False

    def insert_newline(self):
        y = self.cursor.y
        self.document.split_at(y, self.cursor.x)
        self.cursor.move_to(0, y + 1)

    # Search

    def find(self, query: str, direction: SearchDirection) -> Optional[SearchMatch]:
        """Move the cursor to the next match of query, scrolling it into view.

        The viewport is first scrolled so the whole matched word is visible,
        then the cursor moves to the start of the match. Without a match the
        cursor stays where it is.
        """
        match = search(self.document, self.cursor.y, self.cursor.x, query, direction)
        if match is None:
            return None
        self.viewport.adjust_offsets(match.word_end_x, match.line)
        self.cursor.move_to(match.column, match.line)
        return match

    # Files

    def load_file(self, filename: str):
        """Load a file into the editor.

        Args:
            filename: Path to file to load

        Raises:
            LoadError: if the file cannot be read
        """
        lines = self.persistence.load(filename)
        self.document = Document(lines)
        self.filename = filename
        self.modified = False
        self.cursor.move_to(0, 0)
        logger.info(f"Loaded {filename} ({self.document.line_count()} lines)")

    def save(self) -> bool:
        """Save the document to its file.

        Returns:
            True if save succeeded; on failure the error is on the status line
        """
        if not self.filename:
            self.status_message = EditorConstants.NO_FILENAME_MESSAGE
            return False
        try:
            self.persistence.save(self.filename, self.document.lines)
        except SaveError as e:
            self.status_message = str(e)
            return False
        self.modified = False
        self.status_message = EditorConstants.SAVED_MESSAGE.format(self.filename)
        logger.info(f"Saved {self.filename}")
        return True

    def quit(self):
        if self.modified:
            logger.info("Quitting with unsaved changes")
        self.running = False
