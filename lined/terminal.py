"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
from typing import Optional

import blessed

from .constants import EditorConstants
from .interfaces import Renderer

logger = logging.getLogger(__name__)


class TerminalInterface(Renderer):
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and raw key input."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except Exception:
                # Teardown must not mask the exception that ended the loop
                logger.warning("Could not restore terminal input mode", exc_info=True)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.home + self.term.clear, end='')
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def render(self, lines: list[str], cursor_x: int, cursor_y: int, status: str):
        """Draw visible lines, the status line, and position the cursor.

        Args:
            lines: Lines already sliced to the viewport
            cursor_x: Cursor column relative to the viewport
            cursor_y: Cursor row relative to the viewport
            status: Text for the bottom row
        """
        width = self.width
        print(self.term.home + self.term.clear, end='')

        for y in range(self.height):
            if y < len(lines):
                display_line = lines[y][:width].ljust(width)
            else:
                display_line = EditorConstants.EMPTY_ROW_MARKER.ljust(width)
            print(self.term.move(y, 0) + display_line, end='')

        print(self.term.move(self.term.height - 1, 0) + status[:width].ljust(width), end='')
        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self):
        """Block until the user presses a key.

        Returns:
            The curtsies key name, or None if input is not set up.
        """
        if self._curtsies_input is None:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
