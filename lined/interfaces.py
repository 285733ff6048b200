"""Capability interfaces the editor core talks to."""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .keyboard import KeyEvent


class KeySource(ABC):
    """Blocking source of key events."""

    @abstractmethod
    def get_key_event(self) -> "Optional[KeyEvent]":
        """Block for the next key event; None means no key was available."""


class Renderer(ABC):
    """Paints the visible window and the status line."""

    def setup(self):
        """Prepare the output device before the first render."""

    def cleanup(self):
        """Restore the output device after the last render."""

    @abstractmethod
    def render(self, lines: list[str], cursor_x: int, cursor_y: int, status: str):
        """Paint lines already sliced to the viewport.

        Args:
            lines: Visible lines, at most viewport height rows
            cursor_x: Cursor column in screen coordinates
            cursor_y: Cursor row in screen coordinates
            status: Text for the status line
        """


class Persistence(ABC):
    """Loads and stores documents as lists of lines."""

    @abstractmethod
    def load(self, path: str) -> list[str]:
        """Read lines from path, raising LoadError on failure."""

    @abstractmethod
    def save(self, path: str, lines: list[str]):
        """Write lines to path, raising SaveError on failure."""
