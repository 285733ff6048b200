"""Cursor position and the listeners that follow it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CursorState:
    """Snapshot of a cursor position, independent of the live cursor."""
    x: int = 0
    y: int = 0


class PositionListener(ABC):
    """Observer notified after every cursor move."""

    @abstractmethod
    def on_cursor_moved(self, x: int, y: int):
        """Called synchronously with the new absolute position."""


class Cursor:
    """Position in absolute document coordinates.

    ``x`` and ``y`` are clamped to be non-negative. The cursor knows nothing
    about the document, so callers clamp against line count and line length
    before moving.
    """

    def __init__(self, x: int = 0, y: int = 0):
        self.x = max(0, x)
        self.y = max(0, y)
        self._listeners: list[PositionListener] = []

    def add_position_listener(self, listener: PositionListener):
        self._listeners.append(listener)

    def move_to(self, x: int, y: int):
        self.x = max(0, x)
        self.y = max(0, y)
        # Listeners run in registration order before the move returns
        for listener in self._listeners:
            listener.on_cursor_moved(self.x, self.y)

    def move_by(self, dx: int, dy: int):
        self.move_to(self.x + dx, self.y + dy)

    def save_state(self) -> CursorState:
        return CursorState(self.x, self.y)

    def restore_state(self, state: CursorState):
        self.move_to(state.x, state.y)

    def __repr__(self) -> str:
        return f"Cursor(x={self.x}, y={self.y})"
