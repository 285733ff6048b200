"""Scrolling window into document coordinates."""

from .cursor import Cursor, PositionListener
from .document import Document


def _clamp_offset(pos: int, offset: int, span: int) -> int:
    """Move offset by the least amount that puts pos inside the window."""
    if pos < offset:
        return pos
    if pos >= offset + span:
        return pos - span + 1
    return offset


class Viewport(PositionListener):
    """Fixed-size window whose offsets follow the cursor.

    After every adjustment ``offset_y <= y <= offset_y + height - 1`` and
    ``offset_x <= x <= offset_x + width - 1``.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"viewport must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self._offset_x = 0
        self._offset_y = 0

    @property
    def offset_x(self) -> int:
        return self._offset_x

    @property
    def offset_y(self) -> int:
        return self._offset_y

    def attach_to_cursor(self, cursor: Cursor):
        cursor.add_position_listener(self)

    def on_cursor_moved(self, x: int, y: int):
        self.adjust_offsets(x, y)

    def adjust_offsets(self, cursor_x: int, cursor_y: int):
        self._offset_y = _clamp_offset(cursor_y, self._offset_y, self.height)
        self._offset_x = _clamp_offset(cursor_x, self._offset_x, self.width)

    def visible_lines(self, document: Document) -> list[str]:
        """Slice the document to the rows and columns inside the window."""
        end = min(self._offset_y + self.height, document.line_count())
        return [document.line_at(y)[self._offset_x:self._offset_x + self.width]
                for y in range(self._offset_y, end)]

    def to_screen(self, x: int, y: int) -> tuple[int, int]:
        return (x - self._offset_x, y - self._offset_y)
