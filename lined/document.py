"""In-memory line buffer."""

from typing import Iterable, Optional


class Document:
    """Ordered, mutable sequence of text lines.

    A document always holds at least one line; an empty file is a single
    empty line. Line indices outside ``[0, line_count())`` raise
    ``IndexError``. Column arguments are expected to be clamped to
    ``[0, len(line)]`` by the caller.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._lines: list[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]

    @property
    def lines(self) -> list[str]:
        """A copy of the current content."""
        return list(self._lines)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index {index} out of range (0..{len(self._lines) - 1})")

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        self._check_index(index)
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self.line_at(index))

    def set_line(self, index: int, text: str):
        self._check_index(index)
        self._lines[index] = text

    def insert_line(self, index: int, text: str):
        # Inserting at line_count() appends
        if index != len(self._lines):
            self._check_index(index)
        self._lines.insert(index, text)

    def remove_line(self, index: int):
        self._check_index(index)
        if len(self._lines) == 1:
            self._lines[0] = ""
            return
        del self._lines[index]

    def split_at(self, y: int, x: int):
        """Break line ``y`` at column ``x``.

        The text from ``x`` onward becomes a new line at ``y + 1`` and line
        ``y`` keeps its first ``x`` characters. When ``x`` is the line
        length the new line is empty.
        """
        line = self.line_at(y)
        self._lines[y] = line[:x]
        self._lines.insert(y + 1, line[x:])

    def merge_with_previous(self, y: int) -> bool:
        """Append line ``y`` to line ``y - 1`` and remove line ``y``.

        Returns:
            False (and leaves the document untouched) when ``y`` is 0.
        """
        self._check_index(y)
        if y == 0:
            return False
        self._lines[y - 1] = self._lines[y - 1] + self._lines[y]
        del self._lines[y]
        return True

    def insert_char(self, y: int, x: int, ch: str):
        line = self.line_at(y)
        self._lines[y] = line[:x] + ch + line[x:]

    def remove_char(self, y: int, x: int) -> bool:
        """Delete the character left of column ``x`` on line ``y``.

        Returns:
            False (and leaves the line untouched) when ``x`` is 0.
        """
        line = self.line_at(y)
        if x < 1:
            return False
        self._lines[y] = line[:x - 1] + line[x:]
        return True

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"Document({self._lines!r})"
