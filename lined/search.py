"""Wraparound substring search over a document."""

import re
from enum import Enum
from typing import NamedTuple, Optional

from .document import Document

_WORD_RUN = re.compile(r"[A-Za-z0-9_]+")


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class SearchMatch(NamedTuple):
    line: int
    column: int
    word_end_x: int  # last column of the word run at or after the match


def _word_end(line: str, column: int) -> int:
    m = _WORD_RUN.search(line, column)
    if m is None:
        return len(line)
    return m.end() - 1


def _find_in_line(line: str, query: str, start: int, direction: SearchDirection) -> int:
    if direction is SearchDirection.FORWARD:
        return line.find(query, max(start, 0))
    if start < 0:
        return -1
    # Last occurrence beginning at or before start
    return line.rfind(query, 0, start + len(query))


def search(document: Document, start_y: int, start_x: int, query: str,
           direction: SearchDirection) -> Optional[SearchMatch]:
    """Find the next occurrence of query from (start_x, start_y).

    Forward scans the start line from ``start_x + 1``, then each following
    line from column 0. Backward scans the start line for matches beginning
    at or before ``start_x - 1``, then each preceding line from its end.
    Both wrap around the document and visit every line exactly once.

    Returns:
        The first match in scan order, or None when the query is empty or
        occurs nowhere.
    """
    if not query:
        return None

    count = document.line_count()
    forward = direction is SearchDirection.FORWARD
    step = 1 if forward else count - 1
    line_idx = start_y
    char_idx = start_x + 1 if forward else start_x - 1

    for _ in range(count):
        line = document.line_at(line_idx)
        match = _find_in_line(line, query, char_idx, direction)
        if match != -1:
            return SearchMatch(line_idx, match, _word_end(line, match))
        line_idx = (line_idx + step) % count
        char_idx = 0 if forward else document.line_length(line_idx) - 1

    return None
