"""lined - A modal terminal line editor."""

from .document import Document
from .cursor import Cursor, CursorState, PositionListener
from .viewport import Viewport
from .search import SearchDirection, SearchMatch, search
from .editor import Editor

__all__ = [
    'Document',
    'Cursor',
    'CursorState',
    'PositionListener',
    'Viewport',
    'SearchDirection',
    'SearchMatch',
    'search',
    'Editor',
]
