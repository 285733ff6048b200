"""Error kinds surfaced by the editor."""

from .constants import EditorConstants


class EditorError(Exception):
    """Base class for errors shown to the user on the status line."""


class UnknownCommandError(EditorError):
    """Raised when the command line holds no recognized command."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(EditorConstants.UNKNOWN_COMMAND_MESSAGE.format(text))


class LoadError(EditorError):
    """Raised when a document cannot be read."""


class SaveError(EditorError):
    """Raised when a document cannot be written."""
