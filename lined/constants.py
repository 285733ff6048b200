"""Constants and configuration for the lined editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Status line
    NORMAL_STATUS = "Lines: {}, X: {}, Y: {}"
    INSERT_STATUS = "Insertion Mode"
    UNKNOWN_COMMAND_MESSAGE = "Unknown command '{}'"
    SAVED_MESSAGE = "Saved to {}"
    NO_FILENAME_MESSAGE = "No file name"

    # Command line
    COMMAND_PROMPT = ":"

    # Rows past the end of the document
    EMPTY_ROW_MARKER = "-"

    # File operations
    LINE_SEPARATOR = "\n"
    FILE_ENCODING = "utf-8"

    # Logging
    LOG_LEVEL_ENV = "LINED_LOG_LEVEL"
    LOG_FILE_NAME = "lined.log"
    DEFAULT_LOG_LEVEL = "WARNING"
    APP_NAME = "lined"


class Keys:
    """Identifiers carried by named key events."""

    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    BACKSPACE = "Backspace"
    ESCAPE = "Escape"
