"""Command pattern implementation for editor actions."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import Keys
from .errors import UnknownCommandError
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(editor)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor'):
        """Perform the movement."""


class LeftCharCommand(MovementCommand):
    def _move(self, editor):
        editor.move_cursor_left()


class RightCharCommand(MovementCommand):
    def _move(self, editor):
        editor.move_cursor_right()


class UpLineCommand(MovementCommand):
    def _move(self, editor):
        editor.move_cursor_up()


class DownLineCommand(MovementCommand):
    def _move(self, editor):
        editor.move_cursor_down()


class BeginningOfLineCommand(MovementCommand):
    def _move(self, editor):
        editor.move_beginning_of_line()


class EndOfLineCommand(MovementCommand):
    def _move(self, editor):
        editor.move_end_of_line()


class EditCommand(EditorCommand):
    """Base class for editing commands, only available in insert mode."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Perform the edit and report whether the document changed."""


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        return editor.delete_backward()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.insert_newline()
        return True


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        if not key_event.is_printable:
            return False
        editor.insert_char(key_event.value)
        return True


class SystemCommand(EditorCommand):
    """Base class for command-line actions like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor'):
        """Perform the system action."""


class QuitCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.save()


class SaveQuitCommand(SystemCommand):
    def _execute_system(self, editor):
        # A failed save keeps the session open so edits are not lost
        if editor.save():
            editor.quit()


class InsertModeCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.enter_insert_mode()


class SearchModeCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.enter_search_mode()


class CommandRegistry:
    """Registry mapping keys and command-line text to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._line_commands: Dict[str, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, Keys.ARROW_LEFT), LeftCharCommand())
        self.register((KeyType.SPECIAL, Keys.ARROW_RIGHT), RightCharCommand())
        self.register((KeyType.SPECIAL, Keys.ARROW_UP), UpLineCommand())
        self.register((KeyType.SPECIAL, Keys.ARROW_DOWN), DownLineCommand())
        self.register((KeyType.SPECIAL, Keys.HOME), BeginningOfLineCommand())
        self.register((KeyType.SPECIAL, Keys.END), EndOfLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, Keys.BACKSPACE), BackspaceCommand())
        self.register((KeyType.SPECIAL, Keys.ENTER), InsertNewlineCommand())

        # Command-line commands
        self.register_line(':q', QuitCommand())
        self.register_line(':w', SaveCommand())
        self.register_line(':wq', SaveQuitCommand())
        self.register_line(':qw', SaveQuitCommand())
        self.register_line(':i', InsertModeCommand())
        self.register_line(':f', SearchModeCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key."""
        self._commands[key] = command

    def register_line(self, text: str, command: EditorCommand):
        """Register a command for a command-line string such as ':w'."""
        self._line_commands[text] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key."""
        return self._commands.get((key_type, value))

    def get_line_command(self, text: str) -> Optional[EditorCommand]:
        return self._line_commands.get(text)

    def execute(self, editor: 'Editor', key_event: 'KeyEvent', allow_edits: bool = False) -> bool:
        """Execute the command bound to a key event.

        Args:
            editor: Editor instance
            key_event: The key event to dispatch
            allow_edits: Whether editing commands and text input may run

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None and key_event.key_type == KeyType.REGULAR:
            command = InsertTextCommand()
        if command is None:
            return False
        if isinstance(command, EditCommand) and not allow_edits:
            return False
        return command.execute(editor, key_event)

    def execute_line(self, editor: 'Editor', text: str, key_event: 'KeyEvent') -> bool:
        """Execute a command-line string.

        Raises:
            UnknownCommandError: if no command is registered for text
        """
        command = self.get_line_command(text)
        if command is None:
            raise UnknownCommandError(text[1:])
        logger.debug(f"Executing command {text!r}")
        return command.execute(editor, key_event)
