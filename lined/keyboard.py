"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

from .constants import Keys
from .interfaces import KeySource


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # Printable character or key identifier (e.g. 'ArrowLeft')
    raw: str = ""  # The raw key string from the terminal

    @property
    def is_printable(self) -> bool:
        """True for a single printable character."""
        return (self.key_type == KeyType.REGULAR
                and len(self.value) == 1
                and self.value.isprintable())

    def is_key(self, name: str) -> bool:
        return self.key_type == KeyType.SPECIAL and self.value == name

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        return cls(key_type=KeyType.REGULAR, value=ch, raw=ch)

    @classmethod
    def special(cls, name: str) -> "KeyEvent":
        return cls(key_type=KeyType.SPECIAL, value=name, raw=name)


# curtsies base names -> editor key identifiers
SPECIAL_KEYS = {
    'up': Keys.ARROW_UP,
    'down': Keys.ARROW_DOWN,
    'left': Keys.ARROW_LEFT,
    'right': Keys.ARROW_RIGHT,
    'home': Keys.HOME,
    'end': Keys.END,
    'enter': Keys.ENTER,
    'return': Keys.ENTER,
    'backspace': Keys.BACKSPACE,
    'esc': Keys.ESCAPE,
    'escape': Keys.ESCAPE,
}

# Control characters terminals send for editor keys
CONTROL_KEYS = {
    '\r': Keys.ENTER,
    '\n': Keys.ENTER,
    '\x08': Keys.BACKSPACE,
    '\x7f': Keys.BACKSPACE,
    '\x1b': Keys.ESCAPE,
}


class KeyboardHandler(KeySource):
    """Reads terminal keys and maps curtsies-style names to KeyEvent."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a terminal key token into a KeyEvent.

        Keys the editor has no identifier for come back as SPECIAL events
        carrying their terminal name ('F5', 'Ctrl-x'), so no mode mistakes
        them for text.

        Args:
            key: curtsies key name (e.g. '<LEFT>', '<Ctrl-x>') or a raw string

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if key_str in CONTROL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=CONTROL_KEYS[key_str], raw=key_str)
        if len(key_str) == 1 and 1 <= ord(key_str) <= 26:  # Ctrl-A .. Ctrl-Z
            name = f"Ctrl-{chr(ord('a') + ord(key_str) - 1)}"
            return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        lower = name.lower()

        # Named whitespace tokens are regular characters
        if lower in ('space', 'spacebar', 'spc'):
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if lower == 'tab':
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)

        if lower in ('ctrl-j', 'ctrl-m'):
            return KeyEvent(key_type=KeyType.SPECIAL, value=Keys.ENTER, raw=key_str)
        if lower == 'ctrl-h':
            return KeyEvent(key_type=KeyType.SPECIAL, value=Keys.BACKSPACE, raw=key_str)

        if lower in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=SPECIAL_KEYS[lower], raw=key_str)

        # Everything else keeps its terminal name
        return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=key_str)


def create_keyboard_handler(terminal_interface):
    """Factory function to create a keyboard handler.

    Args:
        terminal_interface: TerminalInterface instance

    Returns:
        KeyboardHandler instance
    """
    return KeyboardHandler(terminal_interface)
