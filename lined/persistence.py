"""Loading and atomic saving of documents."""

import errno
import logging
import os
import tempfile

from .constants import EditorConstants
from .errors import LoadError, SaveError
from .interfaces import Persistence

logger = logging.getLogger(__name__)


def split_content(content: str) -> list[str]:
    """Split file content into lines.

    A single trailing newline ends the last line rather than starting a new
    one. Empty content is one empty line.
    """
    if not content:
        return [""]
    lines = content.split(EditorConstants.LINE_SEPARATOR)
    if lines[-1] == "":
        lines.pop()
    return lines or [""]


def join_lines(lines: list[str]) -> str:
    """Join lines, terminating each with a newline."""
    return "".join(line + EditorConstants.LINE_SEPARATOR for line in lines)


class FilePersistence(Persistence):
    """Reads and writes UTF-8 text files."""

    def load(self, path: str) -> list[str]:
        try:
            with open(path, 'r', encoding=EditorConstants.FILE_ENCODING) as f:
                content = f.read()
        except FileNotFoundError:
            raise LoadError(f"Error: File not found: {path}")
        except UnicodeDecodeError:
            raise LoadError(f"Error: {path} is not valid UTF-8 text")
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            raise LoadError(f"Error: Cannot read {path}")
        return split_content(content)

    def save(self, path: str, lines: list[str]):
        """Save lines to path atomically.

        Writes to a temporary file in the same directory, then renames it
        over the target so readers never see a partial file.

        Raises:
            SaveError: if the file could not be written
        """
        content = join_lines(lines)
        dir_name = os.path.dirname(path) or '.'
        suffix = os.path.splitext(path)[1]
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                             dir=dir_name, suffix=suffix,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())

            # Atomic rename on POSIX; overwrites the target on Windows too
            os.replace(temp_filename, path)
        except PermissionError as e:
            self._discard(temp_filename)
            logger.warning(f"Permission denied saving {path}: {e}")
            raise SaveError(f"Error: Permission denied saving {path}")
        except OSError as e:
            self._discard(temp_filename)
            logger.warning(f"Could not save {path}: {e}")
            if e.errno == errno.ENOSPC:
                raise SaveError("Error: No space left on device")
            raise SaveError(f"Error: Cannot save to {path}")

    @staticmethod
    def _discard(temp_filename):
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning(f"Could not remove temporary file {temp_filename}")
