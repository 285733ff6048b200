"""lined CLI entry point.

Allows running via `python -m lined` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import importlib.metadata
import logging
import os
import sys
from pathlib import Path

import platformdirs

from .constants import EditorConstants
from .errors import LoadError

USAGE = "usage: lined [--version] FILE"


def get_version_string() -> str:
    try:
        return importlib.metadata.version(EditorConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def configure_logging() -> None:
    """Send log records to a file so they never reach the fullscreen UI."""
    level_name = os.environ.get(EditorConstants.LOG_LEVEL_ENV, EditorConstants.DEFAULT_LOG_LEVEL)
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    try:
        log_dir = Path(platformdirs.user_log_dir(EditorConstants.APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            log_dir / EditorConstants.LOG_FILE_NAME, encoding='utf-8')
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    except OSError:
        handler = logging.NullHandler()
    root.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    configure_logging()

    # Lazy import to avoid importing terminal deps for --version
    from .editor import Editor
    from .terminal import TerminalInterface

    terminal = TerminalInterface()
    editor = Editor.for_terminal(terminal)
    try:
        editor.load_file(args[0])
    except LoadError as e:
        print(e, file=sys.stderr)
        return 1
    editor.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
