#!/usr/bin/env python3
"""lined - A modal terminal line editor.

Usage:
    python main.py FILE

Modes:
    Normal: arrow keys, Home and End move the cursor; ':' opens the command line
    Command: :q quit, :w save, :wq save and quit, :i insert mode, :f search
    Insert: type to insert text; Backspace, Enter; Escape returns to normal
    Search: type a query; arrows pick the direction; Enter returns to normal
"""

import sys
from lined.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
