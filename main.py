#!/usr/bin/env python3
"""red - a modal terminal text editor.

Usage:
    python main.py [file ...]

Keys (Normal mode):
    h j k l / arrows   Move cursor
    w b ^ $ g G        Word, line start/end, first/last line
    i o O              Insert, open line below/above
    dd x p u           Delete line, delete char, paste, undo
    : /                Command, search
    H L Q              Previous/next buffer, close buffer
Commands:
    :w  :q  :qa  :tn <path>  :%s,find,replace,g
Insert mode:
    Esc or ",," returns to Normal mode
"""

from red.__main__ import main


if __name__ == "__main__":
    main()
