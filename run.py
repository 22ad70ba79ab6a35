#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:
    python run.py play
    python run.py play --width 9 --height 7
    python run.py analyze --position 0,0,0,...
"""

import sys

from connect4engine.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
