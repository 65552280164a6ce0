"""
Amenu — entry point.

Usage:
    python main.py [prompts-file]

Or install and run:
    pip install .
    amenu [prompts-file]
"""
import sys

from amenu.cli import main


if __name__ == '__main__':
    sys.exit(main())
