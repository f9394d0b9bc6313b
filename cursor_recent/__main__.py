"""
Main entry point for running the package as a module.

Uses the Click-based CLI from cursor_recent/cli/.
"""
import sys

from cursor_recent.cli import main

if __name__ == "__main__":
    sys.exit(main())
