"""
Entry point for running Actor Search as a module.

Usage:
    python -m actor_search <command>
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
