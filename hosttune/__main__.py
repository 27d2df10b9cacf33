"""
Entry point for running hosttune as a module.

Usage:
    python -m hosttune check
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
