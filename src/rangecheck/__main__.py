"""
rangecheck CLI entry point.

Usage:
    python -m rangecheck 1 10
    python -m rangecheck 1 10 contains 5
    python -m rangecheck 5 10 subset 1 15
"""

import sys

from rangecheck.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
