"""Terminal output helpers.

Plain print-based formatting for progress headers and fatal errors. The
ordering engine itself never prints; only discovery and the CLI do.
"""

from __future__ import annotations

import sys


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Goes to stderr so stdout carries only the ordered result.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}", file=sys.stderr)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for configuration problems that make ordering impossible.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
