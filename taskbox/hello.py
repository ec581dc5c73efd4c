"""Print a reversed greeting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

GREETING = "Hello, OTUS!"


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Write the reversed greeting to standard output and return 0."""
    parser = argparse.ArgumentParser(description="Print a reversed greeting.")
    parser.parse_args(argv)
    sys.stdout.write(reverse(GREETING) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())