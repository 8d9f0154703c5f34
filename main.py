#!/usr/bin/env python3
"""Entry point for the Promptbook placeholder dialog."""

import sys


def main() -> int:
    """Launch the placeholder dialog."""
    from src.promptbook.app import main as run

    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
