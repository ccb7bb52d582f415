"""Todo CLI entry point

Usage:
    python -m todoapp <command> [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
