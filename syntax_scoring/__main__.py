"""
Make syntax_scoring runnable as a module.

Usage:
    python -m syntax_scoring INPUT [--json | --plain] [--details]
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
