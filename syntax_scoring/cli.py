#!/usr/bin/env python3
# File: syntax_scoring/cli.py
"""
syntax-score: classify bracket lines and report both syntax scores.

Exit codes:
    0  success
    2  input missing or unreadable (including invalid UTF-8)
    3  input contains characters outside ()[]{}<>
    4  median completion score undefined (even number of incomplete lines)
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .delimiters import MedianUndefinedError, UnrecognizedCharacterError
from .driver import run
from .report import render_plain, render_table, to_json

INPUT_ENV_VAR = "SYNTAX_SCORING_INPUT"

EXIT_OK = 0
EXIT_NO_INPUT = 2
EXIT_MALFORMED = 3
EXIT_NO_MEDIAN = 4

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _setup_logging(log_level: str = "warning") -> logging.Logger:
    """Route package logs to stderr; stdout is reserved for the report."""
    logger = logging.getLogger("syntax_scoring")
    logger.setLevel(LOG_LEVELS[log_level])

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syntax-score",
        description="Score corrupted and incomplete lines of ()[]{}<> chunks.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help=f"Input document, one line of delimiters per line. Defaults to ${INPUT_ENV_VAR}.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emit the report as JSON.",
    )
    output.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="Print only the two scores, one per line.",
    )
    parser.add_argument(
        "-d",
        "--details",
        action="store_true",
        help="Include a per-line breakdown (illegal character or completion string).",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=list(LOG_LEVELS),
        default="warning",
        help="Logging level for diagnostics on stderr (default: warning).",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_input(arg: Optional[Path]) -> Optional[Path]:
    if arg is not None:
        return arg
    env_input = os.environ.get(INPUT_ENV_VAR, "").strip()
    return Path(env_input) if env_input else None


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = _setup_logging(args.log_level)

    console_out = Console(highlight=False)
    console_err = Console(stderr=True, highlight=False)

    path = _resolve_input(args.input)
    if path is None:
        console_err.print(f"[bold red][ERROR][/] No input given. Pass a path or set ${INPUT_ENV_VAR}.")
        return EXIT_NO_INPUT

    try:
        report = run(path)
    except FileNotFoundError:
        logger.debug("input not found: %s", path, exc_info=True)
        console_err.print(f"[bold red][ERROR][/] File not found: {escape(str(path))}")
        return EXIT_NO_INPUT
    except OSError as e:
        logger.debug("could not read %s", path, exc_info=True)
        console_err.print(f"[bold red][ERROR][/] Could not read {escape(str(path))}: {escape(str(e))}")
        return EXIT_NO_INPUT
    except UnicodeDecodeError as e:
        logger.debug("could not decode %s", path, exc_info=True)
        console_err.print(
            f"[bold red][ERROR][/] Could not read {escape(str(path))}: "
            f"not valid UTF-8 ({escape(e.reason)} at byte {e.start})"
        )
        return EXIT_NO_INPUT
    except UnrecognizedCharacterError as e:
        logger.debug("aborting: %s", e)
        console_err.print(f"[bold red][ERROR][/] Malformed input: {escape(str(e))}")
        return EXIT_MALFORMED
    except MedianUndefinedError as e:
        logger.debug("aborting: %s", e)
        console_err.print(f"[bold red][ERROR][/] {escape(str(e))}")
        return EXIT_NO_MEDIAN

    if args.json:
        sys.stdout.write(to_json(report, details=args.details) + "\n")
    elif args.plain:
        render_plain(report, console_out)
    else:
        render_table(report, console_out, details=args.details)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
