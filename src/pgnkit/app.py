"""Command-line entry point: print the canonical form of a PGN game."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnkit.core.errors import PgnError
from pgnkit.core.notation import PgnOptions, canonicalize_pgn
from pgnkit.core.notation.time_control import DEFAULT_MAX_PERIODS

_LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnkit",
        description="Parse a single-game PGN file and print it in canonical form.",
    )
    parser.add_argument("path", help="PGN file to read, or '-' for stdin")
    parser.add_argument(
        "--check-result",
        action="store_true",
        help="fail when the Result tag and the termination marker disagree",
    )
    parser.add_argument(
        "--max-time-control-periods",
        type=int,
        default=DEFAULT_MAX_PERIODS,
        metavar="N",
        help="reject TimeControl tags chaining more than N periods",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the canonicalizer; return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = PgnOptions(
            check_result_consistency=args.check_result,
            max_time_control_periods=args.max_time_control_periods,
        )
    except ValueError as exc:
        _LOGGER.error("Invalid options: %s", exc)
        return 2

    try:
        pgn_text = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return 1

    try:
        canonical = canonicalize_pgn(pgn_text, options)
    except PgnError as exc:
        _LOGGER.error("Cannot parse %s: %s", args.path, exc)
        return 1

    sys.stdout.write(canonical + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
