"""Whole-game PGN parsing and canonical serialization."""

from __future__ import annotations

import logging

from pgnkit.core.errors import ResultMismatchError
from pgnkit.core.notation.models import PgnFile
from pgnkit.core.notation.movetext import parse_movetext, parse_termination, skip_commentary
from pgnkit.core.notation.options import PgnOptions
from pgnkit.core.notation.tags import parse_tag_section
from pgnkit.core.scanner import Scanner

_LOGGER = logging.getLogger(__name__)

_DEFAULT_OPTIONS = PgnOptions()


def parse_pgn(pgn_text: str, options: PgnOptions | None = None) -> PgnFile:
    """Parse a single PGN game: tag pairs, movetext and termination marker.

    Multi-game files must be split by the caller; text after the
    termination marker other than whitespace or commentary is an error.

    Raises:
        PgnGrammarError: if the text does not follow the grammar.
        ResultMismatchError: if ``options.check_result_consistency`` is set
            and the Result tag disagrees with the termination marker.
    """
    opts = options or _DEFAULT_OPTIONS
    scanner = Scanner(pgn_text)

    scanner.skip_whitespace()
    roster = parse_tag_section(scanner, opts.max_time_control_periods)
    skip_commentary(scanner)
    movetext = parse_movetext(scanner)
    termination = parse_termination(scanner)
    skip_commentary(scanner)
    if not scanner.at_end():
        raise scanner.fail("end_of_game", "unexpected text after the termination marker")

    if opts.check_result_consistency and roster.result != termination:
        raise ResultMismatchError(
            f"Result tag {roster.result.value!r} does not match "
            f"termination marker {termination.value!r}"
        )

    _LOGGER.debug(
        "Parsed PGN game %r: %d tags, %d moves, %s",
        roster.event,
        len(roster.tag_pairs()),
        len(movetext),
        termination.value,
    )
    return PgnFile(roster=roster, movetext=movetext, termination=termination)


def render_pgn(pgn_file: PgnFile) -> str:
    """Canonical PGN text: fixed tag order, renumbered moves, no trailing newline."""
    return str(pgn_file)


def canonicalize_pgn(pgn_text: str, options: PgnOptions | None = None) -> str:
    """Parse *pgn_text* and render it back in canonical form."""
    return render_pgn(parse_pgn(pgn_text, options))
