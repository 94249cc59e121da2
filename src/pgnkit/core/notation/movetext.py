"""PGN movetext grammar: numbered move records and discarded commentary."""

from __future__ import annotations

from pgnkit.core.enums import Color, GameTermination
from pgnkit.core.notation.models import PgnMove, PgnMovetext
from pgnkit.core.notation.san import parse_san_ply
from pgnkit.core.scanner import Scanner

_TERMINATION_LITERALS: tuple[GameTermination, ...] = (
    GameTermination.WHITE_WINS,
    GameTermination.BLACK_WINS,
    GameTermination.DRAW,
    GameTermination.UNDETERMINED,
)


# ── Commentary ──────────────────────────────────────────────────────────────
# Comments, escape lines and variations are recognised and thrown away.


def _skip_line_comment(scanner: Scanner) -> None:
    scanner.expect(";", "line_comment")
    scanner.take_line()


def _skip_braced_comment(scanner: Scanner) -> None:
    # Braced comments do not nest; the first "}" closes them.
    scanner.expect("{", "braced_comment")
    scanner.take_until("}", "braced_comment")
    scanner.expect("}", "braced_comment")


def _skip_escape_line(scanner: Scanner) -> None:
    scanner.expect("%", "escape_line")
    scanner.take_line()


def _skip_nag(scanner: Scanner) -> None:
    # A free-standing $N glyph; one attached to a move stays in its annotation.
    scanner.expect("$", "nag")
    scanner.expect_uint("nag")


def _skip_variation(scanner: Scanner) -> None:
    # Only one level is supported: "(1... c5 (1... e6))" closes at the first ")".
    scanner.expect("(", "variation")
    scanner.take_until(")", "variation")
    scanner.expect(")", "variation")


_COMMENTARY_ALTERNATIVES = (
    _skip_line_comment,
    _skip_braced_comment,
    _skip_escape_line,
    _skip_variation,
    _skip_nag,
)


def _skip_commentary_item(scanner: Scanner) -> None:
    scanner.first_of("commentary", _COMMENTARY_ALTERNATIVES)
    scanner.skip_whitespace()


def skip_commentary(scanner: Scanner) -> int:
    """Skip any run of comments and variations; return how many were skipped."""
    scanner.skip_whitespace()
    return len(scanner.many(_skip_commentary_item))


# ── Move records ────────────────────────────────────────────────────────────


def _parse_move_number(scanner: Scanner) -> int:
    scanner.skip_whitespace()
    number = scanner.expect_uint("move_number")
    scanner.expect(".", "move_number")
    scanner.skip_whitespace()
    return number


def _parse_continuation_number(scanner: Scanner) -> int:
    """``12...`` announcing black's reply after an interruption."""
    number = scanner.expect_uint("move_number")
    scanner.expect("...", "move_number")
    scanner.skip_whitespace()
    return number


def parse_move(scanner: Scanner) -> PgnMove | None:
    """Parse one numbered move record.

    Returns ``None`` (cursor unchanged) when no move number starts here,
    which ends the movetext. Once the number has been read, a malformed
    white ply is an error.
    """
    if scanner.optional(_parse_move_number) is None:
        return None
    # Input numbering is not kept; rendering renumbers from 1.
    white, white_annotation = parse_san_ply(scanner, Color.WHITE)
    skip_commentary(scanner)
    scanner.optional(_parse_continuation_number)
    black_ply = scanner.optional(lambda s: parse_san_ply(s, Color.BLACK))
    skip_commentary(scanner)
    if black_ply is None:
        return PgnMove(white, white_annotation)
    black, black_annotation = black_ply
    return PgnMove(white, white_annotation, black, black_annotation)


def parse_movetext(scanner: Scanner) -> PgnMovetext:
    """Parse one or more move records.

    Raises:
        PgnGrammarError: if there is no move at all, or a move is malformed.
    """
    moves: list[PgnMove] = []
    while (move := parse_move(scanner)) is not None:
        moves.append(move)
    if not moves:
        raise scanner.fail("movetext", "expected at least one move")
    return PgnMovetext(tuple(moves))


# ── Termination ─────────────────────────────────────────────────────────────


def parse_termination(scanner: Scanner) -> GameTermination:
    """Parse ``1-0``, ``0-1``, ``1/2-1/2`` or ``*``."""
    for marker in _TERMINATION_LITERALS:
        if scanner.accept(marker.value):
            return marker
    raise scanner.fail("game_termination")


def termination_from_text(text: str) -> GameTermination:
    """Parse a complete Result tag value."""
    scanner = Scanner(text)
    marker = parse_termination(scanner)
    if not scanner.at_end():
        raise scanner.fail("game_termination", f"unexpected {scanner.remaining()!r}")
    return marker
