"""SAN (Standard Algebraic Notation) ply grammar.

Only the shape of a move is parsed; nothing is checked against a position.
A ply is matched by the first of these alternatives that succeeds:

1. castle               ``O-O-O`` then ``O-O``
2. capture-promotion    file ``x`` square ``=`` piece
3. promotion            square ``=`` piece
4. capture              [piece] [file] [rank] ``x`` square
5. qualified move       [piece] [file] [rank] square
6. unqualified move     [piece] square

Each alternative is a longer or more specific form that a later, looser one
would otherwise swallow, so reordering them changes parse results. Optional
parts are greedy: ``Nf3`` does not match (5) because ``f3`` is taken as the
qualifier, leaving no destination, and falls through to (6).
"""

from __future__ import annotations

from functools import partial

from pgnkit.core.enums import (
    FILE_LABELS,
    PROMOTION_PIECES,
    RANK_LABELS,
    SAN_PIECES,
    CastleSide,
    Color,
    File,
    PieceType,
    Rank,
)
from pgnkit.core.notation.models import (
    SanBasic,
    SanCapture,
    SanCapturePromotion,
    SanCastle,
    SanCoordinates,
    SanPly,
    SanPromotion,
)
from pgnkit.core.scanner import Scanner
from pgnkit.core.types import Square, make_square

_SAN_PIECE_REV: dict[str, PieceType] = {piece.letter: piece for piece in SAN_PIECES}
_PROMOTION_REV: dict[str, PieceType] = {piece.letter: piece for piece in PROMOTION_PIECES}
_FILES = "".join(FILE_LABELS)
_RANKS = "".join(RANK_LABELS)

# Characters that end an annotation run.
_ANNOTATION_STOP = "= {(;\t\n\r"


# ── Terminals ───────────────────────────────────────────────────────────────


def _accept_piece(scanner: Scanner) -> PieceType | None:
    letter = scanner.accept_char("KQRBN")
    return None if letter is None else _SAN_PIECE_REV[letter]


def _accept_file(scanner: Scanner) -> File | None:
    label = scanner.accept_char(_FILES)
    return None if label is None else File.from_label(label)


def _accept_rank(scanner: Scanner) -> Rank | None:
    label = scanner.accept_char(_RANKS)
    return None if label is None else Rank.from_label(label)


def _expect_file(scanner: Scanner, rule: str) -> File:
    file = _accept_file(scanner)
    if file is None:
        raise scanner.fail(rule, "expected a file")
    return file


def _expect_square(scanner: Scanner, rule: str) -> Square:
    file = _accept_file(scanner)
    rank = _accept_rank(scanner) if file is not None else None
    if file is None or rank is None:
        raise scanner.fail(rule, "expected a square")
    return make_square(file, rank)


def _expect_promotion(scanner: Scanner, rule: str) -> PieceType:
    scanner.expect("=", rule)
    letter = scanner.accept_char("QRBN")
    if letter is None:
        raise scanner.fail(rule, "expected a promotion piece")
    return _PROMOTION_REV[letter]


# ── Alternatives ────────────────────────────────────────────────────────────


def _parse_castle(scanner: Scanner, color: Color) -> SanPly:
    # Queen-side first: "O-O" is a prefix of "O-O-O".
    if scanner.accept("O-O-O") or scanner.accept("0-0-0"):
        return SanCastle(CastleSide.QUEENSIDE)
    if scanner.accept("O-O") or scanner.accept("0-0"):
        return SanCastle(CastleSide.KINGSIDE)
    raise scanner.fail("castle")


def _parse_capture_promotion(scanner: Scanner, color: Color) -> SanPly:
    from_file = _expect_file(scanner, "capture_promotion")
    scanner.expect("x", "capture_promotion")
    to_square = _expect_square(scanner, "capture_promotion")
    promoted = _expect_promotion(scanner, "capture_promotion")
    return SanCapturePromotion(SanCoordinates(to_square, from_file), promoted)


def _parse_promotion(scanner: Scanner, color: Color) -> SanPly:
    to_square = _expect_square(scanner, "promotion")
    promoted = _expect_promotion(scanner, "promotion")
    return SanPromotion(SanCoordinates(to_square), promoted)


def _parse_capture(scanner: Scanner, color: Color) -> SanPly:
    piece = _accept_piece(scanner)
    if piece is None:
        piece = color.pawn
    from_file = _accept_file(scanner)
    from_rank = _accept_rank(scanner)
    scanner.expect("x", "capture")
    to_square = _expect_square(scanner, "capture")
    if piece.is_pawn and from_file is None:
        raise scanner.fail("capture", "pawn capture without a file")
    return SanCapture(piece, SanCoordinates(to_square, from_file, from_rank))


def _parse_qualified(scanner: Scanner, color: Color) -> SanPly:
    piece = _accept_piece(scanner)
    if piece is None:
        piece = color.pawn
    from_file = _accept_file(scanner)
    from_rank = _accept_rank(scanner)
    to_square = _expect_square(scanner, "qualified_move")
    return SanBasic(piece, SanCoordinates(to_square, from_file, from_rank))


def _parse_unqualified(scanner: Scanner, color: Color) -> SanPly:
    piece = _accept_piece(scanner)
    if piece is None:
        piece = color.pawn
    to_square = _expect_square(scanner, "unqualified_move")
    return SanBasic(piece, SanCoordinates(to_square))


# Load-bearing order, see the module docstring.
SAN_ALTERNATIVES = (
    _parse_castle,
    _parse_capture_promotion,
    _parse_promotion,
    _parse_capture,
    _parse_qualified,
    _parse_unqualified,
)


def parse_san_ply(scanner: Scanner, color: Color) -> tuple[SanPly, str | None]:
    """Parse one ply and its trailing annotation at the cursor.

    *color* selects the pawn piece used when the piece letter is omitted.
    Whitespace after the ply is consumed.

    Raises:
        PgnGrammarError: if no SAN alternative matches.
    """
    ply = scanner.first_of(
        "san_ply",
        [partial(parse, color=color) for parse in SAN_ALTERNATIVES],
    )
    annotation = scanner.take_while_not(_ANNOTATION_STOP) or None
    scanner.skip_whitespace()
    return ply, annotation


def parse_san(san: str, color: Color = Color.WHITE) -> SanPly:
    """Parse a standalone SAN string such as ``"Nbd7"`` or ``"exd8=Q"``.

    Check marks and other annotation text after the move are ignored.
    """
    scanner = Scanner(san.strip())
    ply, _annotation = parse_san_ply(scanner, color)
    if not scanner.at_end():
        raise scanner.fail("san_ply", f"unexpected {scanner.remaining()!r}")
    return ply
