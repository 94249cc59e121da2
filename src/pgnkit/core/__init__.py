"""Core domain layer — PGN grammar engine with zero external dependencies.

Quick start::

    from pgnkit.core import parse_pgn

    game = parse_pgn(pgn_text)
    print(game.roster.white, "vs", game.roster.black)
    print(game.movetext.sans())
    print(game)  # canonical PGN
"""

from pgnkit.core.enums import CastleSide, Color, File, GameTermination, PieceType, Rank
from pgnkit.core.errors import (
    PgnError,
    PgnGrammarError,
    ResultMismatchError,
    UnrepresentableMoveError,
)
from pgnkit.core.notation import (
    PgnFile,
    PgnOptions,
    canonicalize_pgn,
    parse_pgn,
    parse_san,
    render_pgn,
)
from pgnkit.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "File",
    "GameTermination",
    "PieceType",
    "Rank",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Errors
    "PgnError",
    "PgnGrammarError",
    "ResultMismatchError",
    "UnrepresentableMoveError",
    # Notation
    "PgnFile",
    "PgnOptions",
    "canonicalize_pgn",
    "parse_pgn",
    "parse_san",
    "render_pgn",
]
