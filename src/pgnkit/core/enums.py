"""Core enumerations for the PGN domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def pawn(self) -> PieceType:
        """Piece assumed when SAN omits the piece letter."""
        return PieceType.WHITE_PAWN if self == Color.WHITE else PieceType.BLACK_PAWN

    def __str__(self) -> str:
        return self.name.lower()


class File(IntEnum):
    """Board file a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @property
    def label(self) -> str:
        return FILE_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> File:
        try:
            return cls(FILE_LABELS.index(label))
        except ValueError:
            raise ValueError(f"Invalid file label: {label!r}") from None

    def __str__(self) -> str:
        return self.label


class Rank(IntEnum):
    """Board rank 1–8."""

    R1 = 0
    R2 = 1
    R3 = 2
    R4 = 3
    R5 = 4
    R6 = 5
    R7 = 6
    R8 = 7

    @property
    def label(self) -> str:
        return RANK_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> Rank:
        try:
            return cls(RANK_LABELS.index(label))
        except ValueError:
            raise ValueError(f"Invalid rank label: {label!r}") from None

    def __str__(self) -> str:
        return self.label


FILE_LABELS: tuple[str, ...] = ("a", "b", "c", "d", "e", "f", "g", "h")
RANK_LABELS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8")


class PieceType(IntEnum):
    """Piece tags used by the notation layer.

    The two pawn members stand in for the piece letter SAN leaves out and are
    never displayed. The castling-rights members are reserved for position
    encodings and never produced by the SAN grammar.
    """

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    WHITE_PAWN = 5
    BLACK_PAWN = 6
    ROOK_CASTLE_QUEENSIDE = 7
    ROOK_CASTLE_KINGSIDE = 8
    KING_CASTLE_BOTH = 9
    KING_CASTLE_QUEENSIDE = 10
    KING_CASTLE_KINGSIDE = 11

    @property
    def letter(self) -> str:
        """Short piece name, e.g. 'N' for a knight."""
        return _PIECE_LETTERS[self.value]

    @property
    def is_pawn(self) -> bool:
        return self in (PieceType.WHITE_PAWN, PieceType.BLACK_PAWN)

    def __str__(self) -> str:
        return self.letter


_PIECE_LETTERS: tuple[str, ...] = ("K", "Q", "R", "B", "N", "P", "P", "R", "R", "K", "K", "K")

# Pieces that may appear as a SAN letter, and the subset a pawn promotes to.
SAN_PIECES: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastleSide(IntEnum):
    """Castling direction."""

    KINGSIDE = 0
    QUEENSIDE = 1

    @property
    def san(self) -> str:
        return "O-O" if self == CastleSide.KINGSIDE else "O-O-O"


class GameTermination(StrEnum):
    """Game termination marker shared by the Result tag and movetext."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    UNDETERMINED = "*"
