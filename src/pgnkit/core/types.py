"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import TypeAlias

from pgnkit.core.enums import File, Rank

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 64


def file_of(sq: Square) -> File:
    """File of a square (a–h)."""
    return File(sq & 7)


def rank_of(sq: Square) -> Rank:
    """Rank of a square (1–8)."""
    return Rank(sq >> 3)


def make_square(file: File, rank: Rank) -> Square:
    """Create square from file and rank."""
    return int(rank) * 8 + int(file)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square index: {sq!r}")
    return SQUARE_NAMES[sq]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(File.from_label(name[0]), Rank.from_label(name[1]))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < BOARD_SIZE


SQUARE_NAMES: tuple[str, ...] = tuple(
    f"{file.label}{rank.label}" for rank in Rank for file in File
)
