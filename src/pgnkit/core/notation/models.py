"""Shared notation-layer data models.

Every model renders its canonical PGN text through ``str()``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from pgnkit.core.enums import (
    PROMOTION_PIECES,
    SAN_PIECES,
    CastleSide,
    Color,
    File,
    GameTermination,
    PieceType,
    Rank,
)
from pgnkit.core.errors import UnrepresentableMoveError
from pgnkit.core.notation.time_control import TimeControlPeriod, UnknownPeriod
from pgnkit.core.types import Square, is_valid_square, square_name

# ── SAN plies ───────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SanCoordinates:
    """Destination square plus the optional disambiguating file/rank."""

    to_square: Square
    from_file: File | None = None
    from_rank: Rank | None = None

    def __post_init__(self) -> None:
        if not is_valid_square(self.to_square):
            raise UnrepresentableMoveError(
                f"Invalid destination square: {self.to_square!r}"
            )

    @property
    def qualifier(self) -> str:
        text = ""
        if self.from_file is not None:
            text += self.from_file.label
        if self.from_rank is not None:
            text += self.from_rank.label
        return text

    def __str__(self) -> str:
        return self.qualifier + square_name(self.to_square)


def _check_moving_piece(piece: PieceType) -> None:
    # Castling-rights markers share letters with K and R and would read back as them.
    if piece not in SAN_PIECES and not piece.is_pawn:
        raise UnrepresentableMoveError(f"{piece.name} cannot move in SAN")


def _check_promotion_piece(piece: PieceType) -> None:
    if piece not in PROMOTION_PIECES:
        raise UnrepresentableMoveError(f"Cannot promote to {piece.name}")


@dataclass(frozen=True, slots=True)
class SanBasic:
    """A quiet move, e.g. ``e4``, ``Nf3`` or ``Nbd7``."""

    piece: PieceType
    coordinates: SanCoordinates

    def __post_init__(self) -> None:
        _check_moving_piece(self.piece)

    def __str__(self) -> str:
        letter = "" if self.piece.is_pawn else self.piece.letter
        return f"{letter}{self.coordinates}"


@dataclass(frozen=True, slots=True)
class SanCapture:
    """A capture, e.g. ``exd5`` or ``Nxe4``.

    Raises:
        UnrepresentableMoveError: for a pawn capture without a file, or a
            castling-rights marker as the piece.
    """

    piece: PieceType
    coordinates: SanCoordinates

    def __post_init__(self) -> None:
        _check_moving_piece(self.piece)
        if self.piece.is_pawn and self.coordinates.from_file is None:
            raise UnrepresentableMoveError(
                "Pawn capture must name the file it captures from"
            )

    def __str__(self) -> str:
        letter = "" if self.piece.is_pawn else self.piece.letter
        return (
            f"{letter}{self.coordinates.qualifier}x"
            f"{square_name(self.coordinates.to_square)}"
        )


@dataclass(frozen=True, slots=True)
class SanPromotion:
    """A pawn push onto the last rank, e.g. ``e8=Q``."""

    coordinates: SanCoordinates
    promoted: PieceType

    def __post_init__(self) -> None:
        if self.coordinates.qualifier:
            raise UnrepresentableMoveError("Pawn promotion takes no file or rank qualifier")
        _check_promotion_piece(self.promoted)

    def __str__(self) -> str:
        return f"{self.coordinates}={self.promoted.letter}"


@dataclass(frozen=True, slots=True)
class SanCapturePromotion:
    """A pawn capture onto the last rank, e.g. ``fxg1=Q``."""

    coordinates: SanCoordinates
    promoted: PieceType

    def __post_init__(self) -> None:
        if self.coordinates.from_file is None:
            raise UnrepresentableMoveError(
                "Pawn capture-promotion must name the file it captures from"
            )
        if self.coordinates.from_rank is not None:
            raise UnrepresentableMoveError("Pawn capture-promotion takes no rank qualifier")
        _check_promotion_piece(self.promoted)

    def __str__(self) -> str:
        return (
            f"{self.coordinates.qualifier}x{square_name(self.coordinates.to_square)}"
            f"={self.promoted.letter}"
        )


@dataclass(frozen=True, slots=True)
class SanCastle:
    side: CastleSide

    def __str__(self) -> str:
        return self.side.san


SanPly: TypeAlias = SanBasic | SanCapture | SanPromotion | SanCapturePromotion | SanCastle


# ── Movetext ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PgnMove:
    """One numbered move: a white ply and, usually, a black reply.

    Annotations (check marks, NAGs, ``!?``...) are opaque text written
    directly after their ply.
    """

    white: SanPly
    white_annotation: str | None = None
    black: SanPly | None = None
    black_annotation: str | None = None

    def __post_init__(self) -> None:
        if self.black is None and self.black_annotation is not None:
            raise UnrepresentableMoveError("Black annotation without a black ply")

    def __str__(self) -> str:
        text = f"{self.white}{self.white_annotation or ''}"
        if self.black is not None:
            text += f" {self.black}{self.black_annotation or ''}"
        return text


@dataclass(frozen=True, slots=True)
class PgnMovetext:
    """Ordered mainline moves. Rendering numbers them from 1."""

    moves: tuple[PgnMove, ...] = ()

    def plies(self) -> Iterator[tuple[Color, SanPly, str | None]]:
        """Yield ``(color, ply, annotation)`` in play order."""
        for move in self.moves:
            yield Color.WHITE, move.white, move.white_annotation
            if move.black is not None:
                yield Color.BLACK, move.black, move.black_annotation

    def sans(self) -> list[str]:
        """SAN text of every ply, annotations included."""
        return [f"{ply}{annotation or ''}" for _color, ply, annotation in self.plies()]

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return "".join(
            f"{number}. {move} " for number, move in enumerate(self.moves, start=1)
        )


# ── Tag pairs ───────────────────────────────────────────────────────────────


def escape_tag_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


_ESCAPE_RE = re.compile(r"\\(.)")


def unescape_tag_value(raw: str) -> str:
    return _ESCAPE_RE.sub(r"\1", raw)


@dataclass(frozen=True, slots=True)
class TagPair:
    """A tag pair kept verbatim, e.g. ``[ECO "C67"]``.

    ``value_offset`` is where the quoted value starts in the parsed text, or
    ``None`` for a pair built in code. It takes no part in comparisons.
    """

    name: str
    value: str
    value_offset: int | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f'[{self.name} "{escape_tag_value(self.value)}"]'


@dataclass(frozen=True, slots=True)
class PgnDateTag:
    """``YYYY.MM.DD`` with each part independently unknown."""

    year: int | None = None
    month: int | None = None
    day: int | None = None

    def __str__(self) -> str:
        year = "????" if self.year is None else f"{self.year:04d}"
        month = "??" if self.month is None else f"{self.month:02d}"
        day = "??" if self.day is None else f"{self.day:02d}"
        return f"{year}.{month}.{day}"


@dataclass(frozen=True, slots=True)
class PgnTimeTag:
    """``HH:MM:SS`` with each part independently unknown."""

    hour: int | None = None
    minute: int | None = None
    second: int | None = None

    def __str__(self) -> str:
        return ":".join(
            "??" if part is None else f"{part:02d}"
            for part in (self.hour, self.minute, self.second)
        )


@dataclass(frozen=True, slots=True)
class RoundUnknown:
    def __str__(self) -> str:
        return "?"


@dataclass(frozen=True, slots=True)
class RoundNotApplicable:
    def __str__(self) -> str:
        return "-"


@dataclass(frozen=True, slots=True)
class RoundName:
    name: str

    def __str__(self) -> str:
        return self.name


PgnRoundTag: TypeAlias = RoundUnknown | RoundNotApplicable | RoundName


@dataclass(frozen=True, slots=True)
class PgnTagPairRoster:
    """Known tags with their defaults, plus unrecognised tags in input order."""

    event: str = "?"
    site: str = "?"
    date: PgnDateTag = PgnDateTag()
    round: PgnRoundTag = RoundNotApplicable()
    white: str = "?"
    black: str = "?"
    result: GameTermination = GameTermination.UNDETERMINED
    time: PgnTimeTag = PgnTimeTag()
    time_control: TimeControlPeriod = UnknownPeriod()
    fen: str | None = None
    other_tags: tuple[TagPair, ...] = ()

    def tag_pairs(self) -> list[TagPair]:
        """All tags in canonical output order, ``Setup`` re-derived from FEN."""
        pairs = [
            TagPair("Event", self.event),
            TagPair("Site", self.site),
            TagPair("Date", str(self.date)),
            TagPair("Round", str(self.round)),
            TagPair("White", self.white),
            TagPair("Black", self.black),
            TagPair("Result", self.result.value),
            TagPair("Time", str(self.time)),
            TagPair("TimeControl", str(self.time_control)),
        ]
        if self.fen is not None:
            pairs.append(TagPair("Setup", "1"))
            pairs.append(TagPair("FEN", self.fen))
        else:
            pairs.append(TagPair("Setup", "0"))
        pairs.extend(self.other_tags)
        return pairs

    @property
    def headers(self) -> dict[str, str]:
        """Tag name → value; a repeated unrecognised tag keeps its last value."""
        return {pair.name: pair.value for pair in self.tag_pairs()}

    def __str__(self) -> str:
        return "".join(f"{pair}\n" for pair in self.tag_pairs())


# ── Whole game ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PgnFile:
    """A parsed single-game PGN document.

    ``roster.result`` and ``termination`` are read independently and may
    disagree.
    """

    roster: PgnTagPairRoster
    movetext: PgnMovetext
    termination: GameTermination

    def __str__(self) -> str:
        return f"{self.roster}\n{self.movetext}{self.termination.value}"
