"""Tests for coordinate and piece value types."""

import pytest

from pgnkit.core.enums import CastleSide, Color, File, GameTermination, PieceType, Rank
from pgnkit.core.types import (
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)


class TestSquares:
    def test_corner_names(self) -> None:
        assert square_name(0) == "a1"
        assert square_name(63) == "h8"

    def test_file_and_rank_of(self) -> None:
        assert file_of(28) == File.E
        assert rank_of(28) == Rank.R4

    def test_make_square(self) -> None:
        assert make_square(File.E, Rank.R4) == 28

    def test_parse_square(self) -> None:
        assert parse_square("e4") == 28

    def test_parse_square_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="file"):
            parse_square("i9")
        with pytest.raises(ValueError, match="square"):
            parse_square("e44")

    def test_every_square_name_roundtrips(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_is_valid_square(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(63)
        assert not is_valid_square(64)
        assert not is_valid_square(-1)

    def test_square_name_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="square index"):
            square_name(64)
        with pytest.raises(ValueError, match="square index"):
            square_name(-1)


class TestLabels:
    def test_file_labels(self) -> None:
        assert [str(f) for f in File] == list("abcdefgh")
        assert File.from_label("c") == File.C

    def test_rank_labels(self) -> None:
        assert [str(r) for r in Rank] == list("12345678")
        assert Rank.from_label("8") == Rank.R8

    def test_bad_label_raises(self) -> None:
        with pytest.raises(ValueError, match="rank"):
            Rank.from_label("9")

    def test_piece_letters(self) -> None:
        assert PieceType.KNIGHT.letter == "N"
        assert PieceType.KING.letter == "K"
        assert PieceType.WHITE_PAWN.letter == "P"
        assert PieceType.KING_CASTLE_BOTH.letter == "K"
        assert PieceType.ROOK_CASTLE_KINGSIDE.letter == "R"

    def test_pawn_markers(self) -> None:
        assert PieceType.WHITE_PAWN.is_pawn
        assert PieceType.BLACK_PAWN.is_pawn
        assert not PieceType.QUEEN.is_pawn

    def test_color_selects_default_pawn(self) -> None:
        assert Color.WHITE.pawn == PieceType.WHITE_PAWN
        assert Color.BLACK.pawn == PieceType.BLACK_PAWN

    def test_castle_text(self) -> None:
        assert CastleSide.KINGSIDE.san == "O-O"
        assert CastleSide.QUEENSIDE.san == "O-O-O"

    def test_termination_literals(self) -> None:
        assert [t.value for t in GameTermination] == ["1-0", "0-1", "1/2-1/2", "*"]
