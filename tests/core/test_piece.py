"""Tests for GamePiece, Move and MoveResult value objects."""

import dataclasses

import pytest

from checkie.core.enums import PieceColor
from checkie.core.move import Move, MoveResult
from checkie.core.piece import GamePiece
from checkie.core.types import Coordinate


class TestGamePiece:
    def test_default_uncrowned(self) -> None:
        assert not GamePiece(PieceColor.BLACK).crowned

    def test_crown_keeps_color(self) -> None:
        piece = GamePiece(PieceColor.WHITE)
        king = piece.crown()
        assert king == GamePiece(PieceColor.WHITE, crowned=True)
        assert not piece.crowned

    def test_crown_is_idempotent(self) -> None:
        king = GamePiece(PieceColor.BLACK, crowned=True)
        assert king.crown() == king

    def test_immutable(self) -> None:
        piece = GamePiece(PieceColor.BLACK)
        with pytest.raises(dataclasses.FrozenInstanceError):
            piece.crowned = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "char, color, crowned",
        [
            ("b", PieceColor.BLACK, False),
            ("B", PieceColor.BLACK, True),
            ("w", PieceColor.WHITE, False),
            ("W", PieceColor.WHITE, True),
        ],
    )
    def test_char_mapping(self, char: str, color: PieceColor, crowned: bool) -> None:
        piece = GamePiece.from_char(char)
        assert piece == GamePiece(color, crowned)
        assert str(piece) == char

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            GamePiece.from_char("k")

    def test_symbol(self) -> None:
        assert GamePiece(PieceColor.WHITE).symbol != GamePiece(PieceColor.BLACK).symbol


class TestMove:
    def test_str(self) -> None:
        move = Move(Coordinate(2, 5), Coordinate(3, 4))
        assert str(move) == "c6-d5"

    def test_str_off_board(self) -> None:
        move = Move(Coordinate(0, 5), Coordinate(-1, 4))
        assert str(move) == "a6-(-1, 4)"

    def test_parse(self) -> None:
        assert Move.parse("c6-d5") == Move(Coordinate(2, 5), Coordinate(3, 4))
        assert Move.parse(" a1-b2 ") == Move(Coordinate(0, 0), Coordinate(1, 1))

    @pytest.mark.parametrize("text", ["c6d5", "c6-d5-e4", "c6-z9"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.parse(text)

    def test_is_jump(self) -> None:
        assert Move.parse("d5-f7").is_jump
        assert not Move.parse("d5-e6").is_jump
        assert not Move.parse("d5-f5").is_jump

    def test_hashable(self) -> None:
        assert Move.parse("a1-b2") in {Move(Coordinate(0, 0), Coordinate(1, 1))}


class TestMoveResult:
    def test_defaults_to_no_capture(self) -> None:
        result = MoveResult(Move.parse("c6-d5"), crowned=False)
        assert result.captured is None
