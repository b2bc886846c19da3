"""Exceptions raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.enums import PieceColor
    from checkie.core.move import Move
    from checkie.core.types import Coordinate


class CheckersError(ValueError):
    """Base class for rule-engine failures."""


class InvalidMove(CheckersError):
    """The submitted move is not legal for the side to move."""

    def __init__(self, move: Move, color: PieceColor) -> None:
        super().__init__(f"Illegal move for {color}: {move}")
        self.move = move
        self.color = color


class OutOfBounds(CheckersError):
    """A coordinate lies outside the 8x8 board."""

    def __init__(self, coordinate: Coordinate) -> None:
        super().__init__(
            f"Coordinate off the board: ({coordinate.x}, {coordinate.y})"
        )
        self.coordinate = coordinate
