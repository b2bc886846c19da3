"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import GameEngine, Move, parse_coordinate

    engine = GameEngine()
    for move in engine.legal_moves():
        print(move)
    result = engine.move_piece(Move.parse("c6-d5"))
"""

from checkie.core.board import Board
from checkie.core.engine import GameEngine
from checkie.core.enums import PieceColor
from checkie.core.errors import CheckersError, InvalidMove, OutOfBounds
from checkie.core.move import Move, MoveResult
from checkie.core.notation import (
    STARTING_NOTATION,
    board_from_notation,
    board_to_notation,
    engine_from_notation,
    engine_to_notation,
)
from checkie.core.piece import GamePiece
from checkie.core.types import (
    BOARD_SIZE,
    Coordinate,
    coordinate_name,
    parse_coordinate,
)

__all__ = [
    # Enums
    "PieceColor",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "coordinate_name",
    "parse_coordinate",
    # Domain objects
    "Board",
    "GameEngine",
    "GamePiece",
    "Move",
    "MoveResult",
    # Errors
    "CheckersError",
    "InvalidMove",
    "OutOfBounds",
    # Notation
    "STARTING_NOTATION",
    "board_from_notation",
    "board_to_notation",
    "engine_from_notation",
    "engine_to_notation",
]
