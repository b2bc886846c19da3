"""Text notation for boards and engine state.

A FEN-like layout: eight ``/``-separated rows from row 8 (y=7) down to
row 1 (y=0), using ``b``/``B``/``w``/``W`` for pieces (uppercase =
crowned) and digits for runs of empty cells, then the side to move
(``b`` or ``w``) and an optional move count.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.engine import GameEngine
from checkie.core.enums import PieceColor
from checkie.core.piece import GamePiece
from checkie.core.types import BOARD_SIZE, Coordinate

STARTING_NOTATION = (
    "b1b1b1b1/1b1b1b1b/b1b1b1b1/8/8/1w1w1w1w/w1w1w1w1/1w1w1w1w b 0"
)

_SIDES: dict[str, PieceColor] = {"b": PieceColor.BLACK, "w": PieceColor.WHITE}


def board_from_notation(layout: str) -> Board:
    """Parse the row layout field into a :class:`Board`."""
    rows = layout.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid board layout (must contain 8 rows): {layout!r}")
    board = Board()
    for row_idx, row_text in enumerate(rows):
        y = BOARD_SIZE - 1 - row_idx
        x = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                x += step
            else:
                if x >= BOARD_SIZE:
                    raise ValueError(f"Invalid row width: {layout!r}")
                board[Coordinate(x, y)] = GamePiece.from_char(ch)
                x += 1
            if x > BOARD_SIZE:
                raise ValueError(f"Invalid row width: {layout!r}")
        if x != BOARD_SIZE:
            raise ValueError(f"Invalid row width: {layout!r}")
    return board


def board_to_notation(board: Board) -> str:
    """Serialise a :class:`Board` to the row layout field."""
    rows: list[str] = []
    for y in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for x in range(BOARD_SIZE):
            piece = board[Coordinate(x, y)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def engine_from_notation(text: str) -> GameEngine:
    """Build a :class:`GameEngine` from layout, side to move and move count."""
    parts = text.split()
    if not (2 <= len(parts) <= 3):
        raise ValueError(f"Invalid notation (need 2-3 fields): {text!r}")

    board = board_from_notation(parts[0])

    side = _SIDES.get(parts[1])
    if side is None:
        raise ValueError(f"Invalid side-to-move field: {parts[1]!r}")

    move_count = 0
    if len(parts) > 2:
        if not parts[2].isdigit():
            raise ValueError(f"Invalid move count: {parts[2]!r}")
        move_count = int(parts[2])

    return GameEngine(board, side, move_count)


def engine_to_notation(engine: GameEngine) -> str:
    """Serialise a :class:`GameEngine` to notation."""
    side = "w" if engine.current_turn() == PieceColor.WHITE else "b"
    return f"{board_to_notation(engine.board)} {side} {engine.move_count}"
