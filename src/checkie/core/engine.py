"""GameEngine — board state, legal-move generation and move application."""

from __future__ import annotations

import logging

from checkie.core.board import Board
from checkie.core.enums import PieceColor
from checkie.core.errors import InvalidMove
from checkie.core.move import Move, MoveResult
from checkie.core.piece import GamePiece
from checkie.core.types import BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)


class GameEngine:
    """Owns the board, the side to move and the move counter.

    Every mutation goes through :meth:`move_piece`, which validates the move
    against a freshly generated legal-move list before touching any state.
    A move is either applied in full (capture, relocation, crowning, turn
    change) or not at all.

    Rules in force:

    * a piece may step to any empty diagonal neighbour, in any direction;
    * a piece may jump two diagonal steps over an opposing piece, which is
      removed;
    * captures are not forced and jumps do not chain, so the turn passes
      after every move;
    * a piece landing on its color's far row is crowned.
    """

    __slots__ = ("_board", "_current_turn", "_move_count")

    def __init__(
        self,
        board: Board | None = None,
        current_turn: PieceColor = PieceColor.BLACK,
        move_count: int = 0,
    ) -> None:
        if move_count < 0:
            raise ValueError(f"Move count must be >= 0, got {move_count}")
        if board is None:
            self._board = Board()
            self.initialize_pieces()
        else:
            self._board = board.copy()
        self._current_turn = current_turn
        self._move_count = move_count

    def initialize_pieces(self) -> None:
        """Place the standard 12-and-12 starting layout."""
        self._board.place_initial()

    # ── Accessors ────────────────────────────────────────────────────────

    def current_turn(self) -> PieceColor:
        return self._current_turn

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def board(self) -> Board:
        """Snapshot of the board; mutating it does not affect the engine."""
        return self._board.copy()

    def get_piece(self, coord: Coordinate) -> GamePiece | None:
        """Piece at *coord*, or None for an empty cell.

        Raises:
            OutOfBounds: *coord* is not on the 8x8 board.
        """
        return self._board[coord]

    # ── Move generation ──────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """All moves available to the side to move, in column-major scan order."""
        moves: list[Move] = []
        for col in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                loc = Coordinate(col, row)
                piece = self._board[loc]
                if piece is not None and piece.color == self._current_turn:
                    moves.extend(self.valid_moves_from(loc))
        return moves

    def valid_moves_from(self, loc: Coordinate) -> list[Move]:
        """Moves for the piece on *loc*: jumps first, then single steps."""
        piece = self._board[loc]
        if piece is None:
            return []
        jumps = [
            Move(loc, target)
            for target in loc.jump_targets_from()
            if self.valid_jump(piece, loc, target)
        ]
        steps = [
            Move(loc, target)
            for target in loc.move_targets_from()
            if self.valid_move(piece, loc, target)
        ]
        return jumps + steps

    def valid_move(
        self, piece: GamePiece, from_coord: Coordinate, to_coord: Coordinate
    ) -> bool:
        """Whether *to_coord* is on the board and empty.

        Direction and the mover's identity are not considered.
        """
        return to_coord.in_bounds() and self._board.is_empty(to_coord)

    def valid_jump(
        self, piece: GamePiece, from_coord: Coordinate, to_coord: Coordinate
    ) -> bool:
        """Whether *piece* may jump from *from_coord* to *to_coord*.

        The two coordinates must be a diagonal two-step apart, the cell
        between them must hold a piece of the other color and the landing
        cell must be empty.
        """
        mid = self.midpiece_coordinate(
            from_coord.x, from_coord.y, to_coord.x, to_coord.y
        )
        if mid is None or not to_coord.in_bounds():
            return False
        mid_piece = self._board[mid]
        if mid_piece is None or mid_piece.color == piece.color:
            return False
        return self._board.is_empty(to_coord)

    @staticmethod
    def midpiece_coordinate(
        fx: int, fy: int, tx: int, ty: int
    ) -> Coordinate | None:
        """Midpoint of a diagonal two-step, None for any other displacement."""
        if abs(fx - tx) == 2 and abs(fy - ty) == 2:
            return Coordinate((fx + tx) // 2, (fy + ty) // 2)
        return None

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, move: Move) -> MoveResult:
        """Apply *move* for the side to move.

        Raises:
            InvalidMove: *move* is not in :meth:`legal_moves`. State is
                left untouched.
        """
        if move not in self.legal_moves():
            _LOGGER.debug("Rejected move %s for %s", move, self._current_turn)
            raise InvalidMove(move, self._current_turn)

        src, dst = move.from_coord, move.to_coord
        piece = self._board[src]
        assert piece is not None  # guaranteed by legal_moves()

        captured = self.midpiece_coordinate(src.x, src.y, dst.x, dst.y)
        if captured is not None:
            self._board[captured] = None

        self._board[dst] = piece
        self._board[src] = None

        crowned = self._should_crown(piece, dst)
        if crowned:
            self._board[dst] = piece.crown()

        mover = self._current_turn
        self._advance_turn()
        _LOGGER.debug(
            "Applied %s for %s (captured=%s, crowned=%s); %s to move, count=%d",
            move,
            mover,
            captured,
            crowned,
            self._current_turn,
            self._move_count,
        )
        return MoveResult(move, crowned, captured)

    @staticmethod
    def _should_crown(piece: GamePiece, to_coord: Coordinate) -> bool:
        return to_coord.y == piece.color.crown_row

    def _advance_turn(self) -> None:
        self._current_turn = self._current_turn.opposite
        self._move_count += 1

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"{self._board!r}\n"
            f"{self._current_turn} to move, {self._move_count} moves played"
        )
