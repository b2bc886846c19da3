"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import PieceColor
from checkie.core.errors import OutOfBounds
from checkie.core.piece import GamePiece
from checkie.core.types import BOARD_SIZE, Coordinate

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Starting columns per row; White fills rows 0-2, Black rows 5-7.
_WHITE_START: tuple[tuple[int, tuple[int, ...]], ...] = (
    (0, (1, 3, 5, 7)),
    (1, (0, 2, 4, 6)),
    (2, (1, 3, 5, 7)),
)
_BLACK_START: tuple[tuple[int, tuple[int, ...]], ...] = (
    (5, (0, 2, 4, 6)),
    (6, (1, 3, 5, 7)),
    (7, (0, 2, 4, 6)),
)


class Board:
    """Mutable 64-cell board, stored column-major (``x * 8 + y``)."""

    __slots__ = ("_cells", "_counts")

    def __init__(self) -> None:
        self._cells: list[GamePiece | None] = [None] * _CELL_COUNT
        # [color] -> number of pieces on the board.
        self._counts: list[int] = [0, 0]

    @staticmethod
    def _index(coord: Coordinate) -> int:
        if not coord.in_bounds():
            raise OutOfBounds(coord)
        return coord.x * BOARD_SIZE + coord.y

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> GamePiece | None:
        return self._cells[self._index(coord)]

    def __setitem__(self, coord: Coordinate, piece: GamePiece | None) -> None:
        idx = self._index(coord)
        old_piece = self._cells[idx]
        if old_piece is not None:
            self._counts[int(old_piece.color)] -= 1
        self._cells[idx] = piece
        if piece is not None:
            self._counts[int(piece.color)] += 1

    def is_empty(self, coord: Coordinate) -> bool:
        return self[coord] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Coordinate, GamePiece]]:
        """Occupied cells in column-major order (x outer, y inner)."""
        for idx, piece in enumerate(self._cells):
            if piece is not None:
                yield Coordinate(idx // BOARD_SIZE, idx % BOARD_SIZE), piece

    def pieces(self, color: PieceColor) -> list[Coordinate]:
        """Cells occupied by *color*, column-major."""
        return [coord for coord, piece in self.occupied() if piece.color == color]

    def count(self, color: PieceColor) -> int:
        return self._counts[int(color)]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * _CELL_COUNT
        self._counts = [0, 0]

    def place_initial(self) -> None:
        """Put the 12 White and 12 Black starting pieces on their cells."""
        for color, layout in (
            (PieceColor.WHITE, _WHITE_START),
            (PieceColor.BLACK, _BLACK_START),
        ):
            for row, columns in layout:
                for col in columns:
                    self[Coordinate(col, row)] = GamePiece(color)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.place_initial()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for x in range(BOARD_SIZE):
                p = self[Coordinate(x, y)]
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
