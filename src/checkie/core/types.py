"""Coordinate value object and diagonal geometry helpers.

Board layout: ``x`` is the column (file ``a``..``h``), ``y`` is the row
(rank ``1``..``8``).  White starts on rows 0-2, Black on rows 5-7::

    8 b . b . b . b .
    ...
    1 . w . w . w . w
      a b c d e f g h
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (x, y) grid position."""

    x: int
    y: int

    def in_bounds(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    # ── Diagonal targets ─────────────────────────────────────────────────

    def move_targets_from(self) -> Iterator[Coordinate]:
        """Single-step diagonal neighbours that lie on the board."""
        for dx, dy in DIAGONALS:
            target = self.offset(dx, dy)
            if target.in_bounds():
                yield target

    def jump_targets_from(self) -> Iterator[Coordinate]:
        """Two-step diagonal landing squares that lie on the board."""
        for dx, dy in DIAGONALS:
            target = self.offset(2 * dx, 2 * dy)
            if target.in_bounds():
                yield target

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.in_bounds():
            return coordinate_name(self)
        return f"({self.x}, {self.y})"


def coordinate_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. Coordinate(0, 0) → 'a1'."""
    if not coord.in_bounds():
        raise ValueError(f"Coordinate off the board: ({coord.x}, {coord.y})")
    return _FILES[coord.x] + _RANKS[coord.y]


def parse_coordinate(name: str) -> Coordinate:
    """Parse a coordinate name, e.g. 'd4' → Coordinate(3, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return Coordinate(_FILES.index(name[0]), _RANKS.index(name[1]))
