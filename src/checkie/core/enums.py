"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class PieceColor(IntEnum):
    """Side color."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction this side advances in (+1 toward row 7, -1 toward row 0)."""
        return 1 if self is PieceColor.WHITE else -1

    @property
    def crown_row(self) -> int:
        """Row on which a piece of this color is crowned."""
        return 7 if self is PieceColor.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()
