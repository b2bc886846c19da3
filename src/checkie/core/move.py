"""Move and MoveResult value objects."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Coordinate, parse_coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) transition, candidate or applied."""

    from_coord: Coordinate
    to_coord: Coordinate

    @property
    def is_jump(self) -> bool:
        """Whether the move spans two diagonal steps."""
        return (
            abs(self.from_coord.x - self.to_coord.x) == 2
            and abs(self.from_coord.y - self.to_coord.y) == 2
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_coord}-{self.to_coord}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``"c3-d4"`` into a move."""
        parts = text.strip().split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_coordinate(parts[0]), parse_coordinate(parts[1]))


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a successfully applied move."""

    move: Move
    crowned: bool
    captured: Coordinate | None = None
