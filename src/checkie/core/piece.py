"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkie.core.enums import PieceColor

# Notation character ↔ (PieceColor, crowned)
_CHAR_MAP: dict[str, tuple[PieceColor, bool]] = {
    "b": (PieceColor.BLACK, False),
    "B": (PieceColor.BLACK, True),
    "w": (PieceColor.WHITE, False),
    "W": (PieceColor.WHITE, True),
}

_CHARS: dict[tuple[PieceColor, bool], str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[tuple[PieceColor, bool], str] = {
    (PieceColor.BLACK, False): "⛂",
    (PieceColor.BLACK, True): "⛃",
    (PieceColor.WHITE, False): "⛀",
    (PieceColor.WHITE, True): "⛁",
}


@dataclass(frozen=True, slots=True)
class GamePiece:
    """Immutable value object representing a checkers piece."""

    color: PieceColor
    crowned: bool = False

    def crown(self) -> GamePiece:
        """Crowned copy of this piece (same color)."""
        return replace(self, crowned=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Notation character (uppercase = crowned)."""
        return _CHARS[(self.color, self.crowned)]

    @classmethod
    def from_char(cls, char: str) -> GamePiece:
        """Create piece from notation character, e.g. 'W' → crowned white."""
        try:
            color, crowned = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, crowned)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛂."""
        return _UNICODE[(self.color, self.crowned)]
