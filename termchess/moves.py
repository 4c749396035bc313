"""Chess moves and their notations."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termchess.pieces import PieceType
from termchess.position import Position

_PROMOTION_LETTERS = {
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
}


def _promotion_letter(piece_type: PieceType) -> str:
    return _PROMOTION_LETTERS.get(piece_type, "Q")


@dataclass(frozen=True)
class Move:
    """A move from one square to another, with optional promotion."""

    from_square: Position
    to_square: Position
    promotion: PieceType | None = None
    is_capture: bool = False
    is_castling: bool = False
    is_en_passant: bool = False

    def with_capture(self) -> Move:
        """Return a copy marked as a capture."""
        return replace(self, is_capture=True)

    def with_castling(self) -> Move:
        """Return a copy marked as castling."""
        return replace(self, is_castling=True)

    def with_en_passant(self) -> Move:
        """Return a copy marked as an en passant capture."""
        return replace(self, is_en_passant=True)

    def to_algebraic(self) -> str:
        """Return a short notation: the target square plus any promotion."""
        if self.is_castling:
            return "O-O" if self.to_square.file == 6 else "O-O-O"
        result = self.to_square.to_algebraic()
        if self.promotion is not None:
            result += "=" + _promotion_letter(self.promotion)
        return result

    def to_uci(self) -> str:
        """Return the move in UCI long notation, e.g. ``e7e8q``."""
        result = self.from_square.to_algebraic() + self.to_square.to_algebraic()
        if self.promotion is not None:
            result += _promotion_letter(self.promotion).lower()
        return result

    def __str__(self) -> str:
        return self.to_algebraic()