"""Players, piece kinds and pieces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    """A side in the game."""

    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> Player:
        """Return the other side."""
        return Player.BLACK if self is Player.WHITE else Player.WHITE


class PieceType(Enum):
    """The kind of a chess piece."""

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"


_SYMBOLS = {
    (Player.WHITE, PieceType.KING): "♔",
    (Player.WHITE, PieceType.QUEEN): "♕",
    (Player.WHITE, PieceType.ROOK): "♖",
    (Player.WHITE, PieceType.BISHOP): "♗",
    (Player.WHITE, PieceType.KNIGHT): "♘",
    (Player.WHITE, PieceType.PAWN): "♙",
    (Player.BLACK, PieceType.KING): "♚",
    (Player.BLACK, PieceType.QUEEN): "♛",
    (Player.BLACK, PieceType.ROOK): "♜",
    (Player.BLACK, PieceType.BISHOP): "♝",
    (Player.BLACK, PieceType.KNIGHT): "♞",
    (Player.BLACK, PieceType.PAWN): "♟",
}


@dataclass(frozen=True)
class Piece:
    """A piece of a given kind belonging to a player."""

    piece_type: PieceType
    player: Player

    def unicode_symbol(self) -> str:
        """Return the Unicode chess glyph for this piece."""
        return _SYMBOLS[(self.player, self.piece_type)]

    def __str__(self) -> str:
        return self.unicode_symbol()