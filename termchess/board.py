"""The board, its pieces and game bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from termchess.moves import Move
from termchess.pieces import Piece, PieceType, Player
from termchess.position import Position


class GameState(Enum):
    """The outcome status of a game."""

    IN_PROGRESS = "in_progress"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


class IllegalMoveError(ValueError):
    """Raised when a move is not allowed on the current board."""


@dataclass
class CastlingRights:
    """Which castling moves each side may still make."""

    white_kingside: bool = True
    white_queenside: bool = True
    black_kingside: bool = True
    black_queenside: bool = True

    def to_fen(self) -> str:
        flags = [
            ("K", self.white_kingside),
            ("Q", self.white_queenside),
            ("k", self.black_kingside),
            ("q", self.black_queenside),
        ]
        return "".join(letter for letter, allowed in flags if allowed) or "-"


_BACK_RANK = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]

_FEN_LETTERS = {
    PieceType.KING: "k",
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
    PieceType.PAWN: "p",
}


def _fen_letter(piece: Piece) -> str:
    letter = _FEN_LETTERS[piece.piece_type]
    return letter.upper() if piece.player is Player.WHITE else letter


class Board:
    """A chess board set up in the standard starting position."""

    def __init__(self) -> None:
        self.pieces: dict[Position, Piece] = {}
        self.current_player = Player.WHITE
        self.move_count = 1
        self.halfmove_clock = 0
        self.castling_rights = CastlingRights()
        self.en_passant_target: Position | None = None
        self._setup_initial_position()

    def _setup_initial_position(self) -> None:
        for player, back, pawns in ((Player.WHITE, 0, 1), (Player.BLACK, 7, 6)):
            for file, piece_type in enumerate(_BACK_RANK):
                self.pieces[Position(file, back)] = Piece(piece_type, player)
                self.pieces[Position(file, pawns)] = Piece(PieceType.PAWN, player)

    def piece_at(self, position: Position) -> Piece | None:
        """Return the piece on a square, or None if it is empty."""
        return self.pieces.get(position)

    def make_move(self, move: Move) -> None:
        """Play a move, raising IllegalMoveError if it is not allowed."""
        if not self.is_legal_move(move):
            raise IllegalMoveError("Illegal move")
        piece = self.pieces.pop(move.from_square, None)
        if piece is not None:
            if move.promotion is not None:
                piece = replace(piece, piece_type=move.promotion)
            self.pieces[move.to_square] = piece
        self.current_player = self.current_player.opposite()
        if self.current_player is Player.WHITE:
            self.move_count += 1

    def is_legal_move(self, move: Move) -> bool:
        """Whether the side to move owns the moving piece and the target is not its own."""
        piece = self.piece_at(move.from_square)
        if piece is None or piece.player is not self.current_player:
            return False
        target = self.piece_at(move.to_square)
        return target is None or target.player is not piece.player

    def legal_moves(self) -> list[Move]:
        """Generated moves; the board does no move generation, so this is empty."""
        return []

    def game_state(self) -> GameState:
        """The game status; end-of-game detection is not done, so always in progress."""
        return GameState.IN_PROGRESS

    def is_in_check(self, player: Player) -> bool:
        """Whether a generated move of the opponent lands on the player's king.

        The board generates no moves, so this is False in practice.
        """
        kings = {
            position
            for position, piece in self.pieces.items()
            if piece.player is player and piece.piece_type is PieceType.KING
        }
        if player.opposite() is not self.current_player:
            return False
        return any(move.to_square in kings for move in self.legal_moves())

    def to_fen(self) -> str:
        """Return the position in Forsyth-Edwards Notation."""
        rows = []
        for rank in range(7, -1, -1):
            row = ""
            empty = 0
            for file in range(8):
                piece = self.piece_at(Position(file, rank))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += _fen_letter(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        side = "w" if self.current_player is Player.WHITE else "b"
        ep = self.en_passant_target.to_algebraic() if self.en_passant_target else "-"
        return (
            f"{'/'.join(rows)} {side} {self.castling_rights.to_fen()} {ep} "
            f"{self.halfmove_clock} {self.move_count}"
        )