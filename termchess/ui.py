"""Drawing the board and game status on a terminal."""

from __future__ import annotations

import sys
from typing import TextIO

from termchess.board import Board, GameState
from termchess.pieces import Player
from termchess.position import Position

_WHITE = "\x1b[38;5;15m"
_YELLOW = "\x1b[38;5;11m"
_RED = "\x1b[38;5;9m"
_RESET = "\x1b[0m"
_CLEAR = "\x1b[H\x1b[2J"

_TOP = "┌───┬───┬───┬───┬───┬───┬───┬───┐"
_MIDDLE = "├───┼───┼───┼───┼───┼───┼───┼───┤"
_BOTTOM = "└───┴───┴───┴───┴───┴───┴───┴───┘"
_LABELS = "  a   b   c   d   e   f   g   h  "


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{_RESET}" if color else text


def render_board(board: Board, color: bool = True) -> str:
    """Return the board drawn with box characters, rank 8 at the top."""
    lines = [_TOP]
    for rank in range(7, -1, -1):
        row = "│"
        for file in range(8):
            piece = board.piece_at(Position(file, rank))
            symbol = piece.unicode_symbol() if piece else " "
            code = _WHITE if (file + rank) % 2 == 0 else _YELLOW
            row += _paint(f" {symbol} ", code, color) + "│"
        lines.append(f"{row} {rank + 1}")
        if rank > 0:
            lines.append(_MIDDLE)
    lines += [_BOTTOM, _LABELS, ""]
    return "\n".join(lines) + "\n"


def render_game_info(board: Board, color: bool = True) -> str:
    """Return the turn, move number and any check or end-of-game notice."""
    player = "White" if board.current_player is Player.WHITE else "Black"
    lines = [f"Turn: {player} | Move: {board.move_count}"]
    if board.is_in_check(board.current_player):
        lines.append(_paint("⚠️  CHECK!", _RED, color))
    notices = {
        GameState.CHECKMATE: ("🏁 CHECKMATE!", _RED),
        GameState.STALEMATE: ("🤝 STALEMATE!", _YELLOW),
        GameState.DRAW: ("🤝 DRAW!", _YELLOW),
    }
    notice = notices.get(board.game_state())
    if notice is not None:
        lines.append(_paint(*notice, color))
    lines.append("")
    return "\n".join(lines) + "\n"


class ChessUI:
    """Writes the board and game status to a text stream."""

    def __init__(self, out: TextIO | None = None, color: bool = True) -> None:
        self._out = out
        self.color = color

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def display_board(self, board: Board) -> None:
        """Clear the screen and draw the board."""
        self.out.write(_CLEAR + render_board(board, self.color))
        self.out.flush()

    def display_game_info(self, board: Board) -> None:
        """Write the turn and status lines."""
        self.out.write(render_game_info(board, self.color))
        self.out.flush()