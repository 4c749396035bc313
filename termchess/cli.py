"""Command-line game against a UCI engine."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from datetime import timedelta

from termchess.board import Board, GameState, IllegalMoveError
from termchess.engine import EngineError, StockfishEngine
from termchess.moves import Move
from termchess.pieces import Player
from termchess.position import Position
from termchess.ui import ChessUI

_CLEAR = "\x1b[2J\x1b[H"
_MOVE_DELAY = 0.5

HELP_TEXT = """
📖 Help:
  • Enter moves in algebraic notation:
    - Pawn moves: e4, d5, exd5
    - Piece moves: Nf3, Bb5, Qh4
    - Castling: O-O (kingside), O-O-O (queenside)
    - Promotion: e8=Q
  • Commands:
    - help/h: Show this help
    - quit/q: Quit game
    - board/b: Redraw board
"""


class MoveParseError(ValueError):
    """Raised when typed input cannot be turned into a move."""


def _castle(board: Board, target_file: str) -> Move:
    back = "1" if board.current_player is Player.WHITE else "8"
    return Move(
        Position.from_algebraic("e" + back),
        Position.from_algebraic(target_file + back),
    )


def parse_algebraic_notation(notation: str, board: Board) -> Move:
    """Turn typed input (``e4``, ``e2e4``, ``O-O``, ``O-O-O``) into a move."""
    notation = notation.strip().lower()
    if notation in ("o-o", "0-0"):
        return _castle(board, "g")
    if notation in ("o-o-o", "0-0-0"):
        return _castle(board, "c")
    try:
        if len(notation) == 2:
            to_square = Position.from_algebraic(notation)
            if board.current_player is Player.WHITE:
                from_rank = 1 if to_square.rank == 3 else to_square.rank - 1
            else:
                from_rank = 6 if to_square.rank == 4 else to_square.rank + 1
            return Move(Position(to_square.file, from_rank), to_square)
        if len(notation) == 4:
            return Move(
                Position.from_algebraic(notation[0:2]),
                Position.from_algebraic(notation[2:4]),
            )
    except ValueError as exc:
        raise MoveParseError(str(exc)) from exc
    raise MoveParseError(
        f"Could not parse move: '{notation}'. Try format like 'e4' or 'e2e4'"
    )


def get_player_move(
    board: Board, read_line: Callable[[], str] | None = None
) -> Move | None:
    """Prompt until a move is entered; None when the player quits or input ends."""
    read = read_line if read_line is not None else input
    while True:
        print("Enter your move: ", end="", flush=True)
        try:
            text = read().strip()
        except EOFError:
            return None
        command = text.lower()
        if command in ("quit", "exit", "q"):
            return None
        if command in ("help", "h"):
            print(HELP_TEXT)
            continue
        if command in ("board", "b"):
            continue
        try:
            return parse_algebraic_notation(text, board)
        except MoveParseError as exc:
            print(f"❌ Invalid move '{text}': {exc}")


def run_game(
    engine_path: str | Sequence[str], time_limit: int, player_white: bool
) -> None:
    """Play one game; ``time_limit`` is the engine's thinking time in milliseconds."""
    board = Board()
    ui = ChessUI()
    think = timedelta(milliseconds=time_limit)
    with StockfishEngine(engine_path) as engine:
        human, computer = ("White", "Black") if player_white else ("Black", "White")
        print("🏰 Chess CLI - Playing against Stockfish")
        print(f"Player: {human} | Engine: {computer}")
        print("Enter moves in algebraic notation (e.g., e4, Nf3, O-O)")
        print("Type 'quit' to exit, 'help' for commands\n")

        while True:
            ui.display_board(board)
            ui.display_game_info(board)

            state = board.game_state()
            if state is GameState.CHECKMATE:
                winner = "Black" if board.current_player is Player.WHITE else "White"
                print(f"🏁 Checkmate! {winner} wins!")
                break
            if state is GameState.STALEMATE:
                print("🤝 Stalemate! Game is a draw.")
                break
            if state is GameState.DRAW:
                print("🤝 Draw!")
                break

            if (board.current_player is Player.WHITE) == player_white:
                move = get_player_move(board)
                if move is None:
                    break
                if not board.is_legal_move(move):
                    print("❌ Illegal move! Try again.")
                    continue
                board.make_move(move)
                print(f"✓ Move played: {move.to_algebraic()}")
            else:
                print("🤖 Stockfish is thinking...")
                move = engine.best_move(board, think)
                if move is None:
                    print("🤖 Stockfish couldn't find a move!")
                    break
                board.make_move(move)
                print(f"🤖 Stockfish plays: {move.to_algebraic()}")

            time.sleep(_MOVE_DELAY)

    print("\nGame Over! Thanks for playing!")


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="chess-cli",
        description="A CLI chess game with Stockfish integration",
    )
    parser.add_argument("-e", "--engine-path", default="stockfish")
    parser.add_argument("-t", "--time-limit", type=int, default=1000)
    parser.add_argument("-p", "--player-white", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line; returns the exit status."""
    args = build_parser().parse_args(argv)
    print(_CLEAR, end="", flush=True)
    try:
        run_game(args.engine_path, args.time_limit, args.player_white)
    except (EngineError, IllegalMoveError) as exc:
        print(_CLEAR, end="", flush=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(_CLEAR, end="", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())