# termchess

Play chess against a UCI engine, such as Stockfish, in your terminal. The
board is drawn with Unicode pieces and coloured squares, and you type your
moves at a prompt.

## Installation

```
pip install .
```

The package has no third-party dependencies. You do need a UCI chess engine
on your machine. The default is the `stockfish` executable, found on your
`PATH`.

## Playing

```
termchess
```

Options:

- `-e`, `--engine-path PATH`: the engine to run (default: `stockfish`)
- `-t`, `--time-limit MS`: how long the engine thinks per move, in milliseconds (default: `1000`)
- `-p`, `--player-white`: play White. Without it you play Black and the engine moves first.

For example, to play White against an engine that thinks for half a second:

```
termchess --player-white --time-limit 500
```

If the engine cannot be started or stops answering, the command prints
`Error: ...` to standard error and exits with status 1.

## Entering moves

At the `Enter your move:` prompt you can type:

- a target square for a pawn push, such as `e4` or `d5`. The starting square
  is taken to be one rank behind, or two ranks behind for a double step to
  the fourth (White) or fifth (Black) rank.
- a move from one square to another, such as `e2e4` or `g1f3`
- `O-O` or `0-0` for kingside castling, `O-O-O` or `0-0-0` for queenside
  castling. These are read as the king's move from e1/e8 to g1/g8 or c1/c8.

Input is not case-sensitive. Commands:

- `help` / `h`: show help
- `board` / `b`: prompt again
- `quit` / `q` / `exit`: leave the game (end of input also ends the game)

## What the game does not do

The board checks only two things about a move: the piece on the starting
square must belong to the side to move, and the target square must not hold
one of that side's own pieces. It does not:

- check how pieces move, or generate legal moves (`Board.legal_moves()`
  returns an empty list)
- detect check, checkmate, stalemate or draws (`Board.game_state()` always
  returns `GameState.IN_PROGRESS`, and `Board.is_in_check()` is `False`)
- move the rook when castling, remove a pawn taken en passant, or track
  castling rights, the en passant square or the halfmove clock
- read piece moves such as `Nf3`, captures such as `exd5`, or promotions
  such as `e8=Q` from the prompt

The engine sees the position as the FEN produced by `Board.to_fen()`, so its
replies are based on that view of the game.

## Using it as a library

```python
from termchess.board import Board
from termchess.moves import Move
from termchess.position import Position

board = Board()
board.make_move(Move(Position.from_algebraic("e2"), Position.from_algebraic("e4")))
print(board.to_fen())
# rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1
```

Modules:

- `termchess.position`: `Position`, a square with `file` and `rank` from 0
  to 7; `Position.from_algebraic("e4")`, `to_algebraic()`, `is_valid()`.
  Squares off the board raise `ValueError`.
- `termchess.pieces`: the `Player` and `PieceType` enums and `Piece`, with
  `Player.opposite()` and `Piece.unicode_symbol()`.
- `termchess.moves`: `Move(from_square, to_square, promotion=None)` with
  `to_algebraic()`, `to_uci()` and the `with_capture()`, `with_castling()`
  and `with_en_passant()` copies.
- `termchess.board`: `Board`, `GameState` and `IllegalMoveError`, raised by
  `Board.make_move()` for a move that `Board.is_legal_move()` rejects.
- `termchess.engine`: `StockfishEngine(engine_path)` starts the engine (a
  path, or a command as a sequence of arguments) and performs the UCI
  handshake. Use it as a context manager, or call `close()`.
  `best_move(board, time_limit)` takes a `datetime.timedelta` and returns a
  `Move`, or `None` if the engine has no move. `parse_uci_move("e7e8q")`
  parses UCI moves. Failures raise `EngineError`.
- `termchess.ui`: `render_board(board, color=True)` and
  `render_game_info(board, color=True)` return the drawings as strings.
  `ChessUI(out=None, color=True)` writes them to a stream (standard output
  by default).
- `termchess.cli`: `main(argv=None)`, `run_game(engine_path, time_limit,
  player_white)`, `parse_algebraic_notation(notation, board)` (raises
  `MoveParseError`), `get_player_move(board, read_line=None)` and
  `build_parser()`.

## Running the tests

```
pip install .[test]
pytest
```