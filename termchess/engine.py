"""A UCI chess engine driven over pipes."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from datetime import timedelta

from termchess.board import Board
from termchess.moves import Move
from termchess.pieces import PieceType
from termchess.position import Position

_PROMOTIONS = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


class EngineError(RuntimeError):
    """Raised when the engine cannot be started or talked to."""


def parse_uci_move(uci_move: str) -> Move:
    """Parse a UCI long-notation move such as ``e2e4`` or ``e7e8q``."""
    if len(uci_move) < 4:
        raise EngineError(f"Invalid UCI move: {uci_move}")
    try:
        from_square = Position.from_algebraic(uci_move[0:2])
        to_square = Position.from_algebraic(uci_move[2:4])
    except ValueError as exc:
        raise EngineError(str(exc)) from exc
    promotion = _PROMOTIONS.get(uci_move[4]) if len(uci_move) == 5 else None
    return Move(from_square, to_square, promotion)


class StockfishEngine:
    """A running UCI engine process, ready to be asked for moves."""

    def __init__(self, engine_path: str | Sequence[str]) -> None:
        command = [engine_path] if isinstance(engine_path, str) else list(engine_path)
        try:
            self._process = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                bufsize=1,
            )
        except OSError as exc:
            raise EngineError(f"Failed to start Stockfish: {exc}") from exc
        self._closed = False
        try:
            self._send("uci")
            self._wait_for("uciok")
            self._send("isready")
            self._wait_for("readyok")
        except EngineError:
            self.close()
            raise

    def _send(self, command: str) -> None:
        stdin = self._process.stdin
        if stdin is None:
            return
        try:
            stdin.write(command + "\n")
            stdin.flush()
        except OSError as exc:
            raise EngineError(f"Failed to send '{command}': {exc}") from exc

    def _lines(self):
        stdout = self._process.stdout
        if stdout is None:
            return
        for line in iter(stdout.readline, ""):
            yield line.rstrip("\r\n")

    def _wait_for(self, expected: str) -> None:
        if any(expected in line for line in self._lines()):
            return
        raise EngineError(f"Expected response '{expected}' not received")

    def _read_best_move(self) -> str | None:
        for line in self._lines():
            if line.startswith("bestmove"):
                parts = line.split()
                if len(parts) >= 2 and parts[1] != "(none)":
                    return parts[1]
                return None
        return None

    def best_move(self, board: Board, time_limit: timedelta) -> Move | None:
        """Ask the engine for its move in this position, thinking for ``time_limit``."""
        self._send(f"position fen {board.to_fen()}")
        millis = int(time_limit / timedelta(milliseconds=1))
        self._send(f"go movetime {millis}")
        uci_move = self._read_best_move()
        return parse_uci_move(uci_move) if uci_move is not None else None

    def close(self) -> None:
        """Tell the engine to quit and wait for it to exit."""
        if self._closed:
            return
        self._closed = True
        try:
            self._send("quit")
        except EngineError:
            pass
        for stream in (self._process.stdin, self._process.stdout):
            if stream is not None:
                try:
                    stream.close()
                except OSError:
                    pass
        try:
            self._process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            self._process.kill()
            self._process.wait()

    def __enter__(self) -> StockfishEngine:
        return self

    def __exit__(self, *args) -> None:
        self.close()