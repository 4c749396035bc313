import sys
from datetime import timedelta

import pytest

from termchess.board import Board
from termchess.engine import EngineError, StockfishEngine, parse_uci_move
from termchess.moves import Move
from termchess.pieces import PieceType
from termchess.position import Position

FAKE_ENGINE = """
import sys
best = sys.argv[1]
log = sys.argv[2] if len(sys.argv) > 2 else None
for line in sys.stdin:
    cmd = line.strip()
    if log:
        with open(log, "a", encoding="utf-8") as fh:
            fh.write(cmd + "\\n")
    if cmd == "uci":
        print("id name Fake")
        print("uciok")
    elif cmd == "isready":
        print("readyok")
    elif cmd.startswith("go"):
        print("info depth 1")
        print("bestmove " + best)
    elif cmd == "quit":
        break
    sys.stdout.flush()
"""

SILENT_ENGINE = "import sys\nsys.stdin.readline()\n"


@pytest.fixture
def fake_script(tmp_path):
    path = tmp_path / "fake_engine.py"
    path.write_text(FAKE_ENGINE, encoding="utf-8")
    return str(path)


def sq(name):
    return Position.from_algebraic(name)


def test_parse_simple_move():
    assert parse_uci_move("e2e4") == Move(sq("e2"), sq("e4"))


def test_parse_promotion():
    move = parse_uci_move("e7e8n")
    assert move.promotion is PieceType.KNIGHT
    assert move.to_uci() == "e7e8n"


def test_parse_unknown_promotion_letter_ignored():
    assert parse_uci_move("e7e8x").promotion is None


def test_parse_too_short():
    with pytest.raises(EngineError):
        parse_uci_move("e2e")


def test_parse_bad_square():
    with pytest.raises(EngineError):
        parse_uci_move("z2e4")


@pytest.mark.parametrize("uci", ["e2e4", "g1f3", "a7a8q", "h2h1r"])
def test_parse_round_trip(uci):
    assert parse_uci_move(uci).to_uci() == uci


def test_best_move_sends_fen(fake_script, tmp_path):
    log = tmp_path / "log.txt"
    board = Board()
    with StockfishEngine([sys.executable, fake_script, "e7e5", str(log)]) as engine:
        move = engine.best_move(board, timedelta(milliseconds=250))
    assert move == Move(sq("e7"), sq("e5"))
    commands = log.read_text(encoding="utf-8").splitlines()
    assert commands[:2] == ["uci", "isready"]
    assert f"position fen {board.to_fen()}" in commands
    assert "go movetime 250" in commands
    assert commands[-1] == "quit"


def test_best_move_none(fake_script):
    with StockfishEngine([sys.executable, fake_script, "(none)"]) as engine:
        assert engine.best_move(Board(), timedelta(milliseconds=10)) is None


def test_missing_executable(tmp_path):
    with pytest.raises(EngineError, match="Failed to start"):
        StockfishEngine(str(tmp_path / "no-such-engine"))


def test_engine_without_handshake(tmp_path):
    path = tmp_path / "silent.py"
    path.write_text(SILENT_ENGINE, encoding="utf-8")
    with pytest.raises(EngineError, match="uciok"):
        StockfishEngine([sys.executable, str(path)])


def test_close_is_idempotent(fake_script, tmp_path):
    log = tmp_path / "log.txt"
    engine = StockfishEngine([sys.executable, fake_script, "e7e5", str(log)])
    engine.close()
    engine.close()
    assert engine._process.poll() == 0
    commands = log.read_text(encoding="utf-8").splitlines()
    assert commands == ["uci", "isready", "quit"]