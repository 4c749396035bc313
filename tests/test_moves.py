import pytest

from termchess.moves import Move
from termchess.pieces import PieceType
from termchess.position import Position


def sq(text):
    return Position.from_algebraic(text)


def test_plain_move_algebraic_is_target():
    move = Move(sq("e2"), sq("e4"))
    assert move.to_algebraic() == "e4"
    assert str(move) == "e4"


def test_plain_move_uci():
    assert Move(sq("g1"), sq("f3")).to_uci() == "g1f3"


@pytest.mark.parametrize(
    "piece,letter",
    [
        (PieceType.QUEEN, "q"),
        (PieceType.ROOK, "r"),
        (PieceType.BISHOP, "b"),
        (PieceType.KNIGHT, "n"),
    ],
)
def test_promotion_notations(piece, letter):
    move = Move(sq("e7"), sq("e8"), piece)
    assert move.to_uci() == "e7e8" + letter
    assert move.to_algebraic() == "e8=" + letter.upper()


def test_invalid_promotion_falls_back_to_queen():
    move = Move(sq("a7"), sq("a8"), PieceType.KING)
    assert move.to_uci() == "a7a8q"
    assert move.to_algebraic() == "a8=Q"


def test_castling_notation():
    assert Move(sq("e1"), sq("g1")).with_castling().to_algebraic() == "O-O"
    assert Move(sq("e8"), sq("c8")).with_castling().to_algebraic() == "O-O-O"


def test_castling_uci_unchanged():
    assert Move(sq("e1"), sq("g1")).with_castling().to_uci() == "e1g1"


def test_flags_do_not_mutate_original():
    move = Move(sq("d4"), sq("e5"))
    capture = move.with_capture()
    assert capture.is_capture is True
    assert move.is_capture is False
    assert move.with_en_passant().is_en_passant is True
    assert move.is_en_passant is False


def test_default_flags_false():
    move = Move(sq("b1"), sq("c3"))
    assert (move.is_capture, move.is_castling, move.is_en_passant) == (False, False, False)
    assert move.promotion is None