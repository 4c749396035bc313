import pytest

from termchess.pieces import Piece, PieceType, Player


def test_opposite():
    assert Player.WHITE.opposite() is Player.BLACK
    assert Player.BLACK.opposite() is Player.WHITE


@pytest.mark.parametrize("name", ["WHITE", "BLACK"])
def test_opposite_twice_is_identity(name):
    player = Player[name]
    assert Player[name].opposite().opposite() is player


def test_known_symbols():
    assert Piece(PieceType.KING, Player.WHITE).unicode_symbol() == "♔"
    assert Piece(PieceType.PAWN, Player.BLACK).unicode_symbol() == "♟"
    assert Piece(PieceType.KNIGHT, Player.BLACK).unicode_symbol() == "♞"


def test_all_symbols_distinct():
    symbols = {Piece(t, p).unicode_symbol() for t in PieceType for p in Player}
    assert len(symbols) == 12


def test_str_is_symbol():
    piece = Piece(PieceType.QUEEN, Player.WHITE)
    assert str(piece) == piece.unicode_symbol() == "♕"


def test_piece_equality():
    assert Piece(PieceType.ROOK, Player.BLACK) == Piece(PieceType.ROOK, Player.BLACK)
    assert Piece(PieceType.ROOK, Player.BLACK) != Piece(PieceType.ROOK, Player.WHITE)