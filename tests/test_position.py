import pytest

from termchess.position import Position

ALL_COORDS = [(f, r) for f in range(8) for r in range(8)]


def test_corner_squares():
    assert Position.from_algebraic("a1") == Position(0, 0)
    assert Position.from_algebraic("h8") == Position(7, 7)


@pytest.mark.parametrize("file,rank", ALL_COORDS)
def test_round_trip(file, rank):
    square = Position(file, rank)
    assert Position.from_algebraic(square.to_algebraic()) == square


def test_str_matches_algebraic():
    pos = Position.from_algebraic("e4")
    assert str(pos) == "e4"
    assert pos.to_algebraic() == "e4"


def test_all_squares_distinct_notation():
    assert len({Position(f, r).to_algebraic() for f, r in ALL_COORDS}) == 64


@pytest.mark.parametrize("file,rank", ALL_COORDS)
def test_is_valid(file, rank):
    assert Position(file, rank).is_valid() is True


@pytest.mark.parametrize("file,rank", [(8, 0), (0, 8), (-1, 0), (0, -1)])
def test_out_of_range_rejected(file, rank):
    with pytest.raises(ValueError):
        Position(file, rank)


@pytest.mark.parametrize("text", ["", "a", "a10", "i1", "a9", "a0", "E4", "44"])
def test_bad_notation_rejected(text):
    with pytest.raises(ValueError):
        Position.from_algebraic(text)


def test_positions_hashable():
    squares = {Position(1, 2), Position(1, 2), Position(2, 1)}
    assert len(squares) == 2