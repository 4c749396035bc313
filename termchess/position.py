"""Board squares addressed by file and rank."""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True)
class Position:
    """A square on the board; file and rank both run from 0 to 7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file <= 7 and 0 <= self.rank <= 7):
            raise ValueError(f"Invalid position: file {self.file} rank {self.rank}")

    @classmethod
    def from_algebraic(cls, notation: str) -> Position:
        """Parse a square such as ``e4``."""
        if len(notation) != 2:
            raise ValueError(f"Invalid algebraic notation: {notation}")
        file_char, rank_char = notation
        if file_char not in _FILES:
            raise ValueError(f"Invalid file: {file_char}")
        if rank_char not in _RANKS:
            raise ValueError(f"Invalid rank: {rank_char}")
        return cls(_FILES.index(file_char), _RANKS.index(rank_char))

    def to_algebraic(self) -> str:
        """Return the square in algebraic notation, e.g. ``e4``."""
        return f"{_FILES[self.file]}{_RANKS[self.rank]}"

    def is_valid(self) -> bool:
        """Whether the square lies on the board."""
        return 0 <= self.file <= 7 and 0 <= self.rank <= 7

    def __str__(self) -> str:
        return self.to_algebraic()