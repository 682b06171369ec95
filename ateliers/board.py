"""
Board squares and forward iteration over them.
"""

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class Square:
    """A named square at a numeric position."""

    position: int
    name: str

    def describe(self) -> str:
        return f"Square {self.position}: {self.name}"


class BoardIterator:
    """Forward cursor over a board's squares."""

    def __init__(self, squares: List[Square]):
        self._squares = squares
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the square the next call to `next()` returns."""
        return self._position

    def rewind(self) -> None:
        self._position = 0

    def __iter__(self) -> "BoardIterator":
        return self

    def __next__(self) -> Square:
        if self._position >= len(self._squares):
            raise StopIteration
        square = self._squares[self._position]
        self._position += 1
        return square


class Board:
    """Ordered, finite sequence of squares."""

    def __init__(self):
        self.squares: List[Square] = []

    def add_square(self, square: Square) -> None:
        self.squares.append(square)

    def __len__(self) -> int:
        return len(self.squares)

    def __getitem__(self, index: int) -> Square:
        return self.squares[index]

    def __iter__(self) -> Iterator[Square]:
        # A fresh cursor each time, so the board can be walked again.
        return BoardIterator(self.squares)


DEMO_SQUARES = [
    "Départ",
    "Boulevard de Belleville",
    "Caisse Communauté",
    "Rue Lecourbe",
    "Impôt sur le Revenu",
    "Gare Montparnasse",
    "Rue de Vaugirard",
    "Chance",
    "Rue de Courcelles",
    "Avenue de la République",
]


def create_demo_board() -> Board:
    """Create the first ten squares of the French board."""
    board = Board()
    for position, name in enumerate(DEMO_SQUARES):
        board.add_square(Square(position, name))
    return board
