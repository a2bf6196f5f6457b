from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import MalformedInput, OutOfRange

FILES = "abcdefgh"
RANKS = "12345678"


class Occupant(Enum):
    EMPTY = " "
    WHITE = "W"
    BLACK = "B"

    @property
    def symbol(self) -> str:
        return self.value


class Side(Enum):
    WHITE = 1
    BLACK = -1

    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def direction(self) -> int:
        return self.value

    @property
    def start_rank(self) -> int:
        return 1 if self is Side.WHITE else 6

    @property
    def goal_rank(self) -> int:
        return 7 if self is Side.WHITE else 0

    @property
    def occupant(self) -> Occupant:
        return Occupant.WHITE if self is Side.WHITE else Occupant.BLACK

    @property
    def label(self) -> str:
        return self.name.lower()


class GameResult(Enum):
    ONGOING = "ongoing"
    WHITE_WINS = "White Wins!"
    BLACK_WINS = "Black Wins!"
    STALEMATE = "Stalemate!"

    @classmethod
    def win_for(cls, side: Side) -> "GameResult":
        return cls.WHITE_WINS if side is Side.WHITE else cls.BLACK_WINS

    @property
    def is_over(self) -> bool:
        return self is not GameResult.ONGOING

    @property
    def message(self) -> str:
        return self.value


def in_bounds(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


@dataclass(frozen=True, order=True)
class Square:
    """A board coordinate, zero-indexed: file a..h -> 0..7, rank 1..8 -> 0..7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not in_bounds(self.file, self.rank):
            raise OutOfRange(f"Square out of range: ({self.file}, {self.rank})")

    @classmethod
    def parse(cls, text: str) -> "Square":
        if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
            raise MalformedInput(f"Bad square: {text!r}")
        return cls(FILES.index(text[0]), RANKS.index(text[1]))

    @property
    def name(self) -> str:
        return f"{FILES[self.file]}{RANKS[self.rank]}"

    def offset(self, df: int, dr: int) -> "Square":
        return Square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return self.name


ALL_SQUARES = tuple(Square(f, r) for r in range(8) for f in range(8))
