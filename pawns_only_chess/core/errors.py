from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Side, Square


class PawnsChessError(ValueError):
    """Base class for every rejected command; none of them is fatal."""


class InvalidMove(PawnsChessError):
    pass


class NoPawnAtSource(PawnsChessError):
    def __init__(self, side: "Side", square: "Square") -> None:
        super().__init__(f"No {side.label} pawn at {square.name}")
        self.side = side
        self.square = square


class MalformedInput(PawnsChessError):
    pass


class OutOfRange(PawnsChessError):
    pass
