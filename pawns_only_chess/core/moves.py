from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from .types import Occupant, Square

if TYPE_CHECKING:
    from .game import Game


DOUBLE_PAWN_PUSH = "double_pawn_push"
CAPTURE = "capture"


@dataclass(frozen=True)
class Move:
    from_sq: Square
    to_sq: Square
    flags: Tuple[str, ...] = ()

    @property
    def is_double_step(self) -> bool:
        return DOUBLE_PAWN_PUSH in self.flags

    @property
    def uci(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"

    def apply(self, game: "Game") -> "MoveOutcome":
        raise NotImplementedError

    def _finish(self, game: "Game", captured: Optional[Square]) -> "MoveOutcome":
        # the target lives for exactly one reply
        if self.is_double_step:
            game.en_passant = Square(self.to_sq.file, (self.from_sq.rank + self.to_sq.rank) // 2)
        else:
            game.en_passant = None
        game.last_move = self
        return MoveOutcome(move=self, captured_sq=captured, en_passant=game.en_passant)


@dataclass(frozen=True)
class NormalMove(Move):
    """Straight advance or diagonal capture onto an occupied square."""

    def apply(self, game: "Game") -> "MoveOutcome":
        board = game.board
        mover = board.occupant_at(self.from_sq)
        if mover is Occupant.EMPTY:
            raise ValueError("No pawn to move")

        captured = None if board.is_empty(self.to_sq) else self.to_sq

        board.clear(self.from_sq)
        board.place(self.to_sq, mover)
        return self._finish(game, captured)


@dataclass(frozen=True)
class EnPassantMove(Move):
    captured_sq: Optional[Square] = None

    def apply(self, game: "Game") -> "MoveOutcome":
        board = game.board
        mover = board.occupant_at(self.from_sq)
        if mover is Occupant.EMPTY or self.captured_sq is None or board.is_empty(self.captured_sq):
            raise ValueError("Invalid en passant state")

        board.clear(self.captured_sq)
        board.clear(self.from_sq)
        board.place(self.to_sq, mover)
        return self._finish(game, self.captured_sq)


@dataclass(frozen=True)
class MoveOutcome:
    move: Move
    captured_sq: Optional[Square] = None
    en_passant: Optional[Square] = None

    @property
    def is_capture(self) -> bool:
        return self.captured_sq is not None
