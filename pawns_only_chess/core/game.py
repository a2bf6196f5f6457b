from __future__ import annotations

import logging
from typing import List, Optional

from .board import Board
from .errors import InvalidMove, NoPawnAtSource
from .moves import Move, MoveOutcome
from .rules import classify_move, generate_moves
from .types import GameResult, Occupant, Side, Square

LOGGER = logging.getLogger("pawns.core.game")


class Game:
    """One pawns-only game: the board, the side to move and the en-passant target.

    State changes only through attempt_move and switch_side.
    """

    def __init__(self) -> None:
        self.board = Board()
        self.side_to_move: Side = Side.WHITE
        self.en_passant: Optional[Square] = None
        self.last_move: Optional[Move] = None

    # --- queries ---
    def occupant_at(self, s: Square) -> Occupant:
        return self.board.occupant_at(s)

    def legal_moves(self, side: Side) -> List[Move]:
        return list(generate_moves(self, side))

    # --- moves ---
    def validate_move(self, side: Side, from_sq: Square, to_sq: Square) -> Move:
        if side is not self.side_to_move:
            raise InvalidMove("Wrong side to move")
        if self.board.occupant_at(from_sq) is not side.occupant:
            raise NoPawnAtSource(side, from_sq)
        return classify_move(self, side, from_sq, to_sq)

    def attempt_move(self, side: Side, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Play a pawn move for `side` without passing the turn.

        Raises NoPawnAtSource or InvalidMove with the game left untouched.
        """
        try:
            move = self.validate_move(side, from_sq, to_sq)
        except (InvalidMove, NoPawnAtSource) as exc:
            LOGGER.debug(
                "move_rejected",
                extra={"side": side.label, "from_alg": from_sq.name, "to_alg": to_sq.name, "reason": str(exc)},
            )
            raise

        outcome = move.apply(self)
        LOGGER.debug(
            "move_applied",
            extra={
                "side": side.label,
                "uci": move.uci,
                "captured": outcome.captured_sq.name if outcome.captured_sq else None,
                "en_passant": outcome.en_passant.name if outcome.en_passant else None,
            },
        )
        return outcome

    def switch_side(self) -> Side:
        self.side_to_move = self.side_to_move.opponent()
        return self.side_to_move

    # --- terminal states ---
    def evaluate_stalemate(self, side: Side) -> bool:
        return next(generate_moves(self, side), None) is None

    def evaluate_win_conditions(self, side: Side) -> GameResult:
        """Result from the point of view of `side`, which has just moved."""
        reached_goal = any(
            self.board.occupant_at(Square(f, side.goal_rank)) is side.occupant for f in range(8)
        )
        if reached_goal or self.board.count(side.opponent()) == 0:
            return GameResult.win_for(side)
        return GameResult.ONGOING

    def copy(self) -> "Game":
        other = Game()
        other.board = self.board.copy()
        other.side_to_move = self.side_to_move
        other.en_passant = self.en_passant
        other.last_move = self.last_move
        return other
