from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

from .errors import InvalidMove
from .moves import CAPTURE, DOUBLE_PAWN_PUSH, EnPassantMove, Move, NormalMove
from .types import Side, Square, in_bounds

if TYPE_CHECKING:
    from .game import Game


def classify_move(game: "Game", side: Side, from_sq: Square, to_sq: Square) -> Move:
    """Validate a pawn move for `side` and return the move that would play it.

    Reads the board and the en-passant target only; raises InvalidMove when
    no pawn rule allows the move. The caller has already checked that
    `from_sq` holds a pawn of `side`.
    """
    board = game.board
    direction = side.direction
    enemy = side.opponent().occupant

    df = to_sq.file - from_sq.file
    dr = to_sq.rank - from_sq.rank

    # one square diagonally forward
    if abs(df) == 1 and dr == direction:
        target = board.occupant_at(to_sq)
        if target is enemy:
            return NormalMove(from_sq, to_sq, flags=(CAPTURE,))
        if game.en_passant is not None and to_sq == game.en_passant and board.is_empty(to_sq):
            captured = Square(to_sq.file, from_sq.rank)
            if board.occupant_at(captured) is enemy:
                return EnPassantMove(from_sq, to_sq, flags=(CAPTURE,), captured_sq=captured)
        raise InvalidMove(f"Nothing to capture on {to_sq.name}")

    if df != 0:
        raise InvalidMove("Pawns advance along their own file")

    steps = dr * direction
    if steps <= 0:
        raise InvalidMove("Pawns only move forward")
    if steps > 2 or (steps == 2 and from_sq.rank != side.start_rank):
        raise InvalidMove("Pawn cannot advance that far")

    for i in range(1, steps + 1):
        if not board.is_empty(Square(from_sq.file, from_sq.rank + i * direction)):
            raise InvalidMove("Path is blocked")

    if steps == 2:
        return NormalMove(from_sq, to_sq, flags=(DOUBLE_PAWN_PUSH,))
    return NormalMove(from_sq, to_sq)


def candidate_targets(side: Side, from_sq: Square) -> Iterator[Square]:
    direction = side.direction
    for df, steps in ((0, 1), (0, 2), (-1, 1), (1, 1)):
        f, r = from_sq.file + df, from_sq.rank + steps * direction
        if in_bounds(f, r):
            yield Square(f, r)


def generate_moves(game: "Game", side: Side) -> Iterator[Move]:
    for from_sq in game.board.pawns_of(side):
        for to_sq in candidate_targets(side, from_sq):
            try:
                yield classify_move(game, side, from_sq, to_sq)
            except InvalidMove:
                continue
