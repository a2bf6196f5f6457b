from __future__ import annotations

from typing import Dict

from .core import Game


def _play(game: Game, move) -> Game:
    child = game.copy()
    side = child.side_to_move
    child.attempt_move(side, move.from_sq, move.to_sq)
    return child


def perft(game: Game, depth: int) -> int:
    """Performance test: count leaf nodes to `depth` from current game state.

    Works on copies; a move that wins the game is a leaf and is not expanded.
    """
    if depth <= 0:
        return 1
    side = game.side_to_move
    moves = game.legal_moves(side)
    if depth == 1:
        return len(moves)
    total = 0
    for m in moves:
        child = _play(game, m)
        if child.evaluate_win_conditions(side).is_over:
            total += 1
            continue
        child.switch_side()
        total += perft(child, depth - 1)
    return total


def perft_divide(game: Game, depth: int) -> Dict[str, int]:
    """Divide perft: nodes per root move."""
    out: Dict[str, int] = {}
    side = game.side_to_move
    for m in game.legal_moves(side):
        child = _play(game, m)
        if depth <= 1 or child.evaluate_win_conditions(side).is_over:
            out[m.uci] = 1
            continue
        child.switch_side()
        out[m.uci] = perft(child, depth - 1)
    return out
