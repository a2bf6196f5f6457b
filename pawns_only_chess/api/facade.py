from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..core import Game, GameResult, Move, new_game
from ..fen import parse_fen

from .serde import snapshot, dict_to_move, move_to_dict

LOGGER = logging.getLogger("pawns.api.facade")


def diff(before: Dict[str, Any], after: Dict[str, Any]) -> Dict[str, Any]:
    """Squares that changed between two snapshots, for animation."""
    b = {p["pos_alg"]: p["color"] for p in before.get("pawns", [])}
    a = {p["pos_alg"]: p["color"] for p in after.get("pawns", [])}

    vacated = sorted(s for s in b if s not in a)
    occupied = sorted(s for s in a if s not in b)
    replaced = sorted(s for s in a.keys() & b.keys() if a[s] != b[s])

    return {
        "vacated": [{"pos_alg": s, "color": b[s]} for s in vacated],
        "occupied": [{"pos_alg": s, "color": a[s]} for s in occupied],
        "replaced": [{"pos_alg": s, "before": b[s], "after": a[s]} for s in replaced],
        "side_to_move": after.get("side_to_move"),
        "en_passant": after.get("en_passant"),
    }


class PawnsEngine:
    """A small, stable facade for UI/server integration.

    - apply runs one whole turn: move, win check, side switch, stalemate check
    - returns snapshots + diffs
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.result = GameResult.ONGOING
        if game.evaluate_stalemate(game.side_to_move):
            self.result = GameResult.STALEMATE

    @classmethod
    def new_game(cls) -> "PawnsEngine":
        return cls(new_game())

    @classmethod
    def from_fen(cls, fen: str) -> "PawnsEngine":
        return cls(parse_fen(fen))

    def state(self) -> Dict[str, Any]:
        out = snapshot(self.game)
        out["result"] = self.result.name
        return out

    def legal_moves(self) -> List[Dict[str, Any]]:
        if self.result.is_over:
            return []
        return [move_to_dict(m) for m in self.game.legal_moves(self.game.side_to_move)]

    def apply(self, move: Union[Dict[str, Any], str]) -> Dict[str, Any]:
        if self.result.is_over:
            raise ValueError("Game is over")

        m = self._decode(move)
        before = self.state()
        side = self.game.side_to_move

        outcome = self.game.attempt_move(side, m.from_sq, m.to_sq)

        result = self.game.evaluate_win_conditions(side)
        if not result.is_over:
            nxt = self.game.switch_side()
            if self.game.evaluate_stalemate(nxt):
                result = GameResult.STALEMATE
        self.result = result
        if result.is_over:
            LOGGER.info("game_over", extra={"result": result.name, "last_uci": outcome.move.uci})

        after = self.state()
        meta = {
            "applied": move_to_dict(outcome.move),
            "uci": outcome.move.uci,
            "captured_alg": outcome.captured_sq.name if outcome.captured_sq else None,
            "result": result.name,
            "message": result.message if result.is_over else None,
        }
        return {"before": before, "after": after, "diff": diff(before, after), "meta": meta}

    @staticmethod
    def _decode(move: Union[Dict[str, Any], str]) -> Move:
        if isinstance(move, str):
            uci = move.strip().lower()
            if len(uci) != 4:
                raise ValueError(f"Bad move: {move!r}")
            return dict_to_move({"from_alg": uci[:2], "to_alg": uci[2:]})
        return dict_to_move(move)

    def winner(self) -> Optional[str]:
        if self.result is GameResult.WHITE_WINS:
            return "WHITE"
        if self.result is GameResult.BLACK_WINS:
            return "BLACK"
        return None
