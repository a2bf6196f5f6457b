from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core import (
    Game,
    Move,
    NormalMove,
    EnPassantMove,
    Occupant,
    Side,
    Square,
    MalformedInput,
)
from ..fen import game_to_fen


def _side_to_str(s: Side) -> str:
    return "WHITE" if s is Side.WHITE else "BLACK"


def _alg_to_sq(a: str) -> Square:
    try:
        return Square.parse(a.strip().lower())
    except MalformedInput:
        raise ValueError(f"Bad square: {a!r}") from None


def _sq_to_alg(s: Optional[Square]) -> Optional[str]:
    return s.name if s is not None else None


def move_to_uci(m: Move) -> str:
    return m.uci


def move_to_dict(m: Move) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "from_alg": m.from_sq.name,
        "to_alg": m.to_sq.name,
        "flags": list(m.flags),
    }
    if isinstance(m, EnPassantMove):
        d["kind"] = "en_passant"
        d["captured_alg"] = _sq_to_alg(m.captured_sq)
    else:
        d["kind"] = "normal"
    return d


def dict_to_move(d: Dict[str, Any]) -> Move:
    """Decode a move; only the squares are trusted, legality is re-checked on apply."""
    kind = d.get("kind", "normal")

    def get_sq(key: str) -> Square:
        if key not in d:
            raise ValueError(f"Missing square: {key}")
        return _alg_to_sq(str(d[key]))

    fr = get_sq("from_alg")
    to = get_sq("to_alg")
    flags = tuple(d.get("flags", []) or [])

    if kind == "normal":
        return NormalMove(fr, to, flags=flags)
    if kind == "en_passant":
        return EnPassantMove(fr, to, flags=flags, captured_sq=get_sq("captured_alg"))
    raise ValueError(f"Unknown move kind: {kind!r}")


def snapshot(game: Game) -> Dict[str, Any]:
    """JSON-friendly snapshot of the current position."""

    pawns: List[Dict[str, Any]] = []
    for side in (Side.WHITE, Side.BLACK):
        for s in game.board.iter_pawns_of(side):
            pawns.append({"color": _side_to_str(side), "pos_alg": s.name})

    rows = []
    for r in range(7, -1, -1):
        row = []
        for f in range(8):
            occ = game.occupant_at(Square(f, r))
            row.append("." if occ is Occupant.EMPTY else occ.symbol)
        rows.append("".join(row))

    stm = game.side_to_move
    return {
        "side_to_move": _side_to_str(stm),
        "en_passant": _sq_to_alg(game.en_passant),
        "last_move": move_to_dict(game.last_move) if game.last_move is not None else None,
        "pawns": sorted(pawns, key=lambda x: (x["color"], x["pos_alg"])),
        "counts": {"WHITE": game.board.count(Side.WHITE), "BLACK": game.board.count(Side.BLACK)},
        "rows": rows,
        "stalemate": game.evaluate_stalemate(stm),
        "fen": game_to_fen(game),
    }
