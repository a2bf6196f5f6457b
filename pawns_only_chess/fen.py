from __future__ import annotations

from .core import Game, Occupant, Side, Square, MalformedInput

STARTPOS_FEN = "8/pppppppp/8/8/8/8/PPPPPPPP/8 w -"

_CHAR_TO_SIDE = {"P": Side.WHITE, "p": Side.BLACK}
_OCCUPANT_CHARS = {Occupant.WHITE: "P", Occupant.BLACK: "p"}


def _alg_to_sq(a: str) -> Square:
    try:
        return Square.parse(a.strip().lower())
    except MalformedInput:
        raise ValueError(f"Bad square: {a!r}") from None


def parse_fen(fen: str) -> Game:
    """Parse a pawns-only position: ``<placement> <side> <en-passant>``.

    Placement uses FEN conventions with ``P``/``p`` as the only piece letters.
    The en-passant field names the square skipped by the last double step.
    """
    parts = fen.strip().split()
    if len(parts) != 3:
        raise ValueError("Position must have 3 fields")

    placement, stm, ep = parts

    g = Game()

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError("Placement must have 8 ranks")

    for rank_idx, row in enumerate(ranks):
        r = 7 - rank_idx
        f = 0
        for ch in row:
            if ch.isdigit():
                gap = int(ch)
                if gap < 1 or gap > 8:
                    raise ValueError("Bad empty-square run")
                f += gap
                if f > 8:
                    raise ValueError("Bad rank width")
                continue
            if f >= 8:
                raise ValueError("Bad rank width")
            side = _CHAR_TO_SIDE.get(ch)
            if side is None:
                raise ValueError(f"Unknown piece char: {ch}")
            g.board.add_pawn(side, Square(f, r))
            f += 1
        if f != 8:
            raise ValueError("Bad rank width")

    if stm == "w":
        g.side_to_move = Side.WHITE
    elif stm == "b":
        g.side_to_move = Side.BLACK
    else:
        raise ValueError("Bad side-to-move")

    if ep != "-":
        ep_sq = _alg_to_sq(ep)
        # the side that just double-stepped is the one not on move
        mover = g.side_to_move.opponent()
        if ep_sq.rank != mover.start_rank + mover.direction:
            raise ValueError("Bad en-passant square")
        if not g.board.is_empty(ep_sq):
            raise ValueError("Bad en-passant square")
        if not g.board.is_empty(Square(ep_sq.file, mover.start_rank)):
            raise ValueError("Bad en-passant square")
        if g.board.occupant_at(ep_sq.offset(0, mover.direction)) is not mover.occupant:
            raise ValueError("Bad en-passant square")
        g.en_passant = ep_sq

    return g


def game_to_fen(g: Game) -> str:
    rows = []
    for r in range(7, -1, -1):
        empty = 0
        row = []
        for f in range(8):
            occ = g.occupant_at(Square(f, r))
            if occ is Occupant.EMPTY:
                empty += 1
                continue
            if empty:
                row.append(str(empty))
                empty = 0
            row.append(_OCCUPANT_CHARS[occ])
        if empty:
            row.append(str(empty))
        rows.append("".join(row))
    placement = "/".join(rows)

    stm = "w" if g.side_to_move is Side.WHITE else "b"
    ep = g.en_passant.name if g.en_passant is not None else "-"
    return f"{placement} {stm} {ep}"
