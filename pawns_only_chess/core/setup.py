from __future__ import annotations

from .game import Game
from .types import FILES, RANKS, Side, Square

SEPARATOR = "  +---+---+---+---+---+---+---+---+"


def setup_standard(game) -> None:
    for f in range(8):
        game.board.add_pawn(Side.WHITE, Square(f, Side.WHITE.start_rank))
        game.board.add_pawn(Side.BLACK, Square(f, Side.BLACK.start_rank))


def new_game() -> Game:
    g = Game()
    setup_standard(g)
    return g


def ascii_board(game) -> str:
    rows = [SEPARATOR]
    for r in range(7, -1, -1):
        cells = "".join(f" {game.occupant_at(Square(f, r)).symbol} |" for f in range(8))
        rows.append(f"{RANKS[r]} |{cells}")
        rows.append(SEPARATOR)
    rows.append("    " + "   ".join(FILES))
    return "\n".join(rows)
