from __future__ import annotations

from pathlib import Path
import sys

# Ensure the repo root is on sys.path so `import pawns_only_chess` works.
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

from pawns_only_chess.core import Game, Square, ascii_board, new_game
from pawns_only_chess.fen import parse_fen, game_to_fen


def show(title: str, game: Game) -> None:
    print("\n" + "=" * 72)
    print(title)
    print(ascii_board(game))
    print("Side to move:", game.side_to_move.label, "| en passant:", game.en_passant, "|", game_to_fen(game))


def play(game: Game, uci: str) -> None:
    side = game.side_to_move
    outcome = game.attempt_move(side, Square.parse(uci[:2]), Square.parse(uci[2:]))
    result = game.evaluate_win_conditions(side)
    if result.is_over:
        print(f"{uci}: {result.message}")
        return
    game.switch_side()
    print(f"{uci}: captured={outcome.captured_sq} en_passant={outcome.en_passant}")


def demo_en_passant() -> None:
    g = new_game()
    for uci in ("e2e4", "a7a6", "e4e5", "d7d5"):
        play(g, uci)
    show("Demo 1: d7-d5 skipped d6; White may take en passant once", g)
    print("Legal:", sorted(m.uci for m in g.legal_moves(g.side_to_move)))

    play(g, "e5d6")
    show("After e5xd6 e.p. the d5 pawn is gone", g)


def demo_stalemate() -> None:
    g = parse_fen("8/8/8/p7/P7/8/8/8 w -")
    show("Demo 2: both pawns blocked", g)
    print("White stalemated:", g.evaluate_stalemate(g.side_to_move))


def demo_breakthrough() -> None:
    g = parse_fen("8/1P6/8/8/8/8/6p1/8 w -")
    show("Demo 3: a pawn one step from the last rank", g)
    play(g, "b7b8")


if __name__ == "__main__":
    demo_en_passant()
    demo_stalemate()
    demo_breakthrough()
