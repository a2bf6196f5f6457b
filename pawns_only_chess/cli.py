from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .core import Game, new_game, ascii_board
from .fen import parse_fen, game_to_fen
from .perft import perft, perft_divide
from .session import TITLE, GameSession, SessionConfig


def _load_game(fen: Optional[str]) -> Game:
    return parse_fen(fen) if fen else new_game()


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return "exit"


def cmd_perft(args: argparse.Namespace) -> int:
    g = _load_game(args.fen)
    if args.divide:
        out = perft_divide(g, args.depth)
        total = 0
        for k in sorted(out):
            print(f"{k}: {out[k]}")
            total += out[k]
        print(f"Total: {total}")
    else:
        print(perft(g, args.depth))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    g = _load_game(args.fen)
    print(ascii_board(g))
    print()
    print(game_to_fen(g))
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    g = _load_game(args.fen)
    print(TITLE)

    white = args.white
    if white is None:
        print("First Player's name:")
        white = _read_line()
    black = args.black
    if black is None:
        print("Second Player's name:")
        black = _read_line()

    session = GameSession(g, SessionConfig(white_name=white, black_name=black), _read_line, print)
    session.play()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pawns-only-chess")
    ap.add_argument(
        "--log-level",
        default=os.environ.get("PAWNS_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    ap.set_defaults(fn=cmd_play, white=None, black=None, fen=None)
    sub = ap.add_subparsers(dest="cmd")

    pl = sub.add_parser("play", help="Play a two-player game on this console")
    pl.add_argument("--white", type=str, default=None, help="first player's name")
    pl.add_argument("--black", type=str, default=None, help="second player's name")
    pl.add_argument("--fen", type=str, default=None)
    pl.set_defaults(fn=cmd_play)

    ss = sub.add_parser("show", help="Show the board and position notation")
    ss.add_argument("--fen", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    sp = sub.add_parser("perft", help="Run perft")
    sp.add_argument("--depth", type=int, default=3)
    sp.add_argument("--fen", type=str, default=None)
    sp.add_argument("--divide", action="store_true")
    sp.set_defaults(fn=cmd_perft)

    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s %(message)s")

    try:
        return int(args.fn(args))
    except ValueError as exc:
        ap.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
