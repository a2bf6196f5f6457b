"""Pawns-Only Chess.

- core: board, pawn move rules, win/stalemate detection
- api: stable JSON-oriented facade for UIs
- session/cli: console turn loop
- formats/tools: position notation and perft helpers
"""

from . import core, api
from .fen import parse_fen, game_to_fen, STARTPOS_FEN
from .perft import perft, perft_divide
from .session import GameSession, SessionConfig, parse_command

__all__ = [
    "core","api",
    "parse_fen","game_to_fen","STARTPOS_FEN",
    "perft","perft_divide",
    "GameSession","SessionConfig","parse_command",
]
