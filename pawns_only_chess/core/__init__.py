from .types import Side, Occupant, GameResult, Square, FILES, RANKS, in_bounds
from .errors import PawnsChessError, InvalidMove, NoPawnAtSource, MalformedInput, OutOfRange
from .board import Board
from .moves import Move, NormalMove, EnPassantMove, MoveOutcome
from .rules import classify_move, generate_moves
from .game import Game
from .setup import setup_standard, new_game, ascii_board

__all__ = [
    "Side","Occupant","GameResult","Square","FILES","RANKS","in_bounds",
    "PawnsChessError","InvalidMove","NoPawnAtSource","MalformedInput","OutOfRange",
    "Board",
    "Move","NormalMove","EnPassantMove","MoveOutcome",
    "classify_move","generate_moves",
    "Game",
    "setup_standard","new_game","ascii_board",
]
