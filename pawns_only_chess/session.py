from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .core import (
    Game,
    GameResult,
    Side,
    Square,
    InvalidMove,
    NoPawnAtSource,
    MalformedInput,
    ascii_board,
)

LOGGER = logging.getLogger("pawns.session")

TITLE = "Pawns-Only Chess"
INVALID_INPUT = "Invalid Input"
BYE = "Bye!"

_MOVE_RE = re.compile(r"[a-h][1-8][a-h][1-8]")


@dataclass(frozen=True)
class SessionConfig:
    """Per-session presentation data; the rules never look at it."""

    white_name: str = "White"
    black_name: str = "Black"

    def name_for(self, side: Side) -> str:
        return self.white_name if side is Side.WHITE else self.black_name


@dataclass(frozen=True)
class MoveCommand:
    from_sq: Square
    to_sq: Square


@dataclass(frozen=True)
class ExitCommand:
    pass


Command = Union[MoveCommand, ExitCommand]


def parse_command(text: str) -> Command:
    if text == "exit":
        return ExitCommand()
    if not _MOVE_RE.fullmatch(text):
        raise MalformedInput(f"Not a move: {text!r}")
    return MoveCommand(Square.parse(text[:2]), Square.parse(text[2:]))


class GameSession:
    """Turn loop between a player console and a Game.

    `read_line` returns one line of input per call; `write` prints one line.
    """

    def __init__(
        self,
        game: Game,
        config: SessionConfig,
        read_line: Callable[[], str],
        write: Callable[[str], None],
    ) -> None:
        self.game = game
        self.config = config
        self.read_line = read_line
        self.write = write

    def play(self) -> Optional[GameResult]:
        """Run until a result or `exit`; returns None when the players quit."""
        game = self.game
        self.write(ascii_board(game))

        while True:
            side = game.side_to_move
            if game.evaluate_stalemate(side):
                return self._finish(GameResult.STALEMATE)

            self.write(f"{self.config.name_for(side)}'s turn:")
            try:
                cmd = parse_command(self.read_line())
            except MalformedInput:
                self.write(INVALID_INPUT)
                continue

            if isinstance(cmd, ExitCommand):
                LOGGER.info("session_exit", extra={"side": side.label})
                self.write(BYE)
                return None

            try:
                game.attempt_move(side, cmd.from_sq, cmd.to_sq)
            except NoPawnAtSource as exc:
                self.write(str(exc))
                continue
            except InvalidMove:
                self.write(INVALID_INPUT)
                continue

            self.write(ascii_board(game))

            result = game.evaluate_win_conditions(side)
            if result.is_over:
                return self._finish(result)

            game.switch_side()

    def _finish(self, result: GameResult) -> GameResult:
        LOGGER.info("game_over", extra={"result": result.name})
        self.write(result.message)
        return result
