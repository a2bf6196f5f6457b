import unittest

from pawns_only_chess.core import GameResult, Occupant, Square, ascii_board, new_game
from pawns_only_chess.core.errors import MalformedInput
from pawns_only_chess.fen import parse_fen
from pawns_only_chess.session import (
    ExitCommand,
    GameSession,
    MoveCommand,
    SessionConfig,
    parse_command,
)


class _Console:
    def __init__(self, lines):
        self._lines = list(lines)
        self.out = []

    def read_line(self) -> str:
        if not self._lines:
            raise AssertionError("session asked for more input than scripted")
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.out.append(text)

    def messages(self):
        return [line for line in self.out if not line.startswith("  +")]


def _run(lines, game=None, config=None):
    console = _Console(lines)
    session = GameSession(game or new_game(), config or SessionConfig(), console.read_line, console.write)
    return session.play(), console


class TestParseCommand(unittest.TestCase):
    def test_move_and_exit(self):
        self.assertEqual(parse_command("e2e4"), MoveCommand(Square.parse("e2"), Square.parse("e4")))
        self.assertEqual(parse_command("exit"), ExitCommand())

    def test_malformed(self):
        for text in ("", "e2e", "e2e44", "e2-e4", "E2E4", "i2i4", "e0e4", "e2e9", "exit ", "quit"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput):
                    parse_command(text)


class TestAsciiBoard(unittest.TestCase):
    def test_start_position(self):
        lines = ascii_board(new_game()).split("\n")
        self.assertEqual(len(lines), 18)
        self.assertEqual(lines[0], "  +---+---+---+---+---+---+---+---+")
        self.assertEqual(lines[1], "8 |   |   |   |   |   |   |   |   |")
        self.assertEqual(lines[3], "7 | B | B | B | B | B | B | B | B |")
        self.assertEqual(lines[13], "2 | W | W | W | W | W | W | W | W |")
        self.assertEqual(lines[15], "1 |   |   |   |   |   |   |   |   |")
        self.assertEqual(lines[17], "    a   b   c   d   e   f   g   h")


class TestGameSession(unittest.TestCase):
    def test_exit_says_bye(self):
        result, console = _run(["exit"])
        self.assertIsNone(result)
        self.assertEqual(console.out[0], ascii_board(new_game()))
        self.assertEqual(console.messages(), ["White's turn:", "Bye!"])

    def test_rejections_do_not_consume_the_turn(self):
        result, console = _run(["e2e5", "hello", "e7e5", "e3e4", "e2e4", "exit"])
        self.assertIsNone(result)
        self.assertEqual(
            console.messages(),
            [
                "White's turn:", "Invalid Input",
                "White's turn:", "Invalid Input",
                "White's turn:", "No white pawn at e7",
                "White's turn:", "No white pawn at e3",
                "White's turn:",
                "Black's turn:", "Bye!",
            ],
        )

    def test_player_names_in_prompts(self):
        _, console = _run(["e2e4", "exit"], config=SessionConfig("Alice", "Bob"))
        self.assertIn("Alice's turn:", console.out)
        self.assertEqual(console.messages()[-2:], ["Bob's turn:", "Bye!"])

    def test_board_printed_after_each_move(self):
        game = new_game()
        _, console = _run(["e2e4", "e7e5", "exit"], game=game)
        boards = [line for line in console.out if line.startswith("  +")]
        self.assertEqual(len(boards), 3)
        self.assertEqual(boards[-1], ascii_board(game))

    def test_white_wins_by_reaching_last_rank(self):
        result, console = _run(["a7a8"], game=parse_fen("8/P7/8/8/8/8/7p/8 w -"))
        self.assertIs(result, GameResult.WHITE_WINS)
        self.assertEqual(console.out[-1], "White Wins!")
        self.assertNotIn("Bye!", console.out)

    def test_black_wins_by_capture(self):
        game = parse_fen("8/8/8/8/3p4/8/4P3/8 w -")
        result, console = _run(["e2e4", "d4e3"], game=game)
        self.assertIs(result, GameResult.BLACK_WINS)
        self.assertEqual(console.out[-1], "Black Wins!")
        self.assertIs(game.occupant_at(Square.parse("e4")), Occupant.EMPTY)

    def test_stalemate_before_prompt(self):
        result, console = _run([], game=parse_fen("8/8/8/p7/P7/8/8/8 w -"))
        self.assertIs(result, GameResult.STALEMATE)
        self.assertEqual(console.messages(), ["Stalemate!"])

    def test_stalemate_after_opponent_move(self):
        result, console = _run(["a3a4"], game=parse_fen("8/8/8/p7/8/P7/8/8 w -"))
        self.assertIs(result, GameResult.STALEMATE)
        self.assertEqual(console.messages(), ["White's turn:", "Stalemate!"])

    def test_en_passant_through_the_console(self):
        game = new_game()
        _, console = _run(["e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "exit"], game=game)
        self.assertNotIn("Invalid Input", console.out)
        self.assertIs(game.occupant_at(Square.parse("d5")), Occupant.EMPTY)
        self.assertIs(game.occupant_at(Square.parse("d6")), Occupant.WHITE)


if __name__ == "__main__":
    unittest.main()
