import unittest

from pawns_only_chess.api import PawnsEngine
from pawns_only_chess.core import (
    InvalidMove,
    MalformedInput,
    NoPawnAtSource,
    OutOfRange,
    Side,
    Square,
    new_game,
)
from pawns_only_chess.core.types import FILES


def _sq(alg: str) -> Square:
    return Square(FILES.index(alg[0]), int(alg[1]) - 1)


class TestIllegalInputRejected(unittest.TestCase):
    def test_attempt_rejects_opposite_color_pawn(self):
        g = new_game()
        with self.assertRaisesRegex(NoPawnAtSource, "No white pawn at e7") as ctx:
            g.attempt_move(Side.WHITE, _sq("e7"), _sq("e6"))
        self.assertIs(ctx.exception.side, Side.WHITE)
        self.assertEqual(ctx.exception.square, _sq("e7"))

    def test_attempt_rejects_empty_source(self):
        g = new_game()
        with self.assertRaisesRegex(NoPawnAtSource, "No white pawn at e4"):
            g.attempt_move(Side.WHITE, _sq("e4"), _sq("e5"))

    def test_attempt_rejects_wrong_side(self):
        g = new_game()
        with self.assertRaisesRegex(InvalidMove, "Wrong side to move"):
            g.attempt_move(Side.BLACK, _sq("e7"), _sq("e6"))

    def test_errors_are_value_errors(self):
        for exc in (InvalidMove, NoPawnAtSource, MalformedInput, OutOfRange):
            with self.subTest(exc=exc.__name__):
                self.assertTrue(issubclass(exc, ValueError))

    def test_square_parse_rejects_bad_text(self):
        for text in ("", "e", "e10", "i1", "a0", "A1", "11"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput):
                    Square.parse(text)

    def test_square_constructor_rejects_out_of_range(self):
        for f, r in ((-1, 0), (0, -1), (8, 0), (0, 8)):
            with self.subTest(file=f, rank=r):
                with self.assertRaises(OutOfRange):
                    Square(f, r)

    def test_square_names(self):
        self.assertEqual(Square.parse("a1"), Square(0, 0))
        self.assertEqual(Square.parse("h8"), Square(7, 7))
        self.assertEqual(Square(4, 3).name, "e4")
        self.assertEqual(str(Square(3, 5)), "d6")

    def test_engine_rejects_illegal_moves_unchanged(self):
        eng = PawnsEngine.new_game()
        before = eng.state()

        with self.assertRaises(InvalidMove):
            eng.apply("e2e5")
        with self.assertRaises(NoPawnAtSource):
            eng.apply("e7e5")
        with self.assertRaises(ValueError):
            eng.apply("e2")
        with self.assertRaises(ValueError):
            eng.apply({"kind": "normal", "from_alg": "e2"})

        self.assertEqual(eng.state(), before)

    def test_engine_ignores_forged_move_kind(self):
        eng = PawnsEngine.new_game()
        with self.assertRaises(InvalidMove):
            eng.apply({"kind": "en_passant", "from_alg": "e2", "to_alg": "d3", "captured_alg": "d2"})
        self.assertEqual(eng.state()["counts"], {"WHITE": 8, "BLACK": 8})


if __name__ == "__main__":
    unittest.main()
