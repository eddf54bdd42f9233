import dataclasses
import unittest

from helpers import fixed_generator  # noqa: F401  (ajusta sys.path)

from tetris_stack.models.piece import Piece


class PieceTestCase(unittest.TestCase):
    def test_str_format(self):
        self.assertEqual(str(Piece("T", 3)), "[T 3]")

    def test_piece_is_immutable(self):
        piece = Piece("I", 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            piece.id = 10

    def test_equal_by_value(self):
        self.assertEqual(Piece("O", 1), Piece("O", 1))
        self.assertNotEqual(Piece("O", 1), Piece("O", 2))

    def test_unknown_kind_rejected(self):
        with self.assertRaises(ValueError):
            Piece("X", 0)

    def test_negative_id_rejected(self):
        with self.assertRaises(ValueError):
            Piece("I", -1)


if __name__ == "__main__":
    unittest.main()
