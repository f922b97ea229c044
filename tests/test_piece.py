import unittest
from collections import Counter

from tetris_piece import CATALOGUE, ActivePiece, PieceShape, as_matrix, rotate_matrix, spawn_position
from tetris_rng import PieceRandomizer
from support import BY_NAME


class CatalogueTests(unittest.TestCase):
    def test_seven_tetrominoes(self):
        self.assertEqual(sorted(s.name for s in CATALOGUE), ["I", "J", "L", "O", "S", "T", "Z"])
        for shape in CATALOGUE:
            self.assertEqual(len(list(shape.cells())), 4, shape.name)

    def test_colors_are_distinct(self):
        self.assertEqual(len({s.color for s in CATALOGUE}), 7)

    def test_shapes_are_immutable(self):
        with self.assertRaises(AttributeError):
            CATALOGUE[0].matrix = ()


class RotationTests(unittest.TestCase):
    def test_four_turns_is_identity(self):
        for shape in CATALOGUE:
            turned = shape
            for _ in range(4):
                turned = turned.rotated()
            self.assertEqual(turned, shape, shape.name)

    def test_rotation_makes_new_matrix(self):
        i = BY_NAME["I"]
        upright = i.rotated()
        self.assertEqual((upright.height, upright.width), (4, 1))
        self.assertEqual((i.height, i.width), (1, 4))

    def test_transpose_then_reverse_rows(self):
        m = as_matrix([[1, 0, 0], [1, 1, 1]])
        self.assertEqual(rotate_matrix(m), as_matrix([[0, 1], [0, 1], [1, 1]]))

    def test_rotation_keeps_name_and_color(self):
        s = BY_NAME["S"].rotated()
        self.assertEqual((s.name, s.color), ("S", BY_NAME["S"].color))


class SpawnTests(unittest.TestCase):
    def test_centered(self):
        self.assertEqual(spawn_position(BY_NAME["T"], 10), (4, 0))
        self.assertEqual(spawn_position(BY_NAME["O"], 10), (4, 0))
        self.assertEqual(spawn_position(BY_NAME["I"], 10), (3, 0))

    def test_absolute_cells(self):
        p = ActivePiece.spawn(BY_NAME["T"], 10)
        self.assertEqual(sorted(p.cells()), [(4, 0), (5, 0), (5, 1), (6, 0)])
        self.assertEqual(p.color, BY_NAME["T"].color)


class RandomizerTests(unittest.TestCase):
    def test_seeded_is_reproducible(self):
        a = PieceRandomizer(seed=7)
        b = PieceRandomizer(seed=7)
        self.assertEqual([a.create_piece() for _ in range(50)], [b.create_piece() for _ in range(50)])

    def test_draws_cover_catalogue(self):
        rng = PieceRandomizer(seed=1)
        counts = Counter(rng.create_piece().name for _ in range(700))
        self.assertEqual(set(counts), set(BY_NAME))

    def test_returns_catalogue_shapes(self):
        rng = PieceRandomizer(seed=3)
        for _ in range(20):
            self.assertIsInstance(rng.create_piece(), PieceShape)

    def test_empty_catalogue_rejected(self):
        with self.assertRaises(ValueError):
            PieceRandomizer(catalogue=())


if __name__ == "__main__":
    unittest.main()
