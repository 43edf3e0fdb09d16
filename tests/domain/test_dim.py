import unittest

import numpy as np

from dimvec.domain import DIMS, D0, D1, D2, D3, D8, MAX_RANK, Dim, RankError


class TestDimLadder(unittest.TestCase):
    def test_one_singleton_per_rank(self):
        self.assertEqual(len(DIMS), MAX_RANK + 1)
        for rank, dim in enumerate(DIMS):
            self.assertIs(Dim.of(rank), dim)
            self.assertEqual(dim.rank, rank)
        self.assertIs(Dim.of(np.int64(3)), D3)

    def test_repr(self):
        self.assertEqual(repr(D0), "D0")
        self.assertEqual(repr(D8), "D8")

    def test_previous(self):
        self.assertIs(D3.previous, D2)
        self.assertIs(D1.previous, D0)
        self.assertIs(D0.previous, D0)

    def test_rank_outside_ladder_raises(self):
        for bad in (-1, MAX_RANK + 1, "2", 1.5):
            with self.assertRaises(RankError):
                Dim.of(bad)

    def test_equality_is_by_rank(self):
        self.assertEqual(Dim(2), D2)
        self.assertNotEqual(D2, D3)
        self.assertEqual(hash(Dim(2)), hash(D2))


class TestCoordinateNormalization(unittest.TestCase):
    def test_full_coordinates(self):
        self.assertEqual(D2.idx([1, 2]), (1, 2))
        self.assertEqual(D2.idx((np.int64(1), np.int32(2))), (1, 2))
        self.assertEqual(D0.idx(()), ())

    def test_bare_int_at_rank_one(self):
        self.assertEqual(D1.idx(5), (5,))
        self.assertEqual(D1.idx(np.int64(5)), (5,))
        with self.assertRaises(RankError):
            D2.idx(5)

    def test_wrong_length_raises(self):
        with self.assertRaises(RankError) as ctx:
            D2.idx((1, 2, 3))
        self.assertEqual(ctx.exception.rank, 2)
        with self.assertRaises(RankError):
            D2.idx((1,))

    def test_non_integer_components_raise(self):
        with self.assertRaises(RankError):
            D2.idx((1.5, 2))
        with self.assertRaises(RankError):
            D1.idx("a")
        with self.assertRaises(RankError):
            D1.idx(None)

    def test_negative_components_are_structurally_valid(self):
        self.assertEqual(D2.idx((-1, 0)), (-1, 0))

    def test_leq_idx(self):
        self.assertEqual(D3.leq_idx(()), ())
        self.assertEqual(D3.leq_idx((1, 2)), (1, 2))
        self.assertEqual(D3.leq_idx((1, 2, 3)), (1, 2, 3))
        with self.assertRaises(RankError):
            D3.leq_idx((1, 2, 3, 4))

    def test_card_idx(self):
        self.assertEqual(D2.card_idx(()), ())
        self.assertEqual(D2.card_idx((4,)), (4,))
        with self.assertRaises(RankError):
            D2.card_idx((1, 2))
        with self.assertRaises(RankError):
            D0.card_idx(())

    def test_split_and_join(self):
        i, rest = D3.split((4, 5, 6))
        self.assertEqual(i, 4)
        self.assertEqual(rest, (5, 6))
        self.assertEqual(D3.join(i, rest), (4, 5, 6))
        with self.assertRaises(RankError):
            D0.split(())


if __name__ == "__main__":
    unittest.main()
