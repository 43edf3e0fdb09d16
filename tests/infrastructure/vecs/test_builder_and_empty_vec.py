import unittest

import numpy as np

from dimvec.domain import DIMS, OutOfBoundsError, RankError
from dimvec.infrastructure.adapters import MappingVec, SequenceVec
from dimvec.infrastructure.vecs import EmptyVec, NewV, V


class TestBuilder(unittest.TestCase):
    def test_rank_factories(self):
        factories = [V.d1(), V.d2(), V.d3(), V.d4(), V.d5(), V.d6(), V.d7(), V.d8()]
        for rank, factory in enumerate(factories, start=1):
            self.assertIsInstance(factory, NewV)
            self.assertIs(factory.dim, DIMS[rank])
            self.assertIs(V.of_rank(rank).dim, DIMS[rank])

    def test_rank_outside_ladder(self):
        with self.assertRaises(RankError):
            V.of_rank(9)

    def test_from_storage(self):
        self.assertIsInstance(V.d2().from_storage([[1], [2, 3]]), SequenceVec)
        self.assertIsInstance(V.d1().from_storage({}), MappingVec)
        self.assertEqual(V.d1().from_storage([[1]]).at(0), [1])
        with self.assertRaises(RankError):
            V.d1().from_storage(np.zeros((2, 2)))


class TestEmptyVec(unittest.TestCase):
    def test_no_elements(self):
        vec = V.d2().empty()
        self.assertIsInstance(vec, EmptyVec)
        self.assertEqual(vec.card(()), 0)
        self.assertEqual(list(vec.all()), [])
        self.assertEqual(vec.to_list(), [])
        self.assertTrue(vec.is_bounded())
        self.assertTrue(vec.is_rectangular())
        with self.assertRaises(OutOfBoundsError):
            vec.at((0, 0))
        self.assertIsNone(vec.try_at((0, 0)))

    def test_rank_zero_has_no_empty_container(self):
        with self.assertRaises(RankError):
            V.of_rank(0).empty()


if __name__ == "__main__":
    unittest.main()
