import unittest

from dimvec.domain import (
    D1,
    D2,
    INVec,
    INVecMut,
    InvalidConstructionError,
    OutOfBoundsError,
    RankError,
    ReadOnlyError,
)
from dimvec.infrastructure.adapters import SequenceVec, as_nvec


class TestSequenceVecRead(unittest.TestCase):
    def setUp(self):
        self.storage = [[1, 2, 3], [4], [5, 6]]
        self.vec = as_nvec(self.storage)

    def test_adapter_and_rank_inference(self):
        self.assertIsInstance(self.vec, SequenceVec)
        self.assertIs(self.vec.dim, D2)
        self.assertIsInstance(self.vec, INVec)
        self.assertIsInstance(self.vec, INVecMut)

    def test_cardinality(self):
        self.assertEqual(self.vec.num_children(), 3)
        self.assertEqual([self.vec.card((i,)) for i in range(3)], [3, 1, 2])
        with self.assertRaises(OutOfBoundsError):
            self.vec.card((3,))

    def test_at_and_try_at(self):
        self.assertEqual(self.vec.at((2, 1)), 6)
        self.assertEqual(self.vec[(0, 2)], 3)
        with self.assertRaises(OutOfBoundsError):
            self.vec.at((1, 1))
        self.assertIsNone(self.vec.try_at((1, 1)))
        self.assertEqual(self.vec.try_at((1, 0)), 4)

    def test_negative_components_are_out_of_bounds(self):
        with self.assertRaises(OutOfBoundsError):
            self.vec.at((-1, 0))
        self.assertIsNone(self.vec.try_at((0, -1)))

    def test_in_bounds(self):
        self.assertTrue(self.vec.in_bounds(()))
        self.assertTrue(self.vec.in_bounds((1,)))
        self.assertFalse(self.vec.in_bounds((3,)))
        self.assertTrue(self.vec.in_bounds((2, 1)))
        self.assertFalse(self.vec.in_bounds((2, 2)))

    def test_traversal(self):
        self.assertEqual(list(self.vec.all()), [1, 2, 3, 4, 5, 6])
        self.assertFalse(self.vec.is_rectangular())
        self.assertEqual(self.vec.to_list(), self.storage)

    def test_children(self):
        self.assertEqual(self.vec.child(2).at(1), 6)
        self.assertEqual(self.vec.child(0).card(()), 3)
        self.assertEqual([list(c.all()) for c in self.vec.children()], self.storage)
        with self.assertRaises(OutOfBoundsError):
            self.vec.child(3)


class TestSequenceVecWrite(unittest.TestCase):
    def test_set_writes_into_storage(self):
        storage = [[1, 2], [3]]
        vec = as_nvec(storage)
        vec.set((0, 1), 20)
        vec[(1, 0)] = 30
        self.assertEqual(storage, [[1, 20], [30]])

    def test_out_of_bounds_write_changes_nothing(self):
        storage = [[1, 2], [3]]
        vec = as_nvec(storage)
        with self.assertRaises(OutOfBoundsError):
            vec.set((1, 1), 99)
        self.assertEqual(storage, [[1, 2], [3]])

    def test_child_mut_writes_through(self):
        storage = [[1, 2], [3]]
        as_nvec(storage).child_mut(0).set(1, 7)
        self.assertEqual(storage[0][1], 7)

    def test_tuple_storage_is_read_only(self):
        vec = as_nvec(((1, 2), (3, 4)))
        with self.assertRaises(ReadOnlyError):
            vec.set((0, 0), 5)


class TestSequenceVecConstruction(unittest.TestCase):
    def test_explicit_rank_keeps_sequences_as_elements(self):
        vec = as_nvec([(1, 2), (3, 4)], rank=1)
        self.assertIs(vec.dim, D1)
        self.assertEqual(vec.at(1), (3, 4))

    def test_strings_are_not_containers(self):
        with self.assertRaises(InvalidConstructionError):
            as_nvec("abc")
        self.assertEqual(as_nvec(["ab", "cd"]).at(1), "cd")

    def test_rank_above_ladder_raises(self):
        deep = [1]
        for _ in range(8):
            deep = [deep]
        with self.assertRaises(RankError):
            as_nvec(deep)

    def test_explicit_rank_deeper_than_storage(self):
        vec = as_nvec([[1]], rank=3)
        self.assertFalse(vec.in_bounds((0, 0, 0)))
        with self.assertRaises(OutOfBoundsError):
            vec.at((0, 0, 0))
        self.assertEqual(vec.card((0, 0)), 0)
        self.assertEqual(list(vec.all()), [])

    def test_element_in_branch_position_is_an_empty_branch(self):
        vec = as_nvec([[1, 2], 3])
        self.assertIs(vec.dim, D2)
        self.assertTrue(vec.in_bounds((1,)))
        self.assertEqual(vec.card((1,)), 0)
        self.assertFalse(vec.in_bounds((1, 0)))
        self.assertIsNone(vec.try_at((1, 0)))
        self.assertEqual(list(vec.all()), [1, 2])
        self.assertEqual(vec.to_list(), [[1, 2], []])
        self.assertFalse(vec.is_rectangular())

    def test_bounds_and_cardinality_agree(self):
        vec = as_nvec([[1, 2], 3, [4]])
        for i in range(vec.card(())):
            with self.subTest(i=i):
                self.assertTrue(vec.in_bounds((i,)))
                for j in range(vec.card((i,))):
                    self.assertTrue(vec.in_bounds((i, j)))
        self.assertEqual(list(vec.indices()), [(0, 0), (0, 1), (2, 0)])


if __name__ == "__main__":
    unittest.main()
