import unittest

from dimvec.domain import UNBOUNDED, EqualityKind, UnboundedTraversalError
from dimvec.infrastructure._traversal import (
    card_equality,
    in_leq_bounds,
    is_rectangular,
    iter_indices,
)

JAGGED = {(): 3, (0,): 2, (1,): 0, (2,): 1}
GRID = {(): 2, (0,): 2, (1,): 2}


def jagged_card(prefix):
    return JAGGED[prefix]


def grid_card(prefix):
    return GRID[prefix]


def unbounded_card(prefix):
    return UNBOUNDED


class TestInLeqBounds(unittest.TestCase):
    def test_prefixes_and_full_coordinates(self):
        self.assertTrue(in_leq_bounds(jagged_card, ()))
        self.assertTrue(in_leq_bounds(jagged_card, (1,)))
        self.assertTrue(in_leq_bounds(jagged_card, (0, 1)))
        self.assertTrue(in_leq_bounds(jagged_card, (2, 0)))

    def test_out_of_bounds(self):
        self.assertFalse(in_leq_bounds(jagged_card, (3,)))
        self.assertFalse(in_leq_bounds(jagged_card, (1, 0)))
        self.assertFalse(in_leq_bounds(jagged_card, (0, 2)))
        self.assertFalse(in_leq_bounds(jagged_card, (-1,)))

    def test_short_circuits_before_querying_bad_prefix(self):
        # JAGGED has no entry for (5,); reaching it would raise KeyError
        self.assertFalse(in_leq_bounds(jagged_card, (5, 0)))


class TestIterIndices(unittest.TestCase):
    def test_row_major_order_skips_empty_rows(self):
        self.assertEqual(
            list(iter_indices(jagged_card, 2)), [(0, 0), (0, 1), (2, 0)]
        )

    def test_rank_zero_yields_empty_coordinate(self):
        self.assertEqual(list(iter_indices(unbounded_card, 0)), [()])

    def test_unbounded_raises_eagerly(self):
        with self.assertRaises(UnboundedTraversalError):
            iter_indices(unbounded_card, 2)

    def test_restartable(self):
        self.assertEqual(list(iter_indices(grid_card, 2)), list(iter_indices(grid_card, 2)))


class TestIsRectangular(unittest.TestCase):
    def test_jagged_and_grid(self):
        self.assertFalse(is_rectangular(jagged_card, 2))
        self.assertTrue(is_rectangular(grid_card, 2))
        self.assertTrue(is_rectangular(jagged_card, 1))

    def test_unbounded_is_not_rectangular(self):
        self.assertFalse(is_rectangular(unbounded_card, 2))


class TestCardEquality(unittest.TestCase):
    def test_equal(self):
        self.assertTrue(card_equality(grid_card, grid_card, 2).is_equal())

    def test_reports_first_differing_prefix(self):
        result = card_equality(grid_card, jagged_card, 2)
        self.assertIs(result.kind, EqualityKind.UNEQUAL_CARD)
        self.assertEqual((result.idx, result.lhs_card, result.rhs_card), ((), 2, 3))

    def test_unbounded_raises(self):
        with self.assertRaises(UnboundedTraversalError):
            card_equality(grid_card, unbounded_card, 2)


if __name__ == "__main__":
    unittest.main()
