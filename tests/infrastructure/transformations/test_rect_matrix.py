import unittest

import numpy as np

from dimvec.domain import (
    D1,
    D2,
    EqualityKind,
    InvalidConstructionError,
    OutOfBoundsError,
    RankError,
    ReadOnlyError,
)
from dimvec.infrastructure.adapters import as_nvec
from dimvec.infrastructure.transformations import Matrix, MatrixLine
from dimvec.infrastructure.vecs import V


def rows_2x3():
    return [[1, 2, 3], [4, 5, 6]]


class TestRowMajorMatrix(unittest.TestCase):
    def setUp(self):
        self.storage = rows_2x3()
        self.matrix = V.d2().from_storage(self.storage).as_matrix()

    def test_shape(self):
        self.assertIsInstance(self.matrix, Matrix)
        self.assertIs(self.matrix.dim, D2)
        self.assertFalse(self.matrix.is_column_major)
        self.assertEqual((self.matrix.num_rows, self.matrix.num_cols), (2, 3))
        self.assertEqual(self.matrix.card(()), 2)
        self.assertEqual(self.matrix.card((1,)), 3)

    def test_at_and_bounds(self):
        self.assertEqual(self.matrix.at((1, 0)), 4)
        self.assertTrue(self.matrix.in_bounds((1, 2)))
        self.assertFalse(self.matrix.in_bounds((2, 0)))
        self.assertFalse(self.matrix.in_bounds((0, 3)))
        self.assertIsNone(self.matrix.try_at((0, 3)))
        with self.assertRaises(OutOfBoundsError):
            self.matrix.at((2, 0))

    def test_all_is_row_by_row(self):
        self.assertEqual(list(self.matrix.all()), [1, 2, 3, 4, 5, 6])
        self.assertEqual(self.matrix.to_list(), rows_2x3())

    def test_set_writes_through(self):
        self.matrix.set((0, 2), 30)
        self.assertEqual(self.storage[0][2], 30)

    def test_rows_and_cols(self):
        self.assertEqual([row.to_list() for row in self.matrix.rows()], rows_2x3())
        self.assertEqual(
            [col.to_list() for col in self.matrix.cols()], [[1, 4], [2, 5], [3, 6]]
        )
        col = self.matrix.col(1)
        self.assertIsInstance(col, MatrixLine)
        self.assertIs(col.dim, D1)
        self.assertEqual(col.card(()), 2)
        self.assertEqual(col.at((1,)), 5)

    def test_line_writes_through(self):
        self.matrix.col(2).set((1,), 60)
        self.matrix.row(0).set((0,), 10)
        self.assertEqual(self.storage, [[10, 2, 3], [4, 5, 60]])

    def test_line_out_of_bounds(self):
        with self.assertRaises(OutOfBoundsError):
            self.matrix.row(2)
        with self.assertRaises(OutOfBoundsError):
            self.matrix.col(3)
        with self.assertRaises(OutOfBoundsError):
            self.matrix.row(0).at((3,))

    def test_to_numpy(self):
        np.testing.assert_array_equal(self.matrix.to_numpy(), np.array(rows_2x3()))

    def test_repr(self):
        self.assertEqual(
            repr(self.matrix),
            "Matrix(dim=D2, is_bounded=True, num_children=2, "
            "num_rows=2, num_cols=3, column_major=False)",
        )


class TestColumnMajorMatrix(unittest.TestCase):
    def setUp(self):
        # three stored columns of two rows each
        self.storage = [[1, 4], [2, 5], [3, 6]]
        self.data = V.d2().from_storage(self.storage)
        self.matrix = self.data.as_matrix_col_major()

    def test_shape(self):
        self.assertTrue(self.matrix.is_column_major)
        self.assertEqual((self.matrix.num_rows, self.matrix.num_cols), (2, 3))

    def test_at_swaps_coordinates(self):
        for i in range(2):
            for j in range(3):
                self.assertEqual(self.matrix.at((i, j)), self.data.at((j, i)))
        self.assertEqual(self.matrix.to_list(), rows_2x3())

    def test_all_is_column_by_column(self):
        self.assertEqual(list(self.matrix.all()), [1, 4, 2, 5, 3, 6])
        self.assertEqual(list(self.matrix.all()), list(self.data.all()))
        self.assertEqual(list(self.matrix.indices())[:3], [(0, 0), (1, 0), (0, 1)])

    def test_cols_are_stored_columns(self):
        self.assertEqual([col.to_list() for col in self.matrix.cols()], self.storage)
        self.assertEqual(self.matrix.row(1).to_list(), [4, 5, 6])

    def test_set_writes_to_stored_column(self):
        self.matrix.set((1, 0), 40)
        self.assertEqual(self.storage[0][1], 40)

    def test_to_numpy_is_in_matrix_coordinates(self):
        np.testing.assert_array_equal(self.matrix.to_numpy(), np.array(rows_2x3()))

    def test_equal_to_row_major_matrix_of_same_elements(self):
        row_major = as_nvec(rows_2x3()).as_matrix()
        self.assertTrue(self.matrix.equality(row_major).is_equal())

    def test_into_matrix_variants(self):
        self.assertTrue(self.data.into_matrix(column_major=True).is_column_major)
        self.assertTrue(self.data.into_matrix_col_major().is_column_major)
        self.assertIs(self.data.into_matrix().into_inner(), self.data)


class TestMatrixEquality(unittest.TestCase):
    def test_unequal_value(self):
        lhs = Matrix(rows_2x3())
        other = rows_2x3()
        other[1][1] = -5
        result = lhs.equality(Matrix(other))
        self.assertIs(result.kind, EqualityKind.UNEQUAL_VALUE)
        self.assertEqual(result.idx, (1, 1))

    def test_unequal_num_rows(self):
        result = Matrix(rows_2x3()).equality(Matrix([[1, 2, 3]]))
        self.assertIs(result.kind, EqualityKind.UNEQUAL_CARD)
        self.assertEqual((result.idx, result.lhs_card, result.rhs_card), ((), 2, 1))

    def test_unequal_num_cols(self):
        result = Matrix(rows_2x3()).equality(Matrix([[1, 2], [4, 5]]))
        self.assertIs(result.kind, EqualityKind.UNEQUAL_CARD)
        self.assertEqual((result.idx, result.lhs_card, result.rhs_card), ((0,), 3, 2))


class TestMatrixConstruction(unittest.TestCase):
    def test_jagged_container_is_rejected(self):
        with self.assertRaises(InvalidConstructionError):
            V.d2().from_storage([[1, 2], [3]]).as_matrix()
        with self.assertRaises(InvalidConstructionError):
            Matrix([[1], [2, 3]], column_major=True)

    def test_unbounded_container_is_rejected(self):
        with self.assertRaises(InvalidConstructionError):
            V.d2().constant(0).as_matrix()

    def test_requires_rank_two(self):
        with self.assertRaises(RankError):
            V.d1().from_storage([1, 2, 3]).as_matrix()

    def test_empty_matrix(self):
        for column_major in (False, True):
            matrix = Matrix([], column_major=column_major)
            self.assertEqual((matrix.num_rows, matrix.num_cols), (0, 0))
            self.assertEqual(list(matrix.all()), [])
            self.assertEqual(list(matrix.rows()), [])
            self.assertEqual(list(matrix.cols()), [])

    def test_rows_without_columns(self):
        matrix = Matrix([[], [], []])
        self.assertEqual((matrix.num_rows, matrix.num_cols), (3, 0))
        self.assertEqual(list(matrix.all()), [])
        self.assertEqual(matrix.row(2).to_list(), [])
        transposed = Matrix([[], [], []], column_major=True)
        self.assertEqual((transposed.num_rows, transposed.num_cols), (0, 3))

    def test_read_only_storage(self):
        matrix = V.d2().constant(7).with_rectangular_bounds((2, 2)).as_matrix()
        self.assertEqual(list(matrix.all()), [7, 7, 7, 7])
        with self.assertRaises(ReadOnlyError):
            matrix.set((0, 0), 1)
        with self.assertRaises(ReadOnlyError):
            matrix.col(1).set((0,), 1)

    def test_appended_rows_are_visible(self):
        storage = [[1, 2]]
        matrix = Matrix(storage)
        storage.append([3, 4])
        self.assertEqual(matrix.num_rows, 2)
        self.assertEqual(matrix.at((1, 1)), 4)


class TestFlatMatrixLines(unittest.TestCase):
    def test_row_major_flat_view(self):
        view = V.d1().from_storage(list(range(6))).as_row_major_matrix(2, 3)
        self.assertEqual((view.num_rows, view.num_cols), (2, 3))
        self.assertEqual(view.row(1).to_list(), [3, 4, 5])
        self.assertEqual(view.col(0).to_list(), [0, 3])

    def test_lower_triangular_lines_skip_unstored_cells(self):
        storage = [1, 2, 3, 4, 5, 6]
        lower = V.d1().from_storage(storage).as_lower_triangular_matrix(3)
        self.assertEqual(list(lower.row(1).all()), [2, 3])
        self.assertEqual(list(lower.col(0).all()), [1, 2, 4])
        self.assertEqual(lower.row(0).to_list(), [1, None, None])
        lower.col(2).set((2,), 60)
        self.assertEqual(storage[5], 60)


if __name__ == "__main__":
    unittest.main()
