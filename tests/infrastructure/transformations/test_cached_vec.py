import unittest

from dimvec.domain import OutOfBoundsError
from dimvec.infrastructure.transformations import CachedVec
from dimvec.infrastructure.vecs import V


class TestCachedVec(unittest.TestCase):
    def setUp(self):
        self.calls = []

        def expensive(idx):
            self.calls.append(idx)
            return idx[0] + idx[1]

        self.inner = V.d2().fun(expensive)
        self.cached = self.inner.into_cached()

    def test_inner_computed_once_per_coordinate(self):
        self.assertIsInstance(self.cached, CachedVec)
        self.assertEqual(self.cached.at((1, 2)), 3)
        self.assertEqual(self.cached.at((1, 2)), 3)
        self.assertEqual(self.calls, [(1, 2)])
        self.assertEqual(self.cached.cache_len(), 1)
        self.cached.at((2, 2))
        self.assertEqual(self.cached.cache_len(), 2)

    def test_clear_forgets_memoized_elements(self):
        self.cached.at((1, 2))
        self.cached.clear()
        self.assertEqual(self.cached.cache_len(), 0)
        self.cached.at((1, 2))
        self.assertEqual(len(self.calls), 2)

    def test_out_of_bounds_is_not_cached(self):
        cached = self.inner.with_rectangular_bounds((2, 2)).into_cached()
        with self.assertRaises(OutOfBoundsError):
            cached.at((5, 5))
        self.assertIsNone(cached.try_at((5, 5)))
        self.assertEqual(cached.cache_len(), 0)
        self.assertEqual(self.calls, [])

    def test_shape_is_forwarded(self):
        cached = self.inner.with_rectangular_bounds((2, 3)).into_cached()
        self.assertEqual(cached.card((1,)), 3)
        self.assertTrue(cached.is_rectangular())
        self.assertEqual(list(cached.all()), [0, 1, 2, 1, 2, 3])
        self.assertEqual(cached.cache_len(), 6)
        self.assertEqual(list(cached.all()), [0, 1, 2, 1, 2, 3])
        self.assertEqual(len(self.calls), 6)

    def test_custom_prepopulated_cache(self):
        cached = CachedVec(self.inner, {(0, 0): "pre"})
        self.assertEqual(cached.at((0, 0)), "pre")
        self.assertEqual(self.calls, [])

    def test_into_inner(self):
        self.assertIs(self.cached.into_inner(), self.inner)

    def test_read_only(self):
        self.assertFalse(hasattr(self.cached, "set"))

    def test_repr_does_not_fill_cache(self):
        cached = self.inner.with_rectangular_bounds((20, 20)).into_cached()
        text = repr(cached)
        self.assertIn("cache_len=0", text)
        self.assertEqual(cached.cache_len(), 0)
        self.assertEqual(self.calls, [])

    def test_caching_twice_warns(self):
        with self.assertWarns(RuntimeWarning):
            self.cached.into_cached()


if __name__ == "__main__":
    unittest.main()
