import unittest

from dimvec.domain import RankError
from dimvec.infrastructure.adapters import (
    MappingVec,
    NVecAdapters,
    RangeVec,
    SequenceVec,
    as_nvec,
)


class Grid:
    def __init__(self, n):
        self.n = n


class Unregistered:
    pass


class TestAdapterRegistry(unittest.TestCase):
    def test_available_contains_builtin_adapters(self):
        names = NVecAdapters.available()
        for name in ("list", "tuple", "dict", "ndarray", "range"):
            self.assertIn(name, names)

    def test_get_returns_adapter(self):
        self.assertIs(NVecAdapters.get(list), SequenceVec)
        self.assertIs(NVecAdapters.get(dict), MappingVec)
        self.assertIs(NVecAdapters.get(range), RangeVec)

    def test_unknown_storage_raises_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            as_nvec(Unregistered())
        msg = str(ctx.exception)
        self.assertIn("Unsupported storage type", msg)
        self.assertIn("Available:", msg)

    def test_register_adapter_no_overwrite_by_default(self):
        class Throwaway:
            pass

        @NVecAdapters.register_adapter(Throwaway, overwrite=True)
        def adapter_a(storage, rank):
            return RangeVec(range(0))

        with self.assertRaises(ValueError):

            @NVecAdapters.register_adapter(Throwaway)  # overwrite=False default
            def adapter_b(storage, rank):
                return RangeVec(range(0))

    def test_register_adapter_overwrite_true(self):
        class Throwaway:
            pass

        @NVecAdapters.register_adapter(Throwaway, overwrite=True)
        def adapter_a(storage, rank):
            return RangeVec(range(0))

        @NVecAdapters.register_adapter(Throwaway, overwrite=True)
        def adapter_b(storage, rank):
            return RangeVec(range(1))

        self.assertIs(NVecAdapters.get(Throwaway), adapter_b)

    def test_dispatch_calls_adapter(self):
        called = {"rank": "unset"}

        @NVecAdapters.register_adapter(Grid, overwrite=True)
        def grid_adapter(storage, rank):
            called["rank"] = rank
            return RangeVec(range(storage.n))

        vec = as_nvec(Grid(4), rank=1)
        self.assertEqual(called["rank"], 1)
        self.assertEqual(list(vec.all()), [0, 1, 2, 3])

    def test_subclasses_resolve_through_mro(self):
        class MyList(list):
            pass

        self.assertIsInstance(as_nvec(MyList([1, 2])), SequenceVec)

    def test_containers_pass_through(self):
        vec = as_nvec([1, 2, 3])
        self.assertIs(as_nvec(vec), vec)
        with self.assertRaises(RankError):
            as_nvec(vec, rank=2)


if __name__ == "__main__":
    unittest.main()
