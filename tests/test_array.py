"""
Tests for the Ar module (operations producing Vectors).

This module tests:
- Construction (literals, conversion, ranges, generators)
- Selection (filter, unique, take/drop)
- Division (chunk, partition, slice, splice, split)
- Combination (concat, zip, unzip, product)
- Transformation and ordering
- Async fan-out operations
"""

import asyncio
import unittest

from polycoll import EMPTY_VECTOR, Ar, InvalidArgumentError, Mp, St
from polycoll.pds import TransientVector, Vector
from polycoll.testing import CollectionAssertions

vec = Ar.vec


class TestConstruct(CollectionAssertions, unittest.TestCase):
    def test_vec(self):
        self.assertCollectionEqual(vec(1, 2, 3), Vector([1, 2, 3]))
        self.assertIs(vec(), EMPTY_VECTOR)

    def test_from_returns_vectors_unchanged(self):
        v = vec(1, 2)
        self.assertIs(Ar.from_(v), v)

    def test_from_other_kinds(self):
        self.assertCollectionEqual(Ar.from_(St.hash_set(1, 2)), vec(1, 2))
        self.assertCollectionEqual(Ar.from_(Mp.hash_map(a=1, b=2)), vec(1, 2))
        self.assertCollectionEqual(Ar.from_("ab"), vec("a", "b"))
        self.assertIs(Ar.from_([]), EMPTY_VECTOR)

    def test_keys_and_entries(self):
        m = Mp.hash_map(a=1, b=2)
        self.assertCollectionEqual(Ar.keys(m), vec("a", "b"))
        self.assertCollectionEqual(Ar.keys(vec("x", "y")), vec(0, 1))
        self.assertCollectionEqual(Ar.entries(m), vec(("a", 1), ("b", 2)))

    def test_range(self):
        self.assertCollectionEqual(Ar.range(1, 6), vec(1, 2, 3, 4, 5))
        self.assertCollectionEqual(Ar.range(0, 10, 3), vec(0, 3, 6, 9))
        self.assertCollectionEqual(Ar.range(-0.5, 0.51, 0.5), vec(-0.5, 0.0, 0.5))
        self.assertIs(Ar.range(3, 3), EMPTY_VECTOR)
        self.assertIs(Ar.range(5, 1), EMPTY_VECTOR)

    def test_range_inclusive(self):
        self.assertCollectionEqual(Ar.range_inclusive(1, 3), vec(1, 2, 3))
        self.assertCollectionEqual(Ar.range_inclusive(4, 4), vec(4))

    def test_range_descending(self):
        self.assertCollectionEqual(Ar.range_descending(5, 1), vec(5, 4, 3, 2))
        self.assertCollectionEqual(Ar.range_descending(10, 0, 5), vec(10, 5))

    def test_range_dynamic(self):
        self.assertCollectionEqual(Ar.range_dynamic(2, 6, 2), vec(2, 4, 6))
        self.assertCollectionEqual(Ar.range_dynamic(6, 2, 2), vec(6, 4, 2))
        self.assertCollectionEqual(Ar.range_dynamic(3, 3), vec(3))

    def test_ranges_reject_bad_step(self):
        """Every range variant fails loudly on a negative or zero step."""
        for fn in (Ar.range, Ar.range_inclusive, Ar.range_descending, Ar.range_dynamic):
            with self.assertRaises(InvalidArgumentError):
                fn(0, 10, -1)
            with self.assertRaises(InvalidArgumentError):
                fn(0, 10, 0)

    def test_repeat_and_fill(self):
        self.assertCollectionEqual(Ar.repeat("a", 3), vec("a", "a", "a"))
        self.assertIs(Ar.repeat("a", 0), EMPTY_VECTOR)
        self.assertCollectionEqual(Ar.fill(4, lambda i: i * i), vec(0, 1, 4, 9))
        with self.assertRaises(InvalidArgumentError):
            Ar.repeat("a", -1)
        with self.assertRaises(InvalidArgumentError):
            Ar.fill(-1, lambda i: i)

    def test_generate(self):
        result = Ar.generate(2, lambda n: (n, n * n) if n < 64 else None)
        self.assertCollectionEqual(result, vec(2, 4, 16))
        self.assertIs(Ar.generate(0, lambda n: None), EMPTY_VECTOR)

    def test_mutable(self):
        t = Ar.mutable(vec(1, 2))
        self.assertIsInstance(t, TransientVector)
        t.conj_mut(3)
        self.assertCollectionEqual(t.persistent(), vec(1, 2, 3))

    def test_is_vector(self):
        self.assertTrue(Ar.is_vector(vec()))
        self.assertFalse(Ar.is_vector([1]))
        self.assertFalse(Ar.is_vector(St.hash_set()))


class TestSelect(CollectionAssertions, unittest.TestCase):
    def test_filter(self):
        self.assertCollectionEqual(Ar.filter(vec(1, 2, 3, 4), lambda n: n % 2), vec(1, 3))
        self.assertIs(Ar.filter(vec(2), lambda n: n > 5), EMPTY_VECTOR)

    def test_filter_with_key(self):
        result = Ar.filter_with_key(vec("a", "b", "c"), lambda v, i: i != 1)
        self.assertCollectionEqual(result, vec("a", "c"))

    def test_filter_nulls(self):
        self.assertCollectionEqual(Ar.filter_nulls(vec(1, None, 0, None)), vec(1, 0))

    def test_find_indices(self):
        self.assertCollectionEqual(Ar.find_indices(vec(1, 2, 3, 4), lambda n: n % 2 == 0), vec(1, 3))

    def test_unique_keeps_first(self):
        self.assertCollectionEqual(Ar.unique(vec(1, 2, 1, 3, 2)), vec(1, 2, 3))

    def test_unique_by_keeps_last(self):
        """Unlike unique, unique_by keeps the last value for each derived key."""
        self.assertCollectionEqual(Ar.unique_by(vec(2, 4, 7), lambda n: n % 3), vec(2, 7))
        self.assertCollectionEqual(Ar.unique_by(vec("a", "bb", "c"), len), vec("c", "bb"))

    def test_take_and_drop(self):
        v = vec(1, 2, 3, 4)
        self.assertCollectionEqual(Ar.take_first(v, 2), vec(1, 2))
        self.assertCollectionEqual(Ar.drop_first(v, 3), vec(4))
        self.assertCollectionEqual(Ar.take_last(v, 2), vec(3, 4))
        self.assertCollectionEqual(Ar.drop_last(v, 1), vec(1, 2, 3))
        self.assertIs(Ar.take_first(v, 10), v)
        self.assertIs(Ar.take_last(v, 0), EMPTY_VECTOR)
        self.assertIs(Ar.drop_last(v, 0), v)
        self.assertIs(Ar.drop_first(v, 10), EMPTY_VECTOR)

    def test_take_and_drop_reject_negative(self):
        for fn in (Ar.take_first, Ar.drop_first, Ar.take_last, Ar.drop_last):
            with self.assertRaises(InvalidArgumentError):
                fn(vec(1), -1)

    def test_while_variants(self):
        v = vec(1, 2, 5, 1, 2)
        small = lambda n: n < 3  # noqa: E731
        self.assertCollectionEqual(Ar.take_first_while(v, small), vec(1, 2))
        self.assertCollectionEqual(Ar.drop_first_while(v, small), vec(5, 1, 2))
        self.assertCollectionEqual(Ar.take_last_while(v, small), vec(1, 2))
        self.assertCollectionEqual(Ar.drop_last_while(v, small), vec(1, 2, 5))
        self.assertIs(Ar.take_first_while(v, lambda n: False), EMPTY_VECTOR)
        self.assertIs(Ar.drop_last_while(v, lambda n: True), EMPTY_VECTOR)


class TestDivide(CollectionAssertions, unittest.TestCase):
    def test_chunk(self):
        self.assertCollectionEqual(
            Ar.chunk(vec(1, 2, 3, 4, 5), 2), vec(vec(1, 2), vec(3, 4), vec(5))
        )
        self.assertIs(Ar.chunk(vec(), 3), EMPTY_VECTOR)
        with self.assertRaises(InvalidArgumentError):
            Ar.chunk(vec(1), 0)

    def test_partition(self):
        evens, odds = Ar.partition(vec(1, 2, 3, 4, 5), lambda n: n % 2 == 0)
        self.assertCollectionEqual(evens, vec(2, 4))
        self.assertCollectionEqual(odds, vec(1, 3, 5))

    def test_slice(self):
        v = vec(1, 2, 3, 4)
        self.assertCollectionEqual(Ar.slice(v, 1, 3), vec(2, 3))
        self.assertCollectionEqual(Ar.slice(v, -2), vec(3, 4))
        self.assertCollectionEqual(Ar.slice(v, 0, -1), vec(1, 2, 3))
        self.assertCollectionEqual(Ar.slice(St.hash_set(1, 2, 3), 1), vec(2, 3))

    def test_slice_whole_vector_is_identity(self):
        v = vec(1, 2)
        self.assertIs(Ar.slice(v, 0), v)
        self.assertIs(Ar.slice(v, 0, 2), v)

    def test_splice(self):
        v = vec(1, 2, 3, 4)
        self.assertCollectionEqual(Ar.splice(v, 1, 2), vec(1, 4))
        self.assertCollectionEqual(Ar.splice(v, 1, 0, "a", "b"), vec(1, "a", "b", 2, 3, 4))
        self.assertCollectionEqual(Ar.splice(v, 2), vec(1, 2))
        self.assertCollectionEqual(Ar.splice(v, -1, 1, 9), vec(1, 2, 3, 9))
        self.assertCollectionEqual(v, vec(1, 2, 3, 4))

    def test_split_at_and_span(self):
        before, after = Ar.split_at(vec(1, 2, 3), 1)
        self.assertCollectionEqual(before, vec(1))
        self.assertCollectionEqual(after, vec(2, 3))
        before, after = Ar.span(vec(1, 2, 5, 1), lambda n: n < 3)
        self.assertCollectionEqual(before, vec(1, 2))
        self.assertCollectionEqual(after, vec(5, 1))


class TestCombine(CollectionAssertions, unittest.TestCase):
    def test_prepend_append(self):
        self.assertCollectionEqual(Ar.prepend(vec(2), 1), vec(1, 2))
        self.assertCollectionEqual(Ar.append(vec(1), 2), vec(1, 2))

    def test_concat_and_flatten(self):
        self.assertCollectionEqual(Ar.concat(vec(1), St.hash_set(2), [3]), vec(1, 2, 3))
        self.assertCollectionEqual(Ar.flatten(vec(vec(1, 2), vec(), vec(3))), vec(1, 2, 3))
        self.assertIs(Ar.concat(), EMPTY_VECTOR)

    def test_zip_truncates_to_shortest(self):
        result = Ar.zip(vec(1, 2, 3), vec("a", "b", "c", "d"), vec(5, 6, 7, 8, 9, 10))
        self.assertCollectionEqual(result, vec(vec(1, "a", 5), vec(2, "b", 6), vec(3, "c", 7)))
        with self.assertRaises(InvalidArgumentError):
            Ar.zip()

    def test_zip_with(self):
        self.assertCollectionEqual(Ar.zip_with(lambda a, b: a + b, vec(1, 2), vec(10, 20, 30)), vec(11, 22))

    def test_unzip_inverts_zip(self):
        a, b, c = vec(1, 2), vec("a", "b"), vec(True, False)
        ua, ub, uc = Ar.unzip(Ar.zip(a, b, c))
        self.assertCollectionEqual(ua, a)
        self.assertCollectionEqual(ub, b)
        self.assertCollectionEqual(uc, c)
        with self.assertRaises(InvalidArgumentError):
            Ar.unzip(vec())

    def test_product(self):
        result = Ar.product(vec(1, 2), vec("a", "b"))
        self.assertCollectionEqual(result, vec(vec(1, "a"), vec(2, "a"), vec(1, "b"), vec(2, "b")))
        self.assertIs(Ar.product(vec(1), vec()), EMPTY_VECTOR)


class TestTransform(CollectionAssertions, unittest.TestCase):
    def test_map(self):
        self.assertCollectionEqual(Ar.map(vec(1, 2), lambda n: n * 10), vec(10, 20))
        self.assertCollectionEqual(Ar.map(Mp.hash_map(a=1), str), vec("1"))

    def test_map_with_key(self):
        self.assertCollectionEqual(
            Ar.map_with_key(Mp.hash_map(a=1, b=2), lambda v, k: k * v), vec("a", "bb")
        )

    def test_map_maybe(self):
        self.assertCollectionEqual(
            Ar.map_maybe(vec(1, 2, 3), lambda n: n * 2 if n != 2 else None), vec(2, 6)
        )

    def test_flat_map(self):
        self.assertCollectionEqual(Ar.flat_map(vec(1, 2), lambda n: vec(n, n)), vec(1, 1, 2, 2))

    def test_scan(self):
        self.assertCollectionEqual(Ar.scan(vec(1, 2, 3), 0, lambda acc, n: acc + n), vec(1, 3, 6))
        self.assertIs(Ar.scan(vec(), 0, lambda acc, n: acc + n), EMPTY_VECTOR)


class TestOrder(CollectionAssertions, unittest.TestCase):
    def test_reverse(self):
        self.assertCollectionEqual(Ar.reverse(vec(1, 2, 3)), vec(3, 2, 1))

    def test_sort_default(self):
        self.assertCollectionEqual(Ar.sort(vec(3, 1, 2)), vec(1, 2, 3))
        self.assertCollectionEqual(Ar.sort(vec("b", "a")), vec("a", "b"))

    def test_sort_custom_compare(self):
        result = Ar.sort(vec(1, 3, 2), lambda a, b: b - a)
        self.assertCollectionEqual(result, vec(3, 2, 1))

    def test_sort_is_stable(self):
        """Values comparing equal keep their original relative order."""
        by_length = lambda a, b: len(a) - len(b)  # noqa: E731
        result = Ar.sort(vec("bb", "a", "cc", "d", "aa"), by_length)
        self.assertCollectionEqual(result, vec("a", "d", "bb", "cc", "aa"))

    def test_sort_by(self):
        self.assertCollectionEqual(Ar.sort_by(vec(1, 5, 3, 2), lambda n: n % 3), vec(3, 1, 5, 2))
        self.assertCollectionEqual(
            Ar.sort_by(vec(1, 2, 3), lambda n: n, lambda a, b: b - a), vec(3, 2, 1)
        )

    def test_sort_unstable(self):
        self.assertCollectionEqual(Ar.sort_unstable(vec(2, 3, 1)), vec(1, 2, 3))


class TestAsync(CollectionAssertions, unittest.IsolatedAsyncioTestCase):
    async def test_map_async_preserves_order(self):
        """Results come back in input order, not completion order."""

        async def slow_double(n):
            await asyncio.sleep(0.01 * (3 - n))
            return n * 2

        self.assertCollectionEqual(await Ar.map_async(vec(0, 1, 2), slow_double), vec(0, 2, 4))

    async def test_tasks_run_concurrently(self):
        started = []
        release = asyncio.Event()

        async def wait(n):
            started.append(n)
            if len(started) == 3:
                release.set()
            await release.wait()
            return n

        result = await asyncio.wait_for(Ar.map_async(vec(1, 2, 3), wait), timeout=1)
        self.assertCollectionEqual(result, vec(1, 2, 3))

    async def test_filter_async(self):
        async def is_even(n):
            return n % 2 == 0

        self.assertCollectionEqual(await Ar.filter_async(vec(1, 2, 3, 4), is_even), vec(2, 4))

    async def test_from_async_and_fill_async(self):
        async def value(n):
            return n

        self.assertCollectionEqual(await Ar.from_async([value(1), value(2)]), vec(1, 2))
        self.assertCollectionEqual(await Ar.fill_async(3, value), vec(0, 1, 2))
        self.assertIs(await Ar.fill_async(0, value), EMPTY_VECTOR)

    async def test_from_async_passes_plain_values_through(self):
        async def value(n):
            return n

        self.assertCollectionEqual(await Ar.from_async([value(1), 2, value(3)]), vec(1, 2, 3))

    async def test_failing_source_schedules_nothing(self):
        async def value(n):
            return n

        def source():
            yield value(1)
            raise ValueError("bad source")

        with self.assertRaisesRegex(ValueError, "bad source"):
            await Ar.from_async(source())

    async def test_first_failure_propagates(self):
        async def boom(n):
            if n == 2:
                raise KeyError(n)
            return n

        with self.assertRaises(KeyError):
            await Ar.map_async(vec(1, 2, 3), boom)


if __name__ == "__main__":
    unittest.main()
