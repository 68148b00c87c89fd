"""
polycoll.array - Operations producing Vectors (imported as `Ar`)

Every function accepts any collection (Vector, Set, Map, their transients or
a plain Python iterable) and returns a new Vector, or the canonical empty
vector when the result is empty. Inputs are never mutated.

Categories:
- Construct: vec, from_, from_async, keys, entries, range*, repeat, fill,
  fill_async, generate, mutable
- Check: is_vector, equals, equals_nested, equals_order_ignored
- Select: filter*, unique*, take_*/drop_*
- Divide: chunk, partition, slice, splice, split_at, span
- Combine: prepend, append, concat, flatten, zip, zip_with, unzip, product
- Transform: map*, map_maybe, flat_map, scan
- Order: reverse, sort, sort_by, sort_unstable
"""

import builtins
from functools import cmp_to_key
from typing import Any, Callable, Optional

from polycoll import equality
from polycoll._internal import (
    as_tuple,
    default_compare,
    entries_of,
    gather,
    keys_of,
    values_of,
)
from polycoll.pds import EMPTY_VECTOR, TransientVector, Vector
from polycoll.types import InvalidArgumentError

Compare = Callable[[Any, Any], int]


def _check_step(step):
    if step <= 0:
        raise InvalidArgumentError(
            f"`step` must be a positive number, got `{step}` instead."
        )


def _check_not_negative(name: str, n):
    if n < 0:
        raise InvalidArgumentError(f"Expected `{name}` to not be negative, got `{n}`.")


# =============================================================================
# Construct
# =============================================================================


def vec(*items) -> Vector:
    """Create a Vector from the given items: `vec(1, 2, 3)` -> [1 2 3]."""
    return Vector(items)


def from_(coll) -> Vector:
    """Convert any collection to a Vector of its values. Vectors are returned as is."""
    if isinstance(coll, Vector):
        return coll
    return Vector(values_of(coll))


async def from_async(coll) -> Vector:
    """Await every awaitable in `coll` concurrently, keeping the input order."""
    return Vector(await gather(values_of(coll)))


def keys(coll) -> Vector:
    """Vector of the keys of `coll` (indices for sequences)."""
    return Vector(keys_of(coll))


def entries(coll) -> Vector:
    """Vector of `(key, value)` tuples of `coll`."""
    return Vector(entries_of(coll))


def range(start, end, step=1) -> Vector:
    """
    Ascending numbers from `start` (inclusive) to `end` (exclusive).

    >>> range(1, 6)
    [1 2 3 4 5]
    >>> range(-0.5, 0.51, 0.5)
    [-0.5 0.0 0.5]
    """
    _check_step(step)
    result = []
    current = start
    while current < end:
        result.append(current)
        current += step
    return Vector(result)


def range_inclusive(start, end, step=1) -> Vector:
    """Like `range`, but `end` is included when reached."""
    _check_step(step)
    result = []
    current = start
    while current <= end:
        result.append(current)
        current += step
    return Vector(result)


def range_descending(start, end, step=1) -> Vector:
    """Descending numbers from `start` (inclusive) to `end` (exclusive)."""
    _check_step(step)
    result = []
    current = start
    while current > end:
        result.append(current)
        current -= step
    return Vector(result)


def range_dynamic(start, end, step=1) -> Vector:
    """
    Numbers from `start` to `end`, both inclusive, ascending or descending
    depending on which endpoint is larger. `step` is always positive.
    """
    _check_step(step)
    if start <= end:
        return range_inclusive(start, end, step)
    result = []
    current = start
    while current >= end:
        result.append(current)
        current -= step
    return Vector(result)


def repeat(value, count: int) -> Vector:
    """Vector of `count` references to `value`."""
    _check_not_negative("count", count)
    return Vector((value,) * count)


def fill(count: int, fn: Callable[[int], Any]) -> Vector:
    """Vector of `fn(i)` for every index `i` below `count`."""
    _check_not_negative("count", count)
    return Vector(fn(i) for i in builtins.range(count))


async def fill_async(count: int, fn) -> Vector:
    """Concurrent `fill` where `fn` returns an awaitable."""
    _check_not_negative("count", count)
    return Vector(await gather(fn(i) for i in builtins.range(count)))


def generate(seed, fn) -> Vector:
    """
    Build a Vector by repeatedly calling `fn` on a seed.

    `fn(seed)` returns either `(item, next_seed)` or None to stop.

    >>> generate(2, lambda n: (n, n * n) if n < 64 else None)
    [2 4 16]
    """
    result = []
    acc = seed
    while True:
        step = fn(acc)
        if step is None:
            break
        item, acc = step
        result.append(item)
    return Vector(result)


def mutable(coll) -> TransientVector:
    """Copy the values of `coll` into a TransientVector for local mutation."""
    return TransientVector(values_of(coll))


# =============================================================================
# Check
# =============================================================================


def is_vector(value) -> bool:
    return isinstance(value, Vector)


def equals(coll, *colls) -> bool:
    """True when `coll` holds identical values in the same order as every other."""
    return equality.chained(equality.sequence_equal, coll, colls)


def equals_nested(coll, *colls) -> bool:
    """Like `equals`, but nested containers are compared recursively."""
    return equality.chained(equality.nested_sequence_equal, coll, colls)


def equals_order_ignored(coll, *colls) -> bool:
    """True when every collection holds the same values as `coll`, in any order."""
    return equality.chained(equality.sequence_equal_order_ignored, coll, colls)


# =============================================================================
# Select
# =============================================================================


def filter(coll, fn) -> Vector:
    return Vector(x for x in values_of(coll) if fn(x))


def filter_with_key(coll, fn) -> Vector:
    """Keep values for which `fn(value, key)` is truthy."""
    return Vector(v for k, v in entries_of(coll) if fn(v, k))


async def filter_async(coll, fn) -> Vector:
    """Run the async predicate on every value concurrently, keep the matches."""
    items = as_tuple(coll)
    keep = await gather(fn(x) for x in items)
    return Vector(x for x, ok in builtins.zip(items, keep) if ok)


def filter_nulls(coll) -> Vector:
    return Vector(x for x in values_of(coll) if x is not None)


def find_indices(coll, fn) -> Vector:
    """Keys (indices for sequences) of the values matching `fn`."""
    return Vector(k for k, v in entries_of(coll) if fn(v))


def unique(coll) -> Vector:
    """Drop repeated values. The first occurrence of each value is kept."""
    return Vector(dict.fromkeys(values_of(coll)))


def unique_by(coll, fn) -> Vector:
    """
    Drop values whose `fn(value)` was already produced.

    The *last* value for each derived key is kept, at the position where
    that key was first seen:

    >>> unique_by(vec(2, 4, 7), lambda n: n % 3)
    [2 7]
    """
    seen = {}
    for x in values_of(coll):
        seen[fn(x)] = x
    return Vector(seen.values())


def take_first(coll, n: int) -> Vector:
    _check_not_negative("n", n)
    return slice(coll, 0, n)


def drop_first(coll, n: int) -> Vector:
    _check_not_negative("n", n)
    return slice(coll, n)


def take_last(coll, n: int) -> Vector:
    _check_not_negative("n", n)
    if n == 0:
        return EMPTY_VECTOR
    return slice(coll, -n)


def drop_last(coll, n: int) -> Vector:
    _check_not_negative("n", n)
    if n == 0:
        return from_(coll)
    return slice(coll, 0, -n)


def take_first_while(coll, fn) -> Vector:
    result = []
    for x in values_of(coll):
        if not fn(x):
            break
        result.append(x)
    return Vector(result)


def drop_first_while(coll, fn) -> Vector:
    items = as_tuple(coll)
    i = 0
    while i < len(items) and fn(items[i]):
        i += 1
    return Vector(items[i:])


def take_last_while(coll, fn) -> Vector:
    items = as_tuple(coll)
    i = len(items)
    while i > 0 and fn(items[i - 1]):
        i -= 1
    return Vector(items[i:])


def drop_last_while(coll, fn) -> Vector:
    items = as_tuple(coll)
    i = len(items)
    while i > 0 and fn(items[i - 1]):
        i -= 1
    return Vector(items[:i])


# =============================================================================
# Divide
# =============================================================================


def chunk(coll, size: int) -> Vector:
    """
    Split into Vectors of `size` values; the last one may be shorter.

    >>> chunk(vec(1, 2, 3, 4, 5), 2)
    [[1 2] [3 4] [5]]
    """
    if size < 1:
        raise InvalidArgumentError(
            f"Expected `size` to be greater than 0, got `{size}`."
        )
    items = as_tuple(coll)
    return Vector(
        Vector(items[i : i + size]) for i in builtins.range(0, len(items), size)
    )


def partition(coll, fn) -> tuple[Vector, Vector]:
    """Split into `(matching, not_matching)`, each keeping the original order."""
    positives = []
    negatives = []
    for x in values_of(coll):
        if fn(x):
            positives.append(x)
        else:
            negatives.append(x)
    return Vector(positives), Vector(negatives)


def slice(coll, start: int, end: Optional[int] = None) -> Vector:
    """
    Values from index `start` (inclusive) to `end` (exclusive).

    Negative indices count from the end. Slicing a Vector over its whole
    length returns the same Vector.
    """
    if isinstance(coll, Vector) and start == 0 and (end is None or end >= len(coll)):
        return coll
    return Vector(as_tuple(coll)[start:end])


def splice(coll, start: int, delete_count: Optional[int] = None, *items) -> Vector:
    """
    New Vector with `delete_count` values removed at `start` and `items`
    inserted in their place. The removed values are not returned.

    A negative `start` counts from the end; without `delete_count`
    everything from `start` on is removed.
    """
    values = as_tuple(coll)
    n = len(values)
    if start < 0:
        start = max(n + start, 0)
    start = min(start, n)
    if delete_count is None:
        stop = n
    else:
        stop = start + max(min(delete_count, n - start), 0)
    return Vector(values[:start] + tuple(items) + values[stop:])


def split_at(coll, n: int) -> tuple[Vector, Vector]:
    """Split into the values before index `n` and the rest."""
    items = as_tuple(coll)
    return Vector(items[:n]), Vector(items[n:])


def span(coll, fn) -> tuple[Vector, Vector]:
    """Split before the first value for which `fn` is falsy."""
    items = as_tuple(coll)
    i = 0
    while i < len(items) and fn(items[i]):
        i += 1
    return Vector(items[:i]), Vector(items[i:])


# =============================================================================
# Combine
# =============================================================================


def prepend(coll, item) -> Vector:
    return Vector((item,) + as_tuple(coll))


def append(coll, item) -> Vector:
    return Vector(as_tuple(coll) + (item,))


def concat(*colls) -> Vector:
    """Join the values of all collections into one Vector."""
    return flatten(colls)


def flatten(coll) -> Vector:
    """Join the values of a collection of collections into one Vector."""
    result = []
    for nested in values_of(coll):
        result.extend(values_of(nested))
    return Vector(result)


def zip(*colls) -> Vector:
    """
    Vector of Vectors holding the n-th value of every collection, truncated
    to the shortest collection.

    >>> zip(vec(1, 2, 3), vec("a", "b", "c", "d"))
    [[1 'a'] [2 'b'] [3 'c']]
    """
    if not colls:
        raise InvalidArgumentError("Expected at least one collection, got none instead.")
    return Vector(
        Vector(group) for group in builtins.zip(*(values_of(c) for c in colls))
    )


def zip_with(fn, *colls) -> Vector:
    """`zip` followed by calling `fn` with the values of each group as arguments."""
    if not colls:
        raise InvalidArgumentError("Expected at least one collection, got none instead.")
    return Vector(fn(*group) for group in builtins.zip(*(values_of(c) for c in colls)))


def unzip(coll) -> tuple[Vector, ...]:
    """
    Inverse of `zip`: a tuple of Vectors, one per position in the groups.

    >>> unzip(vec(vec(1, "a"), vec(2, "b")))
    ([1 2], ['a' 'b'])
    """
    groups = [as_tuple(group) for group in values_of(coll)]
    if not groups:
        raise InvalidArgumentError("Expected at least one tuple, got none instead.")
    width = len(groups[0])
    columns = [[] for _ in builtins.range(width)]
    for group in groups:
        for i, item in enumerate(group[:width]):
            columns[i].append(item)
    return tuple(Vector(column) for column in columns)


def product(*colls) -> Vector:
    """
    Cartesian product of the collections, as a Vector of Vectors.

    The first collection varies fastest:

    >>> product(vec(1, 2), vec("a", "b"))
    [[1 'a'] [2 'a'] [1 'b'] [2 'b']]
    """
    if not colls:
        raise InvalidArgumentError("Expected at least one collection, got none instead.")
    result: list[tuple] = [()]
    for coll in colls:
        result = [group + (item,) for item in values_of(coll) for group in result]
    return Vector(Vector(group) for group in result)


# =============================================================================
# Transform
# =============================================================================


def map(coll, fn) -> Vector:
    return Vector(fn(x) for x in values_of(coll))


def map_with_key(coll, fn) -> Vector:
    """Vector of `fn(value, key)` for every entry."""
    return Vector(fn(v, k) for k, v in entries_of(coll))


async def map_async(coll, fn) -> Vector:
    """Call the async `fn` on every value concurrently; results keep the input order."""
    return Vector(await gather(fn(x) for x in values_of(coll)))


def map_maybe(coll, fn) -> Vector:
    """`map`, dropping results that are None."""
    result = []
    for x in values_of(coll):
        mapped = fn(x)
        if mapped is not None:
            result.append(mapped)
    return Vector(result)


def flat_map(coll, fn) -> Vector:
    """`map` where `fn` returns a collection, with the results concatenated."""
    result = []
    for x in values_of(coll):
        result.extend(values_of(fn(x)))
    return Vector(result)


def scan(coll, initial, fn) -> Vector:
    """
    Like reduce, but every intermediate accumulator is kept.

    >>> scan(vec(1, 2, 3), 0, lambda acc, x: acc + x)
    [1 3 6]
    """
    result = []
    acc = initial
    for x in values_of(coll):
        acc = fn(acc, x)
        result.append(acc)
    return Vector(result)


# =============================================================================
# Order
# =============================================================================


def reverse(coll) -> Vector:
    return Vector(reversed(as_tuple(coll)))


def sort(coll, compare: Compare = default_compare) -> Vector:
    """
    Stable sort of the values with a three-way `compare(a, b)` function.

    Values comparing equal keep their original relative order.
    """
    indexed = list(enumerate(values_of(coll)))
    indexed.sort(
        key=cmp_to_key(lambda a, b: compare(a[1], b[1]) or a[0] - b[0])
    )
    return Vector(x for _, x in indexed)


def sort_by(coll, fn, compare: Compare = default_compare) -> Vector:
    """
    Stable sort by the scalar `fn(value)`.

    >>> sort_by(vec(1, 5, 3, 2), lambda n: n % 3)
    [3 1 5 2]
    """
    decorated = [(fn(x), i, x) for i, x in enumerate(values_of(coll))]
    decorated.sort(key=cmp_to_key(lambda a, b: compare(a[0], b[0]) or a[1] - b[1]))
    return Vector(x for _, _, x in decorated)


def sort_unstable(coll, compare: Compare = default_compare) -> Vector:
    """Sort without any guarantee about the order of values comparing equal."""
    items = list(values_of(coll))
    items.sort(key=cmp_to_key(compare))
    return Vector(items)


__all__ = [
    "vec",
    "from_",
    "from_async",
    "keys",
    "entries",
    "range",
    "range_inclusive",
    "range_descending",
    "range_dynamic",
    "repeat",
    "fill",
    "fill_async",
    "generate",
    "mutable",
    "is_vector",
    "equals",
    "equals_nested",
    "equals_order_ignored",
    "filter",
    "filter_with_key",
    "filter_async",
    "filter_nulls",
    "find_indices",
    "unique",
    "unique_by",
    "take_first",
    "drop_first",
    "take_last",
    "drop_last",
    "take_first_while",
    "drop_first_while",
    "take_last_while",
    "drop_last_while",
    "chunk",
    "partition",
    "slice",
    "splice",
    "split_at",
    "span",
    "prepend",
    "append",
    "concat",
    "flatten",
    "zip",
    "zip_with",
    "unzip",
    "product",
    "map",
    "map_with_key",
    "map_async",
    "map_maybe",
    "flat_map",
    "scan",
    "reverse",
    "sort",
    "sort_by",
    "sort_unstable",
]
