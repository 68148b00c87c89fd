"""
polycoll.set - Operations producing Sets (imported as `St`)

A Set's values are also its keys, so "contains" and "contains key" are the
same question. Results are re-deduplicated: mapping two distinct values to
equal results keeps a single one.
"""

from polycoll import equality
from polycoll._internal import as_tuple, gather, keys_of, values_of
from polycoll.pds import EMPTY_SET, Set, TransientSet


def hash_set(*items) -> Set:
    """Create a Set from the given items: `hash_set(1, 2, 2)` -> #{1 2}."""
    return Set(items)


def from_(coll) -> Set:
    """Convert any collection to a Set of its values. Sets are returned as is."""
    if isinstance(coll, Set):
        return coll
    return Set(values_of(coll))


async def from_async(coll) -> Set:
    """Await every awaitable in `coll` concurrently and collect the results."""
    return Set(await gather(values_of(coll)))


def keys(coll) -> Set:
    """Set of the keys of `coll`."""
    return Set(keys_of(coll))


def mutable(coll) -> TransientSet:
    return TransientSet(values_of(coll))


# =============================================================================
# Check
# =============================================================================


def is_set(value) -> bool:
    return isinstance(value, Set)


def equals(coll, *colls) -> bool:
    """True when every Set holds the same values as `coll` in the same order."""
    return equality.chained(equality.sequence_equal, coll, colls)


def equals_order_ignored(coll, *colls) -> bool:
    """True when every Set holds the same values as `coll`, in any order."""
    return equality.chained(equality.set_equal_order_ignored, coll, colls)


def equals_nested(coll, *colls) -> bool:
    return equality.chained(equality.nested_sequence_equal, coll, colls)


# =============================================================================
# Combine
# =============================================================================


def add(coll, value) -> Set:
    return from_(coll).conj(value)


def remove(coll, value) -> Set:
    return from_(coll).disj(value)


def union(*colls) -> Set:
    """Values present in any of the collections."""
    return flatten(colls)


def intersect(*colls) -> Set:
    """
    Values present in all of the collections, in the order of the first one.

    Intersecting no collections gives the empty set.
    """
    if not colls:
        return EMPTY_SET
    first, *rest = colls
    result = dict.fromkeys(values_of(first))
    for coll in rest:
        members = set(values_of(coll))
        result = {x: None for x in result if x in members}
    return Set._wrap(result)


def diff(coll, *colls) -> Set:
    """Values of `coll` absent from every other collection."""
    if not colls:
        return from_(coll)
    excluded = flatten(colls)
    return Set(x for x in values_of(coll) if x not in excluded)


def flatten(colls) -> Set:
    """Union of a collection of collections."""
    result = {}
    for coll in values_of(colls):
        for x in values_of(coll):
            result[x] = None
    return Set._wrap(result)


# =============================================================================
# Select / Transform
# =============================================================================


def filter(coll, fn) -> Set:
    return Set(x for x in values_of(coll) if fn(x))


async def filter_async(coll, fn) -> Set:
    items = as_tuple(coll)
    keep = await gather(fn(x) for x in items)
    return Set(x for x, ok in zip(items, keep) if ok)


def filter_nulls(coll) -> Set:
    return Set(x for x in values_of(coll) if x is not None)


def map(coll, fn) -> Set:
    return Set(fn(x) for x in values_of(coll))


async def map_async(coll, fn) -> Set:
    return Set(await gather(fn(x) for x in values_of(coll)))


def flat_map(coll, fn) -> Set:
    """`map` where `fn` returns a collection, with all results joined into one Set."""
    result = {}
    for x in values_of(coll):
        for y in values_of(fn(x)):
            result[y] = None
    return Set._wrap(result)


__all__ = [
    "hash_set",
    "from_",
    "from_async",
    "keys",
    "mutable",
    "is_set",
    "equals",
    "equals_order_ignored",
    "equals_nested",
    "add",
    "remove",
    "union",
    "intersect",
    "diff",
    "flatten",
    "filter",
    "filter_async",
    "filter_nulls",
    "map",
    "map_async",
    "flat_map",
]
