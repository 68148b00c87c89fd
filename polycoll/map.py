"""
polycoll.map - Operations producing Maps (imported as `Mp`)

Maps keep their keys in insertion order. When an operation writes the same
key twice the later value wins, and the key keeps the position where it was
first written.

Sequences become Maps keyed by index, Sets become Maps keyed by value.
"""

import builtins
from typing import Any, Mapping, Optional

from polycoll import equality
from polycoll._internal import entries_of, gather, values_of
from polycoll.pds import EMPTY_MAP, Map, TransientMap, Vector
from polycoll.types import KeyTypeError, NotFoundError


def _check_string_keys(keys):
    for key in keys:
        if not isinstance(key, str):
            raise KeyTypeError(f"Expected only string keys, got `{key!r}`.")


# =============================================================================
# Construct
# =============================================================================


def hash_map(mapping: Optional[Mapping[str, Any]] = None, **kwargs) -> Map:
    """
    Create a Map from a dict literal and/or keyword arguments.

    Keys must be strings; use `of` for any other kind of key.

    >>> hash_map({"a": 1}, b=2)
    {'a' 1, 'b' 2}
    """
    items = dict(mapping) if mapping is not None else {}
    items.update(kwargs)
    _check_string_keys(items)
    return Map._wrap(items)


def of(*pairs) -> Map:
    """Create a Map from `(key, value)` pairs: `of((1, "a"), (2, "b"))`."""
    return Map(pairs)


def from_(coll) -> Map:
    """Convert any keyed collection to a Map. Maps are returned as is."""
    if isinstance(coll, Map):
        return coll
    return Map(entries_of(coll))


async def from_async(coll) -> Map:
    """Await the values of `coll` concurrently, keeping their keys."""
    pairs = list(entries_of(coll))
    values = await gather(v for _, v in pairs)
    return Map((k, v) for (k, _), v in builtins.zip(pairs, values))


def from_values(coll, fn) -> Map:
    """Map from `fn(value)` to value. Later values win on equal keys."""
    return Map((fn(x), x) for x in values_of(coll))


def from_keys(coll, fn) -> Map:
    """Map from every value of `coll` to `fn(value)`."""
    return Map((x, fn(x)) for x in values_of(coll))


async def from_keys_async(coll, fn) -> Map:
    """`from_keys` where `fn` returns an awaitable; all calls run concurrently."""
    keys = list(values_of(coll))
    values = await gather(fn(k) for k in keys)
    return Map(builtins.zip(keys, values))


def from_entries(coll) -> Map:
    """Map from a collection of `(key, value)` pairs."""
    return Map(values_of(coll))


def zip(keys, values) -> Map:
    """Pair up keys and values, truncated to the shorter collection."""
    return Map(builtins.zip(values_of(keys), values_of(values)))


def to_dict(coll) -> dict:
    """Copy a string-keyed collection into a plain dict."""
    result = dict(entries_of(coll))
    _check_string_keys(result)
    return result


def mutable(coll) -> TransientMap:
    return TransientMap(entries_of(coll))


# =============================================================================
# Check
# =============================================================================


def is_map(value) -> bool:
    return isinstance(value, Map)


def equals(coll, *colls) -> bool:
    """True when every Map holds identical key/value pairs in the same order as `coll`."""
    return equality.chained(equality.map_equal, coll, colls)


def equals_order_ignored(coll, *colls) -> bool:
    return equality.chained(equality.map_equal_order_ignored, coll, colls)


def equals_nested(coll, *colls) -> bool:
    """Like `equals`, but container keys and values are compared recursively."""
    return equality.chained(equality.nested_map_equal, coll, colls)


# =============================================================================
# Combine
# =============================================================================


def set(coll, key, value) -> Map:
    """Copy of `coll` with `key` set to `value`."""
    return from_(coll).assoc(key, value)


def remove(coll, key) -> Map:
    return from_(coll).dissoc(key)


def merge(*colls) -> Map:
    """
    Combine keyed collections; later collections win on conflicting keys.

    >>> merge(hash_map(a=1, b=2), hash_map(a=2, c=3))
    {'a' 2, 'b' 2, 'c' 3}
    """
    result = {}
    for coll in colls:
        result.update(entries_of(coll))
    return Map._wrap(result)


# =============================================================================
# Select
# =============================================================================


def get_x(coll, key):
    """
    Value under `key`, raising NotFoundError when absent.

    Sequences are keyed by index and Sets by value, as in `from_`.
    """
    lookup = coll if isinstance(coll, (Map, TransientMap, dict)) else dict(entries_of(coll))
    if key not in lookup:
        raise NotFoundError(
            f"Expected given collection to have key `{key!r}` but it didn't."
        )
    return lookup[key]


def filter(coll, fn) -> Map:
    return Map((k, v) for k, v in entries_of(coll) if fn(v))


def filter_with_key(coll, fn) -> Map:
    return Map((k, v) for k, v in entries_of(coll) if fn(v, k))


async def filter_async(coll, fn) -> Map:
    pairs = list(entries_of(coll))
    keep = await gather(fn(v) for _, v in pairs)
    return Map(pair for pair, ok in builtins.zip(pairs, keep) if ok)


# =============================================================================
# Transform
# =============================================================================


def map(coll, fn) -> Map:
    """Same keys, values replaced with `fn(value)`."""
    return Map((k, fn(v)) for k, v in entries_of(coll))


def map_with_key(coll, fn) -> Map:
    return Map((k, fn(v, k)) for k, v in entries_of(coll))


async def map_async(coll, fn) -> Map:
    pairs = list(entries_of(coll))
    values = await gather(fn(v) for _, v in pairs)
    return Map((k, v) for (k, _), v in builtins.zip(pairs, values))


def map_to_entries(coll, fn) -> Map:
    """
    Map built from the `(new_key, new_value)` pairs returned by `fn(value, key)`.

    When two entries produce the same key the later one wins.
    """
    return Map(fn(v, k) for k, v in entries_of(coll))


def pull(coll, key_fn, value_fn) -> Map:
    """Map from `key_fn(value)` to `value_fn(value)`, skipping None keys."""
    result = {}
    for x in values_of(coll):
        key = key_fn(x)
        if key is not None:
            result[key] = value_fn(x)
    return Map._wrap(result)


def group_by(coll, key_fn, value_fn=None) -> Map:
    """
    Group values into Vectors keyed by `key_fn(value)`.

    Groups appear in the order their key was first produced. Values whose
    key is None are dropped.

    >>> group_by([1, 2, 3], lambda n: n % 2)
    {1 [1 3], 0 [2]}
    """
    groups: dict[Any, list] = {}
    for x in values_of(coll):
        key = key_fn(x)
        if key is None:
            continue
        groups.setdefault(key, []).append(x if value_fn is None else value_fn(x))
    if not groups:
        return EMPTY_MAP
    return Map._wrap({k: Vector(v) for k, v in groups.items()})


def flip(coll) -> Map:
    """Swap keys and values."""
    return Map((v, k) for k, v in entries_of(coll))


__all__ = [
    "hash_map",
    "of",
    "from_",
    "from_async",
    "from_values",
    "from_keys",
    "from_keys_async",
    "from_entries",
    "zip",
    "to_dict",
    "mutable",
    "is_map",
    "equals",
    "equals_order_ignored",
    "equals_nested",
    "set",
    "remove",
    "merge",
    "get_x",
    "filter",
    "filter_with_key",
    "filter_async",
    "map",
    "map_with_key",
    "map_async",
    "map_to_entries",
    "pull",
    "group_by",
    "flip",
]
