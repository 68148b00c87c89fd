"""
polycoll.collection - Operations on any container kind (imported as `Cl`)

This module answers questions about a collection without caring whether it
is a Vector, a Set or a Map. Kind specific work is routed through the
equality kernel; everything else works on the shared iteration contract
(`values()`, `keys()`, `entries()`).

Every lookup that may come up empty exists twice:
- a nullable form returning None, e.g. `first`
- a strict `_x` form raising NotFoundError, e.g. `first_x`

`only_x` additionally raises CardinalityError when there is more than one
value.
"""

from itertools import islice
from typing import Any, Callable, Optional

from polycoll import equality
from polycoll._internal import (
    count_of,
    default_compare,
    entries_of,
    keys_of,
    values_of,
)
from polycoll.equality import kind_of
from polycoll.pds import Map, Set, TransientMap, TransientSet, TransientVector, Vector
from polycoll.types import _MISSING, CardinalityError, Kind, NotFoundError

_EMPTY_MESSAGE = "Expected a non-empty collection, was empty instead."


# =============================================================================
# Check
# =============================================================================


def is_collection(value) -> bool:
    """True for Vectors, Sets and Maps."""
    return kind_of(value) is not None


def equals(coll, *colls) -> bool:
    """
    True when `coll` equals every other collection.

    Collections of different kinds are never equal. Values inside the
    collections are compared strictly, so nested containers must be the
    very same objects.

    >>> equals(vec(1, 2, 3), vec(1, 2, 3))
    True
    """
    return equality.chained(equality.strict_equal, coll, colls)


def equals_nested(coll, *colls) -> bool:
    """Like `equals`, but nested containers are compared recursively."""
    return equality.chained(equality.nested_equal, coll, colls)


def equals_order_ignored(coll, *colls) -> bool:
    """
    Like `equals`, but iteration order does not matter: Vectors are compared
    as multisets, Sets by membership and Maps by their key/value pairs.
    """
    return equality.chained(equality.order_ignored_equal, coll, colls)


def is_empty(coll) -> bool:
    return count_of(coll) == 0


def count(coll) -> int:
    return count_of(coll)


def contains(coll, value) -> bool:
    """True when `value` is one of the values of `coll`."""
    if isinstance(coll, (Set, TransientSet, set, frozenset)):
        return value in coll
    return value in values_of(coll)


def contains_key(coll, key) -> bool:
    """True when `coll` has `key` (an index for sequences)."""
    if isinstance(coll, (Map, Set, TransientMap, TransientSet, dict, set, frozenset)):
        return key in coll
    if not isinstance(key, int) or isinstance(key, bool):
        return False
    return 0 <= key < count_of(coll)


def any(coll, fn: Optional[Callable[[Any], Any]] = None) -> bool:
    """True when some value (or `fn(value)` when given) is truthy."""
    if fn is None:
        return next((True for x in values_of(coll) if x), False)
    return next((True for x in values_of(coll) if fn(x)), False)


def every(coll, fn: Optional[Callable[[Any], Any]] = None) -> bool:
    """True when every value (or `fn(value)` when given) is truthy."""
    if fn is None:
        return next((False for x in values_of(coll) if not x), True)
    return next((False for x in values_of(coll) if not fn(x)), True)


def is_sorted(coll, compare=default_compare) -> bool:
    """True when no value compares below the value before it."""
    it = values_of(coll)
    previous = next(it, _MISSING)
    if previous is _MISSING:
        return True
    for value in it:
        if compare(value, previous) < 0:
            return False
        previous = value
    return True


def is_sorted_by(coll, fn, compare=default_compare) -> bool:
    """`is_sorted` applied to `fn(value)` for every value."""
    return is_sorted((fn(x) for x in values_of(coll)), compare)


# =============================================================================
# Select
# =============================================================================


def find(coll, fn):
    """First value matching `fn`, or None."""
    for x in values_of(coll):
        if fn(x):
            return x
    return None


def find_x(coll, fn):
    for x in values_of(coll):
        if fn(x):
            return x
    raise NotFoundError(
        "Expected to find a value in collection matching given predicate, "
        "but didn't find one."
    )


def find_key(coll, fn):
    """Key of the first value matching `fn`, or None."""
    for k, v in entries_of(coll):
        if fn(v):
            return k
    return None


def find_key_x(coll, fn):
    for k, v in entries_of(coll):
        if fn(v):
            return k
    raise NotFoundError(
        "Expected to find a key in collection matching given predicate, "
        "but didn't find one."
    )


def first(coll):
    return next(values_of(coll), None)


def first_x(coll):
    value = next(values_of(coll), _MISSING)
    if value is _MISSING:
        raise NotFoundError(_EMPTY_MESSAGE)
    return value


def only(coll):
    """The single value of `coll`, or None when it has zero or several values."""
    it = values_of(coll)
    value = next(it, None)
    if next(it, _MISSING) is not _MISSING:
        return None
    return value


def only_x(coll):
    """The single value of `coll`. Raises when it is empty or has several values."""
    it = values_of(coll)
    value = next(it, _MISSING)
    if value is _MISSING:
        raise NotFoundError(
            "Expected exactly one item in collection, but the collection was empty."
        )
    if next(it, _MISSING) is not _MISSING:
        raise CardinalityError(
            "Expected exactly one item in collection, but there were more."
        )
    return value


def _last_of(it, default):
    result = default
    for result in it:
        pass
    return result


def last(coll):
    if isinstance(coll, (Vector, list, tuple)):
        return coll[-1] if coll else None
    return _last_of(values_of(coll), None)


def last_x(coll):
    if isinstance(coll, (Vector, list, tuple)):
        if not coll:
            raise NotFoundError(_EMPTY_MESSAGE)
        return coll[-1]
    value = _last_of(values_of(coll), _MISSING)
    if value is _MISSING:
        raise NotFoundError(_EMPTY_MESSAGE)
    return value


def _at(coll, index: int, default):
    if index < 0:
        return default
    if isinstance(coll, (Vector, TransientVector, list, tuple)):
        return coll[index] if index < len(coll) else default
    return next(islice(values_of(coll), index, None), default)


def _at_x(coll, index: int):
    value = _at(coll, index, _MISSING)
    if value is _MISSING:
        raise NotFoundError(
            f"Expected collection to have an item at index {index}, "
            f"but it has {count_of(coll)} items."
        )
    return value


def at(coll, index: int):
    """Value at 0-based position `index` in iteration order, or None."""
    return _at(coll, index, None)


def at_x(coll, index: int):
    return _at_x(coll, index)


def at_from_end(coll, index: int):
    """Value at position `index` counted from the end (0 is the last value), or None."""
    if index < 0:
        return None
    return _at(coll, count_of(coll) - 1 - index, None)


def at_from_end_x(coll, index: int):
    position = count_of(coll) - 1 - index if index >= 0 else -1
    value = _at(coll, position, _MISSING)
    if value is _MISSING:
        raise NotFoundError(
            f"Expected collection to have an item at index {index} from the end, "
            f"but it has {count_of(coll)} items."
        )
    return value


def at_dynamic(coll, index: int):
    """`at` for non-negative indices; negative ones count from the end, -1 being the last."""
    if index < 0:
        return _at(coll, count_of(coll) + index, None)
    return _at(coll, index, None)


def at_dynamic_x(coll, index: int):
    if index < 0:
        position = count_of(coll) + index
    else:
        position = index
    value = _at(coll, position, _MISSING)
    if value is _MISSING:
        raise NotFoundError(
            f"Expected collection to have an item at index {index}, "
            f"but it has {count_of(coll)} items."
        )
    return value


def first_key(coll):
    return next(keys_of(coll), None)


def first_key_x(coll):
    key = next(keys_of(coll), _MISSING)
    if key is _MISSING:
        raise NotFoundError(_EMPTY_MESSAGE)
    return key


def last_key(coll):
    return _last_of(keys_of(coll), None)


def last_key_x(coll):
    key = _last_of(keys_of(coll), _MISSING)
    if key is _MISSING:
        raise NotFoundError(_EMPTY_MESSAGE)
    return key


# =============================================================================
# Traverse
# =============================================================================


def for_each(coll, fn) -> None:
    """
    Call `fn(value, key, coll)` for every entry, in iteration order.

    Maps pass their keys; Vectors and Sets pass the position of the value.
    """
    if isinstance(coll, (Map, TransientMap, dict)):
        for k, v in entries_of(coll):
            fn(v, k, coll)
        return
    for i, v in enumerate(values_of(coll)):
        fn(v, i, coll)


def reduce(coll, fn, initial=_MISSING):
    """
    Fold the values of `coll` with `fn(acc, value)`.

    Without `initial` the first value seeds the accumulator and `fn` is not
    called for it; an empty collection then raises NotFoundError.

    >>> reduce(vec(2, 4, 3), lambda acc, x: acc + x)
    9
    """
    it = values_of(coll)
    if initial is _MISSING:
        acc = next(it, _MISSING)
        if acc is _MISSING:
            raise NotFoundError(
                "Expected a non-empty collection to reduce without an initial "
                "value, was empty instead."
            )
    else:
        acc = initial
    for x in it:
        acc = fn(acc, x)
    return acc


__all__ = [
    "Kind",
    "kind_of",
    "is_collection",
    "equals",
    "equals_nested",
    "equals_order_ignored",
    "is_empty",
    "count",
    "contains",
    "contains_key",
    "any",
    "every",
    "is_sorted",
    "is_sorted_by",
    "find",
    "find_x",
    "find_key",
    "find_key_x",
    "first",
    "first_x",
    "only",
    "only_x",
    "last",
    "last_x",
    "at",
    "at_x",
    "at_from_end",
    "at_from_end_x",
    "at_dynamic",
    "at_dynamic_x",
    "first_key",
    "first_key_x",
    "last_key",
    "last_key_x",
    "for_each",
    "reduce",
]
