"""
polycoll.equality - Equality & comparison kernel

Every `equals*` function of Ar, St, Mp and Cl is built from the pairwise
comparisons defined here:

- same: identity for containers, `==` for everything else
- sequence_equal / map_equal: positional comparison in iteration order
- *_order_ignored: membership based comparison (multiset for sequences)
- nested_equal: recursive comparison descending into contained containers
- chained: the variadic "base against every compared value" driver
"""

from collections import Counter
from typing import Any, Callable, Iterable, Optional

from polycoll._internal import count_of, entries_of, values_of
from polycoll.pds import Map, Set, TransientSet, Vector
from polycoll.types import Kind

Pairwise = Callable[[Any, Any], bool]


def kind_of(value) -> Optional[Kind]:
    """Return the Kind of a container, or None for any other value."""
    if isinstance(value, (Vector, Set, Map)):
        return value.kind
    return None


def same(a, b) -> bool:
    """Strict equality of two elements: containers must be the same object."""
    if a is b:
        return True
    if kind_of(a) is not None or kind_of(b) is not None:
        return False
    return a == b


def sequence_equal(a, b, eq: Pairwise = same) -> bool:
    """Compare values position by position. Also used for sets."""
    if a is b:
        return True
    if count_of(a) != count_of(b):
        return False
    return all(eq(x, y) for x, y in zip(values_of(a), values_of(b)))


def map_equal(a, b, eq: Pairwise = same) -> bool:
    """Compare key/value pairs position by position."""
    if a is b:
        return True
    if count_of(a) != count_of(b):
        return False
    for (ka, va), (kb, vb) in zip(entries_of(a), entries_of(b)):
        if not (eq(ka, kb) and eq(va, vb)):
            return False
    return True


def sequence_equal_order_ignored(a, b) -> bool:
    """Same values with the same multiplicities, in any order."""
    if a is b:
        return True
    if count_of(a) != count_of(b):
        return False
    try:
        return Counter(values_of(a)) == Counter(values_of(b))
    except TypeError:
        # Unhashable values: match each one against a remaining value
        remaining = list(values_of(b))
        for x in values_of(a):
            for i, y in enumerate(remaining):
                if x == y:
                    del remaining[i]
                    break
            else:
                return False
        return True


def set_equal_order_ignored(a, b) -> bool:
    if a is b:
        return True
    if count_of(a) != count_of(b):
        return False
    if isinstance(a, (Set, TransientSet, set, frozenset)):
        members = a
    else:
        members = frozenset(values_of(a))
    return all(x in members for x in values_of(b))


def map_equal_order_ignored(a, b) -> bool:
    if a is b:
        return True
    if count_of(a) != count_of(b):
        return False
    for key, value in entries_of(a):
        if key not in b or not same(b[key], value):
            return False
    return True


def nested_equal(a, b) -> bool:
    """Like strict equality, but recurse into containers instead of using identity."""
    if a is b:
        return True
    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is None or kind_b is None:
        return kind_a is None and kind_b is None and a == b
    if kind_a is not kind_b:
        return False
    if kind_a is Kind.MAP:
        return map_equal(a, b, nested_equal)
    return sequence_equal(a, b, nested_equal)


def strict_equal(a, b) -> bool:
    """Shallow equality of two values of any kind."""
    if a is b:
        return True
    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is not kind_b:
        return False
    if kind_a is None:
        return a == b
    if kind_a is Kind.MAP:
        return map_equal(a, b)
    return sequence_equal(a, b)


def order_ignored_equal(a, b) -> bool:
    if a is b:
        return True
    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is not kind_b:
        return False
    if kind_a is Kind.VECTOR:
        return sequence_equal_order_ignored(a, b)
    if kind_a is Kind.SET:
        return set_equal_order_ignored(a, b)
    if kind_a is Kind.MAP:
        return map_equal_order_ignored(a, b)
    return a == b


def chained(pair: Pairwise, base, others: Iterable[Any]) -> bool:
    """True when `base` equals every value in `others` according to `pair`."""
    for compared in others:
        if compared is base:
            continue
        if not pair(base, compared):
            return False
    return True


def nested_sequence_equal(a, b) -> bool:
    return sequence_equal(a, b, nested_equal)


def nested_map_equal(a, b) -> bool:
    return map_equal(a, b, nested_equal)
