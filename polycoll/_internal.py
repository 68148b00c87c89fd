"""
polycoll._internal - Helpers shared by the container modules

- default_compare: the default three-way comparator
- values_of / keys_of / entries_of / count_of: the iteration contract over
  every accepted input (the three kinds, transients, plain Python iterables)
- gather: concurrent fan-out used by every `*_async` operation
"""

import asyncio
import inspect
import logging
from typing import Any, Iterable, Iterator

from polycoll.pds import (
    Map,
    Set,
    TransientMap,
    TransientSet,
    TransientVector,
    Vector,
)

logger = logging.getLogger(__name__)

_CONTAINERS = (Vector, Set, Map, TransientVector, TransientSet, TransientMap)


def default_compare(a, b) -> int:
    """Ascending comparison of numbers or strings."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def values_of(coll) -> Iterator[Any]:
    """Iterate the values of any accepted collection, in iteration order."""
    if isinstance(coll, _CONTAINERS):
        return coll.values()
    if isinstance(coll, dict):
        return iter(coll.values())
    return iter(coll)


def keys_of(coll) -> Iterator[Any]:
    """Iterate the keys of any accepted collection (indices for sequences)."""
    if isinstance(coll, _CONTAINERS):
        return coll.keys()
    if isinstance(coll, dict):
        return iter(coll.keys())
    if isinstance(coll, (set, frozenset)):
        return iter(coll)
    if isinstance(coll, (list, tuple, str)):
        return iter(range(len(coll)))
    return (i for i, _ in enumerate(coll))


def entries_of(coll) -> Iterator[tuple[Any, Any]]:
    """Iterate (key, value) pairs of any accepted collection."""
    if isinstance(coll, _CONTAINERS):
        return coll.entries()
    if isinstance(coll, dict):
        return iter(coll.items())
    if isinstance(coll, (set, frozenset)):
        return ((x, x) for x in coll)
    return enumerate(coll)


def count_of(coll) -> int:
    """Number of values in any accepted collection."""
    try:
        return len(coll)
    except TypeError:
        return sum(1 for _ in coll)


def as_tuple(coll) -> tuple:
    """Materialize the values of `coll` for positional access."""
    if isinstance(coll, Vector):
        return coll._items
    if isinstance(coll, tuple):
        return coll
    return tuple(values_of(coll))


async def _resolved(value):
    return value


async def gather(awaitables: Iterable[Any]) -> list[Any]:
    """
    Run every awaitable concurrently and return their results in input order.

    All tasks are started before any is awaited. Plain values are passed
    through as results. The first exception raised propagates unchanged;
    the other tasks are not cancelled.
    """
    pending = []
    try:
        for a in awaitables:
            pending.append(a if inspect.isawaitable(a) else _resolved(a))
    except Exception:
        # Nothing is scheduled yet; close what was created so far
        for a in pending:
            if inspect.iscoroutine(a):
                a.close()
        raise
    tasks = [asyncio.ensure_future(a) for a in pending]
    logger.debug("Launching %d concurrent tasks", len(tasks))
    try:
        return await asyncio.gather(*tasks)
    except Exception as e:
        logger.debug("Concurrent task failed with %s", type(e).__name__)
        raise
