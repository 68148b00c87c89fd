"""
polycoll.pds - Persistent data structures

This module contains the three immutable container kinds and their mutable
("transient") twins:
- Vector: ordered, 0-indexed sequence backed by a tuple
- Set: insertion-ordered collection of unique values
- Map: insertion-ordered association of unique keys to values
- TransientVector / TransientSet / TransientMap: scratch-space mutable
  versions, obtained with `.transient()` and frozen again with `.persistent()`

Every container shares the same iteration contract: `values()`, `keys()` and
`entries()`. For a Vector the keys are its indices, for a Set the keys are
its values.

Constructing a container with no items always returns the canonical empty
instance of its kind (EMPTY_VECTOR, EMPTY_SET, EMPTY_MAP).

Containers compare and hash by identity. Structural comparison is done
explicitly with the `equals*` functions of the collection modules.
"""

from typing import Any, Iterable, Iterator

from polycoll.types import _MISSING, Kind, TransientUsedError


def _immutable_setattr(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")


# =============================================================================
# Vector
# =============================================================================


class Vector:
    """
    Immutable, ordered, index-addressable sequence.

    Use `Ar.vec(1, 2, 3)` or `Vector([1, 2, 3])` to create one.
    """

    __slots__ = ("_items",)

    kind = Kind.VECTOR
    _EMPTY = None

    def __new__(cls, items: Iterable[Any] = ()):
        items = tuple(items)
        if not items and cls._EMPTY is not None:
            return cls._EMPTY
        self = object.__new__(cls)
        object.__setattr__(self, "_items", items)
        return self

    __setattr__ = _immutable_setattr

    def __reduce__(self):
        return (Vector, (self._items,))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[index]

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if not other._items:
            return self
        if not self._items:
            return other
        return Vector(self._items + other._items)

    def __repr__(self):
        return f"[{' '.join(repr(x) for x in self._items)}]"

    def values(self) -> Iterator[Any]:
        return iter(self._items)

    def keys(self) -> Iterator[int]:
        return iter(range(len(self._items)))

    def entries(self) -> Iterator[tuple[int, Any]]:
        return enumerate(self._items)

    def nth(self, index: int, default=_MISSING):
        """Return the item at `index`, or `default` when out of range."""
        if -len(self._items) <= index < len(self._items):
            return self._items[index]
        if default is _MISSING:
            raise IndexError(f"Index {index} out of range for vector of {len(self)}")
        return default

    def conj(self, value) -> "Vector":
        """Return a new Vector with `value` appended."""
        return Vector(self._items + (value,))

    def assoc(self, index: int, value) -> "Vector":
        """Return a new Vector with `value` at `index` (or appended at the end)."""
        n = len(self._items)
        if index == n:
            return self.conj(value)
        if not 0 <= index < n:
            raise IndexError(f"Index {index} out of range for vector of {n}")
        return Vector(self._items[:index] + (value,) + self._items[index + 1 :])

    def pop(self) -> "Vector":
        """Return a new Vector without the last item."""
        if not self._items:
            raise IndexError("Can't pop empty vector")
        return Vector(self._items[:-1])

    def transient(self) -> "TransientVector":
        return TransientVector(self._items)


# =============================================================================
# Set
# =============================================================================


class Set:
    """
    Immutable collection of unique values, iterated in insertion order.

    Values are their own keys. Use `St.hash_set(1, 2, 3)` or `Set([1, 2, 3])`.
    """

    __slots__ = ("_items",)

    kind = Kind.SET
    _EMPTY = None

    def __new__(cls, items: Iterable[Any] = ()):
        return cls._wrap(dict.fromkeys(items))

    @classmethod
    def _wrap(cls, items: dict):
        # Takes ownership of `items`, callers must not keep mutating it.
        if not items and cls._EMPTY is not None:
            return cls._EMPTY
        self = object.__new__(cls)
        object.__setattr__(self, "_items", items)
        return self

    __setattr__ = _immutable_setattr

    def __reduce__(self):
        return (Set, (tuple(self._items),))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __repr__(self):
        return f"#{{{' '.join(repr(x) for x in self._items)}}}"

    def has(self, value) -> bool:
        return value in self._items

    def values(self) -> Iterator[Any]:
        return iter(self._items)

    def keys(self) -> Iterator[Any]:
        return iter(self._items)

    def entries(self) -> Iterator[tuple[Any, Any]]:
        return ((x, x) for x in self._items)

    def conj(self, value) -> "Set":
        """Return a new Set with `value` added."""
        if value in self._items:
            return self
        items = dict(self._items)
        items[value] = None
        return Set._wrap(items)

    def disj(self, value) -> "Set":
        """Return a new Set without `value`."""
        if value not in self._items:
            return self
        items = dict(self._items)
        del items[value]
        return Set._wrap(items)

    def transient(self) -> "TransientSet":
        return TransientSet(self._items)


# =============================================================================
# Map
# =============================================================================


class Map:
    """
    Immutable association of unique keys to values, iterated in insertion order.

    Iterating a Map directly yields its keys, like a Python mapping.
    Use `Mp.hash_map({"a": 1})`, `Mp.of(("a", 1))` or `Map([("a", 1)])`.
    """

    __slots__ = ("_items",)

    kind = Kind.MAP
    _EMPTY = None

    def __new__(cls, entries=()):
        return cls._wrap(dict(entries))

    @classmethod
    def _wrap(cls, items: dict):
        # Takes ownership of `items`, callers must not keep mutating it.
        if not items and cls._EMPTY is not None:
            return cls._EMPTY
        self = object.__new__(cls)
        object.__setattr__(self, "_items", items)
        return self

    __setattr__ = _immutable_setattr

    def __reduce__(self):
        return (Map, (tuple(self._items.items()),))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, key) -> bool:
        return key in self._items

    def __getitem__(self, key):
        return self._items[key]

    def __repr__(self):
        pairs = ", ".join(f"{k!r} {v!r}" for k, v in self._items.items())
        return f"{{{pairs}}}"

    def get(self, key, default=None):
        return self._items.get(key, default)

    def has(self, key) -> bool:
        return key in self._items

    def values(self) -> Iterator[Any]:
        return iter(self._items.values())

    def keys(self) -> Iterator[Any]:
        return iter(self._items.keys())

    def entries(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._items.items())

    def items(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._items.items())

    def assoc(self, key, value) -> "Map":
        """Return a new Map with `key` set to `value`."""
        items = dict(self._items)
        items[key] = value
        return Map._wrap(items)

    def dissoc(self, key) -> "Map":
        """Return a new Map without `key`."""
        if key not in self._items:
            return self
        items = dict(self._items)
        del items[key]
        return Map._wrap(items)

    def transient(self) -> "TransientMap":
        return TransientMap(self._items)


# =============================================================================
# Transients
# =============================================================================


class _Transient:
    """Shared guard for transients: usable only until `persistent()` is called."""

    __slots__ = ("_editable",)

    def _check_editable(self):
        if not self._editable:
            raise TransientUsedError(
                f"{type(self).__name__} used after persistent() call"
            )


class TransientVector(_Transient):
    """Mutable scratch version of a Vector."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        self._items = list(items)
        self._editable = True

    def __len__(self) -> int:
        self._check_editable()
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        self._check_editable()
        return iter(self._items)

    def __getitem__(self, index: int):
        self._check_editable()
        return self._items[index]

    def values(self) -> Iterator[Any]:
        return iter(self)

    def keys(self) -> Iterator[int]:
        return iter(range(len(self)))

    def entries(self) -> Iterator[tuple[int, Any]]:
        return enumerate(self)

    def conj_mut(self, value) -> "TransientVector":
        self._check_editable()
        self._items.append(value)
        return self

    def assoc_mut(self, index: int, value) -> "TransientVector":
        self._check_editable()
        if index == len(self._items):
            self._items.append(value)
        elif 0 <= index < len(self._items):
            self._items[index] = value
        else:
            raise IndexError(f"Index {index} out of range for vector of {len(self._items)}")
        return self

    def pop_mut(self) -> "TransientVector":
        self._check_editable()
        if not self._items:
            raise IndexError("Can't pop empty vector")
        self._items.pop()
        return self

    def persistent(self) -> Vector:
        self._check_editable()
        self._editable = False
        result = Vector(self._items)
        self._items = []
        return result


class TransientSet(_Transient):
    """Mutable scratch version of a Set."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        self._items = dict.fromkeys(items)
        self._editable = True

    def __len__(self) -> int:
        self._check_editable()
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        self._check_editable()
        return iter(self._items)

    def __contains__(self, value) -> bool:
        self._check_editable()
        return value in self._items

    def values(self) -> Iterator[Any]:
        return iter(self)

    def keys(self) -> Iterator[Any]:
        return iter(self)

    def entries(self) -> Iterator[tuple[Any, Any]]:
        return ((x, x) for x in self)

    def conj_mut(self, value) -> "TransientSet":
        self._check_editable()
        self._items[value] = None
        return self

    def disj_mut(self, value) -> "TransientSet":
        self._check_editable()
        self._items.pop(value, None)
        return self

    def persistent(self) -> Set:
        self._check_editable()
        self._editable = False
        result = Set._wrap(self._items)
        self._items = {}
        return result


class TransientMap(_Transient):
    """Mutable scratch version of a Map."""

    __slots__ = ("_items",)

    def __init__(self, entries=()):
        self._items = dict(entries)
        self._editable = True

    def __len__(self) -> int:
        self._check_editable()
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        self._check_editable()
        return iter(self._items)

    def __contains__(self, key) -> bool:
        self._check_editable()
        return key in self._items

    def __getitem__(self, key):
        self._check_editable()
        return self._items[key]

    def get(self, key, default=None):
        self._check_editable()
        return self._items.get(key, default)

    def values(self) -> Iterator[Any]:
        self._check_editable()
        return iter(self._items.values())

    def keys(self) -> Iterator[Any]:
        self._check_editable()
        return iter(self._items.keys())

    def entries(self) -> Iterator[tuple[Any, Any]]:
        self._check_editable()
        return iter(self._items.items())

    def items(self) -> Iterator[tuple[Any, Any]]:
        return self.entries()

    def assoc_mut(self, key, value) -> "TransientMap":
        self._check_editable()
        self._items[key] = value
        return self

    def dissoc_mut(self, key) -> "TransientMap":
        self._check_editable()
        self._items.pop(key, None)
        return self

    def persistent(self) -> Map:
        self._check_editable()
        self._editable = False
        result = Map._wrap(self._items)
        self._items = {}
        return result


# =============================================================================
# Canonical empties
# =============================================================================

EMPTY_VECTOR = Vector()
Vector._EMPTY = EMPTY_VECTOR

EMPTY_SET = Set()
Set._EMPTY = EMPTY_SET

EMPTY_MAP = Map()
Map._EMPTY = EMPTY_MAP


__all__ = [
    "Vector",
    "Set",
    "Map",
    "TransientVector",
    "TransientSet",
    "TransientMap",
    "EMPTY_VECTOR",
    "EMPTY_SET",
    "EMPTY_MAP",
]
