"""
polycoll - Immutable collections with a uniform set of operations

The library is organised around three container kinds and four modules:

- Vector / Set / Map: immutable containers (see polycoll.pds)
- Ar: operations producing Vectors
- St: operations producing Sets
- Mp: operations producing Maps
- Cl: operations on any kind (equality, lookup, reduction)

Usage:
    from polycoll import Ar, Cl, Mp

    Ar.chunk(Ar.vec(1, 2, 3, 4, 5), 2)            # [[1 2] [3 4] [5]]
    Mp.merge(Mp.hash_map(a=1), Mp.hash_map(b=2))  # {'a' 1, 'b' 2}
    Cl.equals(Ar.vec(1, 2), Ar.vec(1, 2))         # True
"""

import logging

from polycoll import array as Ar
from polycoll import collection as Cl
from polycoll import map as Mp
from polycoll import set as St
from polycoll.array import vec
from polycoll.map import hash_map
from polycoll.pds import (
    EMPTY_MAP,
    EMPTY_SET,
    EMPTY_VECTOR,
    Map,
    Set,
    TransientMap,
    TransientSet,
    TransientVector,
    Vector,
)
from polycoll.set import hash_set
from polycoll.types import (
    CardinalityError,
    InvalidArgumentError,
    InvariantError,
    KeyTypeError,
    Kind,
    NotFoundError,
    TransientUsedError,
)
from polycoll.utils import invariant, nullthrows

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Ar",
    "Cl",
    "Mp",
    "St",
    "vec",
    "hash_set",
    "hash_map",
    "Vector",
    "Set",
    "Map",
    "TransientVector",
    "TransientSet",
    "TransientMap",
    "EMPTY_VECTOR",
    "EMPTY_SET",
    "EMPTY_MAP",
    "Kind",
    "InvalidArgumentError",
    "KeyTypeError",
    "NotFoundError",
    "CardinalityError",
    "TransientUsedError",
    "InvariantError",
    "nullthrows",
    "invariant",
]
