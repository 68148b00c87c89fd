"""
polycoll.types - Core type definitions for polycoll

This module contains the fundamental types shared by every container module:
- Kind: The closed tag identifying which container variant a value is
- _MISSING: Sentinel for "no argument given" (distinct from None)
- InvalidArgumentError: Raised for invalid magnitudes (negative step, count...)
- NotFoundError: Raised by the strict ("_x") accessors when nothing is found
- CardinalityError: Raised when exactly one element was expected but there were more
- TransientUsedError: Raised when a transient is used after being frozen
- InvariantError: Raised by `invariant` when its condition does not hold
"""

from enum import Enum

# Sentinel for missing values
_MISSING = object()


class Kind(Enum):
    """The three container kinds. Exactly one applies to any container."""

    VECTOR = "vector"
    SET = "set"
    MAP = "map"

    def __repr__(self):
        return f"Kind.{self.name}"


class InvalidArgumentError(ValueError):
    """Raised when an argument has an invalid magnitude or shape."""

    pass


class KeyTypeError(InvalidArgumentError, TypeError):
    """Raised when a string-keyed operation is given a non-string key."""

    pass


class NotFoundError(LookupError):
    """Raised by strict accessors when the requested value does not exist."""

    pass


class CardinalityError(LookupError):
    """Raised when a collection was expected to hold exactly one value but held more."""

    pass


class TransientUsedError(RuntimeError):
    """Raised when a transient is used after `persistent()` was called on it."""

    pass


class InvariantError(AssertionError):
    """Raised by `invariant` when its condition is false."""

    pass


# Type exports
__all__ = [
    "Kind",
    "InvalidArgumentError",
    "KeyTypeError",
    "NotFoundError",
    "CardinalityError",
    "TransientUsedError",
    "InvariantError",
    "_MISSING",
]
