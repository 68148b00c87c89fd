"""
polycoll.utils - Small helpers for checking values at runtime

- nullthrows: unwrap a value that must not be None
- invariant: assert a condition with a descriptive message
"""

from typing import Optional, TypeVar

from polycoll.types import InvariantError, NotFoundError

T = TypeVar("T")


def nullthrows(value: Optional[T], message: str = "Got unexpected None") -> T:
    """Return `value`, raising NotFoundError when it is None."""
    if value is not None:
        return value
    raise NotFoundError(message)


def invariant(condition: object, message: str) -> None:
    """Raise InvariantError with `message` when `condition` is falsy."""
    if not condition:
        raise InvariantError(message)


__all__ = ["nullthrows", "invariant"]
