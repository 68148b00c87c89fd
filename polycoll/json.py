"""
polycoll.json - JSON string serialization for polycoll containers.

This module provides a JSON encoder for the persistent containers (Vector,
Set, Map) and their transients, and a decoder that builds containers back.

Usage:
    from polycoll import Mp, Ar
    from polycoll.json import dumps, loads_collections

    dumps(Mp.hash_map(items=Ar.vec(1, 2, 3)))   # '{"items": [1, 2, 3]}'
    loads_collections('{"items": [1, 2, 3]}')   # {'items' [1 2 3]}
"""

import json
from typing import Any

from polycoll.pds import (
    Map,
    Set,
    TransientMap,
    TransientSet,
    TransientVector,
    Vector,
)


class CollectionJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that handles polycoll containers.

    Supported types:
    - Map, TransientMap -> object (non-string keys are converted with str())
    - Vector, TransientVector -> array
    - Set, TransientSet -> array (JSON has no set type)

    Example:
        >>> import json
        >>> from polycoll import Ar, Mp
        >>> json.dumps(Mp.hash_map(items=Ar.vec(1, 2)), cls=CollectionJSONEncoder)
        '{"items": [1, 2]}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, (Map, TransientMap)):
            return {self._convert_key(k): v for k, v in o.entries()}

        if isinstance(o, (Vector, TransientVector, Set, TransientSet)):
            return list(o.values())

        # Fall back to default behavior (will raise TypeError)
        return super().default(o)

    def _convert_key(self, key: Any) -> str:
        if isinstance(key, str):
            return key
        return str(key)


def dumps(
    obj: Any,
    *,
    indent: int | str | None = None,
    sort_keys: bool = False,
    **kwargs: Any,
) -> str:
    """
    Serialize an object containing polycoll containers to a JSON string.

    A wrapper around json.dumps using CollectionJSONEncoder; any extra
    keyword arguments are passed through.
    """
    return json.dumps(
        obj,
        cls=CollectionJSONEncoder,
        indent=indent,
        sort_keys=sort_keys,
        **kwargs,
    )


# Plain parsing produces Python types and needs no special handling
loads = json.loads


def _to_collections(obj: Any) -> Any:
    """Recursively convert dicts to Maps and lists to Vectors."""
    if isinstance(obj, dict):
        return Map((k, _to_collections(v)) for k, v in obj.items())

    if isinstance(obj, list):
        return Vector(_to_collections(item) for item in obj)

    # Primitives (str, int, float, bool, None) pass through unchanged
    return obj


def loads_collections(s: str | bytes | bytearray, **kwargs: Any) -> Any:
    """
    Parse a JSON string into polycoll containers.

    Objects become Maps and arrays become Vectors; empty ones are the
    canonical empties.

    Example:
        >>> loads_collections('{"name": "Alice", "items": [1, 2, 3]}')
        {'name' 'Alice', 'items' [1 2 3]}
    """
    parsed = json.loads(s, **kwargs)
    return _to_collections(parsed)


__all__ = [
    "CollectionJSONEncoder",
    "dumps",
    "loads",
    "loads_collections",
]
