"""orjson-backed JSON helpers."""

from __future__ import annotations

from typing import Any

import orjson

JSONDecodeError = orjson.JSONDecodeError


def loads(data: bytes | str) -> Any:
    """Decode a JSON document."""
    return orjson.loads(data)


def dumps(obj: Any) -> bytes:
    """Encode an object as compact JSON bytes."""
    return orjson.dumps(obj)
