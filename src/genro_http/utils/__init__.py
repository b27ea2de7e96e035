# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Utility functions for genro-http.

Exports:
    HAS_ORJSON: True when orjson is importable.
    json_dumps: Serialize a value to compact UTF-8 JSON bytes.
"""

from __future__ import annotations

import json as stdlib_json
from typing import Any

# Optional fast JSON serialization
try:
    import orjson

    HAS_ORJSON = True
except ImportError:
    orjson = None  # type: ignore[assignment]
    HAS_ORJSON = False


def json_dumps(value: Any) -> bytes:
    """Serialize value to JSON bytes, using orjson when available.

    Examples:
        json_dumps({"a": 1})  # b'{"a":1}'
        json_dumps("http://localhost")  # b'"http://localhost"'
    """
    if HAS_ORJSON:
        result: bytes = orjson.dumps(value)
        return result
    return stdlib_json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


__all__ = ["HAS_ORJSON", "json_dumps"]
