"""Parsing helpers for Lambda event payloads."""

from __future__ import annotations

import json
from typing import Any
from typing import Mapping
from typing import Optional


def parse_json(value: Any) -> Any:
    """Parse ``value`` as JSON, falling back to the value itself.

    Lambda event bodies may arrive as JSON text, as already-decoded
    objects, or as plain strings; all three are accepted.

    Examples:
        >>> parse_json('{"a": 1}')
        {'a': 1}
        >>> parse_json("not json")
        'not json'
        >>> parse_json(None) is None
        True
    """
    try:
        return json.loads(value)
    except (ValueError, TypeError):
        return value


def get_query_param(event: Mapping[str, Any], key: str) -> Optional[str]:
    """Return a single query string parameter from an API Gateway event.

    Falls back to the first multi-value entry when the single-value map
    does not carry the key.
    """
    single = event.get("queryStringParameters") or {}
    if single.get(key) is not None:
        return single[key]

    multi = event.get("multiValueQueryStringParameters") or {}
    for value in multi.get(key) or []:
        if value is not None:
            return value
    return None
