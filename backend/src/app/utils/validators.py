"""Input validation utilities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def item_exists(obj: Any, key: Any) -> bool:
    """Check whether ``obj`` is a mapping that holds ``key``.

    Returns False for None and for anything that is not a mapping, so it
    is safe to call on unparsed payloads.
    """
    if not isinstance(obj, Mapping):
        return False
    return key in obj


def missing_values(**values: Any) -> list[str]:
    """Return the names of the arguments whose value is falsy."""
    return [name for name, value in values.items() if not value]

