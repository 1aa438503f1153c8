"""Shared boto3 client factory with caching."""

from __future__ import annotations

from typing import Any

import boto3

_CLIENT_CACHE: dict[tuple[str, str | None], Any] = {}


def get_client(service: str, region_name: str | None = None) -> Any:
    """Return a boto3 client, reused across warm invocations."""
    cache_key = (service, region_name)
    client = _CLIENT_CACHE.get(cache_key)
    if client is None:
        client = boto3.client(  # type: ignore[call-overload]
            service,
            region_name=region_name,
        )
        _CLIENT_CACHE[cache_key] = client
    return client


def clear_client_cache() -> None:
    """Drop cached clients (tests patch boto3 between cases)."""
    _CLIENT_CACHE.clear()


def get_dynamodb_client(region_name: str | None = None) -> Any:
    return get_client("dynamodb", region_name=region_name)


def get_ssm_client(region_name: str | None = None) -> Any:
    return get_client("ssm", region_name=region_name)
