"""Utility modules for the backend application."""

from app.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    hash_for_correlation,
    mask_pii,
    set_request_context,
)
from app.utils.parsers import get_query_param, parse_json
from app.utils.responses import format_http_response
from app.utils.timing import async_sleep, sleep
from app.utils.validators import item_exists, missing_values

__all__ = [
    "async_sleep",
    "clear_request_context",
    "configure_logging",
    "format_http_response",
    "get_logger",
    "get_query_param",
    "hash_for_correlation",
    "item_exists",
    "mask_pii",
    "missing_values",
    "parse_json",
    "set_request_context",
    "sleep",
]
