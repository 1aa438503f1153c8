"""Lambda proxy integration response formatting."""

from __future__ import annotations

import json
from typing import Any
from typing import Optional

from pydantic import BaseModel

_STATUS_TEXT = {
    200: "OK",
    201: "Created",
    400: "Bad Request",
    500: "Internal Server Error",
}


def get_status_text(code: int) -> Optional[str]:
    """Return the reason phrase for the status codes handlers emit."""
    return _STATUS_TEXT.get(code)


def format_http_response(
    code: int,
    input: Any = None,
    result: Any = None,
    headers: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """Build an API Gateway proxy integration response.

    The body echoes the request ``input`` next to the ``result`` so that
    callers can match responses to requests without extra bookkeeping.

    Args:
        code: HTTP status code.
        input: The request payload the handler acted on.
        result: The handler's result (dict, pydantic model, or any
            JSON-serializable value).
        headers: Optional additional headers.

    Returns:
        A dict with ``statusCode``, ``headers`` and a JSON ``body`` holding
        ``resp``, ``input`` and ``result``.
    """
    status = get_status_text(code)
    resp = f"HTTP Resp: {code} - {status}" if status else f"HTTP Resp: {code}"

    response_headers = {"Content-Type": "application/json"}
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": code,
        "headers": response_headers,
        "body": json.dumps(
            {
                "resp": resp,
                "input": _serialize(input),
                "result": _serialize(result),
            },
            default=str,
        ),
    }


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value
