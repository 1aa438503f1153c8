"""Lambda entrypoint for the vendor identity map."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from app.api.vendor_identity import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the vendor identity handler."""
    return _handler(event, context)
