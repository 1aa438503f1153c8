"""Lambda handler for the vendor identity map.

GET  ?vendorName=&vendorId=            look up the user mapped to a vendor id
POST {"userId", "vendorName", "vendorId"}  store a mapping
"""

from __future__ import annotations

import time
from typing import Any
from typing import Mapping
from typing import Optional

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from app.config import load_settings
from app.db.dynamodb import DynamoDBStore
from app.db.repositories.vendor_identity import VendorIdentityMapper
from app.exceptions import AppError
from app.exceptions import ValidationError
from app.utils.logging import clear_request_context
from app.utils.logging import configure_logging
from app.utils.logging import get_logger
from app.utils.logging import log_response
from app.utils.logging import set_request_context
from app.utils.parsers import get_query_param
from app.utils.parsers import parse_json
from app.utils.responses import format_http_response
from app.utils.validators import item_exists

configure_logging()
logger = get_logger(__name__)

_MAPPER: Optional[VendorIdentityMapper] = None


def get_mapper() -> VendorIdentityMapper:
    """Return the container-wide mapper, building it on first use."""
    global _MAPPER
    if _MAPPER is None:
        settings = load_settings()
        _MAPPER = VendorIdentityMapper(DynamoDBStore.from_settings(settings), settings)
    return _MAPPER


def reset_mapper() -> None:
    """Forget the cached mapper (tests swap settings between cases)."""
    global _MAPPER
    _MAPPER = None


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle an API Gateway proxy request.

    The caller's ``X-Correlation-Id`` header, or the request id when it is
    absent, is bound to the log context and echoed on the response.
    """
    start = time.perf_counter()
    request_id = (event.get("requestContext") or {}).get("requestId", "")
    corr_id = _header(event, "x-correlation-id") or request_id
    set_request_context(req_id=request_id, corr_id=corr_id)

    try:
        headers = {"X-Correlation-Id": corr_id} if corr_id else None
        response = _dispatch(event, headers)
        log_response(
            logger,
            response["statusCode"],
            (time.perf_counter() - start) * 1000,
        )
        return response
    finally:
        clear_request_context()


def _dispatch(
    event: Mapping[str, Any],
    headers: Optional[dict[str, str]],
) -> dict[str, Any]:
    method = (event.get("httpMethod") or "").upper()
    payload: Any = None

    try:
        if method == "GET":
            payload = {
                "vendorName": get_query_param(event, "vendorName"),
                "vendorId": get_query_param(event, "vendorId"),
            }
            record = get_mapper().get_user_id_by_vendor_id(
                payload["vendorName"],
                payload["vendorId"],
            )
            return format_http_response(200, payload, record, headers)

        if method == "POST":
            payload = parse_json(event.get("body"))
            get_mapper().set_mapping(
                _field(payload, "userId"),
                _field(payload, "vendorName"),
                _field(payload, "vendorId"),
            )
            return format_http_response(201, payload, {"stored": True}, headers)

        raise ValidationError(f"Unsupported method: {method or 'none'}", field="httpMethod")
    except ValidationError as exc:
        return format_http_response(400, payload, exc.to_dict(), headers)
    except AppError as exc:
        logger.error(exc.message, exc_info=True)
        return format_http_response(exc.status_code, payload, exc.to_dict(), headers)
    except (ClientError, BotoCoreError):
        logger.exception("Vendor map store call failed")
        return format_http_response(
            500, payload, {"error": "Vendor map store unavailable"}, headers
        )
    except PydanticValidationError:
        logger.exception("Stored vendor identity record is malformed")
        return format_http_response(
            500, payload, {"error": "Stored vendor identity record is malformed"}, headers
        )


def _field(payload: Any, key: str) -> Any:
    return payload[key] if item_exists(payload, key) else None


def _header(event: Mapping[str, Any], name: str) -> Optional[str]:
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == name:
            return value
    return None
