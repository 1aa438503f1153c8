"""Custom exception classes for the application.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.

Errors raised by the AWS SDK (``botocore.exceptions.ClientError`` and
``BotoCoreError``) are not wrapped and reach callers unchanged.
"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence


class AppError(Exception):
    """Base exception for application errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when required input is missing or malformed.

    ``fields`` lists every offending input so callers can report all of
    them at once; ``field`` is kept for the single-field case.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
    ):
        names = list(fields) if fields else ([field] if field else [])
        detail = f"Fields: {', '.join(names)}" if names else None
        super().__init__(message, status_code=400, detail=detail)
        self.field = field or (names[0] if names else None)
        self.fields = names

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.fields:
            result["fields"] = self.fields
        return result


class ConfigurationError(AppError):
    """Raised when required configuration is missing."""

    def __init__(self, config_name: str):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name


class StoreError(AppError):
    """Raised when the key-value store accepts a request but drops items.

    Only used for batch writes that come back with unprocessed items;
    client-side failures propagate as the SDK raised them.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=500, detail=detail)
