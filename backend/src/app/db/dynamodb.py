"""Thin DynamoDB access layer.

Wraps the low-level boto3 client with the two operations the vendor map
needs. Items go in and come out as plain Python dicts; the typed
attribute-value format stays inside this module.
"""

from __future__ import annotations

from typing import Any
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Sequence

from boto3.dynamodb.types import TypeDeserializer
from boto3.dynamodb.types import TypeSerializer

from app.config import VendorMapSettings
from app.exceptions import StoreError
from app.services.aws_clients import get_dynamodb_client
from app.utils.logging import get_logger

logger = get_logger(__name__)

# BatchWriteItem accepts at most 25 requests per call.
MAX_BATCH_WRITE_ITEMS = 25

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def serialize_item(item: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a plain dict to DynamoDB's typed attribute map."""
    return {key: _serializer.serialize(value) for key, value in item.items()}


def deserialize_item(item: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a typed attribute map to a plain dict."""
    return {key: _deserializer.deserialize(value) for key, value in item.items()}


def _chunks(items: Sequence[Any], size: int) -> Iterator[Sequence[Any]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


class DynamoDBStore:
    """Key-value store backed by a low-level DynamoDB client.

    Client errors are not caught here; they reach the caller exactly as
    botocore raised them.
    """

    def __init__(self, client: Any):
        self._client = client

    @classmethod
    def from_settings(cls, settings: VendorMapSettings) -> "DynamoDBStore":
        return cls(get_dynamodb_client(settings.region_name))

    @property
    def client(self) -> Any:
        return self._client

    def batch_put(
        self,
        items: Sequence[Mapping[str, Any]],
        table_name: str,
    ) -> None:
        """Write items with BatchWriteItem, 25 at a time.

        Args:
            items: Plain dict items to write.
            table_name: Target table.

        Raises:
            StoreError: If the service returns unprocessed items.
        """
        for chunk in _chunks(list(items), MAX_BATCH_WRITE_ITEMS):
            response = self._client.batch_write_item(
                RequestItems={
                    table_name: [
                        {"PutRequest": {"Item": serialize_item(item)}}
                        for item in chunk
                    ]
                }
            )
            unprocessed = (response.get("UnprocessedItems") or {}).get(table_name)
            if unprocessed:
                logger.warning(
                    "Batch write left unprocessed items",
                    extra={"table": table_name, "unprocessed": len(unprocessed)},
                )
                raise StoreError(
                    f"Batch write to {table_name} left items unprocessed",
                    detail=f"Unprocessed items: {len(unprocessed)}",
                )

    def query(
        self,
        table_name: str,
        key_condition_expression: str,
        expression_attribute_values: Mapping[str, Any],
        index_name: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Run a single Query call and return the matching items.

        ``expression_attribute_values`` is in typed form (e.g.
        ``{":vid": {"S": "..."}}``), as the low-level API expects. Only
        the first page of results is read.
        """
        params: dict[str, Any] = {
            "TableName": table_name,
            "KeyConditionExpression": key_condition_expression,
            "ExpressionAttributeValues": dict(expression_attribute_values),
        }
        if index_name:
            params["IndexName"] = index_name

        response = self._client.query(**params)
        return [deserialize_item(item) for item in response.get("Items") or []]
