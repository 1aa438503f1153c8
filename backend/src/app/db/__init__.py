"""Data access for the vendor identity map."""

from app.db.dynamodb import DynamoDBStore
from app.db.models import VendorIdentityRecord
from app.db.repositories import VendorIdentityMapper

__all__ = [
    "DynamoDBStore",
    "VendorIdentityMapper",
    "VendorIdentityRecord",
]
