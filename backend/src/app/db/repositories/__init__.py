"""Repositories over the key-value store.

Repositories keep business rules such as key composition and input
validation out of the store client.
"""

from app.db.repositories.vendor_identity import KeyValueStore
from app.db.repositories.vendor_identity import VendorIdentityMapper

__all__ = [
    "KeyValueStore",
    "VendorIdentityMapper",
]
