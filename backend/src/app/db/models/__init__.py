"""Records stored in DynamoDB tables."""

from app.db.models.vendor_identity import VendorIdentityRecord
from app.db.models.vendor_identity import user_id_service_key
from app.db.models.vendor_identity import vendor_id_service_key

__all__ = [
    "VendorIdentityRecord",
    "user_id_service_key",
    "vendor_id_service_key",
]
