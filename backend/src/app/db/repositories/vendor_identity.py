"""Mapping between internal user ids and vendor account ids.

Each record ties ``<userId>-<vendorName>`` to ``<vendorId>-<vendorName>``.
Writes are upserts keyed on the user side; reads go through the secondary
index on the vendor side.
"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Protocol
from typing import Sequence

from app.config import VendorMapSettings
from app.db.models.vendor_identity import VendorIdentityRecord
from app.db.models.vendor_identity import vendor_id_service_key
from app.exceptions import ValidationError
from app.utils.logging import get_logger
from app.utils.logging import hash_for_correlation
from app.utils.logging import mask_pii
from app.utils.validators import missing_values

logger = get_logger(__name__)

SET_MAPPING_ERROR = "Cannot create vendor Id map without all required data"
GET_USER_ID_ERROR = "Cannot fetch userId without vendorId and service name"


class KeyValueStore(Protocol):
    """Store operations the mapper relies on."""

    def batch_put(self, items: Sequence[dict[str, Any]], table_name: str) -> None:
        ...

    def query(
        self,
        table_name: str,
        key_condition_expression: str,
        expression_attribute_values: dict[str, Any],
        index_name: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        ...


class VendorIdentityMapper:
    """Reads and writes vendor identity records.

    Both operations validate their inputs before touching the store and
    make exactly one store call. Store errors are not caught.
    """

    def __init__(self, store: KeyValueStore, settings: VendorMapSettings):
        self._store = store
        self._settings = settings

    @property
    def settings(self) -> VendorMapSettings:
        return self._settings

    def set_mapping(self, user_id: str, vendor_name: str, vendor_id: str) -> None:
        """Record that ``user_id`` owns ``vendor_id`` at ``vendor_name``.

        Raises:
            ValidationError: If any argument is empty or None.
        """
        _validate(
            SET_MAPPING_ERROR,
            user_id=user_id,
            vendor_name=vendor_name,
            vendor_id=vendor_id,
        )

        record = VendorIdentityRecord.for_vendor(user_id, vendor_name, vendor_id)
        self._store.batch_put([record.to_item()], self._settings.table_name)
        logger.info(
            "Vendor id mapping stored",
            extra={
                "vendor": vendor_name,
                "vendor_id": mask_pii(vendor_id),
                "user": hash_for_correlation(str(user_id)),
            },
        )

    def get_user_id_by_vendor_id(
        self,
        vendor_name: str,
        vendor_id: str,
    ) -> Optional[VendorIdentityRecord]:
        """Look up the record for a vendor account.

        When the index holds several records for the same vendor account,
        the first one the store returns wins.

        Returns:
            The matching record, or None when nothing matches.

        Raises:
            ValidationError: If either argument is empty or None.
        """
        _validate(GET_USER_ID_ERROR, vendor_name=vendor_name, vendor_id=vendor_id)

        items = self._store.query(
            table_name=self._settings.table_name,
            index_name=self._settings.index_name,
            key_condition_expression="vendorIdService = :vid",
            expression_attribute_values={
                ":vid": {"S": vendor_id_service_key(vendor_id, vendor_name)},
            },
        )
        if not items:
            return None
        return VendorIdentityRecord.from_item(items[0])


def _validate(message: str, **values: Any) -> None:
    missing = missing_values(**values)
    if missing:
        logger.warning(message, extra={"missing_fields": missing})
        raise ValidationError(message, fields=missing)
