"""Vendor identity record stored in the vendor map table."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


def user_id_service_key(user_id: str, vendor_name: str) -> str:
    """Primary key for a user/vendor pairing."""
    return f"{user_id}-{vendor_name}"


def vendor_id_service_key(vendor_id: str, vendor_name: str) -> str:
    """Secondary index key for a vendor account within a vendor namespace."""
    return f"{vendor_id}-{vendor_name}"


class VendorIdentityRecord(BaseModel):
    """One mapping between an internal user and a vendor account.

    Attribute names in the table are camelCase; the model exposes them
    as snake_case and accepts either on input.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id_service: str = Field(alias="userIdService", min_length=1)
    vendor_id_service: str = Field(alias="vendorIdService", min_length=1)

    @classmethod
    def for_vendor(
        cls,
        user_id: str,
        vendor_name: str,
        vendor_id: str,
    ) -> "VendorIdentityRecord":
        return cls(
            user_id_service=user_id_service_key(user_id, vendor_name),
            vendor_id_service=vendor_id_service_key(vendor_id, vendor_name),
        )

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "VendorIdentityRecord":
        """Build a record from a deserialized table item.

        Attributes other than the two keys are ignored.
        """
        return cls.model_validate(
            {
                "userIdService": item.get("userIdService"),
                "vendorIdService": item.get("vendorIdService"),
            }
        )

    def to_item(self) -> dict[str, str]:
        """Return the record as a table item keyed by stored attribute names."""
        return self.model_dump(by_alias=True)
