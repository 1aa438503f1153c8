"""Configuration for the vendor identity map.

Table and index names are supplied at construction time rather than
baked into the data-access code, so the same code can target per-stage
tables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from app.exceptions import ConfigurationError
from app.services.parameters import get_env_params

DEFAULT_TABLE_NAME = "VendorIdUserMap"
DEFAULT_INDEX_NAME = "vendorIdService-index"


@dataclass(frozen=True)
class VendorMapSettings:
    """Where vendor identity records live.

    Attributes:
        table_name: DynamoDB table holding the records.
        index_name: Secondary index keyed on ``vendorIdService``.
        region_name: AWS region; None defers to the SDK's resolution.
    """

    table_name: str = DEFAULT_TABLE_NAME
    index_name: str = DEFAULT_INDEX_NAME
    region_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "VendorMapSettings":
        """Read settings from the Lambda environment."""
        return cls(
            table_name=os.getenv("VENDOR_MAP_TABLE_NAME") or DEFAULT_TABLE_NAME,
            index_name=os.getenv("VENDOR_MAP_INDEX_NAME") or DEFAULT_INDEX_NAME,
            region_name=os.getenv("AWS_REGION") or None,
        )

    @classmethod
    def from_parameter_store(
        cls,
        region_name: Optional[str],
        table_param: str,
        index_param: str,
    ) -> "VendorMapSettings":
        """Resolve table and index names from SSM parameters.

        Raises:
            ConfigurationError: If either parameter does not exist.
        """
        params = get_env_params(region_name, [table_param, index_param])
        for name in (table_param, index_param):
            if not params.get(name):
                raise ConfigurationError(name)
        return cls(
            table_name=params[table_param],
            index_name=params[index_param],
            region_name=region_name,
        )


def load_settings() -> VendorMapSettings:
    """Load settings, preferring Parameter Store when it is configured.

    ``VENDOR_MAP_TABLE_PARAM`` and ``VENDOR_MAP_INDEX_PARAM`` name the SSM
    parameters holding the table and index names. Without both of them
    the plain environment variables are used.
    """
    table_param = os.getenv("VENDOR_MAP_TABLE_PARAM")
    index_param = os.getenv("VENDOR_MAP_INDEX_PARAM")
    if table_param and index_param:
        return VendorMapSettings.from_parameter_store(
            os.getenv("AWS_REGION") or None,
            table_param,
            index_param,
        )
    return VendorMapSettings.from_env()
