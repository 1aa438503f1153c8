"""SSM Parameter Store helpers."""

from __future__ import annotations

from typing import Sequence

from app.services.aws_clients import get_ssm_client
from app.utils.logging import get_logger

logger = get_logger(__name__)


def get_env_params(region_name: str | None, names: Sequence[str]) -> dict[str, str]:
    """Fetch Parameter Store values keyed by parameter name.

    SecureString parameters are decrypted. Names the service does not
    recognize are left out of the result and logged. Values are fetched
    fresh on every call.

    Args:
        region_name: AWS region of the parameter store.
        names: Parameter names to fetch.

    Returns:
        Mapping of parameter name to value.
    """
    if not names:
        return {}

    client = get_ssm_client(region_name)
    response = client.get_parameters(Names=list(names), WithDecryption=True)

    invalid = response.get("InvalidParameters") or []
    if invalid:
        logger.warning(
            "Parameters not found in parameter store",
            extra={"parameters": invalid},
        )

    return {
        param["Name"]: param["Value"]
        for param in response.get("Parameters") or []
    }
