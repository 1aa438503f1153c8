"""Pytest configuration and fixtures for backend tests.

Store-facing tests use botocore's Stubber on real low-level clients so
request shapes are checked against the service model without network
access. Mapper and handler tests use the in-memory store below.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from typing import Optional
from uuid import uuid4

import boto3
import pytest
from botocore.stub import Stubber

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from app.config import VendorMapSettings  # noqa: E402
from app.db.repositories.vendor_identity import VendorIdentityMapper  # noqa: E402
from app.services.aws_clients import clear_client_cache  # noqa: E402

TEST_REGION = 'us-east-1'


class InMemoryStore:
    """Dict-backed stand-in for DynamoDBStore.

    Items are keyed by table and ``userIdService`` so repeated writes
    upsert, matching the table's primary key. Queries match the single
    ``<attr> = :placeholder`` condition the mapper issues.
    """

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self.put_calls: list[tuple[list[dict[str, Any]], str]] = []
        self.query_calls: list[dict[str, Any]] = []

    def batch_put(self, items, table_name: str) -> None:
        self.put_calls.append((list(items), table_name))
        table = self.tables.setdefault(table_name, {})
        for item in items:
            table[item['userIdService']] = dict(item)

    def query(
        self,
        table_name: str,
        key_condition_expression: str,
        expression_attribute_values: dict[str, Any],
        index_name: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        self.query_calls.append(
            {
                'table_name': table_name,
                'index_name': index_name,
                'key_condition_expression': key_condition_expression,
                'expression_attribute_values': expression_attribute_values,
            }
        )
        attribute, placeholder = (
            part.strip() for part in key_condition_expression.split('=')
        )
        wanted = expression_attribute_values[placeholder]['S']
        return [
            dict(item)
            for item in self.tables.get(table_name, {}).values()
            if item.get(attribute) == wanted
        ]


# --- Environment Fixtures ---


@pytest.fixture(autouse=True)
def _isolate_aws(monkeypatch):
    """Keep tests off real AWS configuration and reset cached clients."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', TEST_REGION)
    for name in (
        'AWS_REGION',
        'VENDOR_MAP_TABLE_NAME',
        'VENDOR_MAP_INDEX_NAME',
        'VENDOR_MAP_TABLE_PARAM',
        'VENDOR_MAP_INDEX_PARAM',
    ):
        monkeypatch.delenv(name, raising=False)
    clear_client_cache()
    yield
    clear_client_cache()


# --- Store Fixtures ---


@pytest.fixture
def settings() -> VendorMapSettings:
    return VendorMapSettings(region_name=TEST_REGION)


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def mapper(memory_store, settings) -> VendorIdentityMapper:
    return VendorIdentityMapper(memory_store, settings)


@pytest.fixture
def dynamodb_client():
    return boto3.client('dynamodb', region_name=TEST_REGION)


@pytest.fixture
def dynamodb_stubber(dynamodb_client):
    with Stubber(dynamodb_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def ssm_client():
    return boto3.client('ssm', region_name=TEST_REGION)


@pytest.fixture
def ssm_stubber(ssm_client, mocker):
    """Stub SSM and route the parameter helpers to the stubbed client."""
    mocker.patch('app.services.parameters.get_ssm_client', return_value=ssm_client)
    with Stubber(ssm_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client creation for AWS service calls."""
    return mocker.patch('boto3.client')


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway proxy event structure."""
    return {
        'httpMethod': 'GET',
        'path': '/v1/vendor-identity',
        'queryStringParameters': {},
        'multiValueQueryStringParameters': {},
        'headers': {},
        'requestContext': {
            'requestId': str(uuid4()),
        },
        'body': None,
        'isBase64Encoded': False,
    }
