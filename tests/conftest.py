"""Shared test fixtures."""

import boto3
import pytest
from moto import mock_aws

from src.config import get_settings
from src.logging import clear_log_fields, reset_logging

TEST_TABLE_NAME = "test-table"


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables that affect settings."""
    env_vars_to_clear = [
        "SERVICE_NAME",
        "AWS_REGION",
        "TABLE_NAME",
        "GROUND_STATION_NAME",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "API_TIMEOUT_SECONDS",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo handler logging setup and context between tests."""
    yield
    reset_logging()
    clear_log_fields()


def create_flight_plan_table(table_name: str = TEST_TABLE_NAME):
    """Create the flight plan table inside an active moto mock."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
    table = dynamodb.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "pk", "KeyType": "HASH"},
            {"AttributeName": "sk", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "pk", "AttributeType": "S"},
            {"AttributeName": "sk", "AttributeType": "S"},
            {"AttributeName": "gsi1pk", "AttributeType": "S"},
            {"AttributeName": "gsi1sk", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "gsi1-status-created",
                "KeySchema": [
                    {"AttributeName": "gsi1pk", "KeyType": "HASH"},
                    {"AttributeName": "gsi1sk", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    return table


@pytest.fixture()
def flight_plan_table(monkeypatch):
    """Mock DynamoDB flight plan table with TABLE_NAME pointing at it."""
    with mock_aws():
        monkeypatch.setenv("TABLE_NAME", TEST_TABLE_NAME)
        get_settings.cache_clear()
        yield create_flight_plan_table()
