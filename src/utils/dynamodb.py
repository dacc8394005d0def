"""DynamoDB data access utilities."""

from decimal import Decimal
from typing import Any, cast

import boto3
from boto3.dynamodb.conditions import Key
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.config import Settings
from src.exceptions.client_errors import NotFoundError
from src.exceptions.server_errors import DatabaseError, ServiceUnavailableError

_CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _convert_decimals(obj: Any) -> Any:
    """Convert Decimal values to int or float for JSON serialization."""
    if isinstance(obj, Decimal):
        if obj == int(obj):
            return int(obj)
        return float(obj)
    if isinstance(obj, dict):
        dict_obj = cast("dict[str, Any]", obj)
        return {k: _convert_decimals(v) for k, v in dict_obj.items()}
    if isinstance(obj, list):
        list_obj = cast("list[Any]", obj)
        return [_convert_decimals(item) for item in list_obj]
    return obj


def _sanitize_for_dynamodb(obj: Any) -> Any:
    """Convert floats to Decimal for DynamoDB storage."""
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        dict_obj = cast("dict[str, Any]", obj)
        return {k: _sanitize_for_dynamodb(v) for k, v in dict_obj.items()}
    if isinstance(obj, (list, tuple)):
        list_obj = cast("list[Any]", obj)
        return [_sanitize_for_dynamodb(item) for item in list_obj]
    return obj


class DynamoDBClient:
    """Wrapper around DynamoDB table operations."""

    def __init__(
        self,
        table_name: str,
        *,
        region_name: str | None = None,
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize the DynamoDB client.

        Args:
            table_name: DynamoDB table name.
            region_name: Table region. Falls back to the boto3 default chain.
            timeout_seconds: Connect and read timeout. botocore defaults if omitted.
        """
        config = None
        if timeout_seconds is not None:
            config = Config(connect_timeout=timeout_seconds, read_timeout=timeout_seconds)
        dynamodb = boto3.resource(  # type: ignore[call-overload]
            "dynamodb",
            region_name=region_name,
            config=config,
        )
        self._table_name = table_name
        self._table = dynamodb.Table(table_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoDBClient":
        """Build a client for the configured flight plan table."""
        return cls(
            settings.table_name,
            region_name=settings.aws_region,
            timeout_seconds=settings.api_timeout_seconds,
        )

    def ping(self) -> None:
        """Check that the table is reachable.

        Raises:
            ServiceUnavailableError: If the table cannot be described.
        """
        try:
            self._table.load()
        except (BotoCoreError, ClientError) as error:
            raise ServiceUnavailableError(
                f"Table {self._table_name} unavailable: {error}",
                context={"table_name": self._table_name},
            ) from error

    def put_item(self, item: dict[str, Any]) -> None:
        """Write an item to the table.

        Args:
            item: Item to write.
        """
        self._table.put_item(Item=_sanitize_for_dynamodb(item))

    def get_item(self, pk: str, sk: str) -> dict[str, Any]:
        """Get a single item by primary key.

        Args:
            pk: Partition key value.
            sk: Sort key value.

        Returns:
            Item data.

        Raises:
            NotFoundError: If item does not exist.
        """
        response = self._table.get_item(Key={"pk": pk, "sk": sk})
        item = response.get("Item")
        if not item:
            raise NotFoundError(
                f"Item not found: {pk}/{sk}",
                resource_type="item",
                resource_id=f"{pk}/{sk}",
            )
        return _convert_decimals(item)

    def query_index(
        self,
        index_name: str,
        pk: str,
        *,
        limit: int | None = None,
        scan_forward: bool = True,
    ) -> list[dict[str, Any]]:
        """Query a global secondary index keyed on ``gsi1pk``.

        Args:
            index_name: GSI name to query.
            pk: Index partition key value.
            limit: Maximum number of items to return.
            scan_forward: Sort ascending if True, descending if False.

        Returns:
            List of matching items.
        """
        kwargs: dict[str, Any] = {
            "IndexName": index_name,
            "KeyConditionExpression": Key("gsi1pk").eq(pk),
            "ScanIndexForward": scan_forward,
        }
        if limit:
            kwargs["Limit"] = limit

        response = self._table.query(**kwargs)
        items: list[dict[str, Any]] = response.get("Items", [])
        return [_convert_decimals(item) for item in items]

    def update_existing_item(
        self,
        pk: str,
        sk: str,
        updates: dict[str, Any],
    ) -> dict[str, Any]:
        """Update attributes of an item that must already exist.

        Args:
            pk: Partition key value.
            sk: Sort key value.
            updates: Dictionary of attribute names to new values.

        Returns:
            Updated item attributes.

        Raises:
            NotFoundError: If the item does not exist.
            DatabaseError: If the update fails for any other reason.
        """
        sanitized: dict[str, Any] = _sanitize_for_dynamodb(updates)
        update_parts: list[str] = []
        expression_values: dict[str, Any] = {}
        expression_names: dict[str, str] = {"#pk": "pk"}

        for idx, (key, value) in enumerate(sanitized.items()):
            placeholder_val = f":v{idx}"
            placeholder_name = f"#n{idx}"
            update_parts.append(f"{placeholder_name} = {placeholder_val}")
            expression_values[placeholder_val] = value
            expression_names[placeholder_name] = key

        try:
            response = self._table.update_item(
                Key={"pk": pk, "sk": sk},
                UpdateExpression="SET " + ", ".join(update_parts),
                ConditionExpression="attribute_exists(#pk)",
                ExpressionAttributeValues=expression_values,
                ExpressionAttributeNames=expression_names,
                ReturnValues="ALL_NEW",
            )
        except ClientError as error:
            if error.response.get("Error", {}).get("Code") == _CONDITIONAL_CHECK_FAILED:
                raise NotFoundError(
                    f"Item not found: {pk}/{sk}",
                    resource_type="item",
                    resource_id=f"{pk}/{sk}",
                ) from error
            raise DatabaseError(
                f"Update of {pk}/{sk} failed: {error}",
                context={"table_name": self._table_name},
            ) from error
        return _convert_decimals(response.get("Attributes", {}))
