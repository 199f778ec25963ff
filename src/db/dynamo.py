"""
Shared DynamoDB helpers for the table adapters.
"""

import boto3
from botocore.exceptions import ClientError

from config import config


def get_table(table_name: str):
    kwargs = {"region_name": config.AWS_REGION}
    if config.DYNAMODB_ENDPOINT_URL:
        kwargs["endpoint_url"] = config.DYNAMODB_ENDPOINT_URL
    return boto3.resource("dynamodb", **kwargs).Table(table_name)


def is_condition_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


def query_all(table, **kwargs):
    """Run a query and follow LastEvaluatedKey until every page is read."""
    items = []
    while True:
        resp = table.query(**kwargs)
        items.extend(resp.get("Items", []))
        last_key = resp.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def scan_all(table, **kwargs):
    """Scan the whole table, following LastEvaluatedKey."""
    items = []
    while True:
        resp = table.scan(**kwargs)
        items.extend(resp.get("Items", []))
        last_key = resp.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def is_invalid_document_path(error: ClientError) -> bool:
    # Raised when an update expression names a nested path whose parent map is missing
    err = error.response.get("Error", {})
    return err.get("Code") == "ValidationException" and "document path" in err.get("Message", "")
