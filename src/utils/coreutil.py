"""
Utility functions shared by the db and feature layers.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_id() -> str:
    return str(uuid.uuid4())


def is_valid_id(value: Optional[str]) -> bool:
    """
    Return True when value is a well-formed record identifier (a UUID string).
    """
    if not value or not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def convert_floats_for_dynamodb(obj: Any) -> Any:
    """
    Recursively convert float values to Decimal for DynamoDB compatibility.
    DynamoDB rejects Python floats, so every float goes through Decimal(str(x)).

    Examples:
        >>> convert_floats_for_dynamodb(2.5)
        Decimal('2.5')
        >>> convert_floats_for_dynamodb({"price": 9.99, "tags": ["a"]})
        {'price': Decimal('9.99'), 'tags': ['a']}
    """
    if isinstance(obj, dict):
        return {k: convert_floats_for_dynamodb(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_floats_for_dynamodb(item) for item in obj]
    elif isinstance(obj, bool):
        return obj
    elif isinstance(obj, float):
        return Decimal(str(obj))
    else:
        return obj


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_minor_units(amount: Any) -> int:
    """
    Convert a major-unit amount (e.g. 12.345 dollars) to minor units (cents),
    rounding halves up: 12.345 -> 1235.
    """
    cents = to_decimal(amount) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def pagination_window(page: int, limit: int) -> tuple:
    """Return (skip, limit) for a 1-based page number."""
    page = max(int(page), 1)
    limit = max(int(limit), 0)
    return (page - 1) * limit, limit
