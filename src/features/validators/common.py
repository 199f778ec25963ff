# Common validation utilities shared across the feature services

from typing import Any, Dict, List, Optional

from features.errors import InvalidIdentifierError
from utils.coreutil import is_valid_id


def first_missing_field(data: Dict[str, Any], fields: List[str]) -> Optional[str]:
    # Absent, None, empty and zero values all count as missing
    for field in fields:
        if not data.get(field):
            return field
    return None


def require_id(value: Any, entity: str) -> str:
    # Well-formedness check that runs before any lookup
    if not is_valid_id(value):
        raise InvalidIdentifierError(entity, value)
    return value
