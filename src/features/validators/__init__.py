# Central validators module for service input validation

from .common import first_missing_field, require_id

__all__ = [
    "first_missing_field",
    "require_id",
]
