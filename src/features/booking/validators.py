# Booking input validation; every failure raises a service error

from typing import Any, Dict, List

from db.enums import BookingStatus
from features.errors import InvalidStatusError, ValidationError
from features.validators.common import first_missing_field, require_id

# Scan order matters: the first missing field is the one reported
REQUIRED_BOOKING_FIELDS: List[str] = [
    "productId",
    "productName",
    "pricePerPiece",
    "quantity",
    "totalPrice",
    "email",
    "firstName",
    "lastName",
    "contactNumber",
    "deliveryAddress",
    "paymentMethod",
]


def validate_booking_request(data: Dict[str, Any]) -> None:
    missing = first_missing_field(data, REQUIRED_BOOKING_FIELDS)
    if missing:
        raise ValidationError(f"{missing} is required")
    require_id(data["productId"], "Product")


def validate_status(status: Any) -> str:
    if status not in BookingStatus.values():
        raise InvalidStatusError(status)
    return status
