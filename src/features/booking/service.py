"""
Booking service layer: the order lifecycle.

pending -> confirmed -> processing -> shipped -> delivered, or cancelled.

Booking placement and the inventory decrement are two separate writes with
no transaction around them. If the decrement fails the booking stays stored
and the caller gets an InternalError; nothing reconciles the two.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from config import config
from db.booking import BookingDB
from db.enums import BookingStatus, PaymentMethod, PaymentStatus
from db.product import ProductDB
from features.errors import (
    InvalidOperationError,
    NotFoundError,
    PaymentNotSucceededError,
    ValidationError,
    log_operation,
)
from features.payment import INTENT_SUCCEEDED, StripeGateway
from features.validators.common import require_id
from utils.coreutil import now_iso, pagination_window, to_decimal
from .presenter import BookingPresenter
from .transitions import can_transition
from .validators import validate_booking_request, validate_status

logger = logging.getLogger(__name__)

# No wishlist entity exists yet; stats report a fixed count
WISHLIST_COUNT_PLACEHOLDER = 5


def tracking_event(stage: Optional[str], location: Optional[str], note: Optional[str]) -> Dict[str, Any]:
    return {
        "stage": stage,
        "location": location,
        "note": note,
        "timestamp": now_iso(),
    }


class BookingService:
    """Service class for booking lifecycle operations."""

    def __init__(
        self,
        booking_db: Optional[BookingDB] = None,
        product_db: Optional[ProductDB] = None,
        gateway: Optional[StripeGateway] = None,
        presenter: Optional[BookingPresenter] = None,
        enforce_transitions: Optional[bool] = None,
    ):
        self.booking_db = booking_db or BookingDB()
        self.product_db = product_db or ProductDB()
        self.gateway = gateway or StripeGateway()
        self.presenter = presenter or BookingPresenter()
        if enforce_transitions is None:
            enforce_transitions = config.ENFORCE_STATUS_TRANSITIONS
        self.enforce_transitions = enforce_transitions

    # ---- Commands ----

    @log_operation("create_booking", "Failed to create booking")
    def create_booking(self, request: Dict[str, Any]) -> str:
        """
        Place a booking and return its id.

        Cash on Delivery bookings start confirmed with payment pending and
        leave inventory alone. Every other method starts pending with payment
        marked paid, and decrements the product's available inventory by the
        requested quantity without checking that enough stock exists.
        """
        validate_booking_request(request)

        payment_method = request["paymentMethod"]
        cash_on_delivery = payment_method == PaymentMethod.CASH_ON_DELIVERY.value
        if cash_on_delivery:
            status, payment_status = BookingStatus.CONFIRMED.value, PaymentStatus.PENDING.value
        else:
            status, payment_status = BookingStatus.PENDING.value, PaymentStatus.PAID.value

        item = self.booking_db.create_booking(
            product_id=request["productId"],
            product_name=request["productName"],
            price_per_piece=request["pricePerPiece"],
            quantity=request["quantity"],
            total_price=request["totalPrice"],
            email=request["email"],
            first_name=request["firstName"],
            last_name=request["lastName"],
            contact_number=request["contactNumber"],
            delivery_address=request["deliveryAddress"],
            payment_method=payment_method,
            status=status,
            payment_status=payment_status,
            tracking=[tracking_event("Order Placed", "Online", "Order has been placed successfully")],
        )
        booking_id = item["booking_id"]
        logger.info(
            "Booking created",
            extra={"booking_id": booking_id, "payment_method": payment_method, "status": status},
        )

        if not cash_on_delivery:
            decremented = self.product_db.decrement_inventory(request["productId"], request["quantity"])
            if not decremented:
                logger.warning(
                    "Inventory not decremented: product not found",
                    extra={"booking_id": booking_id, "product_id": request["productId"]},
                )

        return booking_id

    @log_operation("confirm_payment", "Failed to confirm payment")
    def confirm_payment(self, payment_intent_id: Optional[str], booking_id: Optional[str]) -> None:
        """
        Mark a booking paid and confirmed once the gateway reports the intent
        succeeded. Calling it again appends another "Payment Confirmed" event.
        """
        if not payment_intent_id:
            raise ValidationError("paymentIntentId is required")
        require_id(booking_id, "Booking")

        intent = self.gateway.retrieve_intent(payment_intent_id)
        if intent.get("status") != INTENT_SUCCEEDED:
            raise PaymentNotSucceededError(intent.get("status"))

        matched = self.booking_db.update_booking(
            booking_id,
            fields={
                "payment_status": PaymentStatus.PAID.value,
                "status": BookingStatus.CONFIRMED.value,
                "updated_at": now_iso(),
            },
            push_tracking=[tracking_event("Payment Confirmed", "Online", "Payment has been confirmed")],
        )
        if not matched:
            raise NotFoundError("Booking")
        logger.info("Payment confirmed", extra={"booking_id": booking_id, "payment_intent_id": payment_intent_id})

    @log_operation("update_booking_status", "Failed to update booking status")
    def update_status(self, booking_id: str, new_status: Any) -> None:
        require_id(booking_id, "Booking")
        validate_status(new_status)

        if self.enforce_transitions:
            booking = self.booking_db.get_booking(booking_id)
            if not booking:
                raise NotFoundError("Booking")
            current = booking.get("status")
            if not can_transition(current, new_status):
                raise InvalidOperationError(f"Cannot change status from {current} to {new_status}")

        if not self.booking_db.update_status(booking_id, new_status):
            raise NotFoundError("Booking")
        logger.info("Booking status updated", extra={"booking_id": booking_id, "status": new_status})

    @log_operation("add_tracking_event", "Failed to add tracking info")
    def add_tracking_event(self, booking_id: str, event: Dict[str, Any]) -> None:
        require_id(booking_id, "Booking")

        entry = tracking_event(event.get("stage"), event.get("location"), event.get("note"))
        matched = self.booking_db.update_booking(
            booking_id,
            fields={"updated_at": entry["timestamp"]},
            push_tracking=[entry],
        )
        if not matched:
            raise NotFoundError("Booking")

    @log_operation("cancel_booking", "Failed to cancel booking")
    def cancel_booking(self, booking_id: str) -> None:
        """Delete a booking; only pending bookings can be cancelled."""
        require_id(booking_id, "Booking")

        booking = self.booking_db.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking")
        if booking.get("status") != BookingStatus.PENDING.value:
            raise InvalidOperationError("Cannot cancel order after it's confirmed")

        if not self.booking_db.delete_booking(booking_id):
            raise NotFoundError("Booking")
        logger.info("Booking cancelled", extra={"booking_id": booking_id})

    # ---- Queries ----

    @log_operation("get_booking", "Failed to fetch booking")
    def get_booking(self, booking_id: str) -> Dict[str, Any]:
        require_id(booking_id, "Booking")
        item = self.booking_db.get_booking(booking_id)
        if not item:
            raise NotFoundError("Booking")
        return self.presenter.format_booking(item)

    @log_operation("list_user_bookings", "Failed to fetch bookings")
    def list_user_bookings(self, email: str, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        skip, limit = pagination_window(page, limit)
        items = self.booking_db.list_bookings_page(email, skip=skip, limit=limit)
        return {
            "total": self.booking_db.count_bookings(email),
            "page": page,
            "limit": limit,
            "data": self.presenter.format_bookings(items),
        }

    @log_operation("compute_user_stats", "Failed to fetch user stats")
    def compute_user_stats(self, email: str) -> Dict[str, Any]:
        """
        Order statistics for a customer. totalSpent sums every booking,
        whatever its status.
        """
        bookings = self.booking_db.list_bookings_for_email(email)
        total_spent = sum((to_decimal(b.get("total_price") or 0) for b in bookings), Decimal(0))

        return {
            "totalOrders": self.booking_db.count_bookings(email),
            "completedOrders": self.booking_db.count_bookings(email, status=BookingStatus.DELIVERED.value),
            "pendingOrders": self.booking_db.count_bookings(email, status=BookingStatus.PENDING.value),
            "totalSpent": total_spent,
            "wishlistCount": WISHLIST_COUNT_PLACEHOLDER,
        }
