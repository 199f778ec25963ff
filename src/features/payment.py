"""
Payments: Stripe gateway wrapper and the create-payment-intent operation.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Dict, Optional

import stripe

from config import config
from features.errors import ValidationError, log_operation
from utils.coreutil import to_minor_units

logger = logging.getLogger(__name__)

INTENT_SUCCEEDED = "succeeded"


class StripeGateway:
    """
    Thin wrapper over Stripe PaymentIntents.

    One round trip per call, no retries: Stripe errors propagate to the
    calling service.
    """

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or config.STRIPE_SECRET_KEY

    def create_intent(self, amount_minor: int, currency: str, metadata: Dict[str, str]) -> Dict[str, Any]:
        intent = stripe.PaymentIntent.create(
            amount=amount_minor,
            currency=currency,
            metadata=metadata,
            api_key=self.api_key,
        )
        logger.info("Payment intent created", extra={"payment_intent_id": intent.id, "amount": amount_minor})
        return {"id": intent.id, "client_secret": intent.client_secret}

    def retrieve_intent(self, payment_intent_id: str) -> Dict[str, Any]:
        intent = stripe.PaymentIntent.retrieve(payment_intent_id, api_key=self.api_key)
        return {"id": intent.id, "status": intent.status}


def build_intent_metadata(booking_data: Optional[Dict[str, Any]]) -> Dict[str, str]:
    booking_data = booking_data or {}
    quantity = booking_data.get("quantity")
    customer_name = f"{booking_data.get('firstName') or ''} {booking_data.get('lastName') or ''}".strip()
    return {
        "productName": booking_data.get("productName") or "",
        "quantity": str(quantity) if quantity is not None else "0",
        "customerEmail": booking_data.get("email") or "",
        "customerName": customer_name,
    }


class PaymentService:
    def __init__(self, gateway: Optional[StripeGateway] = None):
        self.gateway = gateway or StripeGateway()

    @log_operation("create_payment_intent", "Failed to create payment intent")
    def create_payment_intent(
        self,
        amount: Any,
        currency: Optional[str] = None,
        booking_data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Create a payment intent for amount (major units) and return its client secret.
        """
        if (
            isinstance(amount, bool)
            or not isinstance(amount, (int, float, Decimal))
            or not math.isfinite(amount)
            or amount <= 0
        ):
            raise ValidationError("Valid amount is required")

        intent = self.gateway.create_intent(
            amount_minor=to_minor_units(amount),
            currency=currency or config.DEFAULT_CURRENCY,
            metadata=build_intent_metadata(booking_data),
        )
        return intent["client_secret"]
