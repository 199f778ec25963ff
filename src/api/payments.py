"""
Payment endpoints: Stripe intent creation and booking payment confirmation.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_booking_service, get_payment_service
from api.schemas import PaymentConfirmationRequest, PaymentIntentRequest
from features.booking import BookingService
from features.payment import PaymentService
from utils.response import standard_response

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent")
def create_payment_intent(body: PaymentIntentRequest, service: PaymentService = Depends(get_payment_service)):
    client_secret = service.create_payment_intent(
        amount=body.amount,
        currency=body.currency,
        booking_data=body.booking_data,
    )
    return standard_response(True, clientSecret=client_secret)


@router.post("/payment-confirmation")
def confirm_payment(body: PaymentConfirmationRequest, service: BookingService = Depends(get_booking_service)):
    service.confirm_payment(body.payment_intent_id, body.booking_id)
    return standard_response(True, message="Payment confirmed successfully")
