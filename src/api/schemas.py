"""
Request bodies for the REST API.

Booking fields are all optional here so that the service can report the
first missing field itself, in its fixed order.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[str] = Field(default=None, alias="productId")
    product_name: Optional[str] = Field(default=None, alias="productName")
    price_per_piece: Optional[float] = Field(default=None, alias="pricePerPiece")
    quantity: Optional[int] = None
    total_price: Optional[float] = Field(default=None, alias="totalPrice")
    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    contact_number: Optional[Union[str, int]] = Field(default=None, alias="contactNumber")
    delivery_address: Optional[Union[str, Dict[str, Any]]] = Field(default=None, alias="deliveryAddress")
    payment_method: Optional[str] = Field(default=None, alias="paymentMethod")


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = None


class TrackingEventRequest(BaseModel):
    stage: Optional[str] = None
    location: Optional[str] = None
    note: Optional[str] = None


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: Any = None
    currency: Optional[str] = None
    booking_data: Optional[Dict[str, Any]] = Field(default=None, alias="bookingData")


class PaymentConfirmationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_intent_id: Optional[str] = Field(default=None, alias="paymentIntentId")
    booking_id: Optional[str] = Field(default=None, alias="bookingId")
