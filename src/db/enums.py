from enum import Enum


class BookingStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls):
        return [s.value for s in cls]


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "Cash on Delivery"
    CARD = "Card"
    # Any other method string is accepted and treated like a prepaid method
