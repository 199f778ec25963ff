"""
Booking package: the order lifecycle (placement, payment confirmation,
status updates, tracking, cancellation) and per-customer statistics.
"""

from .service import BookingService, WISHLIST_COUNT_PLACEHOLDER
from .presenter import BookingPresenter
from .transitions import STATUS_TRANSITIONS, can_transition

__all__ = [
    'BookingService',
    'BookingPresenter',
    'STATUS_TRANSITIONS',
    'WISHLIST_COUNT_PLACEHOLDER',
    'can_transition',
]
