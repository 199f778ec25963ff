"""
Booking presenter: storage records (snake_case) to API shape (camelCase).
"""

from typing import Any, Dict, List


class BookingPresenter:
    """Presenter class for booking data formatting."""

    FIELD_MAP = {
        'booking_id': 'id',
        'product_id': 'productId',
        'product_name': 'productName',
        'price_per_piece': 'pricePerPiece',
        'quantity': 'quantity',
        'total_price': 'totalPrice',
        'email': 'email',
        'first_name': 'firstName',
        'last_name': 'lastName',
        'contact_number': 'contactNumber',
        'delivery_address': 'deliveryAddress',
        'payment_method': 'paymentMethod',
        'status': 'status',
        'payment_status': 'paymentStatus',
        'created_at': 'createdAt',
        'updated_at': 'updatedAt',
    }

    def format_tracking_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'stage': event.get('stage'),
            'location': event.get('location'),
            'note': event.get('note'),
            'timestamp': event.get('timestamp'),
        }

    def format_booking(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Format a single booking for the API."""
        if not item:
            return {}

        booking = {api_name: item.get(db_name) for db_name, api_name in self.FIELD_MAP.items()}
        booking['tracking'] = [self.format_tracking_event(e) for e in item.get('tracking') or []]
        return booking

    def format_bookings(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [self.format_booking(item) for item in items]
