"""
Shared fixtures: in-memory stand-ins for the DynamoDB table adapters and a
mocked Stripe gateway, so services and routes run without AWS or Stripe.
"""

import copy
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from features.booking import BookingService
from features.payment import PaymentService
from features.product import ProductService
from features.user import UserService
from utils.coreutil import convert_floats_for_dynamodb, new_id, now_iso, to_decimal


class InMemoryBookingDB:
    """Same interface as db.booking.BookingDB, backed by a dict."""

    def __init__(self):
        self.items: Dict[str, Dict[str, Any]] = {}

    def create_booking(self, **fields) -> Dict[str, Any]:
        timestamp = now_iso()
        item = convert_floats_for_dynamodb({
            **fields,
            "booking_id": new_id(),
            "tracking": list(fields.get("tracking") or []),
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        self.items[item["booking_id"]] = item
        return copy.deepcopy(item)

    def add(self, **fields) -> Dict[str, Any]:
        """Seed a booking directly, bypassing the service."""
        item = convert_floats_for_dynamodb({
            "booking_id": new_id(),
            "status": "pending",
            "payment_status": "paid",
            "tracking": [],
            "created_at": now_iso(),
            "updated_at": now_iso(),
            **fields,
        })
        self.items[item["booking_id"]] = item
        return copy.deepcopy(item)

    def get_booking(self, booking_id: str) -> Optional[Dict[str, Any]]:
        item = self.items.get(booking_id)
        return copy.deepcopy(item) if item else None

    def update_booking(self, booking_id, fields=None, push_tracking=None) -> bool:
        item = self.items.get(booking_id)
        if item is None:
            return False
        item.update(fields or {})
        item.setdefault("updated_at", now_iso())
        if push_tracking:
            item.setdefault("tracking", []).extend(copy.deepcopy(push_tracking))
        return True

    def update_status(self, booking_id: str, new_status: str) -> bool:
        return self.update_booking(booking_id, fields={"status": new_status, "updated_at": now_iso()})

    def delete_booking(self, booking_id: str) -> bool:
        return self.items.pop(booking_id, None) is not None

    def list_bookings_for_email(self, email: str) -> List[Dict[str, Any]]:
        items = [copy.deepcopy(b) for b in self.items.values() if b.get("email") == email]
        items.sort(key=lambda b: b["created_at"], reverse=True)
        return items

    def list_bookings_page(self, email: str, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        return self.list_bookings_for_email(email)[skip:skip + limit]

    def count_bookings(self, email: str, status: Optional[str] = None) -> int:
        return len([
            b for b in self.items.values()
            if b.get("email") == email and (status is None or b.get("status") == status)
        ])


class InMemoryProductDB:
    """Same interface as db.product.ProductDB, backed by a dict."""

    def __init__(self):
        self.items: Dict[str, Dict[str, Any]] = {}

    def create_product(self, name: str, **attributes) -> Dict[str, Any]:
        item = convert_floats_for_dynamodb({
            **attributes,
            "product_id": new_id(),
            "name": name,
            "created_at": now_iso(),
        })
        self.items[item["product_id"]] = item
        return copy.deepcopy(item)

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        item = self.items.get(product_id)
        return copy.deepcopy(item) if item else None

    def decrement_inventory(self, product_id: str, quantity: Any) -> bool:
        item = self.items.get(product_id)
        if item is None:
            return False
        if "inventory" not in item:
            item["inventory"] = {"available": -to_decimal(quantity)}
            return True
        inventory = item["inventory"]
        inventory["available"] = to_decimal(inventory.get("available", 0)) - to_decimal(quantity)
        return True

    def list_products(self, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        items = sorted(self.items.values(), key=lambda p: p["created_at"], reverse=True)
        return [copy.deepcopy(p) for p in items[skip:skip + limit]]

    def count_products(self) -> int:
        return len(self.items)


class InMemoryUserDB:
    """Same interface as db.user.UserDB, backed by a dict."""

    def __init__(self):
        self.items: Dict[str, Dict[str, Any]] = {}

    def get_user(self, email: str) -> Optional[Dict[str, Any]]:
        item = self.items.get(email)
        return copy.deepcopy(item) if item else None

    def create_user(self, email: str, **profile) -> Dict[str, Any]:
        timestamp = now_iso()
        item = {**profile, "email": email, "created_at": timestamp, "updated_at": timestamp}
        self.items[email] = item
        return copy.deepcopy(item)

    def update_user(self, email: str, updates: Dict[str, Any]) -> bool:
        item = self.items.get(email)
        if item is None:
            return False
        item.update({k: v for k, v in updates.items() if k not in ("email", "created_at")})
        item["updated_at"] = now_iso()
        return True


@pytest.fixture
def booking_db():
    return InMemoryBookingDB()


@pytest.fixture
def product_db():
    return InMemoryProductDB()


@pytest.fixture
def user_db():
    return InMemoryUserDB()


@pytest.fixture
def gateway():
    gateway = Mock()
    gateway.retrieve_intent.return_value = {"id": "pi_123", "status": "succeeded"}
    gateway.create_intent.return_value = {"id": "pi_123", "client_secret": "pi_123_secret_abc"}
    return gateway


@pytest.fixture
def product(product_db):
    return product_db.create_product(
        name="Denim Jacket",
        price=49.5,
        inventory={"available": 10},
    )


@pytest.fixture
def booking_service(booking_db, product_db, gateway):
    return BookingService(
        booking_db=booking_db,
        product_db=product_db,
        gateway=gateway,
        enforce_transitions=False,
    )


@pytest.fixture
def product_service(product_db):
    return ProductService(db=product_db)


@pytest.fixture
def user_service(user_db):
    return UserService(db=user_db)


@pytest.fixture
def payment_service(gateway):
    return PaymentService(gateway=gateway)


@pytest.fixture
def booking_request(product):
    def _make(**overrides):
        request = {
            "productId": product["product_id"],
            "productName": "Denim Jacket",
            "pricePerPiece": 49.5,
            "quantity": 2,
            "totalPrice": 99.0,
            "email": "a@x.com",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "contactNumber": "+8801700000000",
            "deliveryAddress": "12 Mirpur Road, Dhaka",
            "paymentMethod": "Card",
        }
        request.update(overrides)
        return request
    return _make
