from decimal import Decimal

from utils.response import json_safe, standard_response


def test_success_envelope():
    assert standard_response(True, data={"id": "b-1"}) == {
        "success": True,
        "data": {"id": "b-1"},
        "error": None,
    }


def test_error_envelope_with_message():
    response = standard_response(False, error="not_found", message="Booking not found")

    assert response["success"] is False
    assert response["data"] is None
    assert response["error"] == "not_found"
    assert response["message"] == "Booking not found"


def test_extra_keys_are_added_at_top_level():
    response = standard_response(True, message="Booking created successfully", bookingId="b-1")

    assert response["bookingId"] == "b-1"
    assert response["message"] == "Booking created successfully"


def test_decimals_are_made_json_safe():
    data = {"quantity": Decimal("2"), "price": Decimal("49.5"), "tracking": [{"n": Decimal("1")}]}

    assert json_safe(data) == {"quantity": 2, "price": 49.5, "tracking": [{"n": 1}]}
    assert isinstance(json_safe(Decimal("2")), int)
    assert standard_response(True, total=Decimal("35"))["total"] == 35
