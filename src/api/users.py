"""
Account endpoints, keyed by email.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_booking_service, get_user_service
from features.booking import BookingService
from features.user import UserService
from utils.response import standard_response

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def save_user(user: Dict[str, Any] = Body(...), service: UserService = Depends(get_user_service)):
    result = service.save_user(user)
    if result["created"]:
        return standard_response(True, message="User created successfully", insertedId=result["email"])
    return standard_response(True, message="User updated successfully")


@router.get("/{email}/stats")
def get_user_stats(email: str, service: BookingService = Depends(get_booking_service)):
    return standard_response(True, data=service.compute_user_stats(email))


@router.get("/{email}")
def get_user(email: str, service: UserService = Depends(get_user_service)):
    return standard_response(True, data=service.get_user(email))


@router.patch("/{email}")
def update_user(
    email: str,
    updates: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    service.update_user(email, updates)
    return standard_response(True, message="User updated successfully")
