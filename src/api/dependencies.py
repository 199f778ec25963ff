"""
FastAPI dependencies resolving the services stored on app.state by create_app().
"""

from fastapi import Request

from features.booking import BookingService
from features.payment import PaymentService
from features.product import ProductService
from features.user import UserService


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service
