"""
FastAPI Main Application

Entry point for running the Garment Grid API server.

Usage:
    python -m api.main

    or

    uvicorn api.main:app --host 0.0.0.0 --port 3000
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from api import bookings, payments, products, users
from config import config
from features.booking import BookingService
from features.errors import GarmentGridError
from features.payment import PaymentService
from features.product import ProductService
from features.user import UserService
from utils.logging_config import generate_request_id, setup_logging
from utils.response import standard_response

logger = logging.getLogger(__name__)


def create_app(
    booking_service: Optional[BookingService] = None,
    product_service: Optional[ProductService] = None,
    user_service: Optional[UserService] = None,
    payment_service: Optional[PaymentService] = None,
) -> FastAPI:
    """
    Build the API. Services default to instances wired to the configured
    DynamoDB tables and Stripe account; tests pass their own.
    """
    app = FastAPI(
        title="Garment Grid API",
        description="Users, catalog, bookings and payments",
        version="1.0.0"
    )

    app.state.booking_service = booking_service or BookingService()
    app.state.product_service = product_service or ProductService()
    app.state.user_service = user_service or UserService()
    app.state.payment_service = payment_service or PaymentService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Attach a request id and log the request with timing."""
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        request.state.request_id = request_id

        response = await call_next(request)

        if config.ENABLE_REQUEST_LOGGING:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.info(
                f"{request.method} {request.url.path} {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(GarmentGridError)
    async def service_error_handler(request: Request, exc: GarmentGridError):
        return JSONResponse(
            status_code=exc.status_code,
            content=standard_response(False, error=exc.code, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(
            status_code=400,
            content=standard_response(False, error="validation_error", message=message),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=standard_response(False, error="internal_error", message="Internal server error"),
        )

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Garment-Grid Server is Running..."

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "ok"}

    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(bookings.router)
    app.include_router(payments.router)

    return app


setup_logging(
    app_name="garment-grid",
    log_level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT,
    log_file=config.LOG_FILE,
)

app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
