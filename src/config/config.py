"""
Garment Grid Configuration

Centralized configuration for the API, storage and payment layers.
All settings can be overridden via environment variables.
"""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env files before the settings are read
project_root = Path(__file__).resolve().parent.parent.parent
env_file = project_root / ".env"
env_local_file = project_root / ".env.local"

# Load .env first, then .env.local (which can override)
if env_file.exists():
    load_dotenv(env_file, override=False)
if env_local_file.exists():
    load_dotenv(env_local_file, override=True)


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class GarmentGridConfig:
    """
    Central configuration for the Garment Grid service.

    Example:
        >>> from config import config
        >>> print(config.BOOKINGS_TABLE)
        bookings

        # Override via environment:
        >>> os.environ["BOOKINGS_TABLE"] = "bookings-staging"
        >>> config = GarmentGridConfig()  # Reload
    """

    # ========================================================================
    # Storage Settings
    # ========================================================================

    AWS_REGION: str = os.getenv("AWS_REGION", "eu-west-2")
    """AWS region for the DynamoDB tables"""

    DYNAMODB_ENDPOINT_URL: Optional[str] = os.getenv("DYNAMODB_ENDPOINT_URL")
    """Optional: custom endpoint (e.g. 'http://localhost:8000' for DynamoDB Local)"""

    BOOKINGS_TABLE: str = os.getenv("BOOKINGS_TABLE", "bookings")
    PRODUCTS_TABLE: str = os.getenv("PRODUCTS_TABLE", "products")
    USERS_TABLE: str = os.getenv("USERS_TABLE", "users")

    # ========================================================================
    # Payment Settings
    # ========================================================================

    STRIPE_SECRET_KEY: Optional[str] = os.getenv("STRIPE_SECRET_KEY")
    """Stripe secret key (required to create or retrieve payment intents)"""

    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "usd")

    # ========================================================================
    # Booking Lifecycle
    # ========================================================================

    ENFORCE_STATUS_TRANSITIONS: bool = os.getenv(
        "ENFORCE_STATUS_TRANSITIONS", "false").lower() == "true"
    """Reject status updates that are not in the transition table (off: any status may follow any other)"""

    # ========================================================================
    # Logging Settings
    # ========================================================================

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""

    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")
    """Log format: 'json' (structured) or 'pretty' (readable)"""

    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
    """Optional: Write logs to file (e.g., '/var/log/garment-grid/api.log')"""

    ENABLE_REQUEST_LOGGING: bool = os.getenv(
        "ENABLE_REQUEST_LOGGING", "true").lower() == "true"
    """Log all HTTP requests/responses with timing"""

    # ========================================================================
    # API Settings
    # ========================================================================

    API_PORT: int = int(os.getenv("PORT", "3000"))
    API_HOST: str = os.getenv("HOST", "0.0.0.0")

    CORS_ORIGINS: List[str] = _split_csv(os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,https://garment-grid-two.vercel.app"))


config = GarmentGridConfig()
