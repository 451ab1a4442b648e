"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "FAST Booking System"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "WARNING"

    # Admin login
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"

    # Payment simulation
    CURRENCY: str = "PKR"
    PAYMENT_STRATEGY: str = "simulated"  # simulated, declining
    PAYMENT_STEPS: int = 3
    PAYMENT_STEP_DELAY: float = 0.5  # seconds per progress dot

    # Bookings
    BOOKING_ID_STRATEGY: str = "random"  # random, sequential
    REJECT_DUPLICATE_BOOKING_IDS: bool = True
    SEED_CATALOG: bool = True

    # Contact screen
    CONTACT_ADDRESS: str = "FAST University Islamabad"
    CONTACT_PHONE: str = "(051) 111 128 128"
    CONTACT_EMAIL: str = "info@fastbookingsystem.com"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()

