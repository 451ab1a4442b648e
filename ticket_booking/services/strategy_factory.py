"""
Service factory.
Picks the authenticator, payment processor and booking id generator from settings.
"""

from ticket_booking.core.config import get_settings
from ticket_booking.services.auth_service import SettingsAuthenticator
from ticket_booking.services.booking_ids import (
    RandomBookingIdGenerator,
    SequentialBookingIdGenerator,
)
from ticket_booking.services.interfaces import (
    Authenticator,
    BookingIdGenerator,
    PaymentProcessor,
)
from ticket_booking.services.payment_service import (
    DecliningPaymentProcessor,
    SimulatedPaymentProcessor,
)


def get_authenticator() -> Authenticator:
    return SettingsAuthenticator()


def get_payment_processor() -> PaymentProcessor:
    """
    Get configured payment processor.

    Can be overridden via PAYMENT_STRATEGY env var:
    - simulated (default): progress animation, always approves
    - declining: always declines
    """
    settings = get_settings()
    if settings.PAYMENT_STRATEGY == 'declining':
        return DecliningPaymentProcessor()
    return SimulatedPaymentProcessor(
        steps=settings.PAYMENT_STEPS,
        step_delay=settings.PAYMENT_STEP_DELAY,
    )


def get_id_generator() -> BookingIdGenerator:
    """Random ids by default; BOOKING_ID_STRATEGY=sequential for predictable ones."""
    settings = get_settings()
    if settings.BOOKING_ID_STRATEGY == 'sequential':
        return SequentialBookingIdGenerator()
    return RandomBookingIdGenerator()
