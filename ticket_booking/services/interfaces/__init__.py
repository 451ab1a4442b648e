"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .authenticator import Authenticator
from .booking_id import BookingIdGenerator
from .payment import PaymentProcessor

__all__ = ['Authenticator', 'BookingIdGenerator', 'PaymentProcessor']
