"""
Domain errors raised by the booking core and its services.

Every error is recoverable: the console catches BookingSystemError, prints
`detail` and returns to the current menu.
"""


class BookingSystemError(Exception):
    """Base class for all booking system errors."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class OutOfRange(BookingSystemError):
    """Index or seat coordinate outside the valid bounds."""


class AlreadyBooked(BookingSystemError):
    """Seat is already taken."""


class NotFound(BookingSystemError):
    """Lookup by id failed (show or booking)."""


class DuplicateId(BookingSystemError):
    """A booking with the same identifier is already in the ledger."""


class AlreadyCancelled(BookingSystemError):
    pass


class AuthenticationFailed(BookingSystemError):
    pass


class PaymentDeclined(BookingSystemError):
    pass
