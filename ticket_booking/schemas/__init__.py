from ticket_booking.schemas.auth import LoginRequest, PaymentDetails
from ticket_booking.schemas.show import CategoryCreate, ShowCreate, ShowUpdate, ShowSummary
from ticket_booking.schemas.booking import BookingCreate, BookingView

__all__ = [
    "LoginRequest", "PaymentDetails",
    "CategoryCreate", "ShowCreate", "ShowUpdate", "ShowSummary",
    "BookingCreate", "BookingView",
]
