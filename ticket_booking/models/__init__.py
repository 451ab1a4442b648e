from ticket_booking.models.seat_grid import Seat, SeatGrid
from ticket_booking.models.show import Show, RemovedShow
from ticket_booking.models.category import Category
from ticket_booking.models.booking import BookingLedger, BookingRecord, BookingStatus
from ticket_booking.models.catalog import Catalog

__all__ = [
    "Seat", "SeatGrid",
    "Show", "RemovedShow",
    "Category",
    "BookingLedger", "BookingRecord", "BookingStatus",
    "Catalog",
]
