"""
Booking service: seat booking, cancellation and the ledger view.

There is no retry anywhere. A seat that is already taken is reported to the
caller, who picks another one. Payment must be confirmed before book_seat is
called; nothing here knows about money.
"""

from ticket_booking.core.exceptions import AlreadyBooked, DuplicateId, NotFound, OutOfRange
from ticket_booking.core.logging import get_logger
from ticket_booking.core.metrics import booking_cancellations, booking_latency, record_booking_attempt
from ticket_booking.models.booking import BookingRecord
from ticket_booking.models.catalog import Catalog
from ticket_booking.schemas.booking import BookingCreate, BookingView

logger = get_logger(__name__)

_FAILURE_STATUS = {
    AlreadyBooked: "already_booked",
    OutOfRange: "out_of_range",
    NotFound: "not_found",
    DuplicateId: "duplicate_id",
}


def to_view(catalog: Catalog, record: BookingRecord) -> BookingView:
    """Ledger entry joined with its show (live or removed)."""
    show = catalog.resolve_show(record.show_id)
    return BookingView(
        id=record.id,
        show_id=record.show_id,
        show_title=show.title,
        schedule=show.schedule,
        price=show.price,
        row=record.row,
        col=record.col,
        status=record.status.value,
        created_at=record.created_at,
        show_removed=getattr(show, "removed", False),
    )


def book_seat(catalog: Catalog, booking_data: BookingCreate, booking_id: str) -> BookingView:
    """
    Book one seat and append the record to the ledger.
    Raises OutOfRange, AlreadyBooked, NotFound or DuplicateId; on any of them
    neither the seat nor the ledger changes.
    """
    try:
        with booking_latency.time():
            record = catalog.book(booking_data.show_id, booking_data.row, booking_data.col, booking_id)
    except (AlreadyBooked, OutOfRange, NotFound, DuplicateId) as exc:
        status = _FAILURE_STATUS[type(exc)]
        record_booking_attempt(status)
        logger.warning(
            f"booking_failed_{status}",
            show_id=booking_data.show_id,
            row=booking_data.row,
            col=booking_data.col,
            booking_id=booking_id,
        )
        raise

    record_booking_attempt("success")
    logger.info(
        "booking_created",
        booking_id=record.id,
        show_id=record.show_id,
        row=record.row,
        col=record.col,
    )
    return to_view(catalog, record)


def cancel_booking(catalog: Catalog, booking_id: str) -> BookingView:
    """
    Cancel a booking and release its seat back to the show.
    The record stays in the ledger with status "cancelled".
    """
    record = catalog.cancel_booking(booking_id)
    booking_cancellations.inc()

    logger.info(
        "booking_cancelled",
        booking_id=record.id,
        show_id=record.show_id,
        row=record.row,
        col=record.col,
    )
    return to_view(catalog, record)


def list_bookings(catalog: Catalog) -> list[BookingView]:
    """All bookings in the order they were made."""
    return [to_view(catalog, record) for record in catalog.list_bookings()]
