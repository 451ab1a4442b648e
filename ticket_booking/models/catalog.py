"""
Catalog: the root aggregate of categories, shows and the booking ledger.

Key design decisions:
- Removing a show (directly or with its category) records a tombstone, so
  every booking record can still be resolved to a title and schedule
- `book` is atomic: the seat is marked and the record appended together, or
  neither happens
- Duplicate booking ids are rejected unless the catalog is built with
  `reject_duplicate_ids=False`
"""

from typing import Union

from ticket_booking.core.exceptions import (
    AlreadyCancelled,
    DuplicateId,
    NotFound,
    OutOfRange,
)
from ticket_booking.models.booking import BookingLedger, BookingRecord, BookingStatus
from ticket_booking.models.category import Category
from ticket_booking.models.show import RemovedShow, Show


class Catalog:
    def __init__(self, reject_duplicate_ids: bool = True):
        self._categories: list[Category] = []
        self._ledger = BookingLedger()
        self._removed_shows: dict[str, RemovedShow] = {}
        self._reject_duplicate_ids = reject_duplicate_ids

    # ---- categories ----

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._categories):
            raise OutOfRange(
                f"Category index {index} is out of range ({len(self._categories)} categories)"
            )

    def add_category(self, name: str) -> Category:
        category = Category(name, on_show_removed=self._retire_show)
        self._categories.append(category)
        return category

    def get_category(self, index: int) -> Category:
        self._check_index(index)
        return self._categories[index]

    def remove_category(self, index: int) -> Category:
        self._check_index(index)
        category = self._categories.pop(index)
        for show in category.list_shows():
            self._retire_show(show)
        return category

    def rename_category(self, index: int, name: str) -> Category:
        category = self.get_category(index)
        category.set_name(name)
        return category

    def list_categories(self) -> list[Category]:
        return list(self._categories)

    # ---- shows ----

    def _retire_show(self, show: Show) -> None:
        self._removed_shows[show.id] = show.tombstone()

    def find_show(self, show_id: str) -> Show:
        """Live show by id. Raises NotFound for removed or unknown ids."""
        for category in self._categories:
            show = category.find_show(show_id)
            if show is not None:
                return show
        if show_id in self._removed_shows:
            raise NotFound(f"Show {show_id} has been removed")
        raise NotFound(f"Show {show_id} not found")

    def resolve_show(self, show_id: str) -> Union[Show, RemovedShow]:
        """Live show, or its tombstone if it was removed."""
        if show_id in self._removed_shows:
            return self._removed_shows[show_id]
        return self.find_show(show_id)

    # ---- bookings ----

    def book(self, show_id: str, row: int, col: int, booking_id: str) -> BookingRecord:
        show = self.find_show(show_id)
        if self._reject_duplicate_ids and booking_id in self._ledger:
            raise DuplicateId(f"Booking id {booking_id} is already in use")

        show.book_seat(row, col)
        record = BookingRecord(id=booking_id, show_id=show.id, row=row, col=col)
        self._ledger.append(record)
        return record

    def get_booking(self, booking_id: str) -> BookingRecord:
        record = self._ledger.find(booking_id)
        if record is None:
            raise NotFound(f"Booking {booking_id} not found")
        return record

    def cancel_booking(self, booking_id: str) -> BookingRecord:
        record = self.get_booking(booking_id)
        if record.status == BookingStatus.CANCELLED:
            raise AlreadyCancelled(f"Booking {booking_id} is already cancelled")

        if record.show_id not in self._removed_shows:
            self.find_show(record.show_id).release_seat(record.row, record.col)

        cancelled = record.cancelled()
        self._ledger.replace(cancelled)
        return cancelled

    def list_bookings(self) -> list[BookingRecord]:
        return list(self._ledger)

    @property
    def ledger(self) -> BookingLedger:
        return self._ledger
