"""
Booking records and the ledger that holds them.

Key design decisions:
- Records refer to shows by id, never by object, so deleting a show cannot
  leave a dangling reference
- Records are frozen; cancellation swaps in a copy with status "cancelled"
  at the same ledger position instead of deleting anything
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, Optional


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BookingRecord:
    id: str
    show_id: str
    row: int
    col: int
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def cancelled(self) -> "BookingRecord":
        return dataclasses.replace(self, status=BookingStatus.CANCELLED)


class BookingLedger:
    """Booking records in the order they were made."""

    def __init__(self):
        self._records: list[BookingRecord] = []

    def append(self, record: BookingRecord) -> None:
        self._records.append(record)

    def find(self, booking_id: str) -> Optional[BookingRecord]:
        for record in self._records:
            if record.id == booking_id:
                return record
        return None

    def replace(self, record: BookingRecord) -> None:
        for position, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[position] = record
                return
        raise KeyError(record.id)

    def __contains__(self, booking_id: str) -> bool:
        return self.find(booking_id) is not None

    def __iter__(self) -> Iterator[BookingRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
