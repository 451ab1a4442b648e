"""
Show model: a bookable event instance (movie screening, concert, bus trip).

Key design decisions:
- `id` is assigned from a process-wide counter and never reused, so booking
  records can refer to a show after it has been removed
- `schedule` is opaque text ("2025-04-14 10:00", "TBA", "07:00-11:00"); it is
  never parsed and never used for filtering
- price and seat dimensions are fixed at creation; title and schedule are editable
"""

import itertools
from dataclasses import dataclass

from ticket_booking.models.seat_grid import SeatGrid

_show_ids = itertools.count(1)


def _next_show_id() -> str:
    return f"SHOW-{next(_show_ids):06d}"


class Show:
    def __init__(self, title: str, schedule: str, rows: int, cols: int, price: float):
        self._grid = SeatGrid(rows, cols)
        self._id = _next_show_id()
        self._title = title
        self._schedule = schedule
        self._price = price

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def schedule(self) -> str:
        return self._schedule

    @property
    def price(self) -> float:
        return self._price

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def grid(self) -> SeatGrid:
        return self._grid

    def set_title(self, title: str) -> None:
        self._title = title

    def set_schedule(self, schedule: str) -> None:
        self._schedule = schedule

    def available_seats(self) -> list[tuple[int, int]]:
        return self._grid.available()

    def seats_by_row(self) -> dict[int, list[int]]:
        """Free seat numbers grouped by row, for display."""
        grouped = {row: [] for row in range(1, self.rows + 1)}
        for row, col in self._grid.available():
            grouped[row].append(col)
        return grouped

    def is_free(self, row: int, col: int) -> bool:
        return self._grid.is_free(row, col)

    def book_seat(self, row: int, col: int) -> bool:
        return self._grid.book(row, col)

    def release_seat(self, row: int, col: int) -> bool:
        return self._grid.release(row, col)

    def tombstone(self) -> "RemovedShow":
        return RemovedShow(id=self._id, title=self._title, schedule=self._schedule, price=self._price)

    def __repr__(self) -> str:
        return f"<Show(id={self._id}, title={self._title}, free={self._grid.available_count}/{self._grid.capacity})>"


@dataclass(frozen=True)
class RemovedShow:
    """What remains of a show after it was deleted."""

    id: str
    title: str
    schedule: str
    price: float
    removed: bool = True
