"""
Seat grid for a single show.

Key design decisions:
- Dimensions are fixed at creation; every (row, col) in [1, rows] x [1, cols]
  has exactly one Seat
- Coordinates are 1-based everywhere, matching what users type
- `release` exists only for booking cancellation
"""

from dataclasses import dataclass

from ticket_booking.core.exceptions import AlreadyBooked, OutOfRange


@dataclass
class Seat:
    row: int
    col: int
    booked: bool = False


class SeatGrid:
    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Seat grid needs at least one row and column, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._seats = [
            [Seat(row=r, col=c) for c in range(1, cols + 1)]
            for r in range(1, rows + 1)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def capacity(self) -> int:
        return self._rows * self._cols

    def _seat(self, row: int, col: int) -> Seat:
        if not (1 <= row <= self._rows and 1 <= col <= self._cols):
            raise OutOfRange(
                f"Seat [{row},{col}] is outside the {self._rows}x{self._cols} grid"
            )
        return self._seats[row - 1][col - 1]

    def is_free(self, row: int, col: int) -> bool:
        return not self._seat(row, col).booked

    def book(self, row: int, col: int) -> bool:
        """Mark a free seat as booked. Raises AlreadyBooked or OutOfRange."""
        seat = self._seat(row, col)
        if seat.booked:
            raise AlreadyBooked(f"Seat [{row},{col}] is already booked")
        seat.booked = True
        return True

    def release(self, row: int, col: int) -> bool:
        """Free a booked seat. Returns False if it was not booked."""
        seat = self._seat(row, col)
        if not seat.booked:
            return False
        seat.booked = False
        return True

    def available(self) -> list[tuple[int, int]]:
        """Free seats in row-major order."""
        return [
            (seat.row, seat.col)
            for seat_row in self._seats
            for seat in seat_row
            if not seat.booked
        ]

    @property
    def available_count(self) -> int:
        return sum(1 for seat_row in self._seats for seat in seat_row if not seat.booked)

    def __repr__(self) -> str:
        return f"<SeatGrid({self._rows}x{self._cols}, free={self.available_count})>"
