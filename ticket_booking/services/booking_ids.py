"""
Booking id generators.
"""

import itertools
import random
from typing import Optional

from ticket_booking.services.interfaces.booking_id import BookingIdGenerator

ID_PREFIX = "BK"
RANDOM_ID_MIN = 10000
RANDOM_ID_MAX = 99999


class RandomBookingIdGenerator(BookingIdGenerator):
    """
    Five-digit random ids ("BK10000" to "BK99999").
    Remembers every id it issued and draws again on a repeat.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._issued: set[str] = set()

    def next_id(self) -> str:
        if len(self._issued) > RANDOM_ID_MAX - RANDOM_ID_MIN:
            raise RuntimeError("All random booking ids have been issued")
        while True:
            booking_id = f"{ID_PREFIX}{self._rng.randint(RANDOM_ID_MIN, RANDOM_ID_MAX)}"
            if booking_id not in self._issued:
                self._issued.add(booking_id)
                return booking_id


class SequentialBookingIdGenerator(BookingIdGenerator):
    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{ID_PREFIX}{next(self._counter):05d}"
