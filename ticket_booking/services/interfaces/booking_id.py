"""
Booking identifier generator interface.
"""

from abc import ABC, abstractmethod


class BookingIdGenerator(ABC):
    """
    Interface for booking id generators. Implementations must never hand out
    the same id twice.

    Implementations:
    - RandomBookingIdGenerator: "BK" + five random digits
    - SequentialBookingIdGenerator: "BK00001", "BK00002", ...
    """

    @abstractmethod
    def next_id(self) -> str:
        pass
