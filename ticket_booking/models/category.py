"""
Category model: a named, ordered list of shows (Movies, Concerts, Buses).

Indices are 0-based positions in the current list. Removing a show shifts
every later show down by one.
"""

from typing import Callable, Optional

from ticket_booking.core.exceptions import OutOfRange
from ticket_booking.models.show import Show


class Category:
    def __init__(self, name: str, on_show_removed: Optional[Callable[[Show], None]] = None):
        self._name = name
        self._shows: list[Show] = []
        self._on_show_removed = on_show_removed

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    @property
    def count(self) -> int:
        return len(self._shows)

    def __len__(self) -> int:
        return len(self._shows)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._shows):
            raise OutOfRange(
                f"Show index {index} is out of range for category '{self._name}' "
                f"({len(self._shows)} shows)"
            )

    def add_show(self, title: str, schedule: str, rows: int, cols: int, price: float) -> Show:
        show = Show(title, schedule, rows, cols, price)
        self._shows.append(show)
        return show

    def get_show(self, index: int) -> Show:
        self._check_index(index)
        return self._shows[index]

    def remove_show(self, index: int) -> Show:
        self._check_index(index)
        show = self._shows.pop(index)
        if self._on_show_removed is not None:
            self._on_show_removed(show)
        return show

    def edit_show(self, index: int, new_title: str, new_schedule: str) -> Show:
        show = self.get_show(index)
        show.set_title(new_title)
        show.set_schedule(new_schedule)
        return show

    def list_shows(self) -> list[Show]:
        # Schedules are opaque text, so every show is listed.
        return list(self._shows)

    def find_show(self, show_id: str) -> Optional[Show]:
        for show in self._shows:
            if show.id == show_id:
                return show
        return None

    def __repr__(self) -> str:
        return f"<Category(name={self._name}, shows={len(self._shows)})>"
