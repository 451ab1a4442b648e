"""
Pydantic schemas for booking requests and ledger views.
"""

from datetime import datetime
from pydantic import BaseModel


class BookingCreate(BaseModel):
    show_id: str
    row: int
    col: int


class BookingView(BaseModel):
    id: str
    show_id: str
    show_title: str
    schedule: str
    price: float
    row: int
    col: int
    status: str
    created_at: datetime
    show_removed: bool = False
