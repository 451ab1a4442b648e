"""
Pydantic schemas for category and show input validation and listing views.
"""

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ShowCreate(BaseModel):
    title: str
    schedule: str
    rows: int = Field(..., gt=0)
    cols: int = Field(..., gt=0)
    price: float


class ShowUpdate(BaseModel):
    title: str
    schedule: str


class ShowSummary(BaseModel):
    id: str
    title: str
    schedule: str
    price: float
    rows: int
    cols: int
    available_seats: int
