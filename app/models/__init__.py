"""Pydantic models for API requests and responses."""
from .book_model import (
    Book,
    BookCreate,
    BookUpdate,
    DetailedRating,
    LendingStatus,
    LendRequest,
    ReadingStatus,
)
