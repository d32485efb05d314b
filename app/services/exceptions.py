"""Domain errors raised by the book services."""
from typing import Optional

INVALID_RATING_MESSAGE = "Invalid rating. Use DNF, or 1–5 in .25 steps (e.g. 4.5, 3.25)"


class BookServiceError(Exception):
    """Base class for recoverable book operation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookServiceError):
    def __init__(self, book_id: int):
        super().__init__(f"Book with ID {book_id} not found")
        self.book_id = book_id


class InvalidRatingError(BookServiceError):
    def __init__(self, message: str = INVALID_RATING_MESSAGE):
        super().__init__(message)


class BookAlreadyLentError(BookServiceError):
    def __init__(self, book_id: int, lent_to: Optional[str]):
        super().__init__(f"Book with ID {book_id} is already lent to {lent_to}")
        self.book_id = book_id
        self.lent_to = lent_to


class InvalidBorrowerError(BookServiceError):
    def __init__(self):
        super().__init__("A book can only be lent to a named borrower")
