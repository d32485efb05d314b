"""Lend/return transitions for a book.

A book cycles between ON_SHELF and LENT_OUT for as long as it exists.
Lending a book that is already out is a conflict; returning is always
allowed, including for a book that is already on the shelf.
"""
from app.models.book_model import Book, LendingStatus
from app.services.exceptions import BookAlreadyLentError, InvalidBorrowerError


def lend(book: Book, borrower: str) -> Book:
    if not borrower or not borrower.strip():
        raise InvalidBorrowerError()
    if book.lending_status == LendingStatus.LENT_OUT:
        raise BookAlreadyLentError(book.id, book.lent_to)
    return book.model_copy(update={"lending_status": LendingStatus.LENT_OUT, "lent_to": borrower})


def return_book(book: Book) -> Book:
    return book.model_copy(update={"lending_status": LendingStatus.ON_SHELF, "lent_to": None})
