"""Book service helpers."""
from typing import List, Optional

from app.db.repository import BookRepository
from app.models.book_model import Book, BookCreate, BookFields, BookUpdate, LendingStatus, ReadingStatus
from app.services import lending
from app.services.exceptions import BookAlreadyLentError, BookNotFoundError, InvalidRatingError
from app.utils.logger import get_logger
from app.utils.rating_rules import is_valid_simple_rating, validate_detailed_rating

logger = get_logger(__name__)

EDITABLE_FIELDS = (
    "title",
    "author",
    "description",
    "simple_rating",
    "detailed_rating",
    "reading_status",
    "isbn",
    "year",
)


def validate_ratings(payload: BookFields) -> None:
    """Reject a payload whose simple or detailed rating is off the grid."""
    if not is_valid_simple_rating(payload.simple_rating):
        logger.warning("Rejected simple rating %r", payload.simple_rating)
        raise InvalidRatingError()
    if payload.detailed_rating is not None:
        error = validate_detailed_rating(payload.detailed_rating)
        if error:
            logger.warning("Rejected detailed rating: %s", error)
            raise InvalidRatingError(error)


def apply_update(existing: Book, changes: BookUpdate) -> Book:
    """Copy of ``existing`` with every editable field taken from ``changes``.

    Identity and lending state are carried over untouched.
    """
    return existing.model_copy(update={name: getattr(changes, name) for name in EDITABLE_FIELDS})


def list_books(
    repository: BookRepository,
    author: Optional[str] = None,
    lending_status: Optional[LendingStatus] = None,
    reading_status: Optional[ReadingStatus] = None,
) -> List[Book]:
    """List books, AND-combining whichever filters are given."""
    filters = []
    if author is not None:
        needle = author.casefold()
        filters.append(lambda book: needle in book.author.casefold())
    if lending_status is not None:
        filters.append(lambda book: book.lending_status == lending_status)
    if reading_status is not None:
        filters.append(lambda book: book.reading_status == reading_status)
    return repository.list(*filters)


def get_book(repository: BookRepository, book_id: int) -> Book:
    book = repository.get(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return book


def create_book(repository: BookRepository, payload: BookCreate) -> Book:
    """Validate and store a new book; it always starts on the shelf."""
    validate_ratings(payload)
    book = repository.insert(
        **{name: getattr(payload, name) for name in EDITABLE_FIELDS},
        lending_status=LendingStatus.ON_SHELF,
        lent_to=None,
    )
    logger.info("Created book %s (%s)", book.id, book.title)
    return book


def update_book(repository: BookRepository, book_id: int, payload: BookUpdate) -> Book:
    validate_ratings(payload)
    with repository.transaction():
        updated = apply_update(get_book(repository, book_id), payload)
        repository.update(updated)
    logger.info("Updated book %s", book_id)
    return updated


def delete_book(repository: BookRepository, book_id: int) -> None:
    if not repository.delete(book_id):
        raise BookNotFoundError(book_id)
    logger.info("Deleted book %s", book_id)


def lend_book(repository: BookRepository, book_id: int, borrower: str) -> Book:
    with repository.transaction():
        book = get_book(repository, book_id)
        try:
            lent = lending.lend(book, borrower)
        except BookAlreadyLentError:
            logger.warning("Book %s is already lent to %s", book_id, book.lent_to)
            raise
        repository.update(lent)
    logger.info("Lent book %s to %s", book_id, borrower)
    return lent


def return_book(repository: BookRepository, book_id: int) -> Book:
    with repository.transaction():
        returned = lending.return_book(get_book(repository, book_id))
        repository.update(returned)
    logger.info("Returned book %s", book_id)
    return returned
