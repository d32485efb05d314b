"""In-memory book store.

Records live for the lifetime of the process. A single re-entrant lock guards
the collection; callers that read and then write (update, lend, return) hold
it across both steps via ``transaction()``.
"""
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from app.models.book_model import Book

BookFilter = Callable[[Book], bool]


class BookRepository:
    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: Dict[int, Book] = {}
        self._last_id = 0
        self._lock = threading.RLock()
        for book in books or ():
            self._books[book.id] = book
            self._last_id = max(self._last_id, book.id)

    def __len__(self) -> int:
        return len(self._books)

    @contextmanager
    def transaction(self) -> Iterator["BookRepository"]:
        with self._lock:
            yield self

    def _next_id(self) -> int:
        # Ids of deleted books are never handed out again.
        return max(max(self._books, default=0), self._last_id) + 1

    def get(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def list(self, *filters: BookFilter) -> List[Book]:
        """Books in insertion order, keeping only those matching every filter."""
        with self._lock:
            books = list(self._books.values())
        return [book for book in books if all(match(book) for match in filters)]

    def insert(self, **fields) -> Book:
        """Assign the next id, store and return the new book."""
        with self._lock:
            book = Book(id=self._next_id(), **fields)
            self._books[book.id] = book
            self._last_id = book.id
            return book

    def update(self, book: Book) -> Optional[Book]:
        """Replace the stored book with the same id; None if it does not exist."""
        with self._lock:
            if book.id not in self._books:
                return None
            self._books[book.id] = book
            return book

    def delete(self, book_id: int) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None


_repository: Optional[BookRepository] = None


def get_repository() -> BookRepository:
    global _repository
    if _repository is None:
        _repository = BookRepository()
    return _repository


def reset_repository(books: Optional[Iterable[Book]] = None) -> BookRepository:
    """Replace the process-wide store, optionally pre-filled."""
    global _repository
    _repository = BookRepository(books)
    return _repository
