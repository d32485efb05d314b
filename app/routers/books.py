"""Book endpoints.

Plain CRUD on ``/api/books`` plus two actions, ``/lend`` and ``/return``,
modelled as POSTs on the book they act on.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.db.repository import BookRepository, get_repository
from app.models.book_model import Book, BookCreate, BookUpdate, LendingStatus, LendRequest, ReadingStatus
from app.services import book_service

router = APIRouter()


@router.get("/reading-statuses", response_model=List[ReadingStatus])
async def get_reading_statuses():
    """Get all reading status values a book can have."""
    return list(ReadingStatus)


@router.get("", response_model=List[Book])
async def list_books(
    author: Optional[str] = Query(None, description="Case-insensitive substring of the author"),
    lending_status: Optional[LendingStatus] = Query(None, alias="status", description="ON_SHELF or LENT_OUT"),
    reading_status: Optional[ReadingStatus] = Query(None, alias="readingStatus"),
    repository: BookRepository = Depends(get_repository),
):
    """List books with optional filtering."""
    return book_service.list_books(
        repository,
        author=author,
        lending_status=lending_status,
        reading_status=reading_status,
    )


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: int, repository: BookRepository = Depends(get_repository)):
    """Get book details by ID."""
    return book_service.get_book(repository, book_id)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(payload: BookCreate, repository: BookRepository = Depends(get_repository)):
    """Add a book. The id is assigned here and the book starts ON_SHELF."""
    return book_service.create_book(repository, payload)


@router.put("/{book_id}", response_model=Book)
async def update_book(
    book_id: int,
    payload: BookUpdate,
    repository: BookRepository = Depends(get_repository),
):
    """Replace all editable fields of a book. Lending state is left alone."""
    return book_service.update_book(repository, book_id, payload)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: int, repository: BookRepository = Depends(get_repository)):
    book_service.delete_book(repository, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{book_id}/lend", response_model=Book)
async def lend_book(
    book_id: int,
    payload: LendRequest,
    repository: BookRepository = Depends(get_repository),
):
    """Lend a book out. 409 if it is already lent."""
    return book_service.lend_book(repository, book_id, payload.lent_to)


@router.post("/{book_id}/return", response_model=Book)
async def return_book(book_id: int, repository: BookRepository = Depends(get_repository)):
    """Put a book back on the shelf. Returning a book that is not lent is a no-op."""
    return book_service.return_book(repository, book_id)
