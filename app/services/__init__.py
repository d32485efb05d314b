"""Services package."""
from . import book_service, exceptions, lending

__all__ = [
    "book_service",
    "exceptions",
    "lending",
]
