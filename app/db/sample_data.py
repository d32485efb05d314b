"""Demo books for local development and tests."""
from typing import List

from app.models.book_model import Book, DetailedRating, LendingStatus, ReadingStatus


def sample_books() -> List[Book]:
    return [
        Book(
            id=1,
            title="The Hobbit",
            author="J.R.R. Tolkien",
            description="A fantasy classic about Bilbo Baggins and his unexpected journey.",
            simple_rating="5",
            detailed_rating=DetailedRating(
                character=5.0,
                plot=5.0,
                writing=5.0,
                world_building=5.0,
                enjoyment=5.0,
                comment="Timeless classic.",
            ),
            reading_status=ReadingStatus.READ,
            isbn="978-0547928227",
            year=1937,
        ),
        Book(
            id=2,
            title="Clean Code",
            author="Robert C. Martin",
            description="Practical guide to writing readable and maintainable code.",
            simple_rating="4.5",
            reading_status=ReadingStatus.READ,
            isbn="978-0132350884",
            year=2008,
            lending_status=LendingStatus.LENT_OUT,
            lent_to="Alice",
        ),
        Book(
            id=3,
            title="Dune",
            author="Frank Herbert",
            reading_status=ReadingStatus.WANT_TO_READ_OWN,
            isbn="978-0441172719",
            year=1965,
        ),
        Book(
            id=4,
            title="Project Hail Mary",
            author="Andy Weir",
            reading_status=ReadingStatus.CURRENTLY_READING,
            year=2021,
        ),
    ]
