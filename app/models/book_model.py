"""Book models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from app.utils.rating_rules import compute_stars


class ReadingStatus(str, Enum):
    READ = "READ"
    WANT_TO_READ = "WANT_TO_READ"
    WANT_TO_READ_OWN = "WANT_TO_READ_OWN"  # owned, not read yet
    CURRENTLY_READING = "CURRENTLY_READING"


class LendingStatus(str, Enum):
    ON_SHELF = "ON_SHELF"
    LENT_OUT = "LENT_OUT"


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetailedRating(CamelModel):
    """Per-category scores, each 1-10 in .25 steps, plus a free-text comment."""

    character: Optional[float] = None
    plot: Optional[float] = None
    writing: Optional[float] = None
    world_building: Optional[float] = None
    enjoyment: Optional[float] = None
    comment: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BookFields(CamelModel):
    """Editable fields shared by the create and update payloads."""

    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    reading_status: ReadingStatus
    description: Optional[str] = None
    simple_rating: Optional[str] = Field(None, description="DNF, or 1-5 in .25 steps")
    detailed_rating: Optional[DetailedRating] = None
    isbn: Optional[str] = None
    year: Optional[int] = None


class BookCreate(BookFields):
    pass


class BookUpdate(BookFields):
    """Full replacement of the editable fields; omitted optionals are cleared."""


class LendRequest(CamelModel):
    lent_to: str = Field(..., min_length=1, description="Name of the borrower")


class Book(BookFields):
    id: int
    lending_status: LendingStatus = LendingStatus.ON_SHELF
    lent_to: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def check_lending_state(self) -> "Book":
        lent_out = self.lending_status == LendingStatus.LENT_OUT
        if lent_out != (self.lent_to is not None):
            raise ValueError("lentTo must be set exactly when the book is LENT_OUT")
        return self

    @computed_field(alias="calculatedStars")
    @property
    def calculated_stars(self) -> Optional[float]:
        return compute_stars(self.detailed_rating)
