"""Rating validation and star calculation helpers.

Simple ratings are strings: ``"DNF"`` or a number from 1 to 5 in quarter
steps. Detailed ratings score five categories from 1 to 10 in quarter steps
and collapse into a 1-5 star value.
"""
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

DNF = "DNF"

# Plain ASCII decimal, optional exponent. No underscores or padding.
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

# (attribute, public name) in validation order.
CATEGORIES = (
    ("character", "character"),
    ("plot", "plot"),
    ("writing", "writing"),
    ("world_building", "worldBuilding"),
    ("enjoyment", "enjoyment"),
)


def _on_quarter_grid(value: float, low: float, high: float) -> bool:
    if not low <= value <= high:
        return False
    return ((value - 1) * 4).is_integer()


def is_valid_simple_rating(rating: Optional[str]) -> bool:
    """Return True for None, ``DNF`` (any case) or 1, 1.25, ... 5."""
    if rating is None:
        return True
    if rating.upper() == DNF:
        return True
    if not DECIMAL_PATTERN.fullmatch(rating):
        return False
    return _on_quarter_grid(float(rating), 1, 5)


def is_valid_category_score(score: Optional[float]) -> bool:
    """Return True for None or 1, 1.25, ... 10."""
    if score is None:
        return True
    return _on_quarter_grid(float(score), 1, 10)


def validate_detailed_rating(detailed_rating) -> Optional[str]:
    """Return an error message for the first invalid category, or None."""
    for attr, name in CATEGORIES:
        if not is_valid_category_score(getattr(detailed_rating, attr)):
            return f"{name} must be 1–10 in .25 steps"
    return None


def compute_stars(detailed_rating) -> Optional[float]:
    """Average the populated categories and rescale to 1-5 stars.

    The mean (1-10) is halved, then rounded half-up to the nearest quarter
    star. Returns None when no category is populated.
    """
    if detailed_rating is None:
        return None
    scores = [
        getattr(detailed_rating, attr)
        for attr, _ in CATEGORIES
        if getattr(detailed_rating, attr) is not None
    ]
    if not scores:
        return None
    mean = Decimal(str(sum(scores))) / len(scores)
    quarters = (mean / 10 * 5 * 4).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(float(quarters / 4), 1.0)
