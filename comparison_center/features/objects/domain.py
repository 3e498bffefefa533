"""Object and association domain entities, and the object list filter."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from comparison_center.core.filters import validate_order_by, validate_pagination
from comparison_center.core.validation import check_length, check_range, check_required

NAME_MAX_LENGTH = 50
TEXT_MAX_LENGTH = 3000
VALUE_MAX_LENGTH = 100
RATING_MIN = 1
RATING_MAX = 10

OBJECT_ORDER_BY = frozenset({"created_at", "name", "rating"})


@dataclass
class Association:
    """The value one object has for one custom option."""

    custom_option_id: str
    value: str
    object_id: str = ""

    def validate(self) -> None:
        check_required("custom_option_id", self.custom_option_id)
        check_length("value", self.value, 1, VALUE_MAX_LENGTH)


@dataclass
class Object:
    """A catalog entry belonging to exactly one comparison."""

    name: str
    rating: int
    comparison_id: str = ""
    advs: str = ""
    disadvs: str = ""
    photo_path: Optional[str] = None
    id: str = ""
    created_at: Optional[datetime] = None
    associations: list[Association] = field(default_factory=list)

    def validate(self) -> None:
        check_length("name", self.name, 1, NAME_MAX_LENGTH)
        check_range("rating", self.rating, RATING_MIN, RATING_MAX)
        check_length("advs", self.advs, 0, TEXT_MAX_LENGTH)
        check_length("disadvs", self.disadvs, 0, TEXT_MAX_LENGTH)
        check_required("comparison_id", self.comparison_id)
        for association in self.associations:
            association.validate()


@dataclass(frozen=True)
class ObjectFilter:
    limit: int
    offset: int
    order_by: str
    name: str = ""
    comparison_id: str = ""


def new_object_filter(
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    order_by: Optional[str] = None,
    name: Optional[str] = None,
    comparison_id: Optional[str] = None,
) -> ObjectFilter:
    """
    Build a validated object filter.

    name and comparison_id are handed to storage untouched: name matches as a
    case-insensitive substring, comparison_id exactly.

    Raises:
        ValidationError: On negative pagination or an order_by outside OBJECT_ORDER_BY.
    """
    limit, offset = validate_pagination(limit, offset)
    return ObjectFilter(
        limit=limit,
        offset=offset,
        order_by=validate_order_by(order_by, OBJECT_ORDER_BY),
        name=name or "",
        comparison_id=comparison_id or "",
    )
