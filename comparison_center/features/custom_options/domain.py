"""Custom option domain entity and list filter."""
from dataclasses import dataclass
from typing import Optional

from comparison_center.core.filters import validate_pagination
from comparison_center.core.validation import check_length

NAME_MAX_LENGTH = 50


@dataclass
class CustomOption:
    """A named, reusable attribute definition."""

    name: str
    id: str = ""

    def validate(self) -> None:
        check_length("name", self.name, 1, NAME_MAX_LENGTH)


@dataclass(frozen=True)
class CustomOptionFilter:
    limit: int
    offset: int
    name: str = ""


def new_custom_option_filter(
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    name: Optional[str] = None,
) -> CustomOptionFilter:
    """
    Build a validated custom option filter.

    Custom options have no creation timestamp, so there is no order_by; they
    are listed in id order.
    """
    limit, offset = validate_pagination(limit, offset)
    return CustomOptionFilter(limit=limit, offset=offset, name=name or "")
