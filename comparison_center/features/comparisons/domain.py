"""Comparison domain entity and list filter."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from comparison_center.core.filters import validate_order_by, validate_pagination
from comparison_center.core.validation import check_length

NAME_MAX_LENGTH = 50

COMPARISON_ORDER_BY = frozenset({"created_at"})


@dataclass
class Comparison:
    """A named grouping of objects being compared."""

    name: str
    custom_option_ids: list[str] = field(default_factory=list)
    id: str = ""
    created_at: Optional[datetime] = None

    def validate(self) -> None:
        check_length("name", self.name, 1, NAME_MAX_LENGTH)


@dataclass(frozen=True)
class ComparisonFilter:
    limit: int
    offset: int
    order_by: str


def new_comparison_filter(
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    order_by: Optional[str] = None,
) -> ComparisonFilter:
    """
    Build a validated comparison filter.

    Raises:
        ValidationError: On negative pagination or an order_by outside COMPARISON_ORDER_BY.
    """
    limit, offset = validate_pagination(limit, offset)
    return ComparisonFilter(
        limit=limit,
        offset=offset,
        order_by=validate_order_by(order_by, COMPARISON_ORDER_BY),
    )
