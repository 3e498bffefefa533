"""
Pagination and ordering validation shared by the per-entity filter constructors.
"""
from typing import Collection, Optional

from comparison_center.core.errors import ValidationError

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
DEFAULT_ORDER_BY = "created_at"

# Largest value storage can bind as an integer (signed 64-bit)
MAX_PAGINATION_VALUE = 2**63 - 1


def validate_pagination(limit: Optional[int], offset: Optional[int]) -> tuple[int, int]:
    """
    Validate raw limit/offset values and apply defaults.

    A limit of 0 is treated the same as an absent one, so callers cannot ask
    for every row at once.

    Raises:
        ValidationError: If limit or offset is negative or above MAX_PAGINATION_VALUE.
    """
    for field, value in (("limit", limit), ("offset", offset)):
        if value is None:
            continue
        if value < 0:
            raise ValidationError(f"{field} must not be negative", details={"field": field, "value": value})
        if value > MAX_PAGINATION_VALUE:
            raise ValidationError(
                f"{field} must not exceed {MAX_PAGINATION_VALUE}", details={"field": field, "value": value}
            )

    return limit or DEFAULT_LIMIT, offset or DEFAULT_OFFSET


def validate_order_by(order_by: Optional[str], allowed: Collection[str]) -> str:
    """
    Default an empty order_by to created_at and check it against `allowed`.

    Raises:
        ValidationError: If order_by is not in the allow-list.
    """
    if not order_by:
        return DEFAULT_ORDER_BY
    if order_by not in allowed:
        raise ValidationError(
            f"order_by must be one of {', '.join(sorted(allowed))}",
            details={"field": "order_by", "value": order_by},
        )
    return order_by
