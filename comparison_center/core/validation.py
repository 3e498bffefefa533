"""
Field-level checks used by domain entities before they reach storage.
"""
from typing import Optional

from comparison_center.core.errors import ValidationError


def check_length(field: str, value: Optional[str], min_length: int, max_length: int) -> None:
    """Raise ValidationError unless min_length <= len(value) <= max_length."""
    length = len(value or "")
    if not min_length <= length <= max_length:
        raise ValidationError(
            f"{field} length must be between {min_length} and {max_length}, got {length}",
            details={"field": field},
        )


def check_range(field: str, value: int, minimum: int, maximum: int) -> None:
    """Raise ValidationError unless minimum <= value <= maximum."""
    if not minimum <= value <= maximum:
        raise ValidationError(
            f"{field} must be between {minimum} and {maximum}, got {value}",
            details={"field": field, "value": value},
        )


def check_required(field: str, value: Optional[str]) -> None:
    if not value:
        raise ValidationError(f"{field} is required", details={"field": field})
