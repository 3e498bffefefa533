"""
Pydantic schemas for comparison requests and responses.
"""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from comparison_center.features.comparisons.domain import Comparison


class ComparisonBase(BaseModel):
    """Base comparison schema."""
    name: str = Field(..., min_length=1, max_length=50)
    custom_option_ids: list[str] = Field(default_factory=list, description="Ordered custom option IDs")


class ComparisonCreate(ComparisonBase):
    """Schema for creating a new comparison."""

    def to_domain(self) -> Comparison:
        return Comparison(name=self.name, custom_option_ids=list(self.custom_option_ids))


class ComparisonUpdate(ComparisonBase):
    """Schema for replacing a comparison. id and created_at are server-controlled."""

    def to_domain(self) -> Comparison:
        return Comparison(name=self.name, custom_option_ids=list(self.custom_option_ids))


class ComparisonResponse(ComparisonBase):
    """Schema for comparison responses."""
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
