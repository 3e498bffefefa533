"""
Comparison SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from comparison_center.core.database.base import Base, UtcDateTime
from comparison_center.features.comparisons.domain import Comparison


class ComparisonModel(Base):
    """
    Stored comparison.

    custom_option_ids keeps the caller's ordering, so it is a JSON list rather
    than a link table.
    """
    __tablename__ = "comparisons"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(UtcDateTime(), nullable=False, index=True)
    custom_option_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<ComparisonModel(id={self.id}, name={self.name!r})>"

    def to_domain(self) -> Comparison:
        return Comparison(
            id=self.id,
            name=self.name,
            created_at=self.created_at,
            custom_option_ids=list(self.custom_option_ids or []),
        )

    @classmethod
    def from_domain(cls, comparison: Comparison) -> "ComparisonModel":
        return cls(
            id=comparison.id,
            name=comparison.name,
            created_at=comparison.created_at,
            custom_option_ids=list(comparison.custom_option_ids),
        )
