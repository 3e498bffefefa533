"""
Object and object/custom-option association SQLAlchemy models.
"""
from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from comparison_center.core.database.base import Base, UtcDateTime
from comparison_center.features.objects.domain import Association, Object


class ObjectModel(Base):
    """
    Stored object base record.

    Associations live in their own table and are read separately, the same
    way the usecase treats them.
    """
    __tablename__ = "objects"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    rating: Mapped[int] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(UtcDateTime(), nullable=False, index=True)
    advs: Mapped[str] = mapped_column(Text, nullable=False, default="")
    disadvs: Mapped[str] = mapped_column(Text, nullable=False, default="")
    photo_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    comparison_id: Mapped[str] = mapped_column(
        ForeignKey("comparisons.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<ObjectModel(id={self.id}, name={self.name!r}, comparison_id={self.comparison_id})>"

    def to_domain(self) -> Object:
        return Object(
            id=self.id,
            name=self.name,
            rating=self.rating,
            created_at=self.created_at,
            advs=self.advs,
            disadvs=self.disadvs,
            photo_path=self.photo_path,
            comparison_id=self.comparison_id,
        )

    @classmethod
    def from_domain(cls, obj: Object) -> "ObjectModel":
        return cls(
            id=obj.id,
            name=obj.name,
            rating=obj.rating,
            created_at=obj.created_at,
            advs=obj.advs,
            disadvs=obj.disadvs,
            photo_path=obj.photo_path,
            comparison_id=obj.comparison_id,
        )


class AssociationModel(Base):
    """One row per (object, custom option) pair; the composite key enforces uniqueness."""
    __tablename__ = "object_custom_options"

    object_id: Mapped[str] = mapped_column(
        ForeignKey("objects.id", ondelete="CASCADE"), primary_key=True
    )
    custom_option_id: Mapped[str] = mapped_column(
        ForeignKey("custom_options.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    value: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<AssociationModel(object_id={self.object_id}, "
            f"custom_option_id={self.custom_option_id}, value={self.value!r})>"
        )

    def to_domain(self) -> Association:
        return Association(
            object_id=self.object_id,
            custom_option_id=self.custom_option_id,
            value=self.value,
        )
