"""
CustomOption SQLAlchemy model.
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from comparison_center.core.database.base import Base
from comparison_center.features.custom_options.domain import CustomOption


class CustomOptionModel(Base):
    __tablename__ = "custom_options"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<CustomOptionModel(id={self.id}, name={self.name!r})>"

    def to_domain(self) -> CustomOption:
        return CustomOption(id=self.id, name=self.name)

    @classmethod
    def from_domain(cls, custom_option: CustomOption) -> "CustomOptionModel":
        return cls(id=custom_option.id, name=custom_option.name)
