"""
Pydantic schemas for object requests and responses.

Association values travel as `custom_options: [{"id": ..., "value": ...}]`,
where `id` is the custom option id.
"""
from datetime import datetime
from pydantic import BaseModel, Field

from comparison_center.features.objects.domain import Association, Object


class CustomOptionValue(BaseModel):
    """An object's value for one custom option."""
    id: str = Field(..., min_length=1, description="Custom option ID")
    value: str = Field(..., min_length=1, max_length=100)

    def to_domain(self) -> Association:
        return Association(custom_option_id=self.id, value=self.value)


class ObjectBase(BaseModel):
    """Base object schema."""
    name: str = Field(..., min_length=1, max_length=50)
    rating: int = Field(..., ge=1, le=10)
    advs: str = Field("", max_length=3000, description="Advantages")
    disadvs: str = Field("", max_length=3000, description="Disadvantages")
    custom_options: list[CustomOptionValue] = Field(default_factory=list)


class ObjectCreate(ObjectBase):
    """Schema for creating a new object inside a comparison."""
    comparison_id: str = Field(..., min_length=1)

    def to_domain(self) -> Object:
        return Object(
            name=self.name,
            rating=self.rating,
            advs=self.advs,
            disadvs=self.disadvs,
            comparison_id=self.comparison_id,
            associations=[option.to_domain() for option in self.custom_options],
        )


class ObjectUpdate(ObjectBase):
    """
    Schema for updating an object.

    The comparison, creation time and photo cannot be changed here. Custom
    options left out of the list keep their stored values.
    """

    def to_domain(self) -> Object:
        return Object(
            name=self.name,
            rating=self.rating,
            advs=self.advs,
            disadvs=self.disadvs,
            associations=[option.to_domain() for option in self.custom_options],
        )


class ObjectResponse(ObjectBase):
    """Schema for object responses."""
    id: str
    created_at: datetime
    comparison_id: str
    has_photo: bool = False

    @classmethod
    def from_domain(cls, obj: Object) -> "ObjectResponse":
        return cls(
            id=obj.id,
            name=obj.name,
            rating=obj.rating,
            advs=obj.advs,
            disadvs=obj.disadvs,
            created_at=obj.created_at,
            comparison_id=obj.comparison_id,
            has_photo=obj.photo_path is not None,
            custom_options=[
                CustomOptionValue(id=association.custom_option_id, value=association.value)
                for association in obj.associations
            ],
        )
