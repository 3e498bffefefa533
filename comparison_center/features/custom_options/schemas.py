"""
Pydantic schemas for custom option requests and responses.
"""
from pydantic import BaseModel, Field, ConfigDict

from comparison_center.features.custom_options.domain import CustomOption


class CustomOptionBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)

    def to_domain(self) -> CustomOption:
        return CustomOption(name=self.name)


class CustomOptionCreate(CustomOptionBase):
    pass


class CustomOptionUpdate(CustomOptionBase):
    pass


class CustomOptionResponse(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
