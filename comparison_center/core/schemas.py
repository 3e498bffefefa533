"""
Pydantic schemas shared across features.
"""
from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Returned by create endpoints: the generated identifier."""
    id: str


class ErrorResponse(BaseModel):
    error: str
    detail: str
