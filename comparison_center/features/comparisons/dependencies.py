"""
Comparison dependency injection functions.
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.database.engine import get_db
from comparison_center.core.generator import UlidGenerator
from comparison_center.features.comparisons.repository import SqlComparisonRepository
from comparison_center.features.comparisons.usecase import ComparisonUsecase


def get_comparison_usecase(db: Annotated[AsyncSession, Depends(get_db)]) -> ComparisonUsecase:
    """Build a comparison usecase bound to the request's database session."""
    return ComparisonUsecase(SqlComparisonRepository(db), UlidGenerator())
