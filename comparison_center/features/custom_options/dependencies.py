"""
Custom option dependency injection functions.
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.database.engine import get_db
from comparison_center.core.generator import UlidGenerator
from comparison_center.features.custom_options.repository import SqlCustomOptionRepository
from comparison_center.features.custom_options.usecase import CustomOptionUsecase


def get_custom_option_usecase(db: Annotated[AsyncSession, Depends(get_db)]) -> CustomOptionUsecase:
    return CustomOptionUsecase(SqlCustomOptionRepository(db), UlidGenerator())
