"""
Object dependency injection functions.
"""
from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core import config
from comparison_center.core.database.engine import get_db
from comparison_center.core.generator import UlidGenerator
from comparison_center.features.objects.photos import PhotoStorage
from comparison_center.features.objects.repository import SqlAssociationRepository, SqlObjectRepository
from comparison_center.features.objects.usecase import ObjectUsecase


def get_object_usecase(db: Annotated[AsyncSession, Depends(get_db)]) -> ObjectUsecase:
    """Build an object usecase bound to the request's database session."""
    return ObjectUsecase(SqlObjectRepository(db), SqlAssociationRepository(db), UlidGenerator())


def get_photo_storage() -> PhotoStorage:
    return PhotoStorage(config.PHOTOS_DIR, config.MAX_UPLOAD_SIZE_MB * 1024 * 1024)
