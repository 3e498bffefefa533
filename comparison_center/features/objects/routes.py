"""
Object routes, including photo upload and download.
"""
import os
from typing import Annotated
from fastapi import APIRouter, Depends, File, UploadFile, status
from starlette.requests import Request
from starlette.responses import FileResponse, Response

from comparison_center.core import config
from comparison_center.core.errors import NotFoundError
from comparison_center.core.rate_limit import limiter
from comparison_center.core.schemas import CreatedResponse
from comparison_center.features.objects.dependencies import get_object_usecase, get_photo_storage
from comparison_center.features.objects.domain import new_object_filter
from comparison_center.features.objects.photos import PhotoStorage
from comparison_center.features.objects.schemas import ObjectCreate, ObjectResponse, ObjectUpdate
from comparison_center.features.objects.usecase import ObjectUsecase
from comparison_center.utils import get_logger

log = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=list[ObjectResponse])
async def list_objects(
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
    limit: int | None = None,
    offset: int | None = None,
    order_by: str = "",
    name: str = "",
    comparison_id: str = "",
):
    """
    List objects with their custom option values.

    - order_by: `created_at` (default), `name` or `rating`
    - name: case-insensitive substring match
    - comparison_id: only objects of this comparison
    """
    object_filter = new_object_filter(limit, offset, order_by, name, comparison_id)
    objects = await usecase.list_objects(object_filter)
    return [ObjectResponse.from_domain(obj) for obj in objects]


@router.get("/{object_id}", response_model=ObjectResponse)
async def get_object(
    object_id: str,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
):
    """Get object by ID."""
    return ObjectResponse.from_domain(await usecase.get_object(object_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_object(
    object_data: ObjectCreate,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
):
    """Create an object in an existing comparison."""
    object_id = await usecase.create_object(object_data.to_domain())
    return CreatedResponse(id=object_id)


@router.put("/{object_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_object(
    object_id: str,
    object_data: ObjectUpdate,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
):
    """Update an object and upsert the given custom option values."""
    await usecase.update_object(object_id, object_data.to_domain())


@router.delete("/{object_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_object(
    object_id: str,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
):
    """Delete an object and its custom option values."""
    await usecase.delete_object(object_id)


@router.post("/{object_id}/photo", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(config.PHOTO_UPLOAD_RATE_LIMIT)
async def upload_object_photo(
    request: Request,
    object_id: str,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
    storage: Annotated[PhotoStorage, Depends(get_photo_storage)],
    photo: UploadFile = File(..., description="JPEG or PNG image"),
):
    """
    Upload an object's photo.

    The previous photo file, if any, stays on disk; only the object's
    reference moves to the new file.
    """
    photo_path = await storage.save(photo)
    try:
        await usecase.set_photo_path(object_id, photo_path)
    except Exception:
        storage.remove(photo_path)
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{object_id}/photo", response_class=FileResponse)
async def get_object_photo(
    object_id: str,
    usecase: Annotated[ObjectUsecase, Depends(get_object_usecase)],
):
    """Download an object's photo."""
    obj = await usecase.get_object(object_id)
    if not obj.photo_path:
        raise NotFoundError(f"object '{object_id}' has no photo", details={"id": object_id})
    if not os.path.isfile(obj.photo_path):
        log.warning("Photo file %s of object %s is missing", obj.photo_path, object_id)
        raise NotFoundError(f"photo of object '{object_id}' not found", details={"id": object_id})
    return FileResponse(obj.photo_path)
