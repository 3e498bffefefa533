"""
Custom option routes.
"""
from typing import Annotated
from fastapi import APIRouter, Depends, status

from comparison_center.core.schemas import CreatedResponse
from comparison_center.features.custom_options.dependencies import get_custom_option_usecase
from comparison_center.features.custom_options.domain import new_custom_option_filter
from comparison_center.features.custom_options.schemas import (
    CustomOptionCreate,
    CustomOptionUpdate,
    CustomOptionResponse,
)
from comparison_center.features.custom_options.usecase import CustomOptionUsecase


router = APIRouter()


@router.get("", response_model=list[CustomOptionResponse])
async def list_custom_options(
    usecase: Annotated[CustomOptionUsecase, Depends(get_custom_option_usecase)],
    limit: int | None = None,
    offset: int | None = None,
    name: str | None = None,
):
    """List custom options, optionally filtered by a name substring."""
    return await usecase.list_custom_options(new_custom_option_filter(limit, offset, name))


@router.get("/{custom_option_id}", response_model=CustomOptionResponse)
async def get_custom_option(
    custom_option_id: str,
    usecase: Annotated[CustomOptionUsecase, Depends(get_custom_option_usecase)],
):
    return await usecase.get_custom_option(custom_option_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_custom_option(
    custom_option_data: CustomOptionCreate,
    usecase: Annotated[CustomOptionUsecase, Depends(get_custom_option_usecase)],
):
    """Create a new custom option. Names are unique."""
    custom_option = await usecase.create_custom_option(custom_option_data.to_domain())
    return CreatedResponse(id=custom_option.id)


@router.put("/{custom_option_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_custom_option(
    custom_option_id: str,
    custom_option_data: CustomOptionUpdate,
    usecase: Annotated[CustomOptionUsecase, Depends(get_custom_option_usecase)],
):
    await usecase.update_custom_option(custom_option_id, custom_option_data.to_domain())


@router.delete("/{custom_option_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_option(
    custom_option_id: str,
    usecase: Annotated[CustomOptionUsecase, Depends(get_custom_option_usecase)],
):
    """Delete a custom option and every object value recorded for it."""
    await usecase.delete_custom_option(custom_option_id)
