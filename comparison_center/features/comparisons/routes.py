"""
Comparison routes.
"""
from typing import Annotated
from fastapi import APIRouter, Depends, status

from comparison_center.core.schemas import CreatedResponse
from comparison_center.features.comparisons.dependencies import get_comparison_usecase
from comparison_center.features.comparisons.domain import new_comparison_filter
from comparison_center.features.comparisons.schemas import (
    ComparisonCreate,
    ComparisonUpdate,
    ComparisonResponse,
)
from comparison_center.features.comparisons.usecase import ComparisonUsecase


router = APIRouter()


@router.get("", response_model=list[ComparisonResponse])
async def list_comparisons(
    usecase: Annotated[ComparisonUsecase, Depends(get_comparison_usecase)],
    limit: int | None = None,
    offset: int | None = None,
    order_by: str = "",
):
    """
    List comparisons.

    - limit: page size, 0 or absent means 10
    - offset: rows to skip
    - order_by: only `created_at` is accepted
    """
    comparison_filter = new_comparison_filter(limit, offset, order_by)
    return await usecase.list_comparisons(comparison_filter)


@router.get("/{comparison_id}", response_model=ComparisonResponse)
async def get_comparison(
    comparison_id: str,
    usecase: Annotated[ComparisonUsecase, Depends(get_comparison_usecase)],
):
    """Get comparison by ID."""
    return await usecase.get_comparison(comparison_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_comparison(
    comparison_data: ComparisonCreate,
    usecase: Annotated[ComparisonUsecase, Depends(get_comparison_usecase)],
):
    """Create a new comparison. Names are unique."""
    comparison = await usecase.create_comparison(comparison_data.to_domain())
    return CreatedResponse(id=comparison.id)


@router.put("/{comparison_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_comparison(
    comparison_id: str,
    comparison_data: ComparisonUpdate,
    usecase: Annotated[ComparisonUsecase, Depends(get_comparison_usecase)],
):
    """Replace a comparison's name and custom option list."""
    await usecase.update_comparison(comparison_id, comparison_data.to_domain())


@router.delete("/{comparison_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comparison(
    comparison_id: str,
    usecase: Annotated[ComparisonUsecase, Depends(get_comparison_usecase)],
):
    """Delete a comparison together with its objects."""
    await usecase.delete_comparison(comparison_id)
