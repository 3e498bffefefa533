"""
Comparison storage contract and its SQLAlchemy implementation.
"""
from abc import ABC, abstractmethod

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.database.errors import storage_errors
from comparison_center.core.errors import AlreadyExistsError, NotFoundError
from comparison_center.features.comparisons.domain import Comparison, ComparisonFilter
from comparison_center.features.comparisons.models import ComparisonModel
from comparison_center.features.objects.models import AssociationModel, ObjectModel


class ComparisonRepository(ABC):
    """Repository interface for comparisons."""

    @abstractmethod
    async def search(self, comparison_filter: ComparisonFilter) -> list[Comparison]:
        pass

    @abstractmethod
    async def get_by_id(self, comparison_id: str) -> Comparison:
        """Get comparison by ID. Raises NotFoundError."""
        pass

    @abstractmethod
    async def create(self, comparison: Comparison) -> None:
        """Insert a comparison. Raises AlreadyExistsError on a duplicate name."""
        pass

    @abstractmethod
    async def update(self, comparison: Comparison) -> None:
        """Overwrite the stored comparison with the same id. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete(self, comparison_id: str) -> None:
        """
        Delete a comparison along with its objects and their associations.

        Raises NotFoundError if no comparison was deleted.
        """
        pass


_ORDER_COLUMNS = {
    "created_at": ComparisonModel.created_at,
}


class SqlComparisonRepository(ComparisonRepository):
    """
    Comparisons stored in the `comparisons` table.

    Name uniqueness is backed by a unique index; the select before each write
    only fails early with a clearer message.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def search(self, comparison_filter: ComparisonFilter) -> list[Comparison]:
        query = (
            select(ComparisonModel)
            .order_by(_ORDER_COLUMNS[comparison_filter.order_by], ComparisonModel.id)
            .offset(comparison_filter.offset)
            .limit(comparison_filter.limit)
        )
        async with storage_errors(self.session, "fetch comparisons"):
            result = await self.session.execute(query)
        return [model.to_domain() for model in result.scalars().all()]

    async def get_by_id(self, comparison_id: str) -> Comparison:
        async with storage_errors(self.session, "get comparison"):
            model = await self.session.get(ComparisonModel, comparison_id, populate_existing=True)
        if model is None:
            raise NotFoundError(f"comparison '{comparison_id}' not found", details={"id": comparison_id})
        return model.to_domain()

    async def create(self, comparison: Comparison) -> None:
        async with storage_errors(self.session, "insert comparison"):
            await self._ensure_name_free(comparison)
            try:
                self.session.add(ComparisonModel.from_domain(comparison))
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise self._name_taken(comparison) from e

    async def update(self, comparison: Comparison) -> None:
        async with storage_errors(self.session, "update comparison"):
            await self._ensure_name_free(comparison)
            try:
                result = await self.session.execute(
                    update(ComparisonModel)
                    .where(ComparisonModel.id == comparison.id)
                    .values(
                        name=comparison.name,
                        created_at=comparison.created_at,
                        custom_option_ids=list(comparison.custom_option_ids),
                    )
                )
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise self._name_taken(comparison) from e

        if result.rowcount == 0:
            raise NotFoundError(f"comparison '{comparison.id}' not found", details={"id": comparison.id})

    async def delete(self, comparison_id: str) -> None:
        async with storage_errors(self.session, "delete comparison"):
            object_ids = select(ObjectModel.id).where(ObjectModel.comparison_id == comparison_id)
            await self.session.execute(
                delete(AssociationModel)
                .where(AssociationModel.object_id.in_(object_ids))
                .execution_options(synchronize_session=False)
            )
            await self.session.execute(delete(ObjectModel).where(ObjectModel.comparison_id == comparison_id))
            result = await self.session.execute(
                delete(ComparisonModel).where(ComparisonModel.id == comparison_id)
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError(f"comparison '{comparison_id}' not found", details={"id": comparison_id})

    async def _ensure_name_free(self, comparison: Comparison) -> None:
        existing_id = await self.session.scalar(
            select(ComparisonModel.id).where(ComparisonModel.name == comparison.name)
        )
        if existing_id is not None and existing_id != comparison.id:
            raise self._name_taken(comparison)

    @staticmethod
    def _name_taken(comparison: Comparison) -> AlreadyExistsError:
        return AlreadyExistsError(
            f"comparison '{comparison.name}' already exists",
            details={"name": comparison.name},
        )
