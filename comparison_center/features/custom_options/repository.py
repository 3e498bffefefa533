"""
Custom option storage contract and its SQLAlchemy implementation.
"""
from abc import ABC, abstractmethod

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.database.errors import storage_errors
from comparison_center.core.errors import AlreadyExistsError, NotFoundError
from comparison_center.features.custom_options.domain import CustomOption, CustomOptionFilter
from comparison_center.features.custom_options.models import CustomOptionModel
from comparison_center.features.objects.models import AssociationModel


class CustomOptionRepository(ABC):
    """Repository interface for custom options."""

    @abstractmethod
    async def search(self, custom_option_filter: CustomOptionFilter) -> list[CustomOption]:
        pass

    @abstractmethod
    async def get_by_id(self, custom_option_id: str) -> CustomOption:
        pass

    @abstractmethod
    async def create(self, custom_option: CustomOption) -> None:
        pass

    @abstractmethod
    async def update(self, custom_option: CustomOption) -> None:
        pass

    @abstractmethod
    async def delete(self, custom_option_id: str) -> None:
        """Delete a custom option and every object value recorded for it."""
        pass


class SqlCustomOptionRepository(CustomOptionRepository):
    """Custom options stored in the `custom_options` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def search(self, custom_option_filter: CustomOptionFilter) -> list[CustomOption]:
        query = select(CustomOptionModel)
        if custom_option_filter.name:
            query = query.where(CustomOptionModel.name.contains(custom_option_filter.name, autoescape=True))
        query = (
            query.order_by(CustomOptionModel.id)
            .offset(custom_option_filter.offset)
            .limit(custom_option_filter.limit)
        )

        async with storage_errors(self.session, "fetch custom options"):
            result = await self.session.execute(query)
        return [model.to_domain() for model in result.scalars().all()]

    async def get_by_id(self, custom_option_id: str) -> CustomOption:
        async with storage_errors(self.session, "get custom option"):
            model = await self.session.get(CustomOptionModel, custom_option_id, populate_existing=True)
        if model is None:
            raise NotFoundError(
                f"custom option '{custom_option_id}' not found", details={"id": custom_option_id}
            )
        return model.to_domain()

    async def create(self, custom_option: CustomOption) -> None:
        async with storage_errors(self.session, "insert custom option"):
            await self._ensure_name_free(custom_option)
            try:
                self.session.add(CustomOptionModel.from_domain(custom_option))
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise self._name_taken(custom_option) from e

    async def update(self, custom_option: CustomOption) -> None:
        async with storage_errors(self.session, "update custom option"):
            await self._ensure_name_free(custom_option)
            try:
                result = await self.session.execute(
                    update(CustomOptionModel)
                    .where(CustomOptionModel.id == custom_option.id)
                    .values(name=custom_option.name)
                )
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise self._name_taken(custom_option) from e

        if result.rowcount == 0:
            raise NotFoundError(
                f"custom option '{custom_option.id}' not found", details={"id": custom_option.id}
            )

    async def delete(self, custom_option_id: str) -> None:
        async with storage_errors(self.session, "delete custom option"):
            await self.session.execute(
                delete(AssociationModel).where(AssociationModel.custom_option_id == custom_option_id)
            )
            result = await self.session.execute(
                delete(CustomOptionModel).where(CustomOptionModel.id == custom_option_id)
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError(
                f"custom option '{custom_option_id}' not found", details={"id": custom_option_id}
            )

    async def _ensure_name_free(self, custom_option: CustomOption) -> None:
        existing_id = await self.session.scalar(
            select(CustomOptionModel.id).where(CustomOptionModel.name == custom_option.name)
        )
        if existing_id is not None and existing_id != custom_option.id:
            raise self._name_taken(custom_option)

    @staticmethod
    def _name_taken(custom_option: CustomOption) -> AlreadyExistsError:
        return AlreadyExistsError(
            f"custom option with name '{custom_option.name}' already exists",
            details={"name": custom_option.name},
        )
