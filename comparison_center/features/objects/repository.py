"""
Object and association storage contracts and their SQLAlchemy implementations.
"""
from abc import ABC, abstractmethod

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.database.errors import storage_errors
from comparison_center.core.errors import AlreadyExistsError, NotFoundError
from comparison_center.features.objects.domain import Association, Object, ObjectFilter
from comparison_center.features.objects.models import AssociationModel, ObjectModel


class ObjectRepository(ABC):
    """Repository interface for object base records (without associations)."""

    @abstractmethod
    async def search(self, object_filter: ObjectFilter) -> list[Object]:
        pass

    @abstractmethod
    async def get_by_id(self, object_id: str) -> Object:
        """Get object by ID. Raises NotFoundError."""
        pass

    @abstractmethod
    async def create(self, obj: Object) -> None:
        """Insert an object. Raises NotFoundError if its comparison does not exist."""
        pass

    @abstractmethod
    async def update(self, obj: Object) -> None:
        """Overwrite every base field of the stored object. Raises NotFoundError."""
        pass

    @abstractmethod
    async def delete(self, object_id: str) -> None:
        """Delete an object and its associations. Raises NotFoundError."""
        pass


class AssociationRepository(ABC):
    """Repository interface for object/custom option values."""

    @abstractmethod
    async def get_by_object_id(self, object_id: str) -> list[Association]:
        pass

    @abstractmethod
    async def add(self, association: Association) -> None:
        """Insert a new row. Raises AlreadyExistsError if the pair is already stored."""
        pass

    @abstractmethod
    async def update(self, association: Association) -> None:
        """Set the value of the row matching object_id and custom_option_id. Raises NotFoundError."""
        pass


_ORDER_COLUMNS = {
    "created_at": ObjectModel.created_at,
    "name": ObjectModel.name,
    "rating": ObjectModel.rating,
}


class SqlObjectRepository(ObjectRepository):
    """Objects stored in the `objects` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def search(self, object_filter: ObjectFilter) -> list[Object]:
        query = select(ObjectModel)
        if object_filter.name:
            query = query.where(ObjectModel.name.icontains(object_filter.name, autoescape=True))
        if object_filter.comparison_id:
            query = query.where(ObjectModel.comparison_id == object_filter.comparison_id)
        query = (
            query.order_by(_ORDER_COLUMNS[object_filter.order_by], ObjectModel.id)
            .offset(object_filter.offset)
            .limit(object_filter.limit)
        )

        async with storage_errors(self.session, "fetch objects"):
            result = await self.session.execute(query)
        return [model.to_domain() for model in result.scalars().all()]

    async def get_by_id(self, object_id: str) -> Object:
        async with storage_errors(self.session, "get object"):
            model = await self.session.get(ObjectModel, object_id, populate_existing=True)
        if model is None:
            raise NotFoundError(f"object '{object_id}' not found", details={"id": object_id})
        return model.to_domain()

    async def create(self, obj: Object) -> None:
        async with storage_errors(self.session, "insert object"):
            try:
                self.session.add(ObjectModel.from_domain(obj))
                await self.session.commit()
            except IntegrityError as e:
                # The id is freshly generated, so the only constraint left is the comparison foreign key
                await self.session.rollback()
                raise NotFoundError(
                    f"comparison '{obj.comparison_id}' not found",
                    details={"comparison_id": obj.comparison_id},
                ) from e

    async def update(self, obj: Object) -> None:
        async with storage_errors(self.session, "update object"):
            result = await self.session.execute(
                update(ObjectModel)
                .where(ObjectModel.id == obj.id)
                .values(
                    name=obj.name,
                    rating=obj.rating,
                    created_at=obj.created_at,
                    advs=obj.advs,
                    disadvs=obj.disadvs,
                    photo_path=obj.photo_path,
                    comparison_id=obj.comparison_id,
                )
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError(f"object '{obj.id}' not found", details={"id": obj.id})

    async def delete(self, object_id: str) -> None:
        async with storage_errors(self.session, "delete object"):
            await self.session.execute(
                delete(AssociationModel).where(AssociationModel.object_id == object_id)
            )
            result = await self.session.execute(
                delete(ObjectModel).where(ObjectModel.id == object_id)
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError(f"object '{object_id}' not found", details={"id": object_id})


class SqlAssociationRepository(AssociationRepository):
    """Association rows stored in the `object_custom_options` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_object_id(self, object_id: str) -> list[Association]:
        query = (
            select(AssociationModel)
            .where(AssociationModel.object_id == object_id)
            .order_by(AssociationModel.custom_option_id)
        )
        async with storage_errors(self.session, "fetch object custom options"):
            result = await self.session.execute(query)
        return [model.to_domain() for model in result.scalars().all()]

    async def add(self, association: Association) -> None:
        async with storage_errors(self.session, "insert object custom option"):
            try:
                await self.session.execute(
                    insert(AssociationModel).values(
                        object_id=association.object_id,
                        custom_option_id=association.custom_option_id,
                        value=association.value,
                    )
                )
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise await self._add_conflict(association) from e

    async def update(self, association: Association) -> None:
        async with storage_errors(self.session, "update object custom option"):
            result = await self.session.execute(
                update(AssociationModel)
                .where(
                    AssociationModel.object_id == association.object_id,
                    AssociationModel.custom_option_id == association.custom_option_id,
                )
                .values(value=association.value)
            )
            await self.session.commit()

        if result.rowcount == 0:
            raise NotFoundError(
                f"object custom option ({association.object_id}, {association.custom_option_id}) not found",
                details={"object_id": association.object_id, "custom_option_id": association.custom_option_id},
            )

    async def _add_conflict(self, association: Association) -> Exception:
        """Tell a duplicate pair apart from a reference to a missing object or custom option."""
        existing = await self.session.get(
            AssociationModel, (association.object_id, association.custom_option_id)
        )
        details = {"object_id": association.object_id, "custom_option_id": association.custom_option_id}
        if existing is not None:
            return AlreadyExistsError(
                f"option with object id '{association.object_id}' and custom option id "
                f"'{association.custom_option_id}' already exists",
                details=details,
            )
        return NotFoundError(
            f"object '{association.object_id}' or custom option '{association.custom_option_id}' not found",
            details=details,
        )
