"""
Object business rules: base record plus per-custom-option associations.

Associations are stored separately from the object, so every read attaches
them after the fact and every write syncs them one by one. Writes are not
transactional: a failing association call leaves earlier writes in place.
"""
from datetime import datetime, timezone

from comparison_center.core.errors import wrap_errors
from comparison_center.core.generator import IdGenerator
from comparison_center.features.objects.domain import Object, ObjectFilter
from comparison_center.features.objects.repository import AssociationRepository, ObjectRepository
from comparison_center.utils import get_logger

log = get_logger(__name__)


class ObjectUsecase:
    def __init__(
        self,
        object_repo: ObjectRepository,
        association_repo: AssociationRepository,
        id_generator: IdGenerator,
    ):
        self.object_repo = object_repo
        self.association_repo = association_repo
        self.id_generator = id_generator

    async def list_objects(self, object_filter: ObjectFilter) -> list[Object]:
        with wrap_errors("failed to get objects"):
            objects = await self.object_repo.search(object_filter)
            for obj in objects:
                await self._attach_associations(obj)
        return objects

    async def get_object(self, object_id: str) -> Object:
        with wrap_errors("failed to get object"):
            obj = await self.object_repo.get_by_id(object_id)
            await self._attach_associations(obj)
        return obj

    async def create_object(self, obj: Object) -> str:
        """
        Store a new object and then each of its associations.

        Returns:
            The generated object id.

        Raises:
            ValidationError: If a field or association is out of bounds.
            NotFoundError: If the comparison or a referenced custom option is missing.
            AlreadyExistsError: If the input repeats a custom option.
        """
        obj.id = self.id_generator.generate_id()
        obj.created_at = datetime.now(timezone.utc)

        with wrap_errors("failed to create object"):
            obj.validate()
            await self.object_repo.create(obj)

        with wrap_errors("failed to add object custom option"):
            for association in obj.associations:
                association.object_id = obj.id
                await self.association_repo.add(association)

        log.info("Created object %s in comparison %s", obj.id, obj.comparison_id)
        return obj.id

    async def update_object(self, object_id: str, obj: Object) -> None:
        """
        Replace the stored object's editable fields and upsert its associations.

        id, created_at, comparison_id and photo_path always come from the
        stored record. Associations missing from `obj` are kept as they are.
        """
        with wrap_errors("failed to get existing object"):
            existing = await self.object_repo.get_by_id(object_id)

        obj.id = existing.id
        obj.created_at = existing.created_at
        obj.comparison_id = existing.comparison_id
        obj.photo_path = existing.photo_path

        with wrap_errors("failed to update object"):
            obj.validate()
            await self.object_repo.update(obj)

        with wrap_errors("failed to get existing object custom options"):
            stored = await self.association_repo.get_by_object_id(obj.id)
        stored_option_ids = {association.custom_option_id for association in stored}

        for association in obj.associations:
            association.object_id = obj.id
            if association.custom_option_id in stored_option_ids:
                with wrap_errors("failed to update object custom option"):
                    await self.association_repo.update(association)
            else:
                with wrap_errors("failed to add object custom option"):
                    await self.association_repo.add(association)

        log.info("Updated object %s", obj.id)

    async def delete_object(self, object_id: str) -> None:
        with wrap_errors("failed to delete object"):
            await self.object_repo.delete(object_id)

        log.info("Deleted object %s", object_id)

    async def set_photo_path(self, object_id: str, photo_path: str) -> None:
        """Point the object at a stored photo. Only photo_path changes."""
        with wrap_errors("failed to get existing object"):
            obj = await self.object_repo.get_by_id(object_id)

        obj.photo_path = photo_path

        with wrap_errors("failed to set object photo"):
            await self.object_repo.update(obj)

        log.debug("Object %s photo set to %s", object_id, photo_path)

    async def _attach_associations(self, obj: Object) -> None:
        # One lookup per object; batching belongs here if list pages get large
        obj.associations = await self.association_repo.get_by_object_id(obj.id)
