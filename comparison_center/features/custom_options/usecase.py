"""
Custom option business rules: id assignment, with the stored id kept on rename.
"""
from comparison_center.core.errors import wrap_errors
from comparison_center.core.generator import IdGenerator
from comparison_center.features.custom_options.domain import CustomOption, CustomOptionFilter
from comparison_center.features.custom_options.repository import CustomOptionRepository
from comparison_center.utils import get_logger

log = get_logger(__name__)


class CustomOptionUsecase:
    def __init__(self, repo: CustomOptionRepository, id_generator: IdGenerator):
        self.repo = repo
        self.id_generator = id_generator

    async def list_custom_options(self, custom_option_filter: CustomOptionFilter) -> list[CustomOption]:
        with wrap_errors("failed to get custom options"):
            return await self.repo.search(custom_option_filter)

    async def get_custom_option(self, custom_option_id: str) -> CustomOption:
        with wrap_errors("failed to get custom option"):
            return await self.repo.get_by_id(custom_option_id)

    async def create_custom_option(self, custom_option: CustomOption) -> CustomOption:
        custom_option.id = self.id_generator.generate_id()

        with wrap_errors("failed to create custom option"):
            custom_option.validate()
            await self.repo.create(custom_option)

        log.info("Created custom option %s (%r)", custom_option.id, custom_option.name)
        return custom_option

    async def update_custom_option(self, custom_option_id: str, custom_option: CustomOption) -> None:
        """Rename a custom option. The id always comes from the stored record."""
        with wrap_errors("failed to get existing custom option"):
            existing = await self.repo.get_by_id(custom_option_id)

        custom_option.id = existing.id

        with wrap_errors("failed to update custom option"):
            custom_option.validate()
            await self.repo.update(custom_option)

        log.info("Updated custom option %s", custom_option.id)

    async def delete_custom_option(self, custom_option_id: str) -> None:
        with wrap_errors("failed to delete custom option"):
            await self.repo.delete(custom_option_id)

        log.info("Deleted custom option %s", custom_option_id)
