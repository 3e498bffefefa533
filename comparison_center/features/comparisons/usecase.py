"""
Comparison business rules: id and timestamp assignment, immutable fields on update.
"""
from datetime import datetime, timezone

from comparison_center.core.errors import wrap_errors
from comparison_center.core.generator import IdGenerator
from comparison_center.features.comparisons.domain import Comparison, ComparisonFilter
from comparison_center.features.comparisons.repository import ComparisonRepository
from comparison_center.utils import get_logger

log = get_logger(__name__)


class ComparisonUsecase:
    def __init__(self, repo: ComparisonRepository, id_generator: IdGenerator):
        self.repo = repo
        self.id_generator = id_generator

    async def list_comparisons(self, comparison_filter: ComparisonFilter) -> list[Comparison]:
        with wrap_errors("failed to get comparisons"):
            return await self.repo.search(comparison_filter)

    async def get_comparison(self, comparison_id: str) -> Comparison:
        with wrap_errors("failed to get comparison"):
            return await self.repo.get_by_id(comparison_id)

    async def create_comparison(self, comparison: Comparison) -> Comparison:
        """
        Store a new comparison under a generated id, stamped with the current time.

        Raises:
            ValidationError: If the name is empty or longer than 50 characters.
            AlreadyExistsError: If another comparison has the same name.
        """
        comparison.id = self.id_generator.generate_id()
        comparison.created_at = datetime.now(timezone.utc)

        with wrap_errors("failed to create comparison"):
            comparison.validate()
            await self.repo.create(comparison)

        log.info("Created comparison %s (%r)", comparison.id, comparison.name)
        return comparison

    async def update_comparison(self, comparison_id: str, comparison: Comparison) -> None:
        """
        Replace the stored comparison, keeping its id and created_at.

        Whatever the caller put in those two fields is overwritten.
        """
        with wrap_errors("failed to get existing comparison"):
            existing = await self.repo.get_by_id(comparison_id)

        comparison.id = existing.id
        comparison.created_at = existing.created_at

        with wrap_errors("failed to update comparison"):
            comparison.validate()
            await self.repo.update(comparison)

        log.info("Updated comparison %s", comparison.id)

    async def delete_comparison(self, comparison_id: str) -> None:
        with wrap_errors("failed to delete comparison"):
            await self.repo.delete(comparison_id)

        log.info("Deleted comparison %s", comparison_id)
