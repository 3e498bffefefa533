"""
Seed script to populate a demo comparison.

Creates:
- A few custom options
- One comparison using them
- Objects with values for those custom options

Existing custom options and comparisons with the same names are reused, so
the script can be run more than once. Pass --reset to drop all tables first.

Usage:
    python -m scripts.seed_demo [--reset]
"""
import asyncio
import sys

from comparison_center.core.database.engine import drop_db, get_db, init_db
from comparison_center.core.errors import AlreadyExistsError
from comparison_center.core.generator import UlidGenerator
from comparison_center.features.comparisons.domain import Comparison
from comparison_center.features.comparisons.repository import SqlComparisonRepository
from comparison_center.features.comparisons.usecase import ComparisonUsecase
from comparison_center.features.custom_options.domain import CustomOption, new_custom_option_filter
from comparison_center.features.custom_options.repository import SqlCustomOptionRepository
from comparison_center.features.custom_options.usecase import CustomOptionUsecase
from comparison_center.features.objects.domain import Association, Object
from comparison_center.features.objects.repository import SqlAssociationRepository, SqlObjectRepository
from comparison_center.features.objects.usecase import ObjectUsecase
from comparison_center.utils import get_logger


log = get_logger(__name__)


DEMO_COMPARISON = "Laptops"

DEMO_CUSTOM_OPTIONS = ["Weight", "Battery life", "Screen"]

DEMO_OBJECTS = [
    {
        "name": "Thin and light",
        "rating": 8,
        "advs": "Easy to carry",
        "disadvs": "Few ports",
        "values": {"Weight": "1.1 kg", "Battery life": "14 h", "Screen": "13.3\" OLED"},
    },
    {
        "name": "Workstation",
        "rating": 7,
        "advs": "Fast, upgradeable",
        "disadvs": "Heavy",
        "values": {"Weight": "2.6 kg", "Battery life": "5 h", "Screen": "16\" IPS"},
    },
    {
        "name": "Budget",
        "rating": 5,
        "advs": "Cheap",
        "disadvs": "",
        "values": {"Weight": "1.8 kg", "Screen": "15.6\" TN"},
    },
]


async def seed_custom_options(usecase: CustomOptionUsecase) -> dict[str, str]:
    """
    Create the demo custom options.

    Returns:
        Dictionary mapping custom option names to ids
    """
    log.info("Creating custom options...")
    option_ids = {}

    for name in DEMO_CUSTOM_OPTIONS:
        try:
            option = await usecase.create_custom_option(CustomOption(name=name))
        except AlreadyExistsError:
            log.debug("Custom option '%s' already exists, reusing it", name)
            matches = await usecase.list_custom_options(new_custom_option_filter(name=name))
            option = next(match for match in matches if match.name == name)
        option_ids[name] = option.id

    return option_ids


async def seed_comparison(usecase: ComparisonUsecase, option_ids: dict[str, str]) -> str | None:
    """Create the demo comparison. Returns its id, or None if it already existed."""
    try:
        comparison = await usecase.create_comparison(
            Comparison(name=DEMO_COMPARISON, custom_option_ids=list(option_ids.values()))
        )
    except AlreadyExistsError:
        log.warning("Comparison '%s' already exists, skipping objects", DEMO_COMPARISON)
        return None
    return comparison.id


async def seed_objects(usecase: ObjectUsecase, comparison_id: str, option_ids: dict[str, str]) -> None:
    log.info("Creating objects...")
    for entry in DEMO_OBJECTS:
        obj = Object(
            name=entry["name"],
            rating=entry["rating"],
            advs=entry["advs"],
            disadvs=entry["disadvs"],
            comparison_id=comparison_id,
            associations=[
                Association(custom_option_id=option_ids[option_name], value=value)
                for option_name, value in entry["values"].items()
            ],
        )
        object_id = await usecase.create_object(obj)
        log.info("Created object '%s' (%s)", entry["name"], object_id)


async def main():
    """Main function to seed the demo data."""
    if "--reset" in sys.argv[1:]:
        log.warning("Dropping all tables...")
        await drop_db()

    log.info("Initializing database tables...")
    await init_db()

    id_generator = UlidGenerator()
    async for db in get_db():
        try:
            option_ids = await seed_custom_options(CustomOptionUsecase(SqlCustomOptionRepository(db), id_generator))
            comparison_id = await seed_comparison(ComparisonUsecase(SqlComparisonRepository(db), id_generator), option_ids)
            if comparison_id is not None:
                object_usecase = ObjectUsecase(SqlObjectRepository(db), SqlAssociationRepository(db), id_generator)
                await seed_objects(object_usecase, comparison_id, option_ids)
            log.info("Demo seeding completed successfully!")
        except Exception as e:
            log.error("Error seeding demo data: %s", e, exc_info=True)
            await db.rollback()
            raise

        break  # Only use first session


if __name__ == "__main__":
    asyncio.run(main())
