"""
Translation of SQLAlchemy failures into comparison center errors.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from comparison_center.core.errors import UnavailableError
from comparison_center.utils import get_logger

log = get_logger(__name__)


@asynccontextmanager
async def storage_errors(session: AsyncSession, action: str) -> AsyncIterator[None]:
    """
    Roll back and raise UnavailableError for any storage failure inside the block.

    Repositories catch IntegrityError themselves first when a constraint
    violation means something to the caller (duplicate name, missing parent).
    """
    try:
        yield
    except SQLAlchemyError as e:
        log.error("Storage failure while trying to %s: %s", action, e)
        await session.rollback()
        raise UnavailableError(f"{action} error: {e}") from e
