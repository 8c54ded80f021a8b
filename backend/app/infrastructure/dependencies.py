"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import CatService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyCatRepository


async def get_cat_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CatService, None]:
    """Provides a CatService instance with its repository wired up."""
    repository = SQLAlchemyCatRepository(session)
    yield CatService(repository)
