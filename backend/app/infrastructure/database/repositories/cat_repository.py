"""Concrete repository implementation for Cat backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import CatRepository
from app.domain.entities import Cat
from app.infrastructure.database.models import CatModel


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyCatRepository(CatRepository):
    """Implements the CatRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CatModel) -> Cat:
        """Map ORM model → domain entity."""
        return Cat(
            id=model.id,
            name=model.name,
            age=model.age,
            notes=model.notes,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Cat) -> CatModel:
        """Map domain entity → ORM model (for creation).

        The id is left for the database to assign.
        """
        return CatModel(
            name=entity.name,
            age=entity.age,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.created_at,
        )

    async def get_by_id(self, cat_id: int) -> Cat | None:
        result = await self._session.get(CatModel, cat_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Cat]:
        stmt = select(CatModel).order_by(CatModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, cat: Cat) -> Cat:
        model = self._to_model(cat)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(CatModel))
        return result.scalar_one()
