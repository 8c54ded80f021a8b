"""Application service (use case) for Cat operations."""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from app.application.interfaces import CatRepository
from app.application.schemas import CatCreate
from app.domain.entities import Cat
from app.domain.exceptions import CatValidationError, EntityNotFoundError
from app.domain.validation import to_field_errors

logger = logging.getLogger(__name__)


class CatService:
    """Orchestrates cat listing and creation. Depends on the repository port (DI)."""

    def __init__(self, repository: CatRepository):
        self._repository = repository

    async def get_cat(self, cat_id: int) -> Cat:
        cat = await self._repository.get_by_id(cat_id)
        if cat is None:
            raise EntityNotFoundError("Cat", cat_id)
        return cat

    async def list_cats(self) -> list[Cat]:
        return await self._repository.get_all()

    async def count_cats(self) -> int:
        return await self._repository.count()

    async def create_cat(self, data: CatCreate | dict[str, Any]) -> Cat:
        """Validate the candidate, then persist it.

        Raises:
            CatValidationError: if any field rule fails. The repository is
                not touched in that case.
        """
        if not isinstance(data, CatCreate):
            data = parse_candidate(data)

        now = datetime.now(timezone.utc)
        cat = Cat(
            name=data.name,
            age=data.age,
            notes=data.notes,
            created_at=now,
            updated_at=now,
        )
        created = await self._repository.create(cat)
        logger.info("Created cat id=%s name=%r", created.id, created.name)
        return created


def parse_candidate(candidate: dict[str, Any]) -> CatCreate:
    """Build a ``CatCreate`` or raise ``CatValidationError`` with every broken field."""
    try:
        return CatCreate.model_validate(candidate)
    except ValidationError as exc:
        errors = to_field_errors(exc.errors())
        logger.info("Rejected cat candidate, invalid fields: %s", sorted(errors))
        raise CatValidationError(errors) from exc
