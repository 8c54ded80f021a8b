"""Abstract repository interface (port) for Cat persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Cat


class CatRepository(ABC):
    """Port for cat persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, cat_id: int) -> Cat | None:
        """Retrieve a single cat by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Cat]:
        """Retrieve every stored cat in creation order."""
        ...

    @abstractmethod
    async def create(self, cat: Cat) -> Cat:
        """Persist a new, already validated cat and return it with the generated ID."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored cats."""
        ...
