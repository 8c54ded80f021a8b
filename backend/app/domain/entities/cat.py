"""Domain entity — the single resource managed by the registry."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Cat:
    """Core domain entity representing a registered cat.

    ``id`` stays ``None`` until the repository persists the record.
    """

    name: str
    age: int
    notes: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
