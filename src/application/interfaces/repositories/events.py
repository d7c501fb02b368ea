from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.event import Event


class EventsRepository(Protocol):
    async def add(self, event: Event) -> Event: ...

    async def update(self, event: Event) -> Event: ...

    async def get(self, event_id: UUID) -> Event | None: ...

    async def find_pending(self, animal_id: UUID, event_type: str) -> list[Event]:
        """Pending events of `event_type` for the animal, oldest scheduled first."""
        ...

    async def list(
        self,
        *,
        animal_id: UUID | None = None,
        event_type: str | None = None,
        status: str | None = None,
        completed_from: datetime | None = None,
        completed_to: datetime | None = None,
        sort_by: str | None = None,
        sort_dir: str | None = None,
    ) -> list[Event]: ...
