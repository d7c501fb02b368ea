from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.custom_event_type import CustomEventType


class CustomEventTypesRepository(Protocol):
    async def add(self, event_type: CustomEventType) -> CustomEventType: ...

    async def get(self, event_type_id: UUID) -> CustomEventType | None: ...

    async def get_by_name(self, name: str) -> CustomEventType | None: ...

    async def list(self) -> list[CustomEventType]: ...

    async def delete(self, event_type_id: UUID) -> bool: ...
