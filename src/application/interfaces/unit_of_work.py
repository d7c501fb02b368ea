from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.breeding_config import BreedingConfigRepository
from src.application.interfaces.repositories.custom_event_types import (
    CustomEventTypesRepository,
)
from src.application.interfaces.repositories.events import EventsRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    events: EventsRepository
    custom_event_types: CustomEventTypesRepository
    breeding_config: BreedingConfigRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
