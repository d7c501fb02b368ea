from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.custom_event_type import CustomEventType
from src.domain.value_objects.animal_category import classify


async def execute(uow: UnitOfWork, animal_id: UUID | None = None) -> list[CustomEventType]:
    """List custom event types by name, optionally only those applicable to an animal."""
    types = await uow.custom_event_types.list()
    if animal_id is None:
        return types
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFound(f"Animal {animal_id} not found")
    category = classify(animal)
    return [t for t in types if t.applies_to(category)]
