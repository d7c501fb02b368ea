from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, event_type_id: UUID) -> None:
    # Events already created from this type are history and stay untouched.
    deleted = await uow.custom_event_types.delete(event_type_id)
    if not deleted:
        raise NotFound("Custom event type not found")
    await uow.commit()
