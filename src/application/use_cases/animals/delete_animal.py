from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, animal_id: UUID) -> None:
    # Events are kept as history even though their animal is gone.
    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        raise NotFound("Animal not found")
    await uow.commit()
