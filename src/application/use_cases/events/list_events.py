from __future__ import annotations

from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.event import Event, EventStatus


async def execute(
    uow: UnitOfWork,
    *,
    animal_id: UUID | None = None,
    status: str | None = None,
    event_type: str | None = None,
) -> list[Event]:
    """List events ordered by scheduled date, oldest first."""
    if status is not None and status not in {s.value for s in EventStatus}:
        valid = ", ".join(s.value for s in EventStatus)
        raise ValidationError(f"Invalid status. Must be one of: {valid}")
    return await uow.events.list(
        animal_id=animal_id,
        status=status,
        event_type=event_type,
        sort_by="scheduled_date",
        sort_dir="asc",
    )
