from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.event import Event, EventStatus
from src.domain.value_objects.animal_category import classify
from src.utils.datetime_tz import ensure_utc, utc_now

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplyCustomEventInput:
    animal_id: UUID
    custom_event_type_id: UUID
    notes: str | None = None


@dataclass(slots=True)
class CustomEventResult:
    current_event: Event
    next_event: Event
    message: str


async def execute(
    uow: UnitOfWork,
    payload: ApplyCustomEventInput,
    now: datetime | None = None,
) -> CustomEventResult:
    animal = await uow.animals.get(payload.animal_id)
    if not animal:
        raise NotFound(f"Animal {payload.animal_id} not found")

    event_type = await uow.custom_event_types.get(payload.custom_event_type_id)
    if not event_type:
        raise NotFound(f"Custom event type {payload.custom_event_type_id} not found")

    category = classify(animal)
    if not event_type.applies_to(category):
        raise ValidationError(
            f"{event_type.name} does not apply to {category.value} animals",
            details={"category": category.value, "allowed": event_type.animal_categories},
        )

    now = ensure_utc(now) if now else utc_now()
    title = f"{event_type.name} for {animal.tag}"
    description = event_type.description or f"Custom event: {event_type.name}"

    current = await uow.events.add(
        Event.create(
            animal_id=animal.id,
            event_type=event_type.name,
            title=title,
            description=description,
            scheduled_date=now,
            status=EventStatus.COMPLETED.value,
            completed_date=now,
            priority=event_type.default_priority,
            notes=payload.notes or "",
            location=animal.location,
        )
    )

    next_date = event_type.reminder_time.after(now)
    upcoming = await uow.events.add(
        Event.create(
            animal_id=animal.id,
            event_type=event_type.name,
            title=title,
            description=description,
            scheduled_date=next_date,
            status=EventStatus.PENDING.value,
            priority=event_type.default_priority,
            reminder_time=event_type.reminder_time,
            location=animal.location,
            associated_events=[current.id],
        )
    )
    await uow.commit()

    logger.info(
        "Recorded custom event %s for animal %s, next due %s",
        event_type.name,
        animal.tag,
        next_date.isoformat(),
    )
    return CustomEventResult(
        current_event=current,
        next_event=upcoming,
        message=(
            f"{event_type.name} recorded successfully. "
            f"Next event scheduled for {next_date.strftime('%a %b %d %Y')}"
        ),
    )
