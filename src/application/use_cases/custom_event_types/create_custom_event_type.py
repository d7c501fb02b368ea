from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.custom_event_type import CustomEventType
from src.domain.models.event import EventPriority, EventType, ReminderTime, ReminderUnit
from src.domain.value_objects.animal_category import AnimalCategory

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


@dataclass(slots=True)
class CreateCustomEventTypeInput:
    name: str
    reminder_value: int
    reminder_unit: str
    animal_categories: list[str]
    description: str | None = None
    default_priority: str = EventPriority.MEDIUM.value


def _validate(payload: CreateCustomEventTypeInput) -> tuple[str, str | None]:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name must be {MAX_NAME_LENGTH} characters or less")
    if name in {t.value for t in EventType}:
        raise ValidationError(f"{name} is a built-in event type")

    description = payload.description.strip() if payload.description else None
    if description and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description must be {MAX_DESCRIPTION_LENGTH} characters or less"
        )

    valid_priorities = {p.value for p in EventPriority}
    if payload.default_priority not in valid_priorities:
        raise ValidationError(
            f"Invalid priority. Must be one of: {', '.join(sorted(valid_priorities))}"
        )
    valid_units = {u.value for u in ReminderUnit}
    if payload.reminder_unit not in valid_units:
        raise ValidationError(
            f"Invalid reminder unit. Must be one of: {', '.join(sorted(valid_units))}"
        )
    if payload.reminder_value < 1:
        raise ValidationError("Reminder time must be at least 1")

    if not payload.animal_categories:
        raise ValidationError("At least one animal category must be selected")
    valid_categories = {c.value for c in AnimalCategory}
    unknown = [c for c in payload.animal_categories if c not in valid_categories]
    if unknown:
        raise ValidationError(f"Unknown animal categories: {', '.join(unknown)}")
    return name, description


async def execute(uow: UnitOfWork, payload: CreateCustomEventTypeInput) -> CustomEventType:
    name, description = _validate(payload)
    if await uow.custom_event_types.get_by_name(name):
        raise ConflictError("A custom event type with this name already exists")

    event_type = CustomEventType.create(
        name=name,
        description=description,
        default_priority=payload.default_priority,
        reminder_time=ReminderTime(value=payload.reminder_value, unit=payload.reminder_unit),
        # de-duplicate, keep the caller's order
        animal_categories=list(dict.fromkeys(payload.animal_categories)),
    )
    created = await uow.custom_event_types.add(event_type)
    await uow.commit()
    return created
