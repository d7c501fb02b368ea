from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.models.event import EventPriority, ReminderTime
from src.domain.value_objects.animal_category import AnimalCategory


@dataclass(slots=True)
class CustomEventType:
    id: UUID
    name: str
    reminder_time: ReminderTime
    animal_categories: list[str]
    description: str | None = None
    default_priority: str = EventPriority.MEDIUM.value
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        reminder_time: ReminderTime,
        animal_categories: list[str],
        description: str | None = None,
        default_priority: str = EventPriority.MEDIUM.value,
    ) -> CustomEventType:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            reminder_time=reminder_time,
            animal_categories=list(animal_categories),
            description=description,
            default_priority=default_priority,
            created_at=now,
            updated_at=now,
        )

    def applies_to(self, category: AnimalCategory) -> bool:
        return category.value in self.animal_categories
