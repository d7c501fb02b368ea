from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4

from dateutil.relativedelta import relativedelta


class EventType(str, Enum):
    HEALTH_CHECK = "HealthCheck"
    HEAT_OBSERVED = "HeatObserved"
    INSEMINATION = "Insemination"
    PREGNANCY_CHECK = "PregnancyCheck"
    DRY_OFF = "DryOff"
    EXPECTED_CALVING = "ExpectedCalving"
    CALVING = "Calving"

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    EventType.HEALTH_CHECK: "Health Check",
    EventType.HEAT_OBSERVED: "Heat Observed",
    EventType.INSEMINATION: "Insemination",
    EventType.PREGNANCY_CHECK: "Pregnancy Check",
    EventType.DRY_OFF: "Dry Off",
    EventType.EXPECTED_CALVING: "Expected Calving",
    EventType.CALVING: "Calving",
}


class EventStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    CANCELLED = "Cancelled"


class EventPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class PregnancyResult(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class ReminderUnit(str, Enum):
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(slots=True, frozen=True)
class ReminderTime:
    value: int
    unit: str

    def after(self, moment: datetime) -> datetime:
        """Return `moment` shifted forward by this reminder offset.

        Months use calendar arithmetic, so Jan 31 + 1 month is Feb 28/29.
        """
        unit = ReminderUnit(self.unit)
        if unit is ReminderUnit.HOUR:
            return moment + timedelta(hours=self.value)
        if unit is ReminderUnit.DAY:
            return moment + timedelta(days=self.value)
        if unit is ReminderUnit.WEEK:
            return moment + timedelta(weeks=self.value)
        return moment + relativedelta(months=self.value)

    def to_dict(self) -> dict:
        return {"value": self.value, "unit": self.unit}


@dataclass(slots=True, frozen=True)
class SemenDetails:
    bull_tag: str | None = None
    serial_number: str | None = None
    producer: str | None = None

    def to_dict(self) -> dict:
        return {
            "bull_tag": self.bull_tag,
            "serial_number": self.serial_number,
            "producer": self.producer,
        }


@dataclass(slots=True)
class Event:
    id: UUID
    animal_id: UUID
    event_type: str
    title: str
    scheduled_date: datetime
    status: str = EventStatus.PENDING.value
    priority: str = EventPriority.MEDIUM.value
    description: str | None = None
    completed_date: datetime | None = None
    result: str | None = None
    notes: str | None = None
    semen_details: SemenDetails | None = None
    reminder_time: ReminderTime | None = None
    location: str | None = None
    associated_events: list[UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: UUID,
        event_type: str,
        title: str,
        scheduled_date: datetime,
        status: str = EventStatus.PENDING.value,
        priority: str = EventPriority.MEDIUM.value,
        description: str | None = None,
        completed_date: datetime | None = None,
        result: str | None = None,
        notes: str | None = None,
        semen_details: SemenDetails | None = None,
        reminder_time: ReminderTime | None = None,
        location: str | None = None,
        associated_events: list[UUID] | None = None,
    ) -> Event:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            animal_id=animal_id,
            event_type=event_type,
            title=title,
            scheduled_date=scheduled_date,
            status=status,
            priority=priority,
            description=description,
            completed_date=completed_date,
            result=result,
            notes=notes,
            semen_details=semen_details,
            reminder_time=reminder_time,
            location=location,
            associated_events=list(associated_events or []),
            created_at=now,
            updated_at=now,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == EventStatus.PENDING.value

    def complete(
        self,
        completed_at: datetime,
        notes: str | None = None,
        result: str | None = None,
        semen_details: SemenDetails | None = None,
    ) -> None:
        self.status = EventStatus.COMPLETED.value
        self.completed_date = completed_at
        self.notes = notes or self.notes
        if result is not None:
            self.result = result
        if semen_details is not None:
            self.semen_details = semen_details
        self.updated_at = datetime.now(timezone.utc)
