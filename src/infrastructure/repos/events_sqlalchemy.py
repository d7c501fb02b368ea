from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.events import EventsRepository
from src.domain.models.event import Event, EventStatus, ReminderTime, SemenDetails
from src.infrastructure.db.orm.event import EventORM
from src.utils.datetime_tz import ensure_utc

_SORT_COLUMNS = {
    "scheduled_date": EventORM.scheduled_date,
    "completed_date": EventORM.completed_date,
    "created_at": EventORM.created_at,
}


class EventsSQLAlchemyRepository(EventsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EventORM) -> Event:
        return Event(
            id=orm.id,
            animal_id=orm.animal_id,
            event_type=orm.event_type,
            title=orm.title,
            description=orm.description,
            status=orm.status,
            priority=orm.priority,
            scheduled_date=ensure_utc(orm.scheduled_date),
            completed_date=ensure_utc(orm.completed_date),
            result=orm.result,
            notes=orm.notes,
            semen_details=SemenDetails(**orm.semen_details) if orm.semen_details else None,
            reminder_time=ReminderTime(**orm.reminder_time) if orm.reminder_time else None,
            location=orm.location,
            associated_events=[UUID(value) for value in orm.associated_events or []],
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    def _to_orm(self, event: Event) -> EventORM:
        return EventORM(
            id=event.id,
            animal_id=event.animal_id,
            event_type=event.event_type,
            title=event.title,
            description=event.description,
            status=event.status,
            priority=event.priority,
            scheduled_date=event.scheduled_date,
            completed_date=event.completed_date,
            result=event.result,
            notes=event.notes,
            semen_details=event.semen_details.to_dict() if event.semen_details else None,
            reminder_time=event.reminder_time.to_dict() if event.reminder_time else None,
            location=event.location,
            associated_events=[str(value) for value in event.associated_events],
            created_at=event.created_at,
            updated_at=event.updated_at,
        )

    async def _flush(self, action: str) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to {action} event") from exc

    async def add(self, event: Event) -> Event:
        orm = self._to_orm(event)
        self.session.add(orm)
        await self._flush("create")
        return self._to_domain(orm)

    async def update(self, event: Event) -> Event:
        orm = await self.session.get(EventORM, event.id)
        if not orm:
            raise InfrastructureError(f"Event {event.id} not found")
        orm.status = event.status
        orm.scheduled_date = event.scheduled_date
        orm.completed_date = event.completed_date
        orm.result = event.result
        orm.notes = event.notes
        orm.semen_details = event.semen_details.to_dict() if event.semen_details else None
        orm.associated_events = [str(value) for value in event.associated_events]
        orm.updated_at = datetime.now(timezone.utc)
        await self._flush("update")
        return self._to_domain(orm)

    async def get(self, event_id: UUID) -> Event | None:
        result = await self.session.execute(select(EventORM).where(EventORM.id == event_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_pending(self, animal_id: UUID, event_type: str) -> list[Event]:
        stmt = (
            select(EventORM)
            .where(EventORM.animal_id == animal_id)
            .where(EventORM.event_type == event_type)
            .where(EventORM.status == EventStatus.PENDING.value)
            .order_by(EventORM.scheduled_date.asc(), EventORM.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list(
        self,
        *,
        animal_id: UUID | None = None,
        event_type: str | None = None,
        status: str | None = None,
        completed_from: datetime | None = None,
        completed_to: datetime | None = None,
        sort_by: str | None = None,
        sort_dir: str | None = None,
    ) -> list[Event]:
        stmt = select(EventORM)
        if animal_id is not None:
            stmt = stmt.where(EventORM.animal_id == animal_id)
        if event_type is not None:
            stmt = stmt.where(EventORM.event_type == event_type)
        if status is not None:
            stmt = stmt.where(EventORM.status == status)
        # completed_from inclusive, completed_to exclusive
        if completed_from is not None:
            stmt = stmt.where(EventORM.completed_date >= completed_from)
        if completed_to is not None:
            stmt = stmt.where(EventORM.completed_date < completed_to)

        column = _SORT_COLUMNS.get((sort_by or "scheduled_date").lower(), EventORM.scheduled_date)
        direction_fn = desc if (sort_dir or "asc").lower() == "desc" else asc
        stmt = stmt.order_by(direction_fn(column), EventORM.created_at.asc())

        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
