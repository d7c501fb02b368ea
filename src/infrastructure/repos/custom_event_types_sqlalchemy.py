from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.custom_event_types import (
    CustomEventTypesRepository,
)
from src.domain.models.custom_event_type import CustomEventType
from src.domain.models.event import ReminderTime
from src.infrastructure.db.orm.custom_event_type import CustomEventTypeORM
from src.utils.datetime_tz import ensure_utc


class CustomEventTypesSQLAlchemyRepository(CustomEventTypesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: CustomEventTypeORM) -> CustomEventType:
        return CustomEventType(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            default_priority=orm.default_priority,
            reminder_time=ReminderTime(value=orm.reminder_value, unit=orm.reminder_unit),
            animal_categories=list(orm.animal_categories or []),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, event_type: CustomEventType) -> CustomEventType:
        orm = CustomEventTypeORM(
            id=event_type.id,
            name=event_type.name,
            description=event_type.description,
            default_priority=event_type.default_priority,
            reminder_value=event_type.reminder_time.value,
            reminder_unit=event_type.reminder_time.unit,
            animal_categories=list(event_type.animal_categories),
            created_at=event_type.created_at,
            updated_at=event_type.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("A custom event type with this name already exists") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to create custom event type") from exc
        return self._to_domain(orm)

    async def get(self, event_type_id: UUID) -> CustomEventType | None:
        orm = await self.session.get(CustomEventTypeORM, event_type_id)
        return self._to_domain(orm) if orm else None

    async def get_by_name(self, name: str) -> CustomEventType | None:
        result = await self.session.execute(
            select(CustomEventTypeORM).where(CustomEventTypeORM.name == name)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[CustomEventType]:
        result = await self.session.execute(
            select(CustomEventTypeORM).order_by(CustomEventTypeORM.name)
        )
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def delete(self, event_type_id: UUID) -> bool:
        orm = await self.session.get(CustomEventTypeORM, event_type_id)
        if orm is None:
            return False
        try:
            await self.session.delete(orm)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to delete custom event type") from exc
        return True
