from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM
from src.utils.datetime_tz import ensure_utc


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            tag=orm.tag,
            gender=orm.gender,
            category=orm.category,
            name=orm.name,
            birth_date=orm.birth_date,
            breed=orm.breed,
            weight=orm.weight,
            body_condition_score=orm.body_condition_score,
            acquisition_date=orm.acquisition_date,
            acquisition_type=orm.acquisition_type,
            mothers_tag=orm.mothers_tag,
            fathers_tag=orm.fathers_tag,
            location=orm.location,
            notes=orm.notes,
            reproductive_status=orm.reproductive_status,
            last_heat_day=ensure_utc(orm.last_heat_day),
            last_insemination_date=ensure_utc(orm.last_insemination_date),
            last_health_check_date=ensure_utc(orm.last_health_check_date),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            tag=animal.tag,
            gender=animal.gender,
            category=animal.category,
            name=animal.name,
            birth_date=animal.birth_date,
            breed=animal.breed,
            weight=animal.weight,
            body_condition_score=animal.body_condition_score,
            acquisition_date=animal.acquisition_date,
            acquisition_type=animal.acquisition_type,
            mothers_tag=animal.mothers_tag,
            fathers_tag=animal.fathers_tag,
            location=animal.location,
            notes=animal.notes,
            reproductive_status=animal.reproductive_status,
            last_heat_day=animal.last_heat_day,
            last_insemination_date=animal.last_insemination_date,
            last_health_check_date=animal.last_health_check_date,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal tag already exists") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to create animal") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        result = await self.session.execute(select(AnimalORM).where(AnimalORM.id == animal_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        gender: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> list[Animal]:
        stmt = select(AnimalORM)
        if gender is not None:
            stmt = stmt.where(AnimalORM.gender == gender)
        if category is not None:
            stmt = stmt.where(AnimalORM.category == category)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.tag).like(pattern),
                    func.lower(AnimalORM.name).like(pattern),
                )
            )
        stmt = stmt.order_by(AnimalORM.tag)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, animal_id: UUID, data: dict) -> Animal | None:
        orm = await self.session.get(AnimalORM, animal_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        orm.updated_at = data.get("updated_at") or datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to update animal") from exc
        return self._to_domain(orm)

    async def delete(self, animal_id: UUID) -> bool:
        orm = await self.session.get(AnimalORM, animal_id)
        if orm is None:
            return False
        try:
            await self.session.delete(orm)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return True
