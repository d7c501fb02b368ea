from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.breeding_config import BreedingConfigRepository
from src.domain.models.breeding_config import BreedingConfig
from src.infrastructure.db.orm.breeding_config import SINGLETON_ID, BreedingConfigORM
from src.utils.datetime_tz import ensure_utc


class BreedingConfigSQLAlchemyRepository(BreedingConfigRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingConfigORM) -> BreedingConfig:
        return BreedingConfig(
            pregnancy_length_days=orm.pregnancy_length_days,
            dry_off_days_before_calving=orm.dry_off_days_before_calving,
            insemination_to_pregnancy_check_days=orm.insemination_to_pregnancy_check_days,
            health_check_interval_days=orm.health_check_interval_days,
            updated_at=ensure_utc(orm.updated_at),
        )

    async def get(self) -> BreedingConfig | None:
        orm = await self.session.get(BreedingConfigORM, SINGLETON_ID)
        return self._to_domain(orm) if orm else None

    async def upsert(self, data: dict) -> BreedingConfig:
        now = datetime.now(timezone.utc)
        orm = await self.session.get(BreedingConfigORM, SINGLETON_ID)
        if orm is None:
            defaults = BreedingConfig()
            orm = BreedingConfigORM(
                id=SINGLETON_ID,
                pregnancy_length_days=defaults.pregnancy_length_days,
                dry_off_days_before_calving=defaults.dry_off_days_before_calving,
                insemination_to_pregnancy_check_days=defaults.insemination_to_pregnancy_check_days,
                health_check_interval_days=defaults.health_check_interval_days,
            )
            self.session.add(orm)
        for key, value in data.items():
            setattr(orm, key, value)
        orm.updated_at = now
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to save breeding settings") from exc
        return self._to_domain(orm)
