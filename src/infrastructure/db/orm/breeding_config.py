from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base

SINGLETON_ID = 1


class BreedingConfigORM(Base):
    __tablename__ = "breeding_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SINGLETON_ID)
    pregnancy_length_days: Mapped[int] = mapped_column(Integer, nullable=False, default=280)
    dry_off_days_before_calving: Mapped[int] = mapped_column(Integer, nullable=False, default=60)
    insemination_to_pregnancy_check_days: Mapped[int] = mapped_column(
        Integer, nullable=False, default=30
    )
    health_check_interval_days: Mapped[int] = mapped_column(Integer, nullable=False, default=14)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
