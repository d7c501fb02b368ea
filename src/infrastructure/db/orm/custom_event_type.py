from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from src.infrastructure.db.base import Base


class CustomEventTypeORM(Base):
    __tablename__ = "custom_event_types"
    __table_args__ = (UniqueConstraint("name", name="ux_custom_event_types_name"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    default_priority: Mapped[str] = mapped_column(
        String(8), nullable=False, server_default="Medium"
    )
    reminder_value: Mapped[int] = mapped_column(Integer, nullable=False)
    reminder_unit: Mapped[str] = mapped_column(String(8), nullable=False)
    animal_categories: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
