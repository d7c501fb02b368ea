from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.interfaces.http.schemas.events import ReminderTimeSchema


class CustomEventTypeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    default_priority: str = "Medium"
    reminder_time: ReminderTimeSchema
    animal_categories: list[str] = Field(
        ..., description="Any of: adult female, adult male, calf"
    )


class CustomEventTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    default_priority: str
    reminder_time: ReminderTimeSchema
    animal_categories: list[str]
    created_at: datetime
    updated_at: datetime
