from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AnimalBase(BaseModel):
    name: str | None = None
    birth_date: date | None = None
    breed: str | None = None
    weight: Decimal | None = Field(default=None, ge=0)
    body_condition_score: Decimal | None = Field(default=None, ge=1, le=5)
    acquisition_date: date | None = None
    acquisition_type: str | None = None
    mothers_tag: str | None = None
    fathers_tag: str | None = None
    location: str | None = None
    notes: str | None = None


class AnimalCreate(AnimalBase):
    tag: str = Field(..., min_length=1, max_length=128)
    gender: str = Field(..., description="female or male")
    category: str = Field("adult", description="adult or calf")
    # Optional starting point; afterwards only lifecycle actions move it
    reproductive_status: str | None = None


class AnimalUpdate(AnimalBase):
    category: str | None = None


class AnimalResponse(AnimalBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    gender: str
    category: str
    reproductive_status: str
    last_heat_day: datetime | None = None
    last_insemination_date: datetime | None = None
    last_health_check_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
