from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AgeCategory


@dataclass(slots=True)
class UpdateAnimalInput:
    name: str | None = None
    category: str | None = None
    birth_date: date | None = None
    breed: str | None = None
    weight: Decimal | None = None
    body_condition_score: Decimal | None = None
    acquisition_date: date | None = None
    acquisition_type: str | None = None
    mothers_tag: str | None = None
    fathers_tag: str | None = None
    location: str | None = None
    notes: str | None = None


_EDITABLE_FIELDS = (
    "name",
    "category",
    "birth_date",
    "breed",
    "weight",
    "body_condition_score",
    "acquisition_date",
    "acquisition_type",
    "mothers_tag",
    "fathers_tag",
    "location",
    "notes",
)


async def execute(uow: UnitOfWork, animal_id: UUID, payload: UpdateAnimalInput) -> Animal:
    existing = await uow.animals.get(animal_id)
    if not existing:
        raise NotFound("Animal not found")
    if payload.category is not None and payload.category not in {c.value for c in AgeCategory}:
        raise ValidationError("Category must be 'adult' or 'calf'")

    data: dict = {}
    for field_name in _EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.animals.update(animal_id, data)
    if not updated:
        raise NotFound("Animal not found")
    await uow.commit()
    return updated
