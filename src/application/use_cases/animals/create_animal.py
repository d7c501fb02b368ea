from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AgeCategory, Gender
from src.domain.value_objects.reproductive_status import ReproductiveStatus


@dataclass(slots=True)
class CreateAnimalInput:
    tag: str
    gender: str
    category: str = AgeCategory.ADULT.value
    name: str | None = None
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
    # Registration may seed the status; afterwards only actions change it
    reproductive_status: str | None = None


def _ensure_valid(payload: CreateAnimalInput) -> None:
    if not payload.tag or not payload.tag.strip():
        raise ValidationError("Tag is required")
    if payload.gender not in {g.value for g in Gender}:
        raise ValidationError("Gender must be 'female' or 'male'")
    if payload.category not in {c.value for c in AgeCategory}:
        raise ValidationError("Category must be 'adult' or 'calf'")
    if payload.reproductive_status is not None:
        valid = {s.value for s in ReproductiveStatus}
        if payload.reproductive_status not in valid:
            raise ValidationError(
                f"Invalid reproductive status. Must be one of: {', '.join(sorted(valid))}"
            )


async def execute(uow: UnitOfWork, payload: CreateAnimalInput) -> Animal:
    _ensure_valid(payload)
    animal = Animal.create(
        tag=payload.tag.strip(),
        gender=payload.gender,
        category=payload.category,
        name=payload.name,
        birth_date=payload.birth_date,
        breed=payload.breed,
        weight=payload.weight,
        body_condition_score=payload.body_condition_score,
        acquisition_date=payload.acquisition_date,
        acquisition_type=payload.acquisition_type,
        mothers_tag=payload.mothers_tag,
        fathers_tag=payload.fathers_tag,
        location=payload.location,
        notes=payload.notes,
        reproductive_status=payload.reproductive_status,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created
