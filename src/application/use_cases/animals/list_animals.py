from __future__ import annotations

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AgeCategory, Gender


async def execute(
    uow: UnitOfWork,
    *,
    gender: str | None = None,
    category: str | None = None,
    search: str | None = None,
) -> list[Animal]:
    if gender is not None and gender not in {g.value for g in Gender}:
        raise ValidationError("Gender must be 'female' or 'male'")
    if category is not None and category not in {c.value for c in AgeCategory}:
        raise ValidationError("Category must be 'adult' or 'calf'")
    return await uow.animals.list(gender=gender, category=category, search=search)
