from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.animal_category import AgeCategory
from src.domain.value_objects.reproductive_status import ReproductiveStatus


@dataclass(slots=True)
class Animal:
    id: UUID
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

    # Reproductive state
    reproductive_status: str = ReproductiveStatus.NOT_BRED.value
    last_heat_day: datetime | None = None
    last_insemination_date: datetime | None = None
    last_health_check_date: datetime | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        tag: str,
        gender: str,
        category: str = AgeCategory.ADULT.value,
        name: str | None = None,
        birth_date: date | None = None,
        breed: str | None = None,
        weight: Decimal | None = None,
        body_condition_score: Decimal | None = None,
        acquisition_date: date | None = None,
        acquisition_type: str | None = None,
        mothers_tag: str | None = None,
        fathers_tag: str | None = None,
        location: str | None = None,
        notes: str | None = None,
        reproductive_status: str | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tag=tag,
            gender=gender,
            category=category,
            name=name,
            birth_date=birth_date,
            breed=breed,
            weight=weight,
            body_condition_score=body_condition_score,
            acquisition_date=acquisition_date,
            acquisition_type=acquisition_type,
            mothers_tag=mothers_tag,
            fathers_tag=fathers_tag,
            location=location,
            notes=notes,
            reproductive_status=reproductive_status or ReproductiveStatus.NOT_BRED.value,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_female(self) -> bool:
        return self.gender == "female"
