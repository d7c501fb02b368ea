from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.animal import Animal


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


class AgeCategory(str, Enum):
    ADULT = "adult"
    CALF = "calf"


class AnimalCategory(str, Enum):
    """Category a custom event type can be restricted to."""

    ADULT_FEMALE = "adult female"
    ADULT_MALE = "adult male"
    CALF = "calf"


def classify(animal: Animal) -> AnimalCategory:
    if animal.category == AgeCategory.CALF.value:
        return AnimalCategory.CALF
    if animal.gender == Gender.FEMALE.value:
        return AnimalCategory.ADULT_FEMALE
    return AnimalCategory.ADULT_MALE
