from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    HEALTH_CHECK = "health-check"
    HEAT_SYMPTOMS = "heat-symptoms"
    INSEMINATION = "insemination"
    PREGNANCY_CONFIRMED = "pregnancy-confirmed"
    NOT_PREGNANT = "not-pregnant"
    DRY_OFF_COMPLETED = "dry-off-completed"
    CALVING_COMPLETED = "calving-completed"
