from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# field name -> (minimum, maximum, error message)
CONFIG_LIMITS: dict[str, tuple[int, int, str]] = {
    "pregnancy_length_days": (
        200,
        400,
        "Pregnancy length must be between 200 and 400 days",
    ),
    "dry_off_days_before_calving": (
        30,
        120,
        "Dry-off timing must be between 30 and 120 days before calving",
    ),
    "insemination_to_pregnancy_check_days": (
        14,
        60,
        "Pregnancy check timing must be between 14 and 60 days after insemination",
    ),
    "health_check_interval_days": (
        7,
        90,
        "Health check interval must be between 7 and 90 days",
    ),
}


@dataclass(slots=True)
class BreedingConfig:
    pregnancy_length_days: int = 280
    dry_off_days_before_calving: int = 60
    insemination_to_pregnancy_check_days: int = 30
    health_check_interval_days: int = 14
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
