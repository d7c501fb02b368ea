from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BreedingSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pregnancy_length_days: int
    dry_off_days_before_calving: int
    insemination_to_pregnancy_check_days: int
    health_check_interval_days: int
    updated_at: datetime


class BreedingSettingsUpdate(BaseModel):
    """Partial update; fields left out of the body or sent as null are unchanged.

    Ranges are checked by the settings service so the error carries the
    offending field in `details`.
    """

    model_config = ConfigDict(extra="forbid")

    pregnancy_length_days: int | None = None
    dry_off_days_before_calving: int | None = None
    insemination_to_pregnancy_check_days: int | None = None
    health_check_interval_days: int | None = None
