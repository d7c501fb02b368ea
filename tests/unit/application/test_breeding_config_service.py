from __future__ import annotations

import pytest

from src.application.errors import ValidationError
from src.application.services.breeding_config_service import (
    BreedingConfigService,
    validate_changes,
)
from src.domain.models.breeding_config import BreedingConfig


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_get_creates_defaults_when_missing(uow):
    service = BreedingConfigService()
    config = await service.get(uow)

    assert config.pregnancy_length_days == 280
    assert config.dry_off_days_before_calving == 60
    assert config.insemination_to_pregnancy_check_days == 30
    assert config.health_check_interval_days == 14
    assert uow.breeding_config.upserts == [{}]
    assert uow.state["commits"] == 1


@pytest.mark.asyncio
async def test_get_serves_cache_until_ttl_expires(uow_factory):
    uow = uow_factory(BreedingConfig(pregnancy_length_days=285))
    clock = FakeClock()
    service = BreedingConfigService(ttl_seconds=300, clock=clock)

    first = await service.get(uow)
    uow.breeding_config.row.pregnancy_length_days = 290
    clock.now += 299
    cached = await service.get(uow)
    clock.now += 1
    refreshed = await service.get(uow)

    assert first.pregnancy_length_days == 285
    assert cached.pregnancy_length_days == 285
    assert refreshed.pregnancy_length_days == 290
    assert uow.breeding_config.get_calls == 2


@pytest.mark.asyncio
async def test_returned_config_is_a_copy(uow):
    service = BreedingConfigService()
    config = await service.get(uow)
    config.pregnancy_length_days = 1
    assert service.cached.value.pregnancy_length_days == 280


@pytest.mark.asyncio
async def test_update_writes_and_refreshes_cache(uow):
    clock = FakeClock()
    service = BreedingConfigService(clock=clock)
    await service.get(uow)
    clock.now += 10

    updated = await service.update(uow, {"health_check_interval_days": 21})

    assert updated.health_check_interval_days == 21
    assert updated.pregnancy_length_days == 280
    assert service.cached.value.health_check_interval_days == 21
    assert service.cached.fetched_at == clock.now
    assert uow.breeding_config.upserts[-1] == {"health_check_interval_days": 21}


@pytest.mark.asyncio
async def test_out_of_range_update_leaves_cache_untouched(uow):
    service = BreedingConfigService()
    await service.get(uow)
    before = service.cached

    with pytest.raises(ValidationError) as exc_info:
        await service.update(uow, {"pregnancy_length_days": 150})

    assert exc_info.value.message == "Pregnancy length must be between 200 and 400 days"
    assert exc_info.value.details["field"] == "pregnancy_length_days"
    assert service.cached is before
    assert service.cached.value.pregnancy_length_days == 280
    assert uow.breeding_config.upserts == [{}]


@pytest.mark.asyncio
async def test_partial_invalid_update_writes_nothing(uow):
    service = BreedingConfigService()
    with pytest.raises(ValidationError):
        await service.update(
            uow,
            {"health_check_interval_days": 30, "dry_off_days_before_calving": 200},
        )
    assert uow.breeding_config.upserts == []
    assert service.cached is None


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"dry_off_days_before_calving": 29}, "Dry-off timing must be between 30 and 120"),
        ({"insemination_to_pregnancy_check_days": 61}, "Pregnancy check timing"),
        ({"health_check_interval_days": 6}, "Health check interval must be between 7 and 90"),
        ({"pregnancy_length_days": "280"}, "must be an integer"),
        ({"pregnancy_length_days": True}, "must be an integer"),
        ({"milking_interval": 12}, "Unknown settings"),
    ],
)
def test_validate_changes_rejects(changes, message):
    with pytest.raises(ValidationError) as exc_info:
        validate_changes(changes)
    assert message in exc_info.value.message


def test_validate_changes_accepts_boundaries():
    changes = {
        "pregnancy_length_days": 200,
        "dry_off_days_before_calving": 120,
        "insemination_to_pregnancy_check_days": 14,
        "health_check_interval_days": 90,
    }
    assert validate_changes(changes) == changes
