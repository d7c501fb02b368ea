from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.services.breeding_config_service import BreedingConfigService
from src.application.use_cases.lifecycle import apply_action
from src.domain.models.animal import Animal
from src.domain.models.breeding_config import BreedingConfig
from src.domain.models.event import Event, EventStatus, EventType, SemenDetails
from src.domain.value_objects.action_kind import ActionKind

NOW = datetime(2024, 3, 10, 8, 0, tzinfo=timezone.utc)


async def add_animal(uow, **overrides) -> Animal:
    fields = {"tag": "COW-1", "gender": "female"}
    fields.update(overrides)
    return await uow.animals.add(Animal.create(**fields))


async def add_pending(uow, animal: Animal, event_type: EventType, scheduled: datetime) -> Event:
    return await uow.events.add(
        Event.create(
            animal_id=animal.id,
            event_type=event_type.value,
            title=f"{event_type.title} for {animal.tag}",
            scheduled_date=scheduled,
        )
    )


async def run(uow, animal: Animal, action: str, **kwargs):
    return await apply_action.execute(
        uow,
        BreedingConfigService(),
        apply_action.ApplyActionInput(animal_id=animal.id, action=action, **kwargs),
        now=NOW,
    )


def test_every_action_kind_has_a_handler():
    assert set(apply_action.HANDLERS) == set(ActionKind)


@pytest.mark.asyncio
async def test_unknown_action_is_rejected(uow):
    animal = await add_animal(uow)
    with pytest.raises(ValidationError):
        await run(uow, animal, "milk")
    assert uow.events.items == {}


@pytest.mark.asyncio
async def test_missing_animal_raises_not_found(uow):
    with pytest.raises(NotFound):
        await apply_action.execute(
            uow,
            BreedingConfigService(),
            apply_action.ApplyActionInput(animal_id=uuid4(), action="health-check"),
            now=NOW,
        )


@pytest.mark.asyncio
@pytest.mark.parametrize("kind", list(ActionKind))
async def test_actions_without_pending_event_do_not_fail(uow, kind):
    animal = await add_animal(uow, reproductive_status="open")
    result = await run(uow, animal, kind.value)
    assert result.completed_event is None
    assert result.action is kind
    assert uow.state["commits"] >= 1


@pytest.mark.asyncio
async def test_health_check_without_pending_schedules_next(uow):
    animal = await add_animal(uow)
    result = await run(uow, animal, "health-check")

    assert result.completed_event is None
    assert result.animal.last_health_check_date == NOW
    [next_check] = result.scheduled_events
    assert next_check.event_type == EventType.HEALTH_CHECK.value
    assert next_check.status == EventStatus.PENDING.value
    assert next_check.priority == "Medium"
    assert next_check.scheduled_date == NOW + timedelta(days=14)
    assert next_check.title == "Health Check for COW-1"


@pytest.mark.asyncio
async def test_health_check_completes_earliest_pending_and_warns(uow, caplog):
    animal = await add_animal(uow)
    later = await add_pending(uow, animal, EventType.HEALTH_CHECK, NOW + timedelta(days=2))
    earlier = await add_pending(uow, animal, EventType.HEALTH_CHECK, NOW - timedelta(days=1))

    with caplog.at_level(logging.WARNING):
        result = await run(uow, animal, "health-check", notes="All good")

    assert result.completed_event.id == earlier.id
    assert uow.events.items[earlier.id].status == EventStatus.COMPLETED.value
    assert uow.events.items[earlier.id].completed_date == NOW
    assert uow.events.items[earlier.id].notes == "All good"
    assert uow.events.items[later.id].status == EventStatus.PENDING.value
    assert "2 pending HealthCheck events" in caplog.text


@pytest.mark.asyncio
async def test_completing_without_notes_keeps_existing_notes(uow):
    animal = await add_animal(uow)
    pending = await add_pending(uow, animal, EventType.DRY_OFF, NOW)
    uow.events.items[pending.id].notes = "Reduce feed first"

    await run(uow, animal, "dry-off-completed")

    assert uow.events.items[pending.id].notes == "Reduce feed first"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["open", "not bred"])
async def test_heat_symptoms_schedules_insemination(uow, status):
    animal = await add_animal(uow, reproductive_status=status)
    result = await run(uow, animal, "heat-symptoms")

    assert result.animal.reproductive_status == "open"
    assert result.animal.last_heat_day == NOW
    heat = result.recorded_event
    assert heat.event_type == EventType.HEAT_OBSERVED.value
    assert heat.status == EventStatus.COMPLETED.value
    [insemination] = result.scheduled_events
    assert insemination.event_type == EventType.INSEMINATION.value
    assert insemination.scheduled_date == NOW + timedelta(hours=12)
    assert insemination.reminder_time.to_dict() == {"value": 2, "unit": "hour"}
    assert insemination.associated_events == [heat.id]


@pytest.mark.asyncio
async def test_heat_symptoms_on_male_is_rejected(uow):
    bull = await add_animal(uow, tag="BULL-1", gender="male")
    with pytest.raises(ValidationError):
        await run(uow, bull, "heat-symptoms")
    assert uow.events.items == {}
    assert uow.animals.items[bull.id].reproductive_status == "not bred"


@pytest.mark.asyncio
@pytest.mark.parametrize("gender", ["female", "male"])
async def test_insemination_sets_bred_and_schedules_pregnancy_check(uow, gender):
    animal = await add_animal(uow, gender=gender)
    semen = SemenDetails(bull_tag="B-7", serial_number="SN-1", producer="GenStar")
    result = await run(uow, animal, "insemination", semen_details=semen)

    assert result.animal.reproductive_status == "bred"
    assert result.animal.last_insemination_date == NOW
    assert result.completed_event is None
    recorded = result.recorded_event
    assert recorded.event_type == EventType.INSEMINATION.value
    assert recorded.semen_details == semen
    [check] = result.scheduled_events
    assert check.event_type == EventType.PREGNANCY_CHECK.value
    assert check.status == EventStatus.PENDING.value
    assert check.scheduled_date == NOW + timedelta(days=30)
    assert check.associated_events == [recorded.id]


@pytest.mark.asyncio
async def test_insemination_completes_the_scheduled_insemination(uow):
    animal = await add_animal(uow)
    heat = await run(uow, animal, "heat-symptoms")
    scheduled = heat.scheduled_events[0]

    semen = SemenDetails(bull_tag="B-9")
    result = await run(uow, animal, "insemination", notes="AI by vet", semen_details=semen)

    assert result.recorded_event is None
    assert result.completed_event.id == scheduled.id
    stored = uow.events.items[scheduled.id]
    assert stored.status == EventStatus.COMPLETED.value
    assert stored.semen_details == semen
    assert stored.notes == "AI by vet"
    assert result.scheduled_events[0].associated_events == [scheduled.id]


@pytest.mark.asyncio
async def test_insemination_uses_configured_check_delay(uow_factory):
    uow = uow_factory(BreedingConfig(insemination_to_pregnancy_check_days=21))
    animal = await add_animal(uow)
    result = await run(uow, animal, "insemination")
    assert result.scheduled_events[0].scheduled_date == NOW + timedelta(days=21)


@pytest.mark.asyncio
async def test_pregnancy_confirmed_with_default_config(uow):
    inseminated = datetime(2024, 1, 1, tzinfo=timezone.utc)
    animal = await add_animal(uow, reproductive_status="bred")
    uow.animals.items[animal.id].last_insemination_date = inseminated

    result = await run(uow, animal, "pregnancy-confirmed")

    calving, dry_off = result.scheduled_events
    assert calving.event_type == EventType.EXPECTED_CALVING.value
    assert calving.scheduled_date == datetime(2024, 10, 7, tzinfo=timezone.utc)
    assert calving.reminder_time.to_dict() == {"value": 7, "unit": "day"}
    assert dry_off.event_type == EventType.DRY_OFF.value
    assert dry_off.scheduled_date == datetime(2024, 8, 8, tzinfo=timezone.utc)
    assert result.animal.reproductive_status == "confirmed pregnant"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("pregnancy_days", "dry_off_days"),
    [(200, 30), (283, 60), (400, 120)],
)
async def test_pregnancy_confirmed_follows_configured_timing(
    uow_factory, pregnancy_days, dry_off_days
):
    uow = uow_factory(
        BreedingConfig(
            pregnancy_length_days=pregnancy_days,
            dry_off_days_before_calving=dry_off_days,
        )
    )
    inseminated = datetime(2023, 11, 20, 6, 30, tzinfo=timezone.utc)
    animal = await add_animal(uow)
    uow.animals.items[animal.id].last_insemination_date = inseminated
    check = await add_pending(uow, animal, EventType.PREGNANCY_CHECK, NOW)

    result = await run(uow, animal, "pregnancy-confirmed")

    calving, dry_off = result.scheduled_events
    assert calving.scheduled_date == inseminated + timedelta(days=pregnancy_days)
    assert dry_off.scheduled_date == calving.scheduled_date - timedelta(days=dry_off_days)
    assert result.completed_event.id == check.id
    assert uow.events.items[check.id].result == "positive"
    assert calving.associated_events == [check.id]
    assert dry_off.associated_events == [check.id]


@pytest.mark.asyncio
async def test_pregnancy_confirmed_without_insemination_date_schedules_nothing(uow):
    animal = await add_animal(uow)
    result = await run(uow, animal, "pregnancy-confirmed")
    assert result.scheduled_events == []
    assert result.animal.reproductive_status == "confirmed pregnant"


@pytest.mark.asyncio
async def test_not_pregnant_records_negative_result(uow):
    animal = await add_animal(uow, reproductive_status="bred")
    check = await add_pending(uow, animal, EventType.PREGNANCY_CHECK, NOW)

    result = await run(uow, animal, "not-pregnant", notes="Open again")

    assert result.animal.reproductive_status == "not bred"
    assert result.scheduled_events == []
    stored = uow.events.items[check.id]
    assert stored.status == EventStatus.COMPLETED.value
    assert stored.result == "negative"


@pytest.mark.asyncio
async def test_dry_off_completed_sets_dry(uow):
    animal = await add_animal(uow, reproductive_status="confirmed pregnant")
    pending = await add_pending(uow, animal, EventType.DRY_OFF, NOW)

    result = await run(uow, animal, "dry-off-completed")

    assert result.animal.reproductive_status == "dry"
    assert result.completed_event.id == pending.id


@pytest.mark.asyncio
async def test_calving_completed_resets_cycle(uow):
    animal = await add_animal(uow, reproductive_status="dry")
    uow.animals.items[animal.id].last_insemination_date = NOW - timedelta(days=280)
    expected = await add_pending(uow, animal, EventType.EXPECTED_CALVING, NOW)

    result = await run(uow, animal, "calving-completed")

    assert result.animal.reproductive_status == "not bred"
    assert result.animal.last_insemination_date is None
    assert result.completed_event.id == expected.id
    calving = result.recorded_event
    assert calving.event_type == EventType.CALVING.value
    assert calving.status == EventStatus.COMPLETED.value
    assert calving.completed_date == NOW
    assert calving.associated_events == [expected.id]
    [health_check] = result.scheduled_events
    assert health_check.event_type == EventType.HEALTH_CHECK.value
    assert health_check.scheduled_date == NOW + timedelta(days=14)
    assert health_check.associated_events == [calving.id]


@pytest.mark.asyncio
async def test_full_breeding_cycle(uow):
    animal = await add_animal(uow)
    await run(uow, animal, "heat-symptoms")
    await run(uow, animal, "insemination")
    await run(uow, animal, "pregnancy-confirmed")
    await run(uow, animal, "dry-off-completed")
    result = await run(uow, animal, "calving-completed")

    assert result.animal.reproductive_status == "not bred"
    pending_types = sorted(
        e.event_type for e in uow.events.items.values() if e.status == EventStatus.PENDING.value
    )
    assert pending_types == [EventType.HEALTH_CHECK.value]
