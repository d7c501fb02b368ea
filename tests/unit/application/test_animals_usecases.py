from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    update_animal,
)
from src.application.use_cases.events import list_events
from src.domain.models.event import Event


@pytest.mark.asyncio
async def test_create_animal_defaults_to_not_bred(uow):
    result = await create_animal.execute(
        uow, create_animal.CreateAnimalInput(tag=" COW-1 ", gender="female")
    )
    assert result.tag == "COW-1"
    assert result.reproductive_status == "not bred"
    assert result.category == "adult"
    assert uow.state["commits"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"tag": "  "},
        {"gender": "cow"},
        {"category": "heifer"},
        {"reproductive_status": "lactating"},
    ],
)
async def test_create_animal_validation(uow, overrides):
    fields = {"tag": "COW-1", "gender": "female"}
    fields.update(overrides)
    with pytest.raises(ValidationError):
        await create_animal.execute(uow, create_animal.CreateAnimalInput(**fields))
    assert uow.animals.items == {}


@pytest.mark.asyncio
async def test_update_animal_changes_only_given_fields(uow):
    created = await create_animal.execute(
        uow,
        create_animal.CreateAnimalInput(
            tag="COW-1", gender="female", name="Daisy", reproductive_status="bred"
        ),
    )
    updated = await update_animal.execute(
        uow, created.id, update_animal.UpdateAnimalInput(location="Barn 3")
    )
    assert updated.location == "Barn 3"
    assert updated.name == "Daisy"
    assert updated.reproductive_status == "bred"


@pytest.mark.asyncio
async def test_update_unknown_animal_raises(uow):
    with pytest.raises(NotFound):
        await update_animal.execute(uow, uuid4(), update_animal.UpdateAnimalInput(name="X"))


@pytest.mark.asyncio
async def test_list_animals_filters(uow):
    for tag, gender in (("A-1", "female"), ("A-2", "male"), ("B-1", "female")):
        await create_animal.execute(uow, create_animal.CreateAnimalInput(tag=tag, gender=gender))

    females = await list_animals.execute(uow, gender="female")
    searched = await list_animals.execute(uow, search="a-")

    assert [a.tag for a in females] == ["A-1", "B-1"]
    assert [a.tag for a in searched] == ["A-1", "A-2"]
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, gender="cow")


@pytest.mark.asyncio
async def test_delete_animal_keeps_its_events(uow):
    created = await create_animal.execute(
        uow, create_animal.CreateAnimalInput(tag="COW-1", gender="female")
    )
    event = await uow.events.add(
        Event.create(
            animal_id=created.id,
            event_type="HealthCheck",
            title="Health Check for COW-1",
            scheduled_date=created.created_at,
        )
    )

    await delete_animal.execute(uow, created.id)

    with pytest.raises(NotFound):
        await get_animal.execute(uow, created.id)
    assert event.id in uow.events.items
    with pytest.raises(NotFound):
        await delete_animal.execute(uow, created.id)


@pytest.mark.asyncio
async def test_list_events_rejects_unknown_status(uow):
    with pytest.raises(ValidationError):
        await list_events.execute(uow, status="Done")
