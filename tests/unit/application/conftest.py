from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace

import pytest

from src.domain.models.breeding_config import BreedingConfig
from src.domain.models.event import EventStatus


class InMemoryAnimals:
    def __init__(self) -> None:
        self.items = {}

    async def add(self, animal):
        self.items[animal.id] = replace(animal)
        return replace(animal)

    async def get(self, animal_id):
        animal = self.items.get(animal_id)
        return replace(animal) if animal else None

    async def list(self, *, gender=None, category=None, search=None):
        result = []
        for animal in self.items.values():
            if gender is not None and animal.gender != gender:
                continue
            if category is not None and animal.category != category:
                continue
            if search and search.lower() not in f"{animal.tag} {animal.name or ''}".lower():
                continue
            result.append(replace(animal))
        return sorted(result, key=lambda a: a.tag)

    async def update(self, animal_id, data):
        animal = self.items.get(animal_id)
        if animal is None:
            return None
        for key, value in data.items():
            setattr(animal, key, value)
        return replace(animal)

    async def delete(self, animal_id):
        return self.items.pop(animal_id, None) is not None


class InMemoryEvents:
    def __init__(self) -> None:
        self.items = {}

    async def add(self, event):
        self.items[event.id] = replace(event)
        return replace(event)

    async def update(self, event):
        self.items[event.id] = replace(event)
        return replace(event)

    async def get(self, event_id):
        event = self.items.get(event_id)
        return replace(event) if event else None

    async def find_pending(self, animal_id, event_type):
        pending = [
            e
            for e in self.items.values()
            if e.animal_id == animal_id
            and e.event_type == event_type
            and e.status == EventStatus.PENDING.value
        ]
        pending.sort(key=lambda e: (e.scheduled_date, e.created_at))
        return [replace(e) for e in pending]

    async def list(
        self,
        *,
        animal_id=None,
        event_type=None,
        status=None,
        completed_from=None,
        completed_to=None,
        sort_by=None,
        sort_dir=None,
    ):
        result = []
        for e in self.items.values():
            if animal_id is not None and e.animal_id != animal_id:
                continue
            if event_type is not None and e.event_type != event_type:
                continue
            if status is not None and e.status != status:
                continue
            if completed_from is not None and (
                e.completed_date is None or e.completed_date < completed_from
            ):
                continue
            if completed_to is not None and (
                e.completed_date is None or e.completed_date >= completed_to
            ):
                continue
            result.append(replace(e))
        result.sort(key=lambda e: e.scheduled_date, reverse=sort_dir == "desc")
        return result

    def of_type(self, event_type, status=None):
        return [
            e
            for e in self.items.values()
            if e.event_type == event_type and (status is None or e.status == status)
        ]


class InMemoryCustomEventTypes:
    def __init__(self) -> None:
        self.items = {}

    async def add(self, event_type):
        self.items[event_type.id] = event_type
        return event_type

    async def get(self, event_type_id):
        return self.items.get(event_type_id)

    async def get_by_name(self, name):
        return next((t for t in self.items.values() if t.name == name), None)

    async def list(self):
        return sorted(self.items.values(), key=lambda t: t.name)

    async def delete(self, event_type_id):
        return self.items.pop(event_type_id, None) is not None


class InMemoryBreedingConfig:
    def __init__(self, config: BreedingConfig | None = None) -> None:
        self.row = config
        self.get_calls = 0
        self.upserts: list[dict] = []

    async def get(self):
        self.get_calls += 1
        return replace(self.row) if self.row else None

    async def upsert(self, data):
        self.upserts.append(dict(data))
        if self.row is None:
            self.row = BreedingConfig()
        for key, value in data.items():
            setattr(self.row, key, value)
        return replace(self.row)


def make_uow(config: BreedingConfig | None = None):
    state = {"commits": 0, "rollbacks": 0}

    async def commit():
        state["commits"] += 1

    async def rollback():
        state["rollbacks"] += 1

    return SimpleNamespace(
        animals=InMemoryAnimals(),
        events=InMemoryEvents(),
        custom_event_types=InMemoryCustomEventTypes(),
        breeding_config=InMemoryBreedingConfig(config),
        commit=commit,
        rollback=rollback,
        state=state,
    )


@pytest.fixture()
def uow():
    return make_uow()


@pytest.fixture()
def uow_factory():
    return make_uow
