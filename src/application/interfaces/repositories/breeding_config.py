from __future__ import annotations

from typing import Protocol

from src.domain.models.breeding_config import BreedingConfig


class BreedingConfigRepository(Protocol):
    async def get(self) -> BreedingConfig | None: ...

    async def upsert(self, data: dict) -> BreedingConfig: ...
