from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_config import CONFIG_LIMITS, BreedingConfig

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(slots=True, frozen=True)
class CachedConfig:
    value: BreedingConfig
    fetched_at: float


def validate_changes(changes: Mapping[str, Any]) -> dict[str, int]:
    unknown = sorted(set(changes) - set(CONFIG_LIMITS))
    if unknown:
        raise ValidationError(
            f"Unknown settings: {', '.join(unknown)}", details={"fields": unknown}
        )
    validated: dict[str, int] = {}
    for name, value in changes.items():
        minimum, maximum, message = CONFIG_LIMITS[name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be an integer", details={"field": name})
        if value < minimum or value > maximum:
            raise ValidationError(
                message,
                details={"field": name, "min": minimum, "max": maximum, "value": value},
            )
        validated[name] = value
    return validated


class BreedingConfigService:
    """Process-wide holder of the breeding timing parameters.

    Reads are served from memory while the cached copy is younger than the
    TTL. Updates replace the cache reference in one assignment, so concurrent
    readers observe either the old or the new value.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._cache: CachedConfig | None = None

    @property
    def cached(self) -> CachedConfig | None:
        return self._cache

    def invalidate(self) -> None:
        self._cache = None

    def _is_fresh(self, cached: CachedConfig | None) -> bool:
        return cached is not None and self._clock() - cached.fetched_at < self.ttl_seconds

    def _store(self, config: BreedingConfig) -> BreedingConfig:
        value = replace(config)
        self._cache = CachedConfig(value=value, fetched_at=self._clock())
        return replace(value)

    async def get(self, uow: UnitOfWork) -> BreedingConfig:
        cached = self._cache
        if self._is_fresh(cached):
            return replace(cached.value)

        config = await uow.breeding_config.get()
        if config is None:
            config = await uow.breeding_config.upsert({})
            await uow.commit()
        stored = self._store(config)
        logger.info("Breeding settings cached: %s", stored)
        return stored

    async def update(self, uow: UnitOfWork, changes: Mapping[str, Any]) -> BreedingConfig:
        validated = validate_changes(changes)
        config = await uow.breeding_config.upsert(validated)
        await uow.commit()
        stored = self._store(config)
        logger.info("Breeding settings updated and cached: %s", stored)
        return stored
