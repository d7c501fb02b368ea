from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.services.breeding_config_service import BreedingConfigService
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings() -> Settings:
    return get_settings()


def get_config_service(request: Request) -> BreedingConfigService:
    service = getattr(request.app.state, "config_service", None)
    if service is None:
        raise RuntimeError("Breeding config service not configured")
    return service
