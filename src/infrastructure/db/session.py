from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.animals = None
        self.events = None
        self.custom_event_types = None
        self.breeding_config = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.breeding_config_sqlalchemy import (
            BreedingConfigSQLAlchemyRepository,
        )
        from src.infrastructure.repos.custom_event_types_sqlalchemy import (
            CustomEventTypesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.events_sqlalchemy import EventsSQLAlchemyRepository

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.events = EventsSQLAlchemyRepository(self.session)
        self.custom_event_types = CustomEventTypesSQLAlchemyRepository(self.session)
        self.breeding_config = BreedingConfigSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.animals = None
            self.events = None
            self.custom_event_types = None
            self.breeding_config = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
