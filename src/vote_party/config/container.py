"""Dependency Injection Container

Manages the dependency graph of the vote party core, providing lazy
initialization and lifecycle management for the database, stores, act catalog
and application services. Components are created on demand and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.catalog.value_objects import EventType
from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.services.guest_service import GuestApplicationService
    from ..application.services.party_service import PartyApplicationService
    from ..application.services.results_service import ResultsApplicationService
    from ..application.services.user_service import UserApplicationService
    from ..application.services.vote_service import VoteApplicationService
    from ..domain.catalog.repository import ActCatalog
    from ..domain.guests.repository import GuestRepository
    from ..domain.parties.repository import PartyRepository
    from ..domain.users.repository import UserRepository
    from ..domain.voting.repository import VoteRepository
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Nothing here is
    process-global: tests build one container per case.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _party_repository: PartyRepository | None = None
    _guest_repository: GuestRepository | None = None
    _vote_repository: VoteRepository | None = None
    _user_repository: UserRepository | None = None

    # Reference data
    _act_catalog: ActCatalog | None = None

    # Application services
    _party_service: PartyApplicationService | None = None
    _guest_service: GuestApplicationService | None = None
    _vote_service: VoteApplicationService | None = None
    _results_service: ResultsApplicationService | None = None
    _user_service: UserApplicationService | None = None

    # === Database ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    # === Repositories ===

    @property
    def party_repository(self) -> PartyRepository:
        if self._party_repository is None:
            from ..infrastructure.persistence.repositories.party_repository import (
                SQLitePartyRepository,
            )

            self._party_repository = SQLitePartyRepository(self.database)
        return self._party_repository

    @property
    def guest_repository(self) -> GuestRepository:
        if self._guest_repository is None:
            from ..infrastructure.persistence.repositories.guest_repository import (
                SQLiteGuestRepository,
            )

            self._guest_repository = SQLiteGuestRepository(self.database)
        return self._guest_repository

    @property
    def vote_repository(self) -> VoteRepository:
        if self._vote_repository is None:
            from ..infrastructure.persistence.repositories.vote_repository import (
                SQLiteVoteRepository,
            )

            self._vote_repository = SQLiteVoteRepository(self.database)
        return self._vote_repository

    @property
    def user_repository(self) -> UserRepository:
        if self._user_repository is None:
            from ..infrastructure.persistence.repositories.user_repository import (
                SQLiteUserRepository,
            )

            self._user_repository = SQLiteUserRepository(self.database)
        return self._user_repository

    # === Act catalog ===

    @property
    def act_catalog(self) -> ActCatalog:
        """Get the act catalog read from the configured JSON file."""
        if self._act_catalog is None:
            from ..infrastructure.catalog.json_catalog import JsonActCatalog

            self._act_catalog = JsonActCatalog(self.settings.catalog.acts_path)
        return self._act_catalog

    # === Application services ===

    @property
    def party_service(self) -> PartyApplicationService:
        if self._party_service is None:
            from ..application.services.party_service import PartyApplicationService

            self._party_service = PartyApplicationService(party_repository=self.party_repository)
        return self._party_service

    @property
    def guest_service(self) -> GuestApplicationService:
        if self._guest_service is None:
            from ..application.services.guest_service import GuestApplicationService

            self._guest_service = GuestApplicationService(
                guest_repository=self.guest_repository,
                party_repository=self.party_repository,
            )
        return self._guest_service

    @property
    def vote_service(self) -> VoteApplicationService:
        if self._vote_service is None:
            from ..application.services.vote_service import VoteApplicationService

            self._vote_service = VoteApplicationService(
                vote_repository=self.vote_repository,
                party_repository=self.party_repository,
                guest_repository=self.guest_repository,
                act_catalog=self.act_catalog,
                party_service=self.party_service,
            )
        return self._vote_service

    @property
    def results_service(self) -> ResultsApplicationService:
        if self._results_service is None:
            from ..application.services.results_service import ResultsApplicationService

            self._results_service = ResultsApplicationService(
                party_repository=self.party_repository,
                vote_repository=self.vote_repository,
                act_catalog=self.act_catalog,
            )
        return self._results_service

    @property
    def user_service(self) -> UserApplicationService:
        if self._user_service is None:
            from ..application.services.user_service import UserApplicationService

            self._user_service = UserApplicationService(user_repository=self.user_repository)
        return self._user_service

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Create the schema and load the act catalog."""
        await self.database.initialize()

        for event_type in EventType:
            acts = await self.act_catalog.list_acts(event_type)
            logger.info(LogTemplates.CATALOG_EVENT_SIZE, event_type.value, len(acts))

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
