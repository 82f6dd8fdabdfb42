import json

import pytest
import pytest_asyncio

from vote_party.domain.shared.constants import VotingConstants

# ============================================================================
# Act Catalog Fixtures
# ============================================================================

_EVENT_PREFIXES = {"semifinal1": "sf1", "semifinal2": "sf2", "grandfinal": "gf"}


def make_act_records(event_type: str, count: int) -> list[dict]:
    """Build raw act records in the on-disk (camelCase) shape."""
    prefix = _EVENT_PREFIXES[event_type]
    return [
        {
            "id": f"{prefix}-{n:02d}",
            "country": f"Country {prefix.upper()} {n}",
            "artist": f"Artist {n}",
            "song": f"Song {n}",
            "runningOrder": n,
            "eventType": event_type,
        }
        for n in range(1, count + 1)
    ]


def ballot_for(act_ids: list[str]) -> dict[int, str]:
    """Award the ten point values to the first ten act ids, 12 points first."""
    return dict(zip(VotingConstants.POINT_VALUES, act_ids[:10], strict=True))


@pytest.fixture
def acts_file(tmp_path):
    """Write an acts file with 12 acts per semi-final and 14 in the grand final."""
    records = (
        make_act_records("grandfinal", 14)
        + make_act_records("semifinal1", 12)
        + make_act_records("semifinal2", 12)
    )
    path = tmp_path / "acts.json"
    path.write_text(json.dumps({"acts": records}), encoding="utf-8")
    return path


@pytest.fixture
def act_catalog(acts_file):
    """JSON act catalog reading the temporary acts file."""
    from vote_party.infrastructure.catalog.json_catalog import JsonActCatalog

    return JsonActCatalog(acts_file)


@pytest.fixture
def grandfinal_act_ids():
    return [f"gf-{n:02d}" for n in range(1, 15)]


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from vote_party.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def party_repository(in_memory_database):
    from vote_party.infrastructure.persistence.repositories.party_repository import (
        SQLitePartyRepository,
    )

    return SQLitePartyRepository(in_memory_database)


@pytest_asyncio.fixture
async def guest_repository(in_memory_database):
    from vote_party.infrastructure.persistence.repositories.guest_repository import (
        SQLiteGuestRepository,
    )

    return SQLiteGuestRepository(in_memory_database)


@pytest_asyncio.fixture
async def vote_repository(in_memory_database):
    from vote_party.infrastructure.persistence.repositories.vote_repository import (
        SQLiteVoteRepository,
    )

    return SQLiteVoteRepository(in_memory_database)


@pytest_asyncio.fixture
async def user_repository(in_memory_database):
    from vote_party.infrastructure.persistence.repositories.user_repository import (
        SQLiteUserRepository,
    )

    return SQLiteUserRepository(in_memory_database)


# ============================================================================
# Service Fixtures (real stores)
# ============================================================================


@pytest_asyncio.fixture
async def services(party_repository, guest_repository, vote_repository, user_repository, act_catalog):
    """All application services wired against the in-memory database."""
    from types import SimpleNamespace

    from vote_party.application.services import (
        GuestApplicationService,
        PartyApplicationService,
        ResultsApplicationService,
        UserApplicationService,
        VoteApplicationService,
    )

    party_service = PartyApplicationService(party_repository=party_repository)
    return SimpleNamespace(
        parties=party_service,
        guests=GuestApplicationService(
            guest_repository=guest_repository, party_repository=party_repository
        ),
        votes=VoteApplicationService(
            vote_repository=vote_repository,
            party_repository=party_repository,
            guest_repository=guest_repository,
            act_catalog=act_catalog,
            party_service=party_service,
        ),
        results=ResultsApplicationService(
            party_repository=party_repository,
            vote_repository=vote_repository,
            act_catalog=act_catalog,
        ),
        users=UserApplicationService(user_repository=user_repository),
    )


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_party():
    from vote_party.domain.catalog.value_objects import EventType
    from vote_party.domain.parties.entities import Party

    return Party.open(
        admin_id="admin-1", name="Watch Party", code="ABC234", event_type=EventType.GRANDFINAL
    )


@pytest.fixture
def approved_guest(sample_party):
    from vote_party.domain.guests.entities import Guest

    guest = Guest.request_join(party_id=sample_party.id, username="Alice")
    guest.approve()
    return guest


@pytest.fixture
def make_ballot():
    """Factory for a valid ballot over the first ten given act ids."""
    return ballot_for
