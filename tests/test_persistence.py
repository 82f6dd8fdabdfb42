"""
Integration Tests for the SQLite Persistence Layer

Tests for:
- Database initialization and lifecycle
- SQLitePartyRepository (issued codes survive deletion)
- SQLiteGuestRepository (username unique per party)
- SQLiteVoteRepository (one vote per guest and party, ballot round trip)
- SQLiteUserRepository (upsert)
"""

from datetime import UTC, datetime, timedelta

import pytest

from vote_party.domain.catalog.value_objects import EventType
from vote_party.domain.guests.entities import Guest
from vote_party.domain.guests.value_objects import GuestStatus
from vote_party.domain.parties.entities import Party
from vote_party.domain.parties.value_objects import PartyStatus
from vote_party.domain.shared.exceptions import DuplicateEntityError
from vote_party.domain.users.entities import User
from vote_party.domain.voting.entities import Vote
from vote_party.infrastructure.persistence.database import Database


_T0 = datetime(2026, 5, 16, 19, 0, tzinfo=UTC)


def _party(
    code: str = "ABC234",
    admin_id: str = "admin-1",
    name: str = "Watch Party",
    created_at: datetime = _T0,
) -> Party:
    return Party.open(
        admin_id=admin_id,
        name=name,
        code=code,
        event_type=EventType.GRANDFINAL,
        created_at=created_at,
    )


# =============================================================================
# Database Tests
# =============================================================================


class TestDatabase:
    async def test_initialize_is_idempotent(self, in_memory_database):
        await in_memory_database.initialize()

        rows = await in_memory_database.fetch_all(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        )
        assert {row["name"] for row in rows} >= {
            "parties",
            "issued_party_codes",
            "guests",
            "votes",
            "users",
        }

    async def test_memory_databases_are_isolated(self):
        """Two in-memory instances must not share data."""
        first, second = Database(":memory:"), Database(":memory:")
        await first.initialize()
        await second.initialize()
        try:
            await first.execute("INSERT INTO users (id, username) VALUES ('u1', 'alice')")

            assert await first.fetch_one("SELECT * FROM users") is not None
            assert await second.fetch_one("SELECT * FROM users") is None
        finally:
            await first.close()
            await second.close()

    async def test_file_database_created(self, tmp_path):
        db_file = tmp_path / "nested" / "vote_party.db"
        db = Database(f"sqlite:///{db_file}")

        await db.initialize()
        await db.close()

        assert db_file.exists()

    async def test_transaction_rolls_back_on_error(self, in_memory_database):
        with pytest.raises(RuntimeError):
            async with in_memory_database.transaction() as conn:
                await conn.execute("INSERT INTO users (id, username) VALUES ('u1', 'alice')")
                raise RuntimeError("boom")

        assert await in_memory_database.fetch_one("SELECT * FROM users") is None


# =============================================================================
# Party Repository Tests
# =============================================================================


class TestSQLitePartyRepository:
    async def test_create_and_get(self, party_repository):
        party = _party()

        await party_repository.create(party)

        by_id = await party_repository.get_by_id(party.id)
        by_code = await party_repository.get_by_code("ABC234")
        assert by_id == party
        assert by_code == party
        assert by_id.created_at == party.created_at

    async def test_get_missing_returns_none(self, party_repository):
        assert await party_repository.get_by_id("missing") is None
        assert await party_repository.get_by_code("ZZZZZZ") is None

    async def test_duplicate_code_rejected(self, party_repository):
        await party_repository.create(_party())

        with pytest.raises(DuplicateEntityError):
            await party_repository.create(_party())

    async def test_failed_create_leaves_no_party(self, party_repository):
        first = _party()
        await party_repository.create(first)

        with pytest.raises(DuplicateEntityError):
            await party_repository.create(_party(admin_id="admin-2"))

        assert await party_repository.list_by_admin("admin-2") == []

    async def test_code_stays_issued_after_delete(self, party_repository):
        """Deleted parties never give their code back."""
        party = _party()
        await party_repository.create(party)

        assert await party_repository.delete(party.id) is True

        assert await party_repository.get_by_id(party.id) is None
        assert await party_repository.code_exists("ABC234") is True
        with pytest.raises(DuplicateEntityError):
            await party_repository.create(_party())

    async def test_delete_missing(self, party_repository):
        assert await party_repository.delete("missing") is False

    async def test_list_by_admin_newest_first(self, party_repository):
        older = _party(code="AAAAAA", name="Older")
        newer = _party(code="BBBBBB", name="Newer", created_at=_T0 + timedelta(minutes=5))
        other = _party(code="CCCCCC", admin_id="admin-2")
        for party in (older, newer, other):
            await party_repository.create(party)

        parties = await party_repository.list_by_admin("admin-1")

        assert [p.name for p in parties] == ["Newer", "Older"]
        assert await party_repository.list_by_admin("nobody") == []

    async def test_update_status(self, party_repository):
        party = _party()
        await party_repository.create(party)

        assert await party_repository.update_status(party.id, PartyStatus.CLOSED) is True

        stored = await party_repository.get_by_id(party.id)
        assert stored.status is PartyStatus.CLOSED


# =============================================================================
# Guest Repository Tests
# =============================================================================


class TestSQLiteGuestRepository:
    async def test_create_and_get(self, guest_repository):
        guest = Guest.request_join(party_id="p1", username="Alice")

        await guest_repository.create(guest)

        assert await guest_repository.get_by_id(guest.id) == guest
        assert await guest_repository.get_by_id("missing") is None

    async def test_username_unique_per_party(self, guest_repository):
        await guest_repository.create(Guest.request_join(party_id="p1", username="Alice"))

        with pytest.raises(DuplicateEntityError):
            await guest_repository.create(Guest.request_join(party_id="p1", username="Alice"))

        await guest_repository.create(Guest.request_join(party_id="p2", username="Alice"))
        assert await guest_repository.exists_by_party_and_username("p1", "Alice")
        assert await guest_repository.exists_by_party_and_username("p2", "Alice")
        assert not await guest_repository.exists_by_party_and_username("p3", "Alice")

    async def test_lists_filter_by_party_and_status(self, guest_repository):
        alice = Guest.request_join(party_id="p1", username="Alice")
        bob = Guest.request_join(party_id="p1", username="Bob")
        carol = Guest.request_join(party_id="p2", username="Carol")
        for guest in (alice, bob, carol):
            await guest_repository.create(guest)
        await guest_repository.update_status(bob.id, GuestStatus.APPROVED)

        everyone = await guest_repository.list_by_party("p1")
        pending = await guest_repository.list_by_party_and_status("p1", GuestStatus.PENDING)
        approved = await guest_repository.list_by_party_and_status("p1", GuestStatus.APPROVED)

        assert [g.username for g in everyone] == ["Alice", "Bob"]
        assert [g.username for g in pending] == ["Alice"]
        assert [g.username for g in approved] == ["Bob"]

    async def test_delete(self, guest_repository):
        guest = Guest.request_join(party_id="p1", username="Alice")
        await guest_repository.create(guest)

        assert await guest_repository.delete(guest.id) is True
        assert await guest_repository.delete(guest.id) is False
        assert await guest_repository.get_by_id(guest.id) is None


# =============================================================================
# Vote Repository Tests
# =============================================================================


class TestSQLiteVoteRepository:
    async def test_ballot_round_trip_keeps_int_keys(self, vote_repository, make_ballot, grandfinal_act_ids):
        vote = Vote.cast(guest_id="g1", party_id="p1", votes=make_ballot(grandfinal_act_ids))

        await vote_repository.create(vote)
        stored = await vote_repository.get_by_guest_and_party("g1", "p1")

        assert stored == vote
        assert all(isinstance(points, int) for points in stored.votes)

    async def test_one_vote_per_guest_and_party(self, vote_repository, make_ballot, grandfinal_act_ids):
        ballot = make_ballot(grandfinal_act_ids)
        await vote_repository.create(Vote.cast(guest_id="g1", party_id="p1", votes=ballot))

        with pytest.raises(DuplicateEntityError):
            await vote_repository.create(Vote.cast(guest_id="g1", party_id="p1", votes=ballot))

        await vote_repository.create(Vote.cast(guest_id="g1", party_id="p2", votes=ballot))

    async def test_update_overwrites_ballot(self, vote_repository, make_ballot, grandfinal_act_ids):
        vote = Vote.cast(guest_id="g1", party_id="p1", votes=make_ballot(grandfinal_act_ids))
        await vote_repository.create(vote)
        new_ballot = make_ballot(grandfinal_act_ids[4:])

        vote.replace_ballot(new_ballot)
        assert await vote_repository.update(vote) is True

        stored = await vote_repository.get_by_guest_and_party("g1", "p1")
        assert stored.votes == new_ballot
        assert stored.id == vote.id

    async def test_list_by_party(self, vote_repository, make_ballot, grandfinal_act_ids):
        ballot = make_ballot(grandfinal_act_ids)
        for guest_id, party_id in (("g1", "p1"), ("g2", "p1"), ("g3", "p2")):
            await vote_repository.create(Vote.cast(guest_id=guest_id, party_id=party_id, votes=ballot))

        votes = await vote_repository.list_by_party("p1")

        assert sorted(v.guest_id for v in votes) == ["g1", "g2"]
        assert await vote_repository.list_by_party("empty") == []
        assert await vote_repository.get_by_guest_and_party("g3", "p1") is None


# =============================================================================
# User Repository Tests
# =============================================================================


class TestSQLiteUserRepository:
    async def test_upsert_creates_then_overwrites(self, user_repository):
        await user_repository.upsert(User(id="u1", username="alice", email="a@example.com"))
        await user_repository.upsert(User(id="u1", username="alice_2", email="b@example.com"))

        stored = await user_repository.get_by_id("u1")

        assert stored == User(id="u1", username="alice_2", email="b@example.com")

    async def test_get_missing(self, user_repository):
        assert await user_repository.get_by_id("missing") is None
