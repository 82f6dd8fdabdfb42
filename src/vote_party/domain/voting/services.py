"""
Voting Domain Services

Ballot rules and scoreboard computation.
"""

from collections.abc import Iterable, Sequence

from vote_party.domain.catalog.entities import Act
from vote_party.domain.shared.exceptions import InvalidVotesError
from vote_party.domain.shared.messages import ErrorMessages
from vote_party.domain.voting.entities import Vote
from vote_party.domain.voting.value_objects import POINT_VALUES, ActScore, Ballot


class VotingDomainService:
    """Domain service for voting business rules.

    A ballot awards each of the ten point values in ``POINT_VALUES`` to a
    different act of the party's event. Results are summed per act and ranked
    with standard competition ranking (ties share a rank, the next rank skips).
    """

    @classmethod
    def validate_ballot(cls, votes: Ballot) -> None:
        """Check ballot shape.

        Valid iff there are exactly ten entries, the keys are exactly
        ``POINT_VALUES`` and the ten act ids are non-blank and pairwise distinct.

        Raises:
            InvalidVotesError: Naming the first violated rule.
        """
        if len(votes) != len(POINT_VALUES):
            raise InvalidVotesError(
                ErrorMessages.WRONG_VOTE_COUNT.format(expected=len(POINT_VALUES), actual=len(votes))
            )

        for points in POINT_VALUES:
            if points not in votes:
                raise InvalidVotesError(ErrorMessages.MISSING_POINT_VALUE.format(points=points))
            act_id = votes[points]
            if not isinstance(act_id, str) or not act_id.strip():
                raise InvalidVotesError(ErrorMessages.EMPTY_ACT_ID.format(points=points))

        seen: set[str] = set()
        for points in POINT_VALUES:
            act_id = votes[points]
            if act_id in seen:
                raise InvalidVotesError(ErrorMessages.DUPLICATE_ACT_ID.format(act_id=act_id))
            seen.add(act_id)

    @classmethod
    def ensure_acts_in_catalog(cls, votes: Ballot, acts: Iterable[Act]) -> None:
        """Check that every act id on the ballot competes in the event.

        Raises:
            InvalidVotesError: If an act id is not in ``acts``.
        """
        known = {act.id for act in acts}
        for act_id in votes.values():
            if act_id not in known:
                raise InvalidVotesError(ErrorMessages.UNKNOWN_ACT_ID.format(act_id=act_id))

    @classmethod
    def tally(cls, votes: Iterable[Vote], acts: Iterable[Act]) -> dict[str, int]:
        """Sum points per act. Every act starts at zero."""
        totals = {act.id: 0 for act in acts}
        for vote in votes:
            for points, act_id in vote.votes.items():
                totals[act_id] = totals.get(act_id, 0) + points
        return totals

    @classmethod
    def assign_ranks(cls, totals: Sequence[int]) -> list[int]:
        """Standard competition ranks for totals already sorted descending.

        >>> VotingDomainService.assign_ranks([24, 24, 16, 0])
        [1, 1, 3, 4]
        """
        ranks: list[int] = []
        for position, total in enumerate(totals, start=1):
            if ranks and total == totals[position - 2]:
                ranks.append(ranks[-1])
            else:
                ranks.append(position)
        return ranks

    @classmethod
    def build_scoreboard(cls, votes: Iterable[Vote], acts: Sequence[Act]) -> list[ActScore]:
        """Rank every act of the event by total points.

        Ties keep catalog (running) order.
        """
        totals = cls.tally(votes, acts)
        ordered = sorted(acts, key=lambda act: totals[act.id], reverse=True)
        ranks = cls.assign_ranks([totals[act.id] for act in ordered])
        return [
            ActScore(
                act_id=act.id,
                country=act.country,
                artist=act.artist,
                song=act.song,
                total_points=totals[act.id],
                rank=rank,
            )
            for act, rank in zip(ordered, ranks, strict=True)
        ]
