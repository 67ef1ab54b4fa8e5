"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import PostId, UserId, VoteId, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Mirrors the database constraints: a duplicate (post, user) insert raises
    IntegrityError and writes are check-and-set on the stored value.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._ids = count(1)

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        return [v for v in self._votes if v.post_id == post_id]

    async def find_by_post_and_user(
        self,
        post_id: PostId,
        user_id: UserId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        for vote in self._votes:
            if vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def insert(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if any(
            v.post_id == vote.post_id and v.user_id == vote.user_id for v in self._votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        stored = vote.model_copy(update={"id": VoteId(next(self._ids))})
        self._votes.append(stored)
        return stored

    async def update_value(
        self,
        vote_id: VoteId,
        expected: VoteValue,
        value: VoteValue,
    ) -> bool:
        """Change a vote's value if it still holds the expected value."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id and vote.value == expected:
                self._votes[i] = vote.model_copy(update={"value": value})
                return True
        return False

    async def delete(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote if it still holds the expected value."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id and vote.value == expected:
                self._votes.pop(i)
                return True
        return False
