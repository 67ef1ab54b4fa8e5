"""Cast vote use case."""

from pydantic import BaseModel

from agora.application.cache import QueryCache, votes_key
from agora.application.usecase.base import BaseUseCase
from agora.domain.repository import UnitOfWork
from agora.domain.service import VoteService, tally_votes
from agora.domain.value import PostId, UserId, VoteAction, VoteState


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: int
    user_id: str | None = None  # None when the caller is anonymous
    value: int  # +1 or -1, checked by the vote service


class CastVoteResponse(BaseModel):
    """Cast vote response.

    Carries the applied transition and the post's tally after it.
    """

    post_id: int
    action: VoteAction
    previous_state: VoteState
    state: VoteState
    likes: int
    dislikes: int
    score: int
    user_vote: int | None


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for liking, disliking or retracting a vote on a post."""

    def __init__(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        query_cache: QueryCache,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Commit boundary for the request
            query_cache: Cache of per-post read views
        """
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work
        self.query_cache = query_cache

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Reconcile the vote via vote service (insert, flip or toggle off)
        2. Re-read the votes in this transaction and tally them
        3. Commit, releasing the vote row lock
        4. Invalidate the post's cached votes

        The tally is not written back to the cache; the next read
        repopulates it from committed rows.

        Args:
            request: Cast vote request

        Returns:
            Outcome of the vote and the updated tally

        Raises:
            AuthError: If the caller is anonymous
            ValidationError: If value is not +1 or -1
            ConflictError: If a concurrent vote by the same user won the race
            StoreError: If the store fails
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id) if request.user_id else None

        outcome = await self.vote_service.cast_vote(post_id, user_id, request.value)
        votes = await self.vote_service.get_votes_for_post(post_id)
        tally = tally_votes(votes, requesting_user_id=outcome.user_id)

        await self.unit_of_work.commit()
        await self.query_cache.invalidate(votes_key(post_id))

        return CastVoteResponse(
            post_id=post_id,
            action=outcome.action,
            previous_state=outcome.previous_state,
            state=outcome.state,
            likes=tally.likes,
            dislikes=tally.dislikes,
            score=tally.score,
            user_vote=int(tally.user_vote) if tally.user_vote is not None else None,
        )
