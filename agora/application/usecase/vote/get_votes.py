"""Get votes use case."""

import logfire
from pydantic import BaseModel

from agora.application.cache import QueryCache, votes_key
from agora.application.usecase.base import BaseUseCase
from agora.domain.model import Vote
from agora.domain.service import VoteService, tally_votes
from agora.domain.value import PostId, UserId


class GetVotesRequest(BaseModel):
    """Get votes request."""

    post_id: int
    user_id: str | None = None  # Requesting user, if authenticated


class GetVotesResponse(BaseModel):
    """Get votes response."""

    post_id: int
    likes: int
    dislikes: int
    score: int
    user_vote: int | None


class GetVotesUseCase(BaseUseCase[GetVotesRequest, GetVotesResponse]):
    """Use case for getting a post's like/dislike counts."""

    def __init__(self, vote_service: VoteService, query_cache: QueryCache) -> None:
        """Initialize get votes use case.

        Args:
            vote_service: Vote domain service
            query_cache: Cache of per-post read views
        """
        self.vote_service = vote_service
        self.query_cache = query_cache

    async def _load_votes(self, post_id: PostId) -> list[Vote]:
        key = votes_key(post_id)
        cached = await self.query_cache.get(key)
        if cached is not None:
            logfire.debug("Votes served from cache", post_id=post_id)
            return [Vote.model_validate(item) for item in cached]

        votes = await self.vote_service.get_votes_for_post(post_id)
        await self.query_cache.set(key, [vote.model_dump(mode="json") for vote in votes])
        return votes

    async def execute(self, request: GetVotesRequest) -> GetVotesResponse:
        """Execute get votes flow.

        Args:
            request: Get votes request with post ID and optional user ID

        Returns:
            Tally for the post, including the requesting user's own vote
        """
        post_id = PostId(request.post_id)
        votes = await self._load_votes(post_id)

        requesting_user = UserId(request.user_id) if request.user_id else None
        tally = tally_votes(votes, requesting_user_id=requesting_user)

        return GetVotesResponse(
            post_id=post_id,
            likes=tally.likes,
            dislikes=tally.dislikes,
            score=tally.score,
            user_vote=int(tally.user_vote) if tally.user_vote is not None else None,
        )
