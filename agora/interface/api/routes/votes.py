"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
)
from agora.domain.service import IdentityService

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    value: int  # 1 to like, -1 to dislike


@router.get("/posts/{post_id}/votes", response_model=GetVotesResponse)
async def get_votes(
    post_id: int,
    get_votes_use_case: FromDishka[GetVotesUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> GetVotesResponse:
    """Get like/dislike counts for a post.

    Authentication is optional; when present, the caller's own vote is
    included.

    Args:
        post_id: Post ID
        get_votes_use_case: Get votes use case from DI
        identity_service: Identity service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Vote tally for the post
    """
    identity = identity_service.get_identity(auth_token)
    request = GetVotesRequest(
        post_id=post_id, user_id=identity.user_id if identity else None
    )
    return await get_votes_use_case.execute(request)


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: int,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Like or dislike a post.

    Voting the same way twice retracts the vote; voting the other way flips
    it. Requires authentication.

    Args:
        post_id: Post ID
        request: Vote value
        cast_vote_use_case: Cast vote use case from DI
        identity_service: Identity service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Applied transition and the post's updated tally
    """
    identity = identity_service.get_identity(auth_token)
    use_case_request = CastVoteRequest(
        post_id=post_id,
        user_id=identity.user_id if identity else None,
        value=request.value,
    )
    return await cast_vote_use_case.execute(use_case_request)
