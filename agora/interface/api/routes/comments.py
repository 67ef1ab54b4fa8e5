"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from agora.domain.service import IdentityService

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str  # Length and blank checks happen in the comment service
    parent_id: int | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get a post's comments as a reply tree.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Root comments with nested replies, oldest first
    """
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication. Anonymous callers get 401 from the comment
    service's AuthError.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        identity_service: Identity service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details
    """
    identity = identity_service.get_identity(auth_token)

    use_case_request = CreateCommentRequest(
        post_id=post_id,
        content=request.content,
        parent_id=request.parent_id,
        author_id=identity.user_id if identity else None,
        author_name=identity.display_name.root if identity else None,
    )
    return await create_comment_use_case.execute(use_case_request)
