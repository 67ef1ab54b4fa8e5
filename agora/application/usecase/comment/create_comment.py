"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from agora.application.cache import QueryCache, comments_key
from agora.application.usecase.base import BaseUseCase
from agora.domain.error import StoreError
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str
    author_id: str | None = None  # None when the caller is anonymous
    author_name: str | None = None
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post_id: int
    parent_id: int | None
    content: str
    author_id: str
    author_name: str
    created_at: datetime


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
        query_cache: QueryCache,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            unit_of_work: Commit boundary for the request
            query_cache: Cache of per-post read views
        """
        self.comment_service = comment_service
        self.unit_of_work = unit_of_work
        self.query_cache = query_cache

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create comment via comment service (checks identity, content, parent)
        2. Commit, so the new comment is visible to other readers
        3. Invalidate the post's cached comments

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            AuthError: If the caller is anonymous
            ValidationError: If content or parent is invalid
            StoreError: If the store fails
        """
        post_id = PostId(request.post_id)
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
            author_id=UserId(request.author_id) if request.author_id else None,
            author_name=request.author_name,
        )

        if comment.id is None:
            raise StoreError("Comment was stored without an ID")

        await self.unit_of_work.commit()
        await self.query_cache.invalidate(comments_key(post_id))

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            content=comment.content,
            author_id=comment.author_id,
            author_name=comment.author_name.root,
            created_at=comment.created_at,
        )
