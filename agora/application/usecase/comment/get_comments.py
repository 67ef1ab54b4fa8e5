"""Get comments use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from agora.application.cache import QueryCache, comments_key
from agora.application.usecase.base import BaseUseCase
from agora.domain.model import Comment
from agora.domain.service import (
    CommentNode,
    CommentService,
    build_comment_tree,
    count_nodes,
)
from agora.domain.value import PostId


class CommentNodeResponse(BaseModel):
    """Comment tree node for API response.

    Recursive structure mirroring the domain reply tree.
    """

    comment_id: int
    parent_id: int | None
    content: str
    author_id: str
    author_name: str
    created_at: datetime
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment tree node

        Returns:
            API response model with replies recursively converted
        """
        comment = node.comment
        return cls(
            comment_id=node.comment_id,
            parent_id=comment.parent_id,
            content=comment.content,
            author_id=comment.author_id,
            author_name=comment.author_name.root,
            created_at=comment.created_at,
            replies=[cls.from_domain(child) for child in node.children],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: int
    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for getting a post's comments as a reply tree."""

    def __init__(self, comment_service: CommentService, query_cache: QueryCache) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            query_cache: Cache of per-post read views
        """
        self.comment_service = comment_service
        self.query_cache = query_cache

    async def _load_comments(self, post_id: PostId) -> list[Comment]:
        key = comments_key(post_id)
        cached = await self.query_cache.get(key)
        if cached is not None:
            logfire.debug("Comments served from cache", post_id=post_id)
            return [Comment.model_validate(item) for item in cached]

        comments = await self.comment_service.get_comments_for_post(post_id)
        await self.query_cache.set(
            key, [comment.model_dump(mode="json") for comment in comments]
        )
        return comments

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        The tree is rebuilt from the flat comment list on every call; only
        the flat list is cached.

        Args:
            request: Get comments request with post ID

        Returns:
            Root comments in creation order, each with nested replies
        """
        post_id = PostId(request.post_id)
        comments = await self._load_comments(post_id)

        roots = build_comment_tree([c for c in comments if c.post_id == post_id])

        return GetCommentsResponse(
            post_id=post_id,
            comments=[CommentNodeResponse.from_domain(root) for root in roots],
            total=count_nodes(roots),
        )
