"""Comment domain service."""

from datetime import datetime

import logfire

from agora.domain.error import AuthError, ValidationError
from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import AuthorName, CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_content_length: int = 10000,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_content_length: Longest accepted comment body
        """
        self.comment_repository = comment_repository
        self.max_content_length = max_content_length

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
        author_id: UserId | None = None,
        author_name: AuthorName | str | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Identity and content are checked before the store is touched, so a
        rejected request never leaves a partial write.

        Args:
            post_id: Post ID
            content: Comment body
            parent_id: Parent comment ID for replies (None for top-level)
            author_id: Author user ID from the identity provider
            author_name: Author display name from the identity provider

        Returns:
            Created comment with its store-assigned ID

        Raises:
            AuthError: If author ID or name is missing
            ValidationError: If content is empty or too long, or the parent
                comment is unknown or belongs to another post
            StoreError: If the store fails
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            name = str(author_name).strip() if author_name is not None else ""
            if not author_id or not name:
                logfire.warn("Anonymous comment attempt", post_id=post_id)
                raise AuthError("comment")
            if len(name) > 255:
                raise ValidationError("Author name must be at most 255 characters")

            if not content or not content.strip():
                raise ValidationError("Comment content must not be empty")
            if len(content) > self.max_content_length:
                raise ValidationError(
                    f"Comment content must be at most {self.max_content_length} characters"
                )

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise ValidationError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                post_id=post_id,
                parent_id=parent_id,
                content=content,
                author_id=author_id,
                author_name=AuthorName(name),
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                parent_id=parent_id,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=post_id
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment
