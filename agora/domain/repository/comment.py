"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post.

        Comments are returned flat, ordered by creation time (oldest first,
        ties broken by ID). The reply tree is assembled by the caller.

        Args:
            post_id: The post ID

        Returns:
            List of comments for the post
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Comments are immutable, so this is insert-only.

        Args:
            comment: The comment to insert (its ID is ignored)

        Returns:
            The stored comment with its store-assigned ID
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
