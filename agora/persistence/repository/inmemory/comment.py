"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from agora.domain.model import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, assigning the next ID."""
        stored = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[stored.id] = stored
        return stored

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)
