"""Unit tests for CreateCommentUseCase."""

from typing import Awaitable, Callable

import pytest

from agora.application.cache import InMemoryQueryCache, QueryCache, comments_key
from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from agora.domain.error import AuthError
from agora.domain.model import Comment
from agora.domain.repository import CommentRepository, UnitOfWork
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId
from agora.persistence.repository.inmemory import InMemoryCommentRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class CommitDeferredCommentRepository(InMemoryCommentRepository):
    """Comment store whose writes only become readable on commit."""

    def __init__(self) -> None:
        super().__init__()
        self.pending: list[Comment] = []

    async def save(self, comment: Comment) -> Comment:
        stored = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self.pending.append(stored)
        return stored

    def publish(self) -> None:
        for comment in self.pending:
            self._comments[comment.id] = comment
        self.pending.clear()


class ReadDuringCommitUnitOfWork(UnitOfWork):
    """Lets another reader in while the commit is still in flight."""

    def __init__(
        self,
        repository: CommitDeferredCommentRepository,
        read_during_commit: Callable[[], Awaitable[object]],
    ) -> None:
        self.repository = repository
        self.read_during_commit = read_during_commit

    async def commit(self) -> None:
        await self.read_during_commit()
        self.repository.publish()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_details(self, unit_env):
        """Creating a comment returns the stored comment."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=1, content="Hello", author_id="user-1", author_name="Ada"
            )
        )

        # Assert
        assert response.comment_id > 0
        assert response.post_id == 1
        assert response.parent_id is None
        assert response.author_name == "Ada"

    @pytest.mark.asyncio
    async def test_create_comment_commits(self, unit_env):
        """A created comment is committed once."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act
        await use_case.execute(
            CreateCommentRequest(
                post_id=1, content="Hello", author_id="user-1", author_name="Ada"
            )
        )

        # Assert
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_create_comment_invalidates_cached_comments(self, unit_env):
        """A new comment drops the post's cached comment list."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        query_cache = await unit_env.get(QueryCache)
        key = comments_key(PostId(1))
        await query_cache.set(key, [])

        # Act
        await use_case.execute(
            CreateCommentRequest(
                post_id=1, content="Hello", author_id="user-1", author_name="Ada"
            )
        )

        # Assert
        assert await query_cache.get(key) is None

    @pytest.mark.asyncio
    async def test_read_during_commit_does_not_leave_stale_cache(self):
        """A read that caches pre-commit rows is cleared once the commit lands."""
        # Arrange
        repository = CommitDeferredCommentRepository()
        query_cache = InMemoryQueryCache()
        comment_service = CommentService(comment_repository=repository)
        get_comments = GetCommentsUseCase(
            comment_service=comment_service, query_cache=query_cache
        )
        request = GetCommentsRequest(post_id=1)

        async def concurrent_read():
            return await get_comments.execute(request)

        create_comment = CreateCommentUseCase(
            comment_service=comment_service,
            unit_of_work=ReadDuringCommitUnitOfWork(repository, concurrent_read),
            query_cache=query_cache,
        )

        # Act
        await create_comment.execute(
            CreateCommentRequest(
                post_id=1, content="Hello", author_id="user-1", author_name="Ada"
            )
        )
        response = await get_comments.execute(request)

        # Assert
        assert response.total == 1
        assert response.comments[0].content == "Hello"

    @pytest.mark.asyncio
    async def test_rejected_comment_keeps_cache(self, unit_env):
        """A failed create leaves the store and the cache untouched."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        query_cache = await unit_env.get(QueryCache)
        comment_repo = await unit_env.get(CommentRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        key = comments_key(PostId(1))
        await query_cache.set(key, [])

        # Act & Assert
        with pytest.raises(AuthError):
            await use_case.execute(CreateCommentRequest(post_id=1, content="Hello"))
        assert await query_cache.get(key) == []
        assert await comment_repo.count_by_post(PostId(1)) == 0
        assert unit_of_work.commits == 0
