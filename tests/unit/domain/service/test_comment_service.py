"""Unit tests for CommentService."""

import pytest

from agora.domain.error import AuthError, ValidationError
from agora.domain.repository import CommentRepository
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

POST_ID = PostId(1)
AUTHOR_ID = UserId("user-1")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """A top-level comment is stored with an assigned ID."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        comment = await comment_service.create_comment(
            post_id=POST_ID,
            content="First!",
            author_id=AUTHOR_ID,
            author_name="Ada",
        )

        # Assert
        assert comment.id is not None
        assert comment.parent_id is None
        assert comment.author_name.root == "Ada"
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """A reply references its parent on the same post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            post_id=POST_ID, content="Parent", author_id=AUTHOR_ID, author_name="Ada"
        )

        # Act
        reply = await comment_service.create_comment(
            post_id=POST_ID,
            content="Reply",
            parent_id=parent.id,
            author_id=UserId("user-2"),
            author_name="Grace",
        )

        # Assert
        assert reply.parent_id == parent.id
        comments = await comment_service.get_comments_for_post(POST_ID)
        assert [c.id for c in comments] == [parent.id, reply.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "author_id,author_name",
        [(None, "Ada"), (AUTHOR_ID, None), (AUTHOR_ID, "   "), ("", "Ada")],
    )
    async def test_missing_identity_raises_auth_error_without_write(
        self, unit_env, author_id, author_name
    ):
        """Anonymous comments are rejected and nothing is stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        with pytest.raises(AuthError, match="logged in to comment"):
            await comment_service.create_comment(
                post_id=POST_ID,
                content="Hello",
                author_id=author_id,
                author_name=author_name,
            )
        assert await comment_repo.count_by_post(POST_ID) == 0

    @pytest.mark.asyncio
    async def test_auth_checked_before_content(self, unit_env):
        """An anonymous caller with empty content gets AuthError, not ValidationError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(AuthError):
            await comment_service.create_comment(post_id=POST_ID, content="")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_raises_validation_error(self, unit_env, content):
        """Empty or whitespace-only content is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        with pytest.raises(ValidationError, match="must not be empty"):
            await comment_service.create_comment(
                post_id=POST_ID, content=content, author_id=AUTHOR_ID, author_name="Ada"
            )
        assert await comment_repo.count_by_post(POST_ID) == 0

    @pytest.mark.asyncio
    async def test_too_long_content_raises_validation_error(self, unit_env):
        """Content over the configured limit is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        too_long = "x" * (comment_service.max_content_length + 1)

        # Act & Assert
        with pytest.raises(ValidationError, match="at most"):
            await comment_service.create_comment(
                post_id=POST_ID, content=too_long, author_id=AUTHOR_ID, author_name="Ada"
            )

    @pytest.mark.asyncio
    async def test_too_long_author_name_raises_validation_error(self, unit_env):
        """Author names over 255 characters are rejected."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="Author name"):
            await comment_service.create_comment(
                post_id=POST_ID, content="Hi", author_id=AUTHOR_ID, author_name="a" * 256
            )

    @pytest.mark.asyncio
    async def test_unknown_parent_raises_validation_error(self, unit_env):
        """Replying to a comment that does not exist is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        with pytest.raises(ValidationError, match="Parent comment not found"):
            await comment_service.create_comment(
                post_id=POST_ID,
                content="Reply",
                parent_id=CommentId(42),
                author_id=AUTHOR_ID,
                author_name="Ada",
            )
        assert await comment_repo.count_by_post(POST_ID) == 0

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises_validation_error(self, unit_env):
        """Replying across posts is rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        other_post_comment = await comment_service.create_comment(
            post_id=PostId(2), content="Elsewhere", author_id=AUTHOR_ID, author_name="Ada"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong to this post"):
            await comment_service.create_comment(
                post_id=POST_ID,
                content="Reply",
                parent_id=other_post_comment.id,
                author_id=AUTHOR_ID,
                author_name="Ada",
            )


class TestGetComments:
    """Tests for comment lookups."""

    @pytest.mark.asyncio
    async def test_get_comments_for_post_only_returns_that_post(self, unit_env):
        """Comments from other posts are not returned."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        mine = await comment_service.create_comment(
            post_id=POST_ID, content="Mine", author_id=AUTHOR_ID, author_name="Ada"
        )
        await comment_service.create_comment(
            post_id=PostId(2), content="Other", author_id=AUTHOR_ID, author_name="Ada"
        )

        # Act
        comments = await comment_service.get_comments_for_post(POST_ID)

        # Assert
        assert comments == [mine]

    @pytest.mark.asyncio
    async def test_get_comment_by_id_missing_returns_none(self, unit_env):
        """Unknown IDs return None."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_by_id(CommentId(404)) is None
