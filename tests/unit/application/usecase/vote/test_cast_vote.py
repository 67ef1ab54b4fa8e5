"""Unit tests for CastVoteUseCase."""

import pytest

from agora.application.cache import QueryCache, votes_key
from agora.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from agora.domain.error import AuthError, ValidationError
from agora.domain.repository import UnitOfWork
from agora.domain.value import PostId, VoteAction, VoteState
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_like_returns_outcome_and_tally(self, unit_env):
        """A first like reports the insert and the new counts."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        response = await use_case.execute(
            CastVoteRequest(post_id=1, user_id="user-1", value=1)
        )

        # Assert
        assert response.action == VoteAction.INSERTED
        assert response.state == VoteState.UPVOTED
        assert response.likes == 1
        assert response.dislikes == 0
        assert response.score == 1
        assert response.user_vote == 1

    @pytest.mark.asyncio
    async def test_like_like_dislike_sequence(self, unit_env):
        """Like, like again (retract), then dislike leaves one dislike."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        first = await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=1))
        second = await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=1))
        third = await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=-1))

        # Assert
        assert (first.likes, first.dislikes) == (1, 0)
        assert second.action == VoteAction.DELETED
        assert (second.likes, second.dislikes, second.user_vote) == (0, 0, None)
        assert third.action == VoteAction.INSERTED
        assert (third.likes, third.dislikes, third.user_vote) == (0, 1, -1)

    @pytest.mark.asyncio
    async def test_vote_commits_before_returning(self, unit_env):
        """Each applied vote is committed once."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act
        await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=1))
        await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=-1))

        # Assert
        assert unit_of_work.commits == 2

    @pytest.mark.asyncio
    async def test_vote_invalidates_cached_votes(self, unit_env):
        """A vote drops the post's cached vote list."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        query_cache = await unit_env.get(QueryCache)
        key = votes_key(PostId(1))
        await query_cache.set(key, [])

        # Act
        await use_case.execute(CastVoteRequest(post_id=1, user_id="user-1", value=-1))

        # Assert
        assert await query_cache.get(key) is None

    @pytest.mark.asyncio
    async def test_anonymous_vote_raises_auth_error(self, unit_env):
        """Anonymous callers cannot vote."""
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(AuthError):
            await use_case.execute(CastVoteRequest(post_id=1, value=1))

    @pytest.mark.asyncio
    async def test_zero_vote_raises_validation_error(self, unit_env):
        """A zero vote is rejected and the cache is left alone."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        query_cache = await unit_env.get(QueryCache)
        key = votes_key(PostId(1))
        await query_cache.set(key, [])

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(CastVoteRequest(post_id=1, user_id="u", value=0))
        assert await query_cache.get(key) == []
        assert (await unit_env.get(UnitOfWork)).commits == 0
