"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import jwt
import logfire

from agora.config import AuthSettings
from agora.domain.model import Comment, Vote
from agora.domain.value import (
    AuthorName,
    CommentId,
    PostId,
    UserId,
    VoteId,
    VoteValue,
)

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    post_id: int = 1,
    content: str | None = None,
    author_id: str = "user-1",
) -> Comment:
    """Build a stored comment for tests.

    created_at increases with the ID so ID order matches creation order.
    """
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        content=content or f"Comment {comment_id}",
        author_id=UserId(author_id),
        author_name=AuthorName(author_id),
        created_at=BASE_TIME + timedelta(seconds=comment_id),
    )


def make_vote(user_id: str, value: int, post_id: int = 1, vote_id: int = 1) -> Vote:
    """Build a stored vote for tests."""
    return Vote(
        id=VoteId(vote_id),
        post_id=PostId(post_id),
        user_id=UserId(user_id),
        value=VoteValue(value),
        created_at=BASE_TIME,
    )


def make_token(
    user_id: str, name: str, auth_settings: AuthSettings, expires_in_days: int = 30
) -> str:
    """Issue a token the way the identity provider does."""
    payload = {
        "user_id": user_id,
        "name": name,
        "exp": datetime.now(timezone.utc) + timedelta(days=expires_in_days),
    }
    return jwt.encode(
        payload, auth_settings.jwt_secret, algorithm=auth_settings.jwt_algorithm
    )
