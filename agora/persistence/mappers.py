"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict

from agora.domain.model import Comment, Vote
from agora.domain.value import (
    AuthorName,
    CommentId,
    PostId,
    UserId,
    VoteId,
    VoteValue,
)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") is not None else None,
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_name=AuthorName(row["author_name"]),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to an insert dict.

    The ID is left out so the database assigns it.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump(exclude={"id"})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to an insert dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    data = vote.model_dump(exclude={"id"})
    data["value"] = int(vote.value)
    return data
