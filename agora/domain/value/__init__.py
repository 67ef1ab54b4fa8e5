"""Domain value objects for agora."""

from agora.domain.value.identifiers import CommentId, PostId, UserId, VoteId
from agora.domain.value.types import AuthorName, VoteAction, VoteState, VoteValue

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "VoteId",
    "UserId",
    # Types
    "AuthorName",
    "VoteAction",
    "VoteState",
    "VoteValue",
]
