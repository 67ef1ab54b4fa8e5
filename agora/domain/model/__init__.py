"""Domain model entities for agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.vote import Vote, VoteOutcome, VoteTally

__all__ = [
    "Comment",
    "Vote",
    "VoteOutcome",
    "VoteTally",
]
