"""Strongly typed identifiers for agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Store-assigned integer keys
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)

# Opaque identifier issued by the identity provider
UserId = NewType("UserId", str)
