"""Domain value objects for agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import field_validator

from agora.domain.value.common import RootValueObject


class VoteValue(IntEnum):
    """Signed vote on a post.

    There is no zero vote: the absence of a vote row means "no vote".
    """

    UP = 1
    DOWN = -1


class VoteState(str, Enum):
    """Vote state of one user on one post."""

    NO_VOTE = "no_vote"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @classmethod
    def from_value(cls, value: Optional[VoteValue]) -> "VoteState":
        """Map a stored vote value (or its absence) to a state."""
        if value is None:
            return cls.NO_VOTE
        return cls.UPVOTED if value == VoteValue.UP else cls.DOWNVOTED


class VoteAction(str, Enum):
    """Store operation chosen when reconciling a vote."""

    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"


class AuthorName(RootValueObject[str]):
    """Display name of a comment author, as supplied by the identity provider."""

    @field_validator("root")
    @classmethod
    def validate_author_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Author name must be 1-255 characters")
        return v
