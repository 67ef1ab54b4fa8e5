"""Vote entity and derived vote views.

Each user holds at most one live vote per post. A vote is either an upvote
(+1) or a downvote (-1); retracting a vote deletes the row.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from agora.domain.model.common import DomainModel
from agora.domain.value import PostId, UserId, VoteAction, VoteId, VoteState, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per post (enforced by database unique constraint)
    - Value is +1 or -1, never zero
    - Only the value may change after creation
    """

    id: Optional[VoteId] = None
    post_id: PostId
    user_id: UserId
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)


class VoteOutcome(DomainModel):
    """Result of reconciling one vote request against the stored vote."""

    post_id: PostId
    user_id: UserId
    action: VoteAction
    previous_state: VoteState
    state: VoteState
    value: Optional[VoteValue] = None


class VoteTally(DomainModel):
    """Aggregate vote counts for a post, seen by one (optional) user."""

    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    user_vote: Optional[VoteValue] = None

    @computed_field
    @property
    def score(self) -> int:
        """Net score (likes minus dislikes)."""
        return self.likes - self.dislikes
