"""Vote aggregation for a post."""

from typing import Iterable, Optional

from agora.domain.model import Vote, VoteTally
from agora.domain.value import UserId, VoteValue


def tally_votes(
    votes: Iterable[Vote], requesting_user_id: Optional[UserId] = None
) -> VoteTally:
    """Count likes and dislikes and find the requesting user's vote.

    Recomputed from the full vote list on every call; nothing is cached.

    Args:
        votes: All votes on one post
        requesting_user_id: User whose own vote should be reported (optional)

    Returns:
        Tally with like/dislike counts and the user's vote, if any
    """
    likes = 0
    dislikes = 0
    user_vote: Optional[VoteValue] = None

    for vote in votes:
        if vote.value == VoteValue.UP:
            likes += 1
        elif vote.value == VoteValue.DOWN:
            dislikes += 1

        if (
            requesting_user_id is not None
            and user_vote is None
            and vote.user_id == requesting_user_id
        ):
            user_vote = vote.value

    return VoteTally(likes=likes, dislikes=dislikes, user_vote=user_vote)
