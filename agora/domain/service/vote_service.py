"""Vote domain service."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import AuthError, ConflictError, StoreError, ValidationError
from agora.domain.model import Vote, VoteOutcome
from agora.domain.repository import VoteRepository
from agora.domain.value import PostId, UserId, VoteAction, VoteState, VoteValue

from .base import Service


def reconcile(existing: Optional[VoteValue], incoming: VoteValue) -> VoteAction:
    """Decide which store operation turns the current vote into the requested one.

    - No vote yet: insert
    - Same value again: delete (toggle off)
    - Opposite value: update (flip)

    Args:
        existing: Value of the user's stored vote, None if there is none
        incoming: Value the user just submitted

    Returns:
        Store operation to apply
    """
    if existing is None:
        return VoteAction.INSERTED
    if existing == incoming:
        return VoteAction.DELETED
    return VoteAction.UPDATED


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(
        self,
        post_id: PostId,
        user_id: UserId | None,
        value: VoteValue | int,
    ) -> VoteOutcome:
        """Cast, flip or retract a user's vote on a post.

        The stored vote is read with a row lock, then exactly one insert,
        update or delete is issued. Updates and deletes only apply if the row
        still holds the value that was read, and inserts rely on the store's
        unique (post, user) constraint, so two racing casts from the same user
        can never leave two rows behind. The loser gets a ConflictError.

        Args:
            post_id: Post ID
            user_id: Voting user ID from the identity provider
            value: +1 to like, -1 to dislike

        Returns:
            Outcome describing the transition that was applied

        Raises:
            AuthError: If no user ID is supplied
            ValidationError: If value is not +1 or -1
            ConflictError: If a concurrent vote by the same user won the race
            StoreError: If the store fails
        """
        with logfire.span(
            "vote_service.cast_vote", post_id=post_id, user_id=user_id, value=value
        ):
            if not user_id:
                logfire.warn("Anonymous vote attempt", post_id=post_id)
                raise AuthError("vote")

            if isinstance(value, bool):
                raise ValidationError("Vote value must be 1 or -1")
            try:
                incoming = VoteValue(value)
            except ValueError as e:
                raise ValidationError("Vote value must be 1 or -1") from e

            existing = await self.vote_repository.find_by_post_and_user(
                post_id, user_id, for_update=True
            )
            current = existing.value if existing else None
            action = reconcile(current, incoming)

            new_value: Optional[VoteValue]
            if existing is None:
                vote = Vote(
                    post_id=post_id,
                    user_id=user_id,
                    value=incoming,
                    created_at=datetime.now(),
                )
                try:
                    await self.vote_repository.insert(vote)
                except IntegrityError as e:
                    logfire.warn(
                        "Duplicate vote insert", post_id=post_id, user_id=user_id
                    )
                    raise ConflictError("Vote was changed concurrently") from e
                new_value = incoming

            else:
                if existing.id is None:
                    raise StoreError("Stored vote has no ID")

                if action == VoteAction.UPDATED:
                    applied = await self.vote_repository.update_value(
                        existing.id, expected=existing.value, value=incoming
                    )
                    new_value = incoming
                else:
                    applied = await self.vote_repository.delete(
                        existing.id, expected=existing.value
                    )
                    new_value = None

                if not applied:
                    logfire.warn(
                        "Vote changed before write",
                        post_id=post_id,
                        user_id=user_id,
                        action=action.value,
                    )
                    raise ConflictError("Vote was changed concurrently")

            outcome = VoteOutcome(
                post_id=post_id,
                user_id=user_id,
                action=action,
                previous_state=VoteState.from_value(current),
                state=VoteState.from_value(new_value),
                value=new_value,
            )
            logfire.info(
                "Vote reconciled",
                post_id=post_id,
                user_id=user_id,
                action=action.value,
                state=outcome.state.value,
            )
            return outcome

    async def get_votes_for_post(self, post_id: PostId) -> list[Vote]:
        """Get all votes on a post.

        Args:
            post_id: Post ID

        Returns:
            List of votes
        """
        with logfire.span("vote_service.get_votes_for_post", post_id=post_id):
            votes = await self.vote_repository.find_by_post(post_id)
            logfire.info("Votes retrieved for post", post_id=post_id, count=len(votes))
            return votes

