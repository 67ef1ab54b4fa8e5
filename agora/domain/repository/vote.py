"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.vote import Vote
from agora.domain.value import PostId, UserId, VoteId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    The store is responsible for keeping at most one vote row per
    (post, user) pair. Writes on an existing row are check-and-set: they only
    apply if the row still holds the value the caller read.
    """

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post.

        Args:
            post_id: The post ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def find_by_post_and_user(
        self,
        post_id: PostId,
        user_id: UserId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID
            for_update: Lock the row until the current transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert (its ID is ignored)

        Returns:
            The stored vote with its store-assigned ID

        Raises:
            IntegrityError: If a vote already exists for this post and user
        """
        pass

    @abstractmethod
    async def update_value(
        self,
        vote_id: VoteId,
        expected: VoteValue,
        value: VoteValue,
    ) -> bool:
        """Change a vote's value if it still holds the expected value.

        Args:
            vote_id: The vote ID
            expected: Value the caller last read
            value: New value

        Returns:
            True if the row was updated, False if it was gone or had changed
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote if it still holds the expected value.

        Args:
            vote_id: The vote ID
            expected: Value the caller last read

        Returns:
            True if the row was deleted, False if it was gone or had changed
        """
        pass
