"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import PostId, UserId, VoteId, VoteValue
from agora.persistence.error import store_operation
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Duplicate inserts are rejected by the uq_votes_post_user constraint.
    Updates and deletes carry the expected value in their WHERE clause.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.post_id == post_id)
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def find_by_post_and_user(
        self,
        post_id: PostId,
        user_id: UserId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a post, optionally locking the row."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.post_id == post_id,
                votes_table.c.user_id == user_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @store_operation
    async def insert(self, vote: Vote) -> Vote:
        """Insert a vote and return it with its assigned ID."""
        stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
        # Savepoint keeps the request transaction usable after a duplicate key
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict())

    @store_operation
    async def update_value(
        self,
        vote_id: VoteId,
        expected: VoteValue,
        value: VoteValue,
    ) -> bool:
        """Change a vote's value if it still holds the expected value."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.value == int(expected),
                )
            )
            .values(value=int(value))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @store_operation
    async def delete(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote if it still holds the expected value."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.id == vote_id,
                votes_table.c.value == int(expected),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
