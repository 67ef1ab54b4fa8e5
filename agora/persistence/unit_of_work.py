"""PostgreSQL implementation of UnitOfWork."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import UnitOfWork
from agora.persistence.error import store_operation


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's shared session.

    The session provider still commits when the request scope closes; after
    an explicit commit that final commit has nothing left to do.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    @store_operation
    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.session.commit()
        logfire.debug("Unit of work committed")
