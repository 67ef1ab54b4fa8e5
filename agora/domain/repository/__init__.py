"""Repository interfaces for agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.unit_of_work import UnitOfWork
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "UnitOfWork",
    "VoteRepository",
]
