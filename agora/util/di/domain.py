"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, CommentSettings
from agora.domain.repository import CommentRepository, VoteRepository
from agora.domain.service import CommentService, IdentityService, VoteService
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_content_length=comment_settings.max_length,
        )

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)
