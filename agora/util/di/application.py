"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.cache import QueryCache
from agora.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from agora.application.usecase.vote import CastVoteUseCase, GetVotesUseCase
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentService, VoteService
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
        query_cache: QueryCache,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            unit_of_work=unit_of_work,
            query_cache=query_cache,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, query_cache: QueryCache
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, query_cache=query_cache
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        query_cache: QueryCache,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            unit_of_work=unit_of_work,
            query_cache=query_cache,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_votes_use_case(
        self, vote_service: VoteService, query_cache: QueryCache
    ) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(vote_service=vote_service, query_cache=query_cache)
