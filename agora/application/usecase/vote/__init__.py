"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_votes import GetVotesRequest, GetVotesResponse, GetVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVotesRequest",
    "GetVotesResponse",
    "GetVotesUseCase",
]
