"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree, count_nodes, walk_comment_tree
from .identity_service import Identity, IdentityService
from .vote_service import VoteService, reconcile
from .vote_tally import tally_votes

__all__ = [
    "CommentNode",
    "CommentService",
    "Identity",
    "IdentityService",
    "Service",
    "VoteService",
    "build_comment_tree",
    "count_nodes",
    "reconcile",
    "tally_votes",
    "walk_comment_tree",
]
