"""Comment entity.

Comments are threaded discussions on posts with unlimited depth. Only the
direct parent is stored; the reply tree is rebuilt on every read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import AuthorName, CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - id: Assigned by the store on insert (None before that)
    - parent_id: Direct parent comment (None for top-level), same post only
    - Immutable once created: there is no edit or delete flow
    """

    id: Optional[CommentId] = None
    post_id: PostId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    author_name: AuthorName
    created_at: datetime = Field(default_factory=datetime.now)
