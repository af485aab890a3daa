"""Comment entity.

Comments carry two pointers:
- target: the immediate parent (a post, or another comment for replies)
- root: the post anchoring the whole thread

Direct children of anything are found by target; a whole thread, at any
depth, is one flat query by root.
"""

from datetime import datetime

from pydantic import Field

from huddle.domain.model.common import CONTENT_MAX_LENGTH, DomainModel
from huddle.domain.value import CommentId, CommentOptions, TargetId, UserId


class Comment(DomainModel):
    """Comment entity.

    author, target and root are fixed at creation; only content and
    options change afterwards.
    """

    id: CommentId
    author: UserId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    target: TargetId
    root: TargetId
    options: CommentOptions = Field(default_factory=CommentOptions)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """True for a direct reply to the root post."""
        return self.target == self.root
