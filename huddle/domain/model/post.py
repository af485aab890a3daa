"""Post entity.

Posts are the top-level content comment threads are rooted on.
"""

from datetime import datetime

from pydantic import Field

from huddle.domain.model.common import CONTENT_MAX_LENGTH, DomainModel
from huddle.domain.value import PostId, PostOptions, UserId


class Post(DomainModel):
    """Post entity."""

    id: PostId
    author: UserId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    options: PostOptions = Field(default_factory=PostOptions)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
