"""Domain model entities for Huddle."""

from huddle.domain.model.activity import Activity, ActivityRecord
from huddle.domain.model.carpool import Carpool
from huddle.domain.model.comment import Comment
from huddle.domain.model.post import Post

__all__ = [
    "Activity",
    "ActivityRecord",
    "Carpool",
    "Comment",
    "Post",
]
