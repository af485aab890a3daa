"""Domain services."""

from .activity_service import ActivityService
from .base import Service
from .carpool_service import CarpoolService
from .comment_service import CommentService
from .post_service import PostService

__all__ = [
    "ActivityService",
    "CarpoolService",
    "CommentService",
    "PostService",
    "Service",
]
