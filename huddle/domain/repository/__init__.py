"""Repository interfaces for Huddle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from huddle.domain.repository.activity import ActivityFilter, ActivityRepository
from huddle.domain.repository.carpool import CarpoolFilter, CarpoolRepository
from huddle.domain.repository.comment import CommentFilter, CommentRepository
from huddle.domain.repository.post import PostRepository

__all__ = [
    "ActivityFilter",
    "ActivityRepository",
    "CarpoolFilter",
    "CarpoolRepository",
    "CommentFilter",
    "CommentRepository",
    "PostRepository",
]
