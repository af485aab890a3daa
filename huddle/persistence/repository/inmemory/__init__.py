"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .carpool import InMemoryCarpoolRepository
from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryCarpoolRepository",
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
]
