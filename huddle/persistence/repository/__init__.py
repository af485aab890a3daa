"""PostgreSQL repository implementations."""

from huddle.persistence.repository.activity import PostgresActivityRepository
from huddle.persistence.repository.carpool import PostgresCarpoolRepository
from huddle.persistence.repository.comment import PostgresCommentRepository
from huddle.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresCarpoolRepository",
    "PostgresCommentRepository",
    "PostgresPostRepository",
]
