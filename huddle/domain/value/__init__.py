"""Domain value objects for Huddle."""

from huddle.domain.value.identifiers import (
    ActivityId,
    CarpoolId,
    CommentId,
    LocationId,
    PostId,
    TargetId,
    UserId,
)
from huddle.domain.value.types import (
    ActivityOptions,
    ActivityRole,
    CarpoolOptions,
    CarpoolRole,
    CommentOptions,
    PostOptions,
)

__all__ = [
    # Identifiers
    "UserId",
    "ActivityId",
    "CarpoolId",
    "PostId",
    "CommentId",
    "LocationId",
    "TargetId",
    # Types
    "ActivityRole",
    "CarpoolRole",
    "ActivityOptions",
    "CarpoolOptions",
    "CommentOptions",
    "PostOptions",
]
