"""Strongly typed identifiers for Huddle domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ActivityId = NewType("ActivityId", UUID)
CarpoolId = NewType("CarpoolId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LocationId = NewType("LocationId", UUID)

# Weak reference to any entity (carpool target, comment target/root)
TargetId = NewType("TargetId", UUID)
