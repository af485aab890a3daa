"""Domain value objects for Huddle.

Value objects are immutable and defined by their values, not identity.
"""

from enum import IntEnum
from typing import Optional

from huddle.domain.value.common import OptionsRecord
from huddle.domain.value.identifiers import LocationId


class ActivityRole(IntEnum):
    """Role of a user within an activity.

    Ordered, so a guard is a single comparison against the minimum role an
    operation requires. A creator is always a manager, a manager is always
    a member.
    """

    NONE = 0
    MEMBER = 1
    MANAGER = 2
    CREATOR = 3


class CarpoolRole(IntEnum):
    """Role of a user within a carpool."""

    NONE = 0
    MEMBER = 1
    DRIVER = 2


class ActivityOptions(OptionsRecord):
    """Activity extension record."""

    location: Optional[LocationId] = None


class CarpoolOptions(OptionsRecord):
    """Carpool extension record."""

    location: Optional[LocationId] = None


class CommentOptions(OptionsRecord):
    """Comment display options."""

    background_color: Optional[str] = None


class PostOptions(OptionsRecord):
    """Post display options."""

    background_color: Optional[str] = None
