"""Activity use cases."""

from .create_activity import (
    CreateActivityRequest,
    CreateActivityResponse,
    CreateActivityUseCase,
)
from .delete_activity import (
    DeleteActivityRequest,
    DeleteActivityResponse,
    DeleteActivityUseCase,
)
from .join_activity import JoinActivityRequest, JoinActivityResponse, JoinActivityUseCase
from .promote_member import (
    PromoteMemberRequest,
    PromoteMemberResponse,
    PromoteMemberUseCase,
)

__all__ = [
    "CreateActivityRequest",
    "CreateActivityResponse",
    "CreateActivityUseCase",
    "DeleteActivityRequest",
    "DeleteActivityResponse",
    "DeleteActivityUseCase",
    "JoinActivityRequest",
    "JoinActivityResponse",
    "JoinActivityUseCase",
    "PromoteMemberRequest",
    "PromoteMemberResponse",
    "PromoteMemberUseCase",
]
