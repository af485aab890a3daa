"""User use cases."""

from .delete_user_content import (
    DeleteUserContentRequest,
    DeleteUserContentResponse,
    DeleteUserContentUseCase,
)

__all__ = [
    "DeleteUserContentRequest",
    "DeleteUserContentResponse",
    "DeleteUserContentUseCase",
]
