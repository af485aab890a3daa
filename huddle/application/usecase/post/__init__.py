"""Post use cases."""

from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase

__all__ = [
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
]
