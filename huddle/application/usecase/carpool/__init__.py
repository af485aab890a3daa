"""Carpool use cases."""

from .create_carpool import (
    CreateCarpoolRequest,
    CreateCarpoolResponse,
    CreateCarpoolUseCase,
)
from .delete_carpool import (
    DeleteCarpoolRequest,
    DeleteCarpoolResponse,
    DeleteCarpoolUseCase,
)
from .list_activity_carpools import (
    ListActivityCarpoolsRequest,
    ListActivityCarpoolsResponse,
    ListActivityCarpoolsUseCase,
)

__all__ = [
    "CreateCarpoolRequest",
    "CreateCarpoolResponse",
    "CreateCarpoolUseCase",
    "DeleteCarpoolRequest",
    "DeleteCarpoolResponse",
    "DeleteCarpoolUseCase",
    "ListActivityCarpoolsRequest",
    "ListActivityCarpoolsResponse",
    "ListActivityCarpoolsUseCase",
]
