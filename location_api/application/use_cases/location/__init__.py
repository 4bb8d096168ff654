"""Location Use Cases"""
from .create_location import (
    CreateLocationInput,
    CreateLocationOutput,
    CreateLocationUseCase,
)
from .delete_location import (
    DeleteLocationInput,
    DeleteLocationOutput,
    DeleteLocationUseCase,
)
from .get_location import (
    GetLocationInput,
    GetLocationOutput,
    GetLocationUseCase,
)
from .list_locations import ListLocationsOutput, ListLocationsUseCase
from .update_location import (
    UpdateLocationInput,
    UpdateLocationOutput,
    UpdateLocationUseCase,
)

__all__ = [
    "CreateLocationInput",
    "CreateLocationOutput",
    "CreateLocationUseCase",
    "DeleteLocationInput",
    "DeleteLocationOutput",
    "DeleteLocationUseCase",
    "GetLocationInput",
    "GetLocationOutput",
    "GetLocationUseCase",
    "ListLocationsOutput",
    "ListLocationsUseCase",
    "UpdateLocationInput",
    "UpdateLocationOutput",
    "UpdateLocationUseCase",
]
