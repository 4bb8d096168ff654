"""Location Handlers"""
from .handler import (
    create_location,
    delete_location,
    get_location,
    get_locations,
    update_location,
)

__all__ = [
    "create_location",
    "delete_location",
    "get_location",
    "get_locations",
    "update_location",
]
