"""Location Domain Module"""
from .entities.location import Location
from .value_objects.geocode_candidate import GeocodeCandidate
from .value_objects.location_id import LocationId

__all__ = [
    "Location",
    "GeocodeCandidate",
    "LocationId",
]
