"""Location Value Objects"""
from .geocode_candidate import GeocodeCandidate
from .location_id import LocationId

__all__ = ["GeocodeCandidate", "LocationId"]
