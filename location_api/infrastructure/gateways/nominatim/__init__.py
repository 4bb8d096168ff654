"""Nominatim Gateway"""
from .nominatim_gateway import NominatimGeocodingGateway

__all__ = ["NominatimGeocodingGateway"]
