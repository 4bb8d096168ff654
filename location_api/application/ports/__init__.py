"""Application Ports (Interfaces)"""
from .repositories import ILocationRepository
from .gateways import IGeocodingGateway

__all__ = [
    "ILocationRepository",
    "IGeocodingGateway",
]
