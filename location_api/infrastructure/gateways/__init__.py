"""
Infrastructure Gateways

外部サービスとの統合:
- Nominatim (OpenStreetMap ジオコーディング)
"""
from .nominatim import NominatimGeocodingGateway

__all__ = ["NominatimGeocodingGateway"]
