"""Nominatim Geocoding Gateway Implementation"""
from __future__ import annotations

from typing import Any

import httpx
import structlog

from location_api.application.errors import GeocodingError
from location_api.application.ports.gateways import IGeocodingGateway
from location_api.domain.location import GeocodeCandidate

logger = structlog.get_logger()


class NominatimGeocodingGateway(IGeocodingGateway):
    """
    Nominatim Geocoding Gateway

    OpenStreetMap Nominatim の /search を呼び出してロケーション候補を取得する。
    利用規約に従い、呼び出し元アプリを識別する User-Agent を必ず送る。
    """

    DEFAULT_URL = "https://nominatim.openstreetmap.org/search"
    DEFAULT_TIMEOUT_SECONDS = 10.0

    def __init__(
        self,
        user_agent: str,
        base_url: str = DEFAULT_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def search(
        self,
        city: str,
        state: str,
        country: str,
        format: str = "json",
    ) -> list[GeocodeCandidate]:
        """
        ロケーション候補を検索

        Raises:
            GeocodingError: HTTP エラー、タイムアウト、不正なレスポンス
        """
        log = logger.bind(city=city, state=state, country=country)
        log.info("geocode_search_started")

        params = {
            "city": city,
            "state": state,
            "country": country,
            "format": format,
        }
        headers = {"User-Agent": self.user_agent}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params, headers=headers)
                response.raise_for_status()
                payload: Any = response.json()
        except httpx.HTTPStatusError as e:
            log.error("geocode_http_error", status_code=e.response.status_code)
            raise GeocodingError(
                f"Geocoder returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            log.error("geocode_request_failed", error=str(e))
            raise GeocodingError(f"Geocoder request failed: {e!r}") from e
        except ValueError as e:
            log.error("geocode_invalid_json", error=str(e))
            raise GeocodingError("Geocoder returned a non-JSON response") from e

        if not isinstance(payload, list):
            log.error("geocode_unexpected_payload", payload_type=type(payload).__name__)
            raise GeocodingError("Geocoder returned an unexpected response shape")

        candidates = [
            GeocodeCandidate.from_dict(entry) for entry in payload if isinstance(entry, dict)
        ]
        log.info("geocode_search_completed", count=len(candidates))
        return candidates
