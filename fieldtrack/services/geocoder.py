"""
Reverse Geocoding Client.

Resolves address, country and state for a coordinate through the OpenCage
geocoding API. This is the preferred source of country/state; the bounding
box classifier is only used when this is unavailable.
"""

from typing import Any, Dict, Optional
import logging

import requests

from fieldtrack import config
from fieldtrack.models.geo_context import GeocodeResult

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when the geocoding service cannot produce a result."""
    pass


class GeocodingNotConfigured(GeocodingError):
    """Raised when no API key is available."""
    pass


def format_coordinates(lat: float, lng: float) -> str:
    """Coordinate pair as a fallback address, e.g. '14.634900, -90.506900'."""
    return f"{lat:.6f}, {lng:.6f}"


class OpenCageGeocoder:
    """
    Client for OpenCage reverse geocoding.

    One request per lookup, limit=1. Missing components come back as empty
    strings so callers can fall back on them with a plain truthiness test.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = config.OPENCAGE_URL,
        timeout: float = config.GEOCODE_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else config.OPENCAGE_API_KEY
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": config.USER_AGENT
        })

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def reverse_geocode(self, lat: float, lng: float) -> GeocodeResult:
        """
        Reverse geocode a coordinate.

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            GeocodeResult with address, country and state

        Raises:
            GeocodingNotConfigured: If no API key is set
            GeocodingError: On transport failure, non-2xx status or bad payload
        """
        if not self.is_configured:
            logger.error("OpenCage API key not configured")
            raise GeocodingNotConfigured("Geocoding service not configured")

        logger.info(f"Geocoding request for coordinates: {lat}, {lng}")

        params = {
            "q": f"{lat},{lng}",
            "key": self.api_key,
            "limit": 1,
        }
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"OpenCage request failed: {e}")
            raise GeocodingError(f"Geocoding request failed: {e}") from e

        if not response.ok:
            logger.error(f"OpenCage API error: {response.status_code} {response.reason}")
            raise GeocodingError(f"Geocoding API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingError("Geocoding API returned invalid JSON") from e

        return self._parse(data, lat, lng)

    def _parse(self, data: Dict[str, Any], lat: float, lng: float) -> GeocodeResult:
        results = data.get("results") or []
        if not results:
            logger.warning(f"No geocoding results found for {lat}, {lng}")
            return GeocodeResult(address=format_coordinates(lat, lng))

        first = results[0]
        components = first.get("components") or {}
        logger.info(f"Geocoding successful for {lat}, {lng}")
        return GeocodeResult(
            address=first.get("formatted") or "",
            country=components.get("country") or "",
            state=components.get("state") or components.get("province") or "",
        )
