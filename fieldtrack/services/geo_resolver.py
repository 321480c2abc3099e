"""
Geographic Resolution Service.

Determines the country/state pair for a visit coordinate using a cascade:
stored value -> server geocoding -> bounding-box classification.
Never raises - the worst outcome is an 'unresolved' placeholder.
"""

from typing import Optional
from enum import Enum
import logging

from fieldtrack.data.bounding_boxes import DETECTED_REGION_PLACEHOLDER
from fieldtrack.models.geo_context import ResolvedLocation
from fieldtrack.services.geocoder import GeocodingError, OpenCageGeocoder, format_coordinates
from fieldtrack.services.region_classifier import (
    RegionDefaultMode,
    classify_country,
    classify_region,
    normalize_country_name,
)

logger = logging.getLogger(__name__)


class ResolutionMode(str, Enum):
    """Where a resolved country/state pair came from."""
    STORED = "stored"
    GEOCODED = "geocoded"
    CLASSIFIED = "classified"
    UNRESOLVED = "unresolved"


def _region_for(lat: float, lng: float, country: str, state: Optional[str], mode: RegionDefaultMode) -> str:
    if state and state.strip():
        return state.strip()
    return classify_region(lat, lng, country, mode)


def resolve_location(
    lat: float,
    lng: float,
    country: Optional[str] = None,
    state: Optional[str] = None,
    geocoder: Optional[OpenCageGeocoder] = None,
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> ResolvedLocation:
    """
    Resolve country and state for a coordinate.

    Args:
        lat: Latitude
        lng: Longitude
        country: Country already stored with the record, if any
        state: State already stored with the record, if any
        geocoder: Server-side geocoder; skipped when None
        mode: Default label family for classifier fallbacks

    Returns:
        ResolvedLocation with country, state, address and resolution mode
    """
    stored_country = normalize_country_name(country)
    if stored_country:
        return ResolvedLocation(
            country=stored_country,
            state=_region_for(lat, lng, stored_country, state, mode),
            resolution_mode=ResolutionMode.STORED.value,
            resolution_explanation=f"Country '{stored_country}' taken from the stored record.",
        )

    if geocoder is not None:
        try:
            geocoded = geocoder.reverse_geocode(lat, lng)
        except GeocodingError as e:
            logger.warning(f"Geocoding failed for {lat}, {lng}, using bounding-box fallback: {e}")
        else:
            geocoded_country = normalize_country_name(geocoded.country)
            if geocoded_country:
                logger.info(f"Geocoded {lat}, {lng} -> {geocoded_country}")
                return ResolvedLocation(
                    country=geocoded_country,
                    state=_region_for(lat, lng, geocoded_country, geocoded.state, mode),
                    address=geocoded.address or format_coordinates(lat, lng),
                    resolution_mode=ResolutionMode.GEOCODED.value,
                    resolution_explanation=f"Country '{geocoded_country}' returned by server geocoding.",
                )
            logger.debug(f"Geocoder returned no country for {lat}, {lng}")

    classified_country = classify_country(lat, lng)
    address = format_coordinates(lat, lng)
    if classified_country:
        logger.info(f"Classified {lat}, {lng} -> {classified_country} from bounding boxes")
        return ResolvedLocation(
            country=classified_country,
            state=classify_region(lat, lng, classified_country, mode),
            address=address,
            resolution_mode=ResolutionMode.CLASSIFIED.value,
            resolution_explanation=(
                f"Country '{classified_country}' approximated from static bounding boxes. "
                f"Display label only."
            ),
        )

    logger.info(f"Country not detected for {lat}, {lng}")
    return ResolvedLocation(
        country="",
        state=DETECTED_REGION_PLACEHOLDER,
        address=address,
        resolution_mode=ResolutionMode.UNRESOLVED.value,
        resolution_explanation="Coordinates fall outside every known country box.",
    )
