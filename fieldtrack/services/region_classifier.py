"""
Region Classification Service.

Assigns a coordinate to a country and then to a first-level region using
the static bounding-box tables in fieldtrack.data.bounding_boxes.

This is the local fallback for reverse geocoding. Output is a display label
only: stored or server-geocoded values always take precedence.
Every function here is total and pure - no I/O, no state, never raises.
"""

from enum import Enum
from typing import List, Optional
import logging
import unicodedata

from fieldtrack.data.bounding_boxes import (
    BoundingBox,
    COUNTRY_ALIASES,
    COUNTRY_BOXES,
    DETECTED_REGION_PLACEHOLDER,
    GUATEMALA,
    GUATEMALA_CAPITAL,
    REGION_BOXES,
    REGION_CATALOG,
    REGION_DEFAULTS,
)
from fieldtrack.models.geo_context import ClassificationResult

logger = logging.getLogger(__name__)


class RegionDefaultMode(str, Enum):
    """Which default label family to use when no region box matches."""
    HEAT_MAP = "heat-map"
    CAPTURE = "capture"


def _fold(name: str) -> str:
    """Strip accents, casefold and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(stripped.casefold().split())


_ALIAS_INDEX = {_fold(alias): canonical for alias, canonical in COUNTRY_ALIASES.items()}
_KNOWN_COUNTRIES = frozenset(COUNTRY_ALIASES.values())


def normalize_country_name(name: Optional[str]) -> str:
    """
    Map a country name onto its canonical display form.

    "Mexico", "méxico" and "MEXICO" all become "México". Names not in the
    alias table are returned stripped but otherwise untouched.

    Args:
        name: Country name from any source (may be None)

    Returns:
        Canonical name, the stripped input if unknown, or "" for None/blank
    """
    if not name or not name.strip():
        return ""
    return _ALIAS_INDEX.get(_fold(name), name.strip())


def _first_match(boxes, lat: float, lng: float) -> Optional[BoundingBox]:
    for box in boxes:
        if box.contains(lat, lng):
            return box
    return None


def classify_country(lat: float, lng: float) -> str:
    """
    Classify a coordinate into a country by ordered bounding-box lookup.

    Central American boxes are tested before Mexico's coarse box, so a point
    in the overlap (e.g. 15.0, -90.0) resolves to Guatemala.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees

    Returns:
        Canonical country name, or "" if no box matches
    """
    box = _first_match(COUNTRY_BOXES, lat, lng)
    if box is None:
        logger.debug(f"No country box matches coordinates: {lat}, {lng}")
        return ""
    return box.name


def classify_region(
    lat: float,
    lng: float,
    country: Optional[str],
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> str:
    """
    Classify a coordinate into a region of the given country.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees
        country: Country name, usually from classify_country() or geocoding
        mode: Default label family used when no region box matches

    Returns:
        Region name. Falls back to the country's default label, to a
        placeholder for countries without a region table, and to
        "Región detectada" for unknown or empty countries.
    """
    canonical = normalize_country_name(country)
    if not canonical:
        return DETECTED_REGION_PLACEHOLDER

    boxes = REGION_BOXES.get(canonical)
    if boxes is None:
        # Recognized country without a region table
        if canonical in _KNOWN_COUNTRIES and mode == RegionDefaultMode.HEAT_MAP:
            return canonical
        return DETECTED_REGION_PLACEHOLDER

    box = _first_match(boxes, lat, lng)
    if box is not None:
        return box.name

    if canonical == GUATEMALA:
        return GUATEMALA_CAPITAL if mode == RegionDefaultMode.HEAT_MAP else GUATEMALA
    return REGION_DEFAULTS[canonical]


def classify(
    lat: float,
    lng: float,
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> ClassificationResult:
    """Run country then region classification for one coordinate."""
    country = classify_country(lat, lng)
    region = classify_region(lat, lng, country, mode) if country else None
    return ClassificationResult(country=country, region=region)


def known_regions(country: Optional[str]) -> List[str]:
    """
    Full list of first-level region names for a country (dropdown options).

    Returns an empty list for countries without a catalog.
    """
    return list(REGION_CATALOG.get(normalize_country_name(country), []))
