"""
fieldtrack models package.
"""

from fieldtrack.models.geo_context import ClassificationResult, GeocodeResult, ResolvedLocation
from fieldtrack.models.location import LocationRecord, RegionCount

__all__ = [
    "ClassificationResult",
    "GeocodeResult",
    "ResolvedLocation",
    "LocationRecord",
    "RegionCount",
]
