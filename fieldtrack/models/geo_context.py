"""
Geographic Context Models.

Represents country/region labels resolved from device coordinates.
"""

from pydantic import BaseModel, Field
from typing import Optional, Literal


class ClassificationResult(BaseModel):
    """Bounding-box classification of a single coordinate."""
    country: str = Field("", description="Canonical country name, '' when no box matches")
    region: Optional[str] = Field(None, description="Region label, None when no country matched")


class ClassifyRequest(BaseModel):
    """Request model for the classify endpoint."""
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    country: Optional[str] = Field(None, description="Known country; skips country classification")
    mode: Literal["heat-map", "capture"] = "heat-map"


class GeocodeRequest(BaseModel):
    """Request model for server-side reverse geocoding."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class GeocodeResult(BaseModel):
    """Reverse geocoding result as returned to clients."""
    address: str = ""
    country: str = ""
    state: str = ""


class ResolveRequest(BaseModel):
    """Coordinate plus any country/state already stored with the record."""
    latitude: float
    longitude: float
    country: Optional[str] = None
    state: Optional[str] = None
    mode: Literal["heat-map", "capture"] = "heat-map"


class ResolvedLocation(BaseModel):
    """Country/state for a coordinate plus how they were obtained."""
    country: str = Field("", description="Canonical country name")
    state: str = Field(..., description="Region/state label")
    address: Optional[str] = Field(None, description="Formatted address if known")
    resolution_mode: Literal["stored", "geocoded", "classified", "unresolved"] = Field(
        "unresolved",
        description="How the country/state pair was determined"
    )
    resolution_explanation: str = Field("", description="Explanation of how resolution was performed")
