"""
Visit location records and region summary models.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal


class LocationRecord(BaseModel):
    """A stored visit location, optionally annotated with cached country/state."""
    latitude: float
    longitude: float
    country: Optional[str] = None
    state: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator('latitude')
    @classmethod
    def validate_latitude(cls, v):
        if not (-90 <= v <= 90):
            raise ValueError(f"Invalid latitude: {v}. Must be between -90 and 90.")
        return v

    @field_validator('longitude')
    @classmethod
    def validate_longitude(cls, v):
        if not (-180 <= v <= 180):
            raise ValueError(f"Invalid longitude: {v}. Must be between -180 and 180.")
        return v


class RegionCount(BaseModel):
    """Number of visits bucketed into one region."""
    region: str
    count: int = 0
    intensity: float = Field(0.0, description="count / max count * 100")


class RegionSummaryRequest(BaseModel):
    """Request model for heat-map and activity-chart summaries."""
    country: str = Field(..., min_length=1, description="Country to summarize")
    locations: List[LocationRecord] = Field(default_factory=list)
    user_id: Optional[str] = Field(None, description="Only count this user's visits")
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    mode: Literal["heat-map", "capture"] = "heat-map"


class RegionSummaryResponse(BaseModel):
    """Bucketed visit counts for one country."""
    country: str
    total: int
    regions: List[RegionCount]
