"""
FastAPI Backend for the field tracking location service.

Provides HTTP access to country/region classification, server-side reverse
geocoding and the region summaries behind the admin heat map and charts.
CLI (fieldtrack.main) continues to work independently.
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from functools import lru_cache
from typing import List
import os
import sys
import logging
from logging.handlers import RotatingFileHandler

from fieldtrack import __version__, config
from fieldtrack.models.geo_context import (
    ClassificationResult,
    ClassifyRequest,
    GeocodeRequest,
    GeocodeResult,
    ResolveRequest,
    ResolvedLocation,
)
from fieldtrack.models.location import RegionSummaryRequest, RegionSummaryResponse
from fieldtrack.services.geocoder import GeocodingError, GeocodingNotConfigured, OpenCageGeocoder
from fieldtrack.services.geo_resolver import resolve_location
from fieldtrack.services.region_aggregator import build_activity_chart, build_heat_map, filter_records
from fieldtrack.services.region_classifier import (
    RegionDefaultMode,
    classify,
    classify_region,
    known_regions,
    normalize_country_name,
)


def configure_logging():
    """Send fieldtrack logs to stdout and a rotating file under LOG_DIR."""
    app_logger = logging.getLogger("fieldtrack")
    if app_logger.handlers:
        return
    app_logger.setLevel(config.LOG_LEVEL)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    app_logger.addHandler(console_handler)

    os.makedirs(config.LOG_DIR, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(config.LOG_DIR, "fieldtrack.log"),
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    app_logger.addHandler(file_handler)

    # Uvicorn has its own handlers on the root logger
    app_logger.propagate = False


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Field Tracking Location API",
    description="Country/region labelling for GPS-tagged visit records",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_geocoder() -> OpenCageGeocoder:
    """Process-wide geocoder built from environment configuration."""
    return OpenCageGeocoder(api_key=config.OPENCAGE_API_KEY)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with clear messages."""
    error_messages = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        error_messages.append(f"{field}: {error['msg']}")

    return JSONResponse(
        status_code=422,
        content={"detail": "; ".join(error_messages)}
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Field Tracking Location API",
        "version": __version__,
        "endpoints": {
            "POST /classify": "Bounding-box country/region classification",
            "POST /geocode": "Server-side reverse geocoding",
            "POST /resolve": "Stored -> geocoded -> classified resolution",
            "POST /regions/heat-map": "Visit counts per region with intensity",
            "POST /regions/activity": "Zero-filled visit counts per catalog region",
            "GET /regions/{country}": "Region names for a country",
            "GET /health": "Health check",
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/classify", response_model=ClassificationResult)
async def classify_endpoint(request: ClassifyRequest):
    """
    Classify a coordinate with the static bounding-box tables.

    When a country is supplied only the region step runs.
    """
    mode = RegionDefaultMode(request.mode)
    if request.country:
        country = normalize_country_name(request.country)
        return ClassificationResult(
            country=country,
            region=classify_region(request.latitude, request.longitude, country, mode),
        )
    return classify(request.latitude, request.longitude, mode)


@app.post("/geocode", response_model=GeocodeResult)
def geocode(request: GeocodeRequest, geocoder: OpenCageGeocoder = Depends(get_geocoder)):
    """
    Reverse geocode a coordinate through OpenCage.

    Args:
        request: GeocodeRequest with latitude and longitude

    Returns:
        GeocodeResult with address, country and state
    """
    if request.latitude is None or request.longitude is None:
        raise HTTPException(status_code=400, detail="Latitude and longitude are required")

    try:
        return geocoder.reverse_geocode(request.latitude, request.longitude)
    except GeocodingNotConfigured:
        raise HTTPException(status_code=500, detail="Geocoding service not configured")
    except GeocodingError as e:
        logger.error(f"Geocoding error: {e}")
        raise HTTPException(status_code=500, detail="Geocoding service unavailable")


@app.post("/resolve", response_model=ResolvedLocation)
def resolve(request: ResolveRequest, geocoder: OpenCageGeocoder = Depends(get_geocoder)):
    """Resolve country/state, preferring stored values, then geocoding, then bounding boxes."""
    return resolve_location(
        request.latitude,
        request.longitude,
        country=request.country,
        state=request.state,
        geocoder=geocoder if geocoder.is_configured else None,
        mode=RegionDefaultMode(request.mode),
    )


def _summarize(request: RegionSummaryRequest, chart: bool) -> RegionSummaryResponse:
    records = filter_records(
        request.locations,
        user_id=request.user_id,
        date_from=request.date_from,
        date_to=request.date_to,
    )
    mode = RegionDefaultMode(request.mode)
    builder = build_activity_chart if chart else build_heat_map
    regions = builder(records, request.country, mode)
    logger.info(f"Summarized {len(records)} records for {request.country} into {len(regions)} regions")
    return RegionSummaryResponse(
        country=normalize_country_name(request.country),
        total=sum(r.count for r in regions),
        regions=regions,
    )


@app.post("/regions/heat-map", response_model=RegionSummaryResponse)
async def heat_map(request: RegionSummaryRequest):
    """Visit counts per region for the heat map."""
    return _summarize(request, chart=False)


@app.post("/regions/activity", response_model=RegionSummaryResponse)
async def activity(request: RegionSummaryRequest):
    """Visit counts per catalog region for the activity chart."""
    return _summarize(request, chart=True)


@app.get("/regions/{country}", response_model=List[str])
async def regions(country: str):
    """Region names for a country's dropdown."""
    names = known_regions(country)
    if not names:
        raise HTTPException(status_code=404, detail=f"No region catalog for country: {country}")
    return names


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
