# config.py
# Environment-driven settings for the geocoding client, logging and CORS

import os

OPENCAGE_API_KEY = os.getenv("OPENCAGE_API_KEY")
OPENCAGE_URL = os.getenv("OPENCAGE_URL", "https://api.opencagedata.com/geocode/v1/json")
GEOCODE_TIMEOUT_S = float(os.getenv("GEOCODE_TIMEOUT_S", "10"))

LOG_DIR = os.getenv(
    "FIELDTRACK_LOG_DIR",
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"),
)
LOG_LEVEL = os.getenv("FIELDTRACK_LOG_LEVEL", "INFO")
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB per file
LOG_BACKUP_COUNT = 5

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FIELDTRACK_CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS)).split(",")
    if origin.strip()
]

USER_AGENT = "FieldTrackGeocoder/1.0"
