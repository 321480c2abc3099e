"""
HTTP API Tests.

Geocoder is overridden with an in-memory fake; no network access.
"""

import pytest
from fastapi.testclient import TestClient

from fieldtrack.api import app, get_geocoder
from fieldtrack.models.geo_context import GeocodeResult
from fieldtrack.services.geocoder import GeocodingError, GeocodingNotConfigured


class FakeGeocoder:
    def __init__(self, result=None, error=None, configured=True):
        self.result = result
        self.error = error
        self.is_configured = configured

    def reverse_geocode(self, lat, lng):
        if self.error is not None:
            raise self.error
        return self.result


class TestApi:
    """Endpoint contract tests."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def use_geocoder(self, geocoder):
        app.dependency_overrides[get_geocoder] = lambda: geocoder

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_lists_endpoints(self):
        response = self.client.get("/")
        assert "POST /classify" in response.json()["endpoints"]

    def test_classify(self):
        response = self.client.post("/classify", json={"latitude": 14.6349, "longitude": -90.5069})
        assert response.status_code == 200
        assert response.json() == {"country": "Guatemala", "region": "Guatemala (Capital)"}

    def test_classify_with_known_country(self):
        response = self.client.post(
            "/classify", json={"latitude": 21.0, "longitude": -86.9, "country": "Mexico"})
        assert response.json() == {"country": "México", "region": "Quintana Roo"}

    def test_classify_no_match(self):
        response = self.client.post("/classify", json={"latitude": 0, "longitude": 0})
        assert response.json() == {"country": "", "region": None}

    def test_classify_validation_error_is_flat_string(self):
        response = self.client.post("/classify", json={"latitude": "north", "longitude": -90.0})
        assert response.status_code == 422
        assert isinstance(response.json()["detail"], str)
        assert "latitude" in response.json()["detail"]

    def test_geocode(self):
        self.use_geocoder(FakeGeocoder(result=GeocodeResult(
            address="Zona 1, Guatemala", country="Guatemala", state="Guatemala")))

        response = self.client.post("/geocode", json={"latitude": 14.6349, "longitude": -90.5069})

        assert response.status_code == 200
        assert response.json() == {"address": "Zona 1, Guatemala", "country": "Guatemala", "state": "Guatemala"}

    def test_geocode_requires_coordinates(self):
        self.use_geocoder(FakeGeocoder(result=GeocodeResult()))

        response = self.client.post("/geocode", json={"latitude": 14.6})

        assert response.status_code == 400
        assert response.json()["detail"] == "Latitude and longitude are required"

    def test_geocode_not_configured(self):
        self.use_geocoder(FakeGeocoder(error=GeocodingNotConfigured("Geocoding service not configured")))

        response = self.client.post("/geocode", json={"latitude": 14.6, "longitude": -90.5})

        assert response.status_code == 500
        assert response.json()["detail"] == "Geocoding service not configured"

    def test_geocode_upstream_failure(self):
        self.use_geocoder(FakeGeocoder(error=GeocodingError("Geocoding API error: 503")))

        response = self.client.post("/geocode", json={"latitude": 14.6, "longitude": -90.5})

        assert response.status_code == 500
        assert response.json()["detail"] == "Geocoding service unavailable"

    def test_resolve_skips_unconfigured_geocoder(self):
        self.use_geocoder(FakeGeocoder(error=GeocodingNotConfigured("no key"), configured=False))

        response = self.client.post("/resolve", json={"latitude": 18.0, "longitude": -95.0})

        body = response.json()
        assert response.status_code == 200
        assert body["country"] == "México"
        assert body["state"] == "Otra región"
        assert body["resolution_mode"] == "classified"

    def test_resolve_uses_geocoder(self):
        self.use_geocoder(FakeGeocoder(result=GeocodeResult(
            address="San Pedro Sula", country="Honduras", state="Cortés")))

        response = self.client.post("/resolve", json={"latitude": 15.5, "longitude": -88.0})

        body = response.json()
        assert body["country"] == "Honduras"
        assert body["state"] == "Cortés"
        assert body["resolution_mode"] == "geocoded"

    def test_heat_map_summary(self):
        payload = {
            "country": "Guatemala",
            "locations": [
                {"latitude": 14.6349, "longitude": -90.5069},
                {"latitude": 14.6349, "longitude": -90.5069},
                {"latitude": 16.9, "longitude": -89.9},
                {"latitude": 21.0, "longitude": -86.9},
            ],
        }

        response = self.client.post("/regions/heat-map", json=payload)

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 3
        regions = {r["region"]: r for r in body["regions"]}
        assert regions["Guatemala (Capital)"]["intensity"] == pytest.approx(100.0)
        assert regions["Petén"]["count"] == 1

    def test_activity_summary_filters_user(self):
        payload = {
            "country": "Mexico",
            "user_id": "ana",
            "locations": [
                {"latitude": 21.0, "longitude": -86.9, "user_id": "ana"},
                {"latitude": 21.0, "longitude": -86.9, "user_id": "luis"},
            ],
        }

        response = self.client.post("/regions/activity", json=payload)

        body = response.json()
        assert body["country"] == "México"
        assert body["total"] == 1
        assert body["regions"][0] == {"region": "Quintana Roo", "count": 1, "intensity": 100.0}

    def test_heat_map_date_filter_with_aware_timestamps(self):
        payload = {
            "country": "Guatemala",
            "date_from": "2025-08-01",
            "date_to": "2025-08-10",
            "locations": [
                {"latitude": 14.6349, "longitude": -90.5069, "created_at": "2025-08-10T15:00:00+00:00"},
                {"latitude": 14.6349, "longitude": -90.5069, "created_at": "2025-07-31T12:00:00+00:00"},
            ],
        }

        response = self.client.post("/regions/heat-map", json=payload)

        assert response.status_code == 200
        assert response.json()["total"] == 1

    def test_geocoder_dependency_is_shared(self):
        assert get_geocoder() is get_geocoder()

    def test_region_catalog(self):
        response = self.client.get("/regions/Guatemala")
        assert response.status_code == 200
        assert response.json()[0] == "Guatemala (Capital)"

    def test_region_catalog_unknown_country(self):
        response = self.client.get("/regions/Atlantis")
        assert response.status_code == 404


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
