"""Tests for the Google geocoding adapter."""

import pytest
from geopy.exc import GeocoderQueryError, GeocoderQuotaExceeded

from spatial_geocoder.geocoding.constants import (
    GoogleLocationType,
    google_location_score,
)
from spatial_geocoder.geocoding.exceptions import NoCandidatesFound, ProviderError
from spatial_geocoder.geocoding.providers.google import GoogleGeocoder


@pytest.fixture
def provider():
    """Google provider with a test key."""
    return GoogleGeocoder(api_key="google-test-key")


class TestGoogleLocationScore:
    """Tests for the location_type score table."""

    @pytest.mark.parametrize(
        "location_type,score",
        [
            ("ROOFTOP", 100),
            ("RANGE_INTERPOLATED", 80),
            ("GEOMETRIC_CENTER", 60),
            ("APPROXIMATE", 50),
        ],
    )
    def test_known_location_types(self, location_type, score):
        """Test the fixed score scale."""
        assert google_location_score(location_type) == score

    def test_table_is_complete(self):
        """Test exactly the documented categories are mapped."""
        assert {member.name for member in GoogleLocationType} == {
            "ROOFTOP",
            "RANGE_INTERPOLATED",
            "GEOMETRIC_CENTER",
            "APPROXIMATE",
        }

    def test_unknown_location_type(self):
        """Test an undocumented category raises."""
        with pytest.raises(ValueError, match="Unrecognized Google location_type"):
            google_location_score("SATELLITE")


class TestGoogleGeocoder:
    """Tests for GoogleGeocoder."""

    def test_build_query(self, provider, factory):
        """Test address parts are joined and components filtered."""
        options = provider.resolve(
            {
                "factory": factory,
                "address": "1375 E Buena Vista Dr",
                "city": "Orlando",
                "region": "FL",
                "postal_code": "32830",
                "country": "US",
            }
        )

        assert provider.build_query(options) == {
            "address": "1375 E Buena Vista Dr, Orlando, FL",
            "components": "country:US|postal_code:32830",
            "key": "google-test-key",
        }

    def test_build_query_minimal(self, provider, factory):
        """Test components are omitted when neither country nor postal code given."""
        options = provider.resolve({"factory": factory, "address": "Orlando"})

        assert provider.build_query(options) == {
            "address": "Orlando",
            "key": "google-test-key",
        }

    def test_map_response(self, provider, factory, google_response):
        """Test results map onto candidates with category scores."""
        candidates = provider.map_response(google_response, factory)

        assert [c.score for c in candidates] == [100, 60]
        assert candidates[0].address == "1375 E Buena Vista Dr, Orlando, FL 32830, USA"
        assert candidates[0].coordinates == [-81.5180498, 28.3705502]
        assert candidates[1].coordinates == [-81.5162, 28.371]

    def test_zero_results(self, provider, factory):
        """Test ZERO_RESULTS raises NoCandidatesFound."""
        with pytest.raises(NoCandidatesFound):
            provider.map_response({"status": "ZERO_RESULTS", "results": []}, factory)

    @pytest.mark.parametrize(
        "status,cause_class",
        [
            ("OVER_QUERY_LIMIT", GeocoderQuotaExceeded),
            ("REQUEST_DENIED", GeocoderQueryError),
        ],
    )
    def test_error_status(self, provider, factory, status, cause_class):
        """Test non-OK statuses raise ProviderError with a geopy cause."""
        data = {"status": status, "error_message": "The provided API key is invalid."}

        with pytest.raises(ProviderError) as exc_info:
            provider.map_response(data, factory)

        assert exc_info.value.message == "The provided API key is invalid."
        assert isinstance(exc_info.value.cause, cause_class)

    def test_unknown_location_type_is_malformed(self, provider, factory, google_response):
        """Test an unknown category surfaces as ValueError for the facade."""
        google_response["results"][0]["geometry"]["location_type"] = "SATELLITE"

        with pytest.raises(ValueError):
            provider.map_response(google_response, factory)
