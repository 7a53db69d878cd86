"""Google Maps geocoding API."""

from typing import Any

from geopy.exc import (
    GeocoderQueryError,
    GeocoderQuotaExceeded,
    GeocoderServiceError,
)

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    GOOGLE_BASE_URL,
    GOOGLE_GEOCODE_PATH,
    GOOGLE_STATUS_OK,
    GOOGLE_STATUS_ZERO_RESULTS,
    google_location_score,
)
from spatial_geocoder.geocoding.exceptions import ProviderError
from spatial_geocoder.geocoding.options import GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    compact,
    join_present,
)
from spatial_geocoder.geocoding.types import Candidate

# Non-OK statuses Google reports in a 200 response
STATUS_ERRORS: dict[str, type[GeocoderServiceError]] = {
    "OVER_DAILY_LIMIT": GeocoderQuotaExceeded,
    "OVER_QUERY_LIMIT": GeocoderQuotaExceeded,
    "REQUEST_DENIED": GeocoderQueryError,
    "INVALID_REQUEST": GeocoderQueryError,
    "UNKNOWN_ERROR": GeocoderServiceError,
}


class GoogleOptions(GeocodeOptions):
    """Options for the Google geocoding API."""

    path: str = GOOGLE_GEOCODE_PATH


class GoogleGeocoder(GeocodingProvider[GoogleOptions]):
    """Geocodes with the Google Maps geocoding API.

    Google takes one free-text address plus a ``components`` filter, and does
    not return a numeric score: the ``location_type`` category is mapped onto
    a fixed 0-100 scale instead.
    """

    name = "google"
    base_url = GOOGLE_BASE_URL
    options_model = GoogleOptions

    def __init__(self, api_key: str, base_url: str | None = None) -> None:
        """Initialize the provider.

        Args:
            api_key: Google Maps API key
            base_url: Optional override of the service root
        """
        super().__init__(base_url)
        self._api_key = api_key

    def build_query(self, options: GoogleOptions) -> QueryParams:
        address = join_present(
            [options.address, options.neighborhood, options.city, options.region],
            ", ",
        )
        components = join_present(
            [
                f"country:{options.country}" if options.country else None,
                f"postal_code:{options.postal_code}"
                if options.postal_code not in (None, "")
                else None,
            ],
            "|",
        )
        return compact(
            {"address": address, "components": components, "key": self._api_key}
        )

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        status = data["status"]
        if status == GOOGLE_STATUS_ZERO_RESULTS:
            raise self.no_candidates()
        if status != GOOGLE_STATUS_OK:
            message = data.get("error_message") or f"Unexpected status {status}"
            error_class = STATUS_ERRORS.get(status, GeocoderServiceError)
            raise ProviderError(self.name, message, cause=error_class(message))

        candidates = []
        for row in data["results"]:
            geometry = row["geometry"]
            candidates.append(
                self.candidate(
                    factory,
                    row["formatted_address"],
                    geometry["location"]["lng"],
                    geometry["location"]["lat"],
                    google_location_score(geometry["location_type"]),
                )
            )
        return candidates
