"""US Census Bureau geocoder."""

from typing import Any

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    CENSUS_BASE_URL,
    CENSUS_DEFAULT_BENCHMARK,
    CENSUS_GEOCODE_PATH,
)
from spatial_geocoder.geocoding.options import GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    compact,
)
from spatial_geocoder.geocoding.types import Candidate


class CensusOptions(GeocodeOptions):
    """Options for the Census one-line address lookup."""

    path: str = CENSUS_GEOCODE_PATH
    benchmark: str = CENSUS_DEFAULT_BENCHMARK


class CensusGeocoder(GeocodingProvider[CensusOptions]):
    """Geocodes US addresses with the Census ``onelineaddress`` endpoint.

    Only the single free-text ``address`` is sent. The Census returns no
    score, so every candidate's score is None, and its matched address comes
    back upper-cased.
    """

    name = "census"
    base_url = CENSUS_BASE_URL
    options_model = CensusOptions

    def build_query(self, options: CensusOptions) -> QueryParams:
        return compact(
            {
                "address": options.address,
                "benchmark": options.benchmark,
                "format": "json",
            }
        )

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        matches = data["result"]["addressMatches"]
        if len(matches) == 0:
            raise self.no_candidates()

        # Census returns x (longitude), y (latitude)
        return [
            self.candidate(
                factory,
                match["matchedAddress"],
                match["coordinates"]["x"],
                match["coordinates"]["y"],
                None,
            )
            for match in matches
        ]
