"""TomTom search API geocoding."""

from typing import Any
from urllib.parse import quote

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    TOMTOM_BASE_URL,
    TOMTOM_GEOCODE_PATH,
    TOMTOM_POINT_ADDRESS,
)
from spatial_geocoder.geocoding.options import WGS84GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    compact,
    join_present,
)
from spatial_geocoder.geocoding.types import Candidate


class TomTomOptions(WGS84GeocodeOptions):
    """Options for the TomTom geocode endpoint.

    ``path`` is a template; ``{path}`` is replaced with the encoded free text.
    """

    path: str = TOMTOM_GEOCODE_PATH


class TomTomGeocoder(GeocodingProvider[TomTomOptions]):
    """Geocodes with TomTom ``search/2/geocode``.

    The whole address travels in the URL path. Only point-address results are
    kept; street, geography and POI matches are discarded.
    """

    name = "tomtom"
    base_url = TOMTOM_BASE_URL
    options_model = TomTomOptions

    def __init__(self, api_key: str, base_url: str | None = None) -> None:
        super().__init__(base_url)
        self._api_key = api_key

    @staticmethod
    def free_text(options: TomTomOptions) -> str:
        """Compose the space separated free-text address."""
        return join_present(
            [
                options.address.strip(),
                options.neighborhood,
                options.city,
                options.region,
                options.country,
            ],
            " ",
        )

    def request_path(self, options: TomTomOptions) -> str:
        return options.path.replace("{path}", quote(self.free_text(options), safe=""), 1)

    def build_query(self, options: TomTomOptions) -> QueryParams:
        return compact({"key": self._api_key})

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        if data["summary"]["totalResults"] == 0:
            raise self.no_candidates()

        candidates = [
            self.candidate(
                factory,
                row["address"]["freeformAddress"],
                row["position"]["lon"],
                row["position"]["lat"],
                row["score"],
            )
            for row in data["results"]
            if row.get("type") == TOMTOM_POINT_ADDRESS
        ]
        if not candidates:
            raise self.no_candidates()
        return candidates
