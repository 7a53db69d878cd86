"""HERE geocoding & search API."""

from typing import Any

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    HERE_BASE_URL,
    HERE_DEFAULT_LOCALE,
    HERE_GEOCODE_PATH,
    HERE_REVERSE_BASE_URL,
    HERE_REVERSE_PATH,
)
from spatial_geocoder.geocoding.options import WGS84GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    ReverseGeocodingProvider,
    compact,
    join_present,
)
from spatial_geocoder.geocoding.types import Candidate


class HereOptions(WGS84GeocodeOptions):
    """Options for the HERE geocode endpoint."""

    path: str = HERE_GEOCODE_PATH


class HereGeocoder(GeocodingProvider[HereOptions]):
    """Geocodes with HERE ``/v1/geocode``.

    The address line goes in ``q``; the rest of the request becomes a
    qualified query (``qq``). Scores are HERE's 0-1 ``queryScore`` scaled to
    0-100. Only WGS84 output is supported.
    """

    name = "here"
    base_url = HERE_BASE_URL
    options_model = HereOptions

    def __init__(self, api_key: str, base_url: str | None = None) -> None:
        super().__init__(base_url)
        self._api_key = api_key

    def build_query(self, options: HereOptions) -> QueryParams:
        qualified = join_present(
            [
                f"city={options.city}" if options.city else None,
                f"district={options.neighborhood}" if options.neighborhood else None,
                f"state={options.region}" if options.region else None,
                f"postalCode={options.postal_code}"
                if options.postal_code not in (None, "")
                else None,
                f"country={options.country}" if options.country else None,
            ],
            ";",
        )
        return compact(
            {"q": options.address, "qq": qualified, "apiKey": self._api_key}
        )

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        items = data["items"]
        if len(items) == 0:
            raise self.no_candidates()

        return [
            self.candidate(
                factory,
                item["title"],
                item["position"]["lng"],
                item["position"]["lat"],
                float(item["scoring"]["queryScore"]) * 100,
            )
            for item in items
        ]


class HereReverseGeocoder(ReverseGeocodingProvider):
    """Reverse geocodes with HERE ``/v1/revgeocode``."""

    name = "here"
    base_url = HERE_REVERSE_BASE_URL
    path = HERE_REVERSE_PATH

    def __init__(
        self,
        api_key: str,
        locale: str = HERE_DEFAULT_LOCALE,
        base_url: str | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: HERE API key
            locale: Language tag for the returned address, e.g. en-US
            base_url: Optional override of the service root
        """
        super().__init__(base_url)
        self._api_key = api_key
        self.locale = locale

    def build_query(self, x: float, y: float) -> QueryParams:
        # HERE expects latitude first
        return compact({"at": f"{y},{x}", "lang": self.locale, "apiKey": self._api_key})

    def map_response(self, data: Any) -> str | None:
        items = data.get("items") or []
        if not items:
            return None
        return (items[0].get("address") or {}).get("label") or None
