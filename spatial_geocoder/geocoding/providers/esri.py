"""Esri ArcGIS World geocoding service."""

from typing import Any

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    ESRI_BASE_URL,
    ESRI_GEOCODE_PATH,
    ESRI_REVERSE_PATH,
)
from spatial_geocoder.geocoding.options import GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    ReverseGeocodingProvider,
    compact,
)
from spatial_geocoder.geocoding.types import Candidate


class EsriOptions(GeocodeOptions):
    """Options for the ArcGIS World geocoding service."""

    path: str = ESRI_GEOCODE_PATH


class EsriWorldGeocoder(GeocodingProvider[EsriOptions]):
    """Geocodes with ArcGIS World ``findAddressCandidates``.

    Supports every generic option; the output spatial reference is requested
    with ``outSR`` so any SRID is accepted.
    """

    name = "esri"
    base_url = ESRI_BASE_URL
    options_model = EsriOptions

    def build_query(self, options: EsriOptions) -> QueryParams:
        return compact(
            {
                "f": "json",
                "address": options.address,
                "neighborhood": options.neighborhood,
                "city": options.city,
                "region": options.region,
                "postal": options.postal_code,
                "countryCode": options.country,
                "outSR": options.srid,
            }
        )

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        rows = data["candidates"]
        if len(rows) == 0:
            raise self.no_candidates()

        return [
            self.candidate(
                factory,
                row["address"],
                row["location"]["x"],
                row["location"]["y"],
                row["score"],
            )
            for row in rows
        ]


class EsriWorldReverseGeocoder(ReverseGeocodingProvider):
    """Reverse geocodes with ArcGIS World ``reverseGeocode``."""

    name = "esri"
    base_url = ESRI_BASE_URL
    path = ESRI_REVERSE_PATH

    def build_query(self, x: float, y: float) -> QueryParams:
        return {"location": f"{x},{y}", "f": "json"}

    def map_response(self, data: Any) -> str | None:
        # No match comes back as a 200 with an "error" object instead of "address"
        address = data.get("address") or {}
        return address.get("Match_addr") or None
