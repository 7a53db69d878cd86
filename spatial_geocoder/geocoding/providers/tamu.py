"""Texas A&M Geoservices geocoding.

The service geocodes US addresses only and ignores ``neighborhood``. Extra
options:

- ``census_year``: 1990, 2000, 2010 or several of them pipe-joined (or as a
  list). Defaults to all three.
- ``allow_ties``: return equally scored matches as-is (default ``True``).
- ``tie_breaking_strategy``: used when ties are not allowed. ``flipACoin``
  picks one of the tied matches at random; ``revertToHierarchy`` falls back
  to the next geographic level (default).
- ``api_key``: overrides the key given to the constructor for one call.

Only WGS84 (SRID 4326) output is supported.

See https://geoservices.tamu.edu/Services/Geocode/WebService/
"""

from collections.abc import Mapping
from typing import Any

from pydantic import field_validator

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import (
    TAMU_API_VERSION,
    TAMU_BASE_URL,
    TAMU_CENSUS_YEARS,
    TAMU_GEOCODE_PATH,
    TAMU_REVERT_TO_HIERARCHY,
    TAMU_TIE_BREAKING_STRATEGIES,
)
from spatial_geocoder.geocoding.options import WGS84GeocodeOptions
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    QueryParams,
    compact,
)
from spatial_geocoder.geocoding.types import Candidate

CensusYear = str | int


class TamuOptions(WGS84GeocodeOptions):
    """Options for the TAMU geocoding web service."""

    path: str = TAMU_GEOCODE_PATH
    api_key: str
    census_year: CensusYear | list[CensusYear] | tuple[CensusYear, ...] = "|".join(
        TAMU_CENSUS_YEARS
    )
    version: str = TAMU_API_VERSION
    allow_ties: bool = True
    tie_breaking_strategy: str = TAMU_REVERT_TO_HIERARCHY

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate api_key field."""
        if not v or v.isspace():
            raise ValueError("api_key cannot be empty")
        return v

    @field_validator("census_year")
    @classmethod
    def validate_census_year(cls, v: Any) -> str:
        """Normalize census years to a pipe-joined string."""
        if isinstance(v, (list, tuple)):
            years = [str(year).strip() for year in v]
        else:
            years = [year.strip() for year in str(v).split("|")]

        if not years:
            raise ValueError("census_year cannot be empty")
        for year in years:
            if year not in TAMU_CENSUS_YEARS:
                raise ValueError(
                    f"census year must be one of {', '.join(TAMU_CENSUS_YEARS)}, got {year!r}"
                )
        return "|".join(dict.fromkeys(years))

    @field_validator("tie_breaking_strategy")
    @classmethod
    def validate_tie_breaking_strategy(cls, v: str) -> str:
        """Validate tie_breaking_strategy field."""
        if v not in TAMU_TIE_BREAKING_STRATEGIES:
            raise ValueError(
                f"tie breaking strategy must be one of {', '.join(TAMU_TIE_BREAKING_STRATEGIES)}"
            )
        return v


class TamuGeocoder(GeocodingProvider[TamuOptions]):
    """Geocodes with the Texas A&M non-parsed HTTP geocoder (v4.01)."""

    name = "tamu"
    base_url = TAMU_BASE_URL
    options_model = TamuOptions

    def __init__(self, api_key: str, base_url: str | None = None) -> None:
        """Initialize the provider.

        Args:
            api_key: Default TAMU API key
            base_url: Optional override of the service root
        """
        super().__init__(base_url)
        self._api_key = api_key

    def option_defaults(self, options: Mapping[str, Any]) -> Mapping[str, Any]:
        if "api_key" in options:
            return options
        return {**options, "api_key": self._api_key}

    def build_query(self, options: TamuOptions) -> QueryParams:
        return compact(
            {
                "version": options.version,
                "streetAddress": options.address,
                "city": options.city,
                "state": options.region,
                "zip": options.postal_code,
                "censusYear": options.census_year,
                "allowTies": "true" if options.allow_ties else None,
                "tieBreakingStrategy": None
                if options.allow_ties
                else options.tie_breaking_strategy,
                "apiKey": options.api_key,
                "format": "json",
            }
        )

    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        if int(data["FeatureMatchingResultCount"]) == 0:
            raise self.no_candidates()

        # TAMU echoes the input street address rather than a matched one
        address = data["InputAddress"]["StreetAddress"]
        candidates = []
        for row in data["OutputGeocodes"]:
            geocode = row["OutputGeocode"]
            candidates.append(
                self.candidate(
                    factory,
                    address,
                    geocode["Longitude"],
                    geocode["Latitude"],
                    float(geocode["MatchScore"]),
                )
            )
        return candidates
