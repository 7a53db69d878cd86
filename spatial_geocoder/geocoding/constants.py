"""Provider constants for geocoding.

This module contains service roots, endpoint paths and the fixed lookup
tables the provider adapters translate responses with.
"""

from enum import Enum

# Option keys shared by every provider
ADDRESS = "address"
NEIGHBORHOOD = "neighborhood"
CITY = "city"
REGION = "region"
POSTAL_CODE = "postal_code"
COUNTRY = "country"
FACTORY = "factory"
PATH = "path"
HEADERS = "headers"

# Esri ArcGIS World geocoding service
ESRI_BASE_URL = "https://geocode.arcgis.com"
ESRI_GEOCODE_PATH = "arcgis/rest/services/World/GeocodeServer/findAddressCandidates"
ESRI_REVERSE_PATH = "arcgis/rest/services/World/GeocodeServer/reverseGeocode"

# Google Maps geocoding API
GOOGLE_BASE_URL = "https://maps.googleapis.com"
GOOGLE_GEOCODE_PATH = "maps/api/geocode/json"
GOOGLE_STATUS_OK = "OK"
GOOGLE_STATUS_ZERO_RESULTS = "ZERO_RESULTS"

# HERE geocoding & search API
HERE_BASE_URL = "https://geocode.search.hereapi.com"
HERE_GEOCODE_PATH = "v1/geocode"
HERE_REVERSE_BASE_URL = "https://revgeocode.search.hereapi.com"
HERE_REVERSE_PATH = "v1/revgeocode"
HERE_DEFAULT_LOCALE = "en-US"

# TomTom search API; {path} is replaced with the encoded free text
TOMTOM_BASE_URL = "https://api.tomtom.com"
TOMTOM_GEOCODE_PATH = "search/2/geocode/{path}.json"
TOMTOM_POINT_ADDRESS = "Point Address"

# Texas A&M Geoservices
TAMU_BASE_URL = "https://geoservices.tamu.edu"
TAMU_GEOCODE_PATH = (
    "Services/Geocode/WebService/GeocoderWebServiceHttpNonParsed_V04_01.aspx"
)
TAMU_API_VERSION = "4.01"
TAMU_FLIP_A_COIN = "flipACoin"
TAMU_REVERT_TO_HIERARCHY = "revertToHierarchy"
TAMU_TIE_BREAKING_STRATEGIES = (TAMU_FLIP_A_COIN, TAMU_REVERT_TO_HIERARCHY)
TAMU_CENSUS_YEARS = ("1990", "2000", "2010")

# US Census Bureau geocoder
CENSUS_BASE_URL = "https://geocoding.geo.census.gov"
CENSUS_GEOCODE_PATH = "geocoder/locations/onelineaddress"
CENSUS_DEFAULT_BENCHMARK = "Public_AR_Current"

# Spatial reference the WGS84-only services accept
WGS84_ONLY_SRID = 4326


class GoogleLocationType(Enum):
    """Google ``geometry.location_type`` categories and their match scores."""

    ROOFTOP = 100
    RANGE_INTERPOLATED = 80
    GEOMETRIC_CENTER = 60
    APPROXIMATE = 50

    @property
    def score(self) -> int:
        """Get the numeric match score for this category."""
        return self.value


def google_location_score(location_type: str) -> int:
    """Map a Google location type onto the fixed 0-100 score scale.

    Args:
        location_type: Value of ``geometry.location_type``

    Returns:
        Numeric score

    Raises:
        ValueError: If the category is not one Google documents
    """
    try:
        return GoogleLocationType[location_type].score
    except KeyError:
        raise ValueError(f"Unrecognized Google location_type: {location_type!r}")
