"""spatial-geocoder: one request shape, one candidate shape, many geocoding services."""

from spatial_geocoder.core.geometry import GeometryFactory, Point, wgs84
from spatial_geocoder.geocoding import (
    Candidate,
    GeocodeOutcome,
    Geocoder,
    GeocodingError,
    InvalidRequest,
    NoCandidatesFound,
    ProviderError,
    ReverseGeocoder,
    get_geocoder,
    get_reverse_geocoder,
)

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "GeocodeOutcome",
    "Geocoder",
    "GeocodingError",
    "GeometryFactory",
    "InvalidRequest",
    "NoCandidatesFound",
    "Point",
    "ProviderError",
    "ReverseGeocoder",
    "get_geocoder",
    "get_reverse_geocoder",
    "wgs84",
]
