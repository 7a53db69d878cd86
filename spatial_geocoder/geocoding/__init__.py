"""Uniform geocoding over third-party services.

This package provides:
- Forward and reverse geocoding facades
- Provider adapters for Esri, Google, HERE, TomTom, Texas A&M and the US Census
- Request option validation and the geocoding error taxonomy
"""

# Import main components for easy access
from spatial_geocoder.geocoding.exceptions import (
    GeocodingError,
    InvalidRequest,
    NoCandidatesFound,
    ProviderError,
)
from spatial_geocoder.geocoding.registry import (
    available_providers,
    available_reverse_providers,
    get_geocoder,
    get_reverse_geocoder,
)
from spatial_geocoder.geocoding.service import Geocoder, ReverseGeocoder
from spatial_geocoder.geocoding.types import Candidate, GeocodeOutcome, OutcomeStatus

__all__ = [
    "Candidate",
    "GeocodeOutcome",
    "Geocoder",
    "GeocodingError",
    "InvalidRequest",
    "NoCandidatesFound",
    "OutcomeStatus",
    "ProviderError",
    "ReverseGeocoder",
    "available_providers",
    "available_reverse_providers",
    "get_geocoder",
    "get_reverse_geocoder",
]
