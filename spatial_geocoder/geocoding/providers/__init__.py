"""Geocoding provider adapters."""

from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    ReverseGeocodingProvider,
)
from spatial_geocoder.geocoding.providers.census import CensusGeocoder
from spatial_geocoder.geocoding.providers.esri import (
    EsriWorldGeocoder,
    EsriWorldReverseGeocoder,
)
from spatial_geocoder.geocoding.providers.google import GoogleGeocoder
from spatial_geocoder.geocoding.providers.here import HereGeocoder, HereReverseGeocoder
from spatial_geocoder.geocoding.providers.tamu import TamuGeocoder
from spatial_geocoder.geocoding.providers.tomtom import TomTomGeocoder

__all__ = [
    "GeocodingProvider",
    "ReverseGeocodingProvider",
    "CensusGeocoder",
    "EsriWorldGeocoder",
    "EsriWorldReverseGeocoder",
    "GoogleGeocoder",
    "HereGeocoder",
    "HereReverseGeocoder",
    "TamuGeocoder",
    "TomTomGeocoder",
]
