"""Geocoding facades.

This module provides the two entry points callers use:
- ``Geocoder``: address -> candidate locations
- ``ReverseGeocoder``: coordinates -> best matching address

Each call validates its input, issues exactly one blocking GET through the
transport and normalizes the provider response. Transport and response-shape
failures are re-raised as ``ProviderError``; raw transport errors never
escape.
"""

from collections.abc import Callable, Mapping
from typing import Any

from geopy.exc import GeocoderServiceError

from spatial_geocoder.core.geometry import GeometryFactory, wgs84
from spatial_geocoder.core.http import HttpTransport
from spatial_geocoder.core.logging import get_provider_logger
from spatial_geocoder.geocoding.constants import ADDRESS, FACTORY
from spatial_geocoder.geocoding.exceptions import (
    GeocodingError,
    NoCandidatesFound,
    ProviderError,
)
from spatial_geocoder.geocoding.options import parse_location
from spatial_geocoder.geocoding.providers.base import (
    GeocodingProvider,
    ReverseGeocodingProvider,
)
from spatial_geocoder.geocoding.types import Candidate, GeocodeOutcome

CandidateFilter = Callable[[Candidate], bool]

# Errors raised while reading a response whose shape is not what the provider documents
MALFORMED_RESPONSE_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


class Geocoder:
    """Forward geocoding through a single provider."""

    def __init__(
        self,
        provider: GeocodingProvider[Any],
        transport: HttpTransport | None = None,
    ) -> None:
        """Initialize the geocoder.

        Args:
            provider: Provider adapter answering requests
            transport: Optional transport; defaults to one bound to the
                provider's base URL
        """
        self.provider = provider
        self.transport = transport or HttpTransport(provider.base_url)

    def geocode(
        self,
        options: Mapping[str, Any] | str,
        filter: CandidateFilter | None = None,
    ) -> list[Candidate]:
        """Geocode an address to candidate locations.

        Args:
            options: Request options (``factory`` and ``address`` required),
                or an address string geocoded in WGS84
            filter: Optional predicate applied to the normalized candidates

        Returns:
            Candidates in provider order

        Raises:
            InvalidRequest: If the options fail validation
            NoCandidatesFound: If the provider reports zero matches
            ProviderError: If the provider call fails
        """
        if isinstance(options, str):
            options = {ADDRESS: options, FACTORY: wgs84()}

        resolved = self.provider.resolve(options)
        query = self.provider.build_query(resolved)
        path = self.provider.request_path(resolved)

        log = get_provider_logger(self.provider.name).bind(module="geocoding_service")
        log.debug("geocode_request", path=path, params=sorted(query))

        try:
            data = self.transport.get_json(path, query, resolved.headers)
        except GeocoderServiceError as e:
            log.warning("geocode_provider_error", error=str(e))
            raise ProviderError(self.provider.name, str(e), cause=e) from e

        try:
            candidates = self.provider.map_response(data, resolved.factory)
        except NoCandidatesFound:
            log.info("geocode_no_candidates")
            raise
        except ProviderError as e:
            log.warning("geocode_provider_error", error=e.message)
            raise
        except MALFORMED_RESPONSE_ERRORS as e:
            log.warning("geocode_malformed_response", error=repr(e))
            raise ProviderError(
                self.provider.name, f"Malformed response: {e!r}", cause=e
            ) from e

        log.debug("geocode_candidates", count=len(candidates))
        if filter is not None:
            candidates = [candidate for candidate in candidates if filter(candidate)]
        return candidates

    def try_geocode(
        self,
        options: Mapping[str, Any] | str,
        filter: CandidateFilter | None = None,
    ) -> GeocodeOutcome:
        """Geocode, returning the outcome instead of raising.

        Args:
            options: Same as ``geocode``
            filter: Same as ``geocode``

        Returns:
            GeocodeOutcome carrying candidates or the error
        """
        try:
            return GeocodeOutcome.success(self.geocode(options, filter))
        except GeocodingError as e:
            return GeocodeOutcome.failure(e)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r})"


class ReverseGeocoder:
    """Reverse geocoding through a single provider."""

    def __init__(
        self,
        provider: ReverseGeocodingProvider,
        transport: HttpTransport | None = None,
        factory: GeometryFactory | None = None,
    ) -> None:
        """Initialize the reverse geocoder.

        Args:
            provider: Provider adapter answering requests
            transport: Optional transport; defaults to one bound to the
                provider's base URL
            factory: Spatial reference of input coordinates (default WGS84)
        """
        self.provider = provider
        self.transport = transport or HttpTransport(provider.base_url)
        self.factory = factory or wgs84()

    def reverse_geocode(self, location: Any) -> Candidate | None:
        """Find the address at a location.

        Args:
            location: ``[x, y]`` pair or mapping with ``x`` and ``y``

        Returns:
            Candidate echoing the input location with no score, or None if
            the provider has no address there

        Raises:
            InvalidRequest: If a coordinate is missing or not numeric
            ProviderError: If the provider call fails
        """
        x, y = parse_location(location)
        query = self.provider.build_query(x, y)

        log = get_provider_logger(self.provider.name).bind(module="geocoding_service")
        log.debug("reverse_geocode_request", path=self.provider.path)

        try:
            data = self.transport.get_json(self.provider.path, query)
        except GeocoderServiceError as e:
            log.warning("reverse_geocode_provider_error", error=str(e))
            raise ProviderError(self.provider.name, str(e), cause=e) from e

        try:
            address = self.provider.map_response(data)
        except MALFORMED_RESPONSE_ERRORS as e:
            log.warning("reverse_geocode_malformed_response", error=repr(e))
            raise ProviderError(
                self.provider.name, f"Malformed response: {e!r}", cause=e
            ) from e

        if address is None:
            log.info("reverse_geocode_no_match", x=x, y=y)
            return None

        return Candidate(
            address=address, location=self.factory.create_point(x, y), score=None
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r})"
