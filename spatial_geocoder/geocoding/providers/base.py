"""Base classes for geocoding providers."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.exceptions import NoCandidatesFound
from spatial_geocoder.geocoding.options import GeocodeOptions, resolve_options
from spatial_geocoder.geocoding.types import Candidate, Score

OptionsType = TypeVar("OptionsType", bound=GeocodeOptions)
QueryParams = dict[str, str | int]


def compact(params: Mapping[str, Any]) -> QueryParams:
    """Drop parameters whose value is absent or empty.

    Args:
        params: Candidate query parameters

    Returns:
        Parameters with ``None`` and empty-string values removed
    """
    return {key: value for key, value in params.items() if value is not None and value != ""}


def join_present(parts: list[Any], separator: str) -> str:
    """Join the parts that are present, skipping ``None`` and empty values."""
    return separator.join(str(part) for part in parts if part is not None and part != "")


class GeocodingProvider(ABC, Generic[OptionsType]):
    """Base class for geocoding providers.

    A provider translates validated generic options into its own query
    parameters and its JSON response back into candidates. Both translations
    are pure; instances only hold read-only constructor configuration and can
    be shared between callers.
    """

    #: Short provider identifier, e.g. ``esri``
    name: str
    #: Service root the request path is resolved against
    base_url: str
    #: Pydantic model validating this provider's options
    options_model: type[OptionsType]

    def __init__(self, base_url: str | None = None) -> None:
        """Initialize the provider.

        Args:
            base_url: Optional override of the service root
        """
        if base_url is not None:
            self.base_url = base_url

    def resolve(self, options: Mapping[str, Any]) -> OptionsType:
        """Validate and default caller options for this provider."""
        return resolve_options(self.options_model, self.option_defaults(options))

    def option_defaults(self, options: Mapping[str, Any]) -> Mapping[str, Any]:
        """Merge constructor-supplied defaults into caller options."""
        return options

    def request_path(self, options: OptionsType) -> str:
        """Get the endpoint path for a validated request."""
        return options.path

    @abstractmethod
    def build_query(self, options: OptionsType) -> QueryParams:
        """Build the provider query parameters.

        Args:
            options: Validated options

        Returns:
            Query parameters; absent options never appear
        """
        raise NotImplementedError

    @abstractmethod
    def map_response(self, data: Any, factory: GeometryFactory) -> list[Candidate]:
        """Translate a decoded response into candidates.

        Args:
            data: Decoded JSON body
            factory: Builds candidate locations in the requested reference

        Returns:
            Candidates in provider order

        Raises:
            NoCandidatesFound: If the provider reports zero matches
        """
        raise NotImplementedError

    def no_candidates(self) -> NoCandidatesFound:
        return NoCandidatesFound(self.name)

    @staticmethod
    def candidate(
        factory: GeometryFactory, address: str, x: Any, y: Any, score: Score
    ) -> Candidate:
        """Build a candidate, coercing the provider's coordinates to float."""
        return Candidate(
            address=address,
            location=factory.create_point(float(x), float(y)),
            score=score,
        )

    def __repr__(self) -> str:
        """String representation of the provider."""
        return f"{self.__class__.__name__}(base_url='{self.base_url}')"


class ReverseGeocodingProvider(ABC):
    """Base class for reverse geocoding providers."""

    name: str
    base_url: str
    path: str = ""

    def __init__(self, base_url: str | None = None) -> None:
        if base_url is not None:
            self.base_url = base_url

    @abstractmethod
    def build_query(self, x: float, y: float) -> QueryParams:
        """Build the provider query for a coordinate pair.

        Args:
            x: Longitude / x coordinate
            y: Latitude / y coordinate

        Returns:
            Query parameters
        """
        raise NotImplementedError

    @abstractmethod
    def map_response(self, data: Any) -> str | None:
        """Extract the best address from a decoded response.

        Returns:
            Address text, or None when the provider found nothing
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url='{self.base_url}')"
