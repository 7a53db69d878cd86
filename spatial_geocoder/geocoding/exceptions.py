"""Geocoding error taxonomy."""


class GeocodingError(Exception):
    """Base class for all geocoding errors."""


class InvalidRequest(GeocodingError):
    """Raised when request options or coordinates fail validation.

    Always raised before any network call is attempted.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        self.option = option
        self.message = message
        super().__init__(message)


class NoCandidatesFound(GeocodingError):
    """Raised when a provider answers successfully but reports zero matches."""

    def __init__(self, provider: str | None = None) -> None:
        self.provider = provider
        message = "No address candidates found"
        if provider:
            message = f"{message} by {provider}"
        super().__init__(message)


class ProviderError(GeocodingError):
    """Raised when a provider call fails.

    Covers transport failures, undecodable bodies and responses whose shape
    does not match what the provider documents. The originating exception is
    kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        provider: str,
        message: str = "Unable to geocode address",
        cause: BaseException | None = None,
    ) -> None:
        self.provider = provider
        self.message = message
        self.cause = cause
        super().__init__(f"{provider}: {message}")
