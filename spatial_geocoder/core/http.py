"""HTTP transport used by the geocoding facades.

Wraps geopy's ``RequestsAdapter`` so every provider call is a single blocking
"GET with query, return decoded JSON or raise". Failures surface as geopy's
``GeocoderServiceError`` family, which the facades translate into
``ProviderError``.
"""

from typing import Any, Mapping
from urllib.parse import urlencode

import requests
from geopy.adapters import AdapterHTTPError, BaseSyncAdapter, RequestsAdapter
from geopy.exc import (
    GeocoderAuthenticationFailure,
    GeocoderInsufficientPrivileges,
    GeocoderQueryError,
    GeocoderQuotaExceeded,
    GeocoderRateLimited,
    GeocoderServiceError,
    GeocoderTimedOut,
    GeocoderUnavailable,
)

from spatial_geocoder.core.logging import get_logger

logger = get_logger().bind(module="http_transport")

QueryParams = Mapping[str, str | int | float]

# Non-2xx status codes mapped onto geopy's error hierarchy
STATUS_ERRORS: dict[int, type[GeocoderServiceError]] = {
    400: GeocoderQueryError,
    401: GeocoderAuthenticationFailure,
    402: GeocoderQuotaExceeded,
    403: GeocoderInsufficientPrivileges,
    407: GeocoderAuthenticationFailure,
    412: GeocoderQueryError,
    413: GeocoderQueryError,
    414: GeocoderQueryError,
    429: GeocoderRateLimited,
    502: GeocoderServiceError,
    503: GeocoderTimedOut,
    504: GeocoderTimedOut,
}


def build_url(base_url: str, path: str = "", params: QueryParams | None = None) -> str:
    """Join a base URL, a relative path and encoded query parameters.

    Args:
        base_url: Service root, e.g. https://geocode.arcgis.com
        path: Endpoint path relative to the base URL
        params: Query parameters to encode

    Returns:
        Fully qualified request URL
    """
    url = base_url.rstrip("/")
    if path:
        url = f"{url}/{path.lstrip('/')}"
    if params:
        url = "?".join((url, urlencode(params)))
    return url


class HttpTransport:
    """Blocking JSON-over-HTTP GET transport bound to one service root."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        max_redirects: int = 20,
        user_agent: str | None = None,
        max_retries: int = 2,
        adapter: BaseSyncAdapter | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Service root every path is resolved against
            timeout: Request timeout in seconds
            max_redirects: Maximum number of redirects followed
            user_agent: Optional User-Agent header value
            max_retries: Connection-level retries performed by the adapter
            adapter: Optional pre-built geopy adapter (mainly for tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        if adapter is None:
            adapter = RequestsAdapter(
                proxies=None, ssl_context=None, max_retries=max_retries
            )
            adapter.session.max_redirects = max_redirects
        self.adapter = adapter

    def _headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        merged: dict[str, str] = {}
        if self.user_agent:
            merged["User-Agent"] = self.user_agent
        if headers:
            merged.update(headers)
        return merged

    def get_json(
        self,
        path: str,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Issue a GET request and decode the JSON body.

        Args:
            path: Endpoint path relative to the base URL
            params: Query parameters
            headers: Extra HTTP headers

        Returns:
            Decoded JSON body

        Raises:
            GeocoderServiceError: On network failure, non-2xx status or an
                undecodable body
        """
        url = build_url(self.base_url, path, params)
        try:
            return self.adapter.get_json(
                url, timeout=self.timeout, headers=self._headers(headers)
            )
        except AdapterHTTPError as e:
            error_class = STATUS_ERRORS.get(e.status_code, GeocoderServiceError)
            logger.debug(
                "http_status_error",
                status_code=e.status_code,
                error_class=error_class.__name__,
            )
            raise error_class(str(e)) from e
        except GeocoderServiceError:
            raise
        except requests.RequestException as e:
            raise GeocoderServiceError(str(e)) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url='{self.base_url}')"
