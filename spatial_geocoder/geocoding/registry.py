"""Central provider registry.

Maps provider names onto adapter classes and builds ready-to-use facades,
filling API keys and transport settings from ``Settings`` when the caller
does not pass them.
"""

from typing import Any

from spatial_geocoder.core.config import Settings, settings as default_settings
from spatial_geocoder.core.http import HttpTransport
from spatial_geocoder.geocoding.exceptions import InvalidRequest
from spatial_geocoder.geocoding.providers import (
    CensusGeocoder,
    EsriWorldGeocoder,
    EsriWorldReverseGeocoder,
    GeocodingProvider,
    GoogleGeocoder,
    HereGeocoder,
    HereReverseGeocoder,
    ReverseGeocodingProvider,
    TamuGeocoder,
    TomTomGeocoder,
)
from spatial_geocoder.geocoding.service import Geocoder, ReverseGeocoder

# Ordered list of (name, provider class, settings attribute holding its API key)
PROVIDERS: list[tuple[str, type[GeocodingProvider[Any]], str | None]] = [
    ("esri", EsriWorldGeocoder, None),
    ("google", GoogleGeocoder, "GOOGLE_API_KEY"),
    ("here", HereGeocoder, "HERE_API_KEY"),
    ("tomtom", TomTomGeocoder, "TOMTOM_API_KEY"),
    ("tamu", TamuGeocoder, "TAMU_API_KEY"),
    ("census", CensusGeocoder, None),
]

REVERSE_PROVIDERS: list[tuple[str, type[ReverseGeocodingProvider], str | None]] = [
    ("esri", EsriWorldReverseGeocoder, None),
    ("here", HereReverseGeocoder, "HERE_API_KEY"),
]

_GEOCODERS = {name: (cls, key) for name, cls, key in PROVIDERS}
_REVERSE_GEOCODERS = {name: (cls, key) for name, cls, key in REVERSE_PROVIDERS}


def available_providers() -> list[str]:
    """Get the forward geocoding provider names, in registry order."""
    return [name for name, _, _ in PROVIDERS]


def available_reverse_providers() -> list[str]:
    """Get the reverse geocoding provider names, in registry order."""
    return [name for name, _, _ in REVERSE_PROVIDERS]


def _api_key(
    name: str, key_setting: str | None, api_key: str | None, config: Settings
) -> dict[str, str]:
    if key_setting is None:
        return {}
    value = api_key if api_key is not None else getattr(config, key_setting)
    if not value:
        raise InvalidRequest(
            f"Provider '{name}' requires an API key (set {key_setting})",
            option="api_key",
        )
    return {"api_key": value}


def _transport(base_url: str, config: Settings) -> HttpTransport:
    return HttpTransport(
        base_url,
        timeout=config.GEOCODING_TIMEOUT,
        max_redirects=config.GEOCODING_MAX_REDIRECTS,
        user_agent=config.GEOCODING_USER_AGENT,
        max_retries=config.GEOCODING_MAX_RETRIES,
    )


def get_geocoder(
    name: str,
    api_key: str | None = None,
    base_url: str | None = None,
    config: Settings | None = None,
) -> Geocoder:
    """Build a geocoder for a named provider.

    Args:
        name: Provider name (see ``available_providers``)
        api_key: API key; read from settings when omitted
        base_url: Optional override of the provider's service root
        config: Settings to read from (defaults to the module settings)

    Returns:
        Geocoder facade

    Raises:
        InvalidRequest: If the provider is unknown or its API key is missing
    """
    config = config or default_settings
    try:
        provider_class, key_setting = _GEOCODERS[name.lower()]
    except KeyError:
        raise InvalidRequest(
            f"Unknown geocoding provider: {name}", option="provider"
        ) from None

    provider = provider_class(
        base_url=base_url, **_api_key(name, key_setting, api_key, config)
    )
    return Geocoder(provider, _transport(provider.base_url, config))


def get_reverse_geocoder(
    name: str,
    api_key: str | None = None,
    base_url: str | None = None,
    config: Settings | None = None,
) -> ReverseGeocoder:
    """Build a reverse geocoder for a named provider.

    Args:
        name: Provider name (see ``available_reverse_providers``)
        api_key: API key; read from settings when omitted
        base_url: Optional override of the provider's service root
        config: Settings to read from (defaults to the module settings)

    Returns:
        ReverseGeocoder facade

    Raises:
        InvalidRequest: If the provider is unknown or its API key is missing
    """
    config = config or default_settings
    try:
        provider_class, key_setting = _REVERSE_GEOCODERS[name.lower()]
    except KeyError:
        raise InvalidRequest(
            f"Unknown reverse geocoding provider: {name}", option="provider"
        ) from None

    kwargs: dict[str, Any] = _api_key(name, key_setting, api_key, config)
    if provider_class is HereReverseGeocoder:
        kwargs["locale"] = config.HERE_LOCALE
    provider = provider_class(base_url=base_url, **kwargs)
    return ReverseGeocoder(provider, _transport(provider.base_url, config))
