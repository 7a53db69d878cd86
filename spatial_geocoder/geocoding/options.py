"""Request option models and their validation.

Every provider declares a pydantic options model derived from
``GeocodeOptions``. ``resolve_options`` validates a caller-supplied mapping
against such a model before any provider-specific logic runs:

1. required keys are present
2. every supplied key has its declared type (no coercion)
3. provider defaults fill in the keys the caller left out
4. provider value constraints hold (e.g. WGS84-only services)

The first violation is reported as ``InvalidRequest``.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import ErrorDetails

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.constants import WGS84_ONLY_SRID
from spatial_geocoder.geocoding.exceptions import InvalidRequest

OptionsType = TypeVar("OptionsType", bound="GeocodeOptions")


class GeocodeOptions(BaseModel):
    """Generic geocode request options shared by all providers.

    Credentials a service expects in HTTP headers (e.g. an
    ``Authorization`` value) are passed through ``headers``.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    factory: GeometryFactory
    address: str
    neighborhood: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | int | None = None
    country: str | None = None
    path: str = ""
    headers: dict[str, str] | None = None

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate address field."""
        if not v or v.isspace():
            raise ValueError("address cannot be empty")
        return v

    @property
    def srid(self) -> int:
        """Get the requested output spatial reference id."""
        return self.factory.srid


class WGS84GeocodeOptions(GeocodeOptions):
    """Options for services that only return geographic WGS84 coordinates."""

    @field_validator("factory")
    @classmethod
    def validate_factory_srid(cls, v: GeometryFactory) -> GeometryFactory:
        """Validate the spatial reference is WGS84."""
        if v.srid != WGS84_ONLY_SRID:
            raise ValueError(
                f"spatial reference SRID must be {WGS84_ONLY_SRID}, got {v.srid}"
            )
        return v


def _type_name(annotation: Any) -> str:
    """Render a field annotation for error messages, ignoring ``None``."""
    if get_origin(annotation) in (Union, UnionType):
        names = [_type_name(arg) for arg in get_args(annotation) if arg is not NoneType]
        return " | ".join(names)
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return annotation.__name__
    return str(annotation)


def _is_type_error(error: ErrorDetails) -> bool:
    error_type = error["type"]
    return (
        error_type == "extra_forbidden"
        or error_type.endswith("_type")
        or error_type == "is_instance_of"
    )


def _first_error(errors: list[ErrorDetails]) -> ErrorDetails:
    """Pick the error to report: unknown or mistyped keys before value constraints."""
    for error in errors:
        if _is_type_error(error):
            return error
    return errors[0]


def _to_invalid_request(
    model_cls: type[GeocodeOptions], error: ErrorDetails
) -> InvalidRequest:
    """Convert a pydantic error into an ``InvalidRequest``."""
    loc = error.get("loc") or ()
    key = str(loc[0]) if loc else None
    error_type = error["type"]

    if error_type == "extra_forbidden":
        return InvalidRequest(f"Unknown option '{key}'", option=key)

    if error_type == "value_error":
        ctx = error.get("ctx") or {}
        reason = str(ctx.get("error", error["msg"]))
        return InvalidRequest(f"Invalid option '{key}': {reason}", option=key)

    if key in model_cls.model_fields and _is_type_error(error):
        expected = _type_name(model_cls.model_fields[key].annotation)
        return InvalidRequest(
            f"Option '{key}' must be of type {expected}", option=key
        )

    return InvalidRequest(f"Invalid option '{key}': {error['msg']}", option=key)


def resolve_options(
    model_cls: type[OptionsType], options: Mapping[str, Any]
) -> OptionsType:
    """Validate and default request options.

    Args:
        model_cls: The provider's options model
        options: Caller-supplied options

    Returns:
        Validated, immutable options

    Raises:
        InvalidRequest: On the first missing, mistyped, unknown or
            out-of-range option
    """
    if not isinstance(options, Mapping):
        raise InvalidRequest("Geocode options must be a mapping")

    for name, field in model_cls.model_fields.items():
        if field.is_required() and name not in options:
            raise InvalidRequest(f"Missing required option '{name}'", option=name)

    try:
        return model_cls.model_validate(dict(options))
    except ValidationError as e:
        raise _to_invalid_request(model_cls, _first_error(e.errors())) from None


def _coordinate(value: Any, axis: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal, str)):
        raise InvalidRequest(f"Non-numeric coordinate for {axis}: {value!r}", option=axis)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidRequest(
            f"Non-numeric coordinate for {axis}: {value!r}", option=axis
        ) from None
    if not math.isfinite(number):
        raise InvalidRequest(f"Non-numeric coordinate for {axis}: {value!r}", option=axis)
    return number


def parse_location(location: Any) -> tuple[float, float]:
    """Validate a reverse geocode location.

    Args:
        location: ``[x, y]`` pair or mapping with ``x`` and ``y`` keys

    Returns:
        The (x, y) coordinates as floats

    Raises:
        InvalidRequest: If a coordinate is missing or not numeric
    """
    if isinstance(location, Mapping):
        x = location.get("x", location.get(0))
        y = location.get("y", location.get(1))
    elif isinstance(location, (list, tuple)):
        x = location[0] if len(location) > 0 else None
        y = location[1] if len(location) > 1 else None
    else:
        raise InvalidRequest(
            "Location must be an [x, y] pair or a mapping with 'x' and 'y'"
        )

    if x is None:
        raise InvalidRequest("Missing longitude (x) coordinate", option="x")
    if y is None:
        raise InvalidRequest("Missing latitude (y) coordinate", option="y")

    return _coordinate(x, "x"), _coordinate(y, "y")
