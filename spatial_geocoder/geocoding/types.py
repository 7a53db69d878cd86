"""Type definitions for geocoding results."""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spatial_geocoder.core.geometry import GeometryFactory, Point, wgs84
from spatial_geocoder.geocoding.exceptions import (
    GeocodingError,
    InvalidRequest,
    NoCandidatesFound,
    ProviderError,
)

Score = float | int | None


class Candidate(BaseModel):
    """One normalized geocoding result.

    Scores are provider-defined: larger is a better match, on a 0-100 scale
    where the provider defines one. They are not comparable across providers.
    """

    model_config = ConfigDict(frozen=True)

    address: str = Field(description="Matched address text")
    location: Point = Field(description="Location in the request's spatial reference")
    score: Score = Field(default=None, description="Provider match score")

    @field_validator("score", mode="before")
    @classmethod
    def validate_score(cls, v: Any) -> Score:
        """Validate score field."""
        if isinstance(v, bool):
            raise ValueError("Score must be numeric or None")
        return v

    @property
    def coordinates(self) -> list[float]:
        """Get the location as an [x, y] pair."""
        return self.location.coordinates

    def to_geojson(self) -> dict[str, Any]:
        """Serialize to a GeoJSON-like point object."""
        return {
            "type": "Point",
            "coordinates": self.location.coordinates,
            "properties": {
                "address": self.address,
                "score": self.score,
            },
        }

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_geojson()

    def to_json(self) -> str:
        """Serialize the GeoJSON-like form to a JSON string."""
        return json.dumps(self.to_geojson())

    @classmethod
    def from_geojson(
        cls, data: dict[str, Any] | str, factory: GeometryFactory | None = None
    ) -> "Candidate":
        """Rebuild a candidate from its GeoJSON-like form.

        Args:
            data: Serialized candidate, as a mapping or JSON text
            factory: Spatial reference of the coordinates (defaults to WGS84)

        Returns:
            Candidate
        """
        if isinstance(data, str):
            data = json.loads(data)
        if data.get("type") != "Point":
            raise ValueError(f"Expected a Point, got {data.get('type')!r}")
        x, y = data["coordinates"]
        properties = data.get("properties") or {}
        return cls(
            address=properties["address"],
            location=(factory or wgs84()).create_point(x, y),
            score=properties.get("score"),
        )


class OutcomeStatus(str, Enum):
    """Kinds of geocode outcome."""

    OK = "ok"
    NO_CANDIDATES = "no_candidates"
    INVALID_REQUEST = "invalid_request"
    PROVIDER_ERROR = "provider_error"


class GeocodeOutcome(BaseModel):
    """Explicit result of a geocode call.

    Carries the candidates on success, or the error that ended the call.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: OutcomeStatus
    candidates: list[Candidate] = Field(default_factory=list)
    error: GeocodingError | None = None

    @property
    def ok(self) -> bool:
        """Whether the call produced candidates."""
        return self.status is OutcomeStatus.OK

    @classmethod
    def success(cls, candidates: list[Candidate]) -> "GeocodeOutcome":
        return cls(status=OutcomeStatus.OK, candidates=candidates)

    @classmethod
    def failure(cls, error: GeocodingError) -> "GeocodeOutcome":
        """Build the outcome for a geocoding error."""
        if isinstance(error, NoCandidatesFound):
            status = OutcomeStatus.NO_CANDIDATES
        elif isinstance(error, InvalidRequest):
            status = OutcomeStatus.INVALID_REQUEST
        elif isinstance(error, ProviderError):
            status = OutcomeStatus.PROVIDER_ERROR
        else:
            raise TypeError(f"Unsupported geocoding error: {type(error).__name__}")
        return cls(status=status, error=error)

    def unwrap(self) -> list[Candidate]:
        """Return the candidates or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.candidates
