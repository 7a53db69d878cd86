"""Point construction under a spatial reference."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

WGS84_SRID = 4326  # WGS84 coordinate system


class Point(BaseModel):
    """Two dimensional point in a spatial reference system."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., title="X", description="X coordinate (longitude)")
    y: float = Field(..., title="Y", description="Y coordinate (latitude)")
    srid: int = Field(
        default=WGS84_SRID,
        title="SRID",
        description="Spatial reference identifier of the coordinates",
    )

    @property
    def coordinates(self) -> list[float]:
        """Get the ordered pair as a list."""
        return [self.x, self.y]

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": "Point", "coordinates": self.coordinates}

    def __getitem__(self, index: int) -> float:
        return self.coordinates[index]


class SpatialReference(BaseModel):
    """Spatial reference system handle."""

    model_config = ConfigDict(frozen=True)

    srid: int = Field(default=WGS84_SRID, gt=0, description="Spatial reference id")


class GeometryFactory:
    """Creates points bound to a single spatial reference.

    The factory is the handle passed with every geocode request. Providers use
    it to build output locations and, for services that only speak WGS84, to
    check the requested SRID up front.
    """

    def __init__(self, srid: int = WGS84_SRID) -> None:
        self.spatial_reference = SpatialReference(srid=srid)

    @property
    def srid(self) -> int:
        """Get the spatial reference identifier."""
        return self.spatial_reference.srid

    def create_point(self, x: float, y: float) -> Point:
        """Create a point from an x/y pair.

        Args:
            x: X coordinate (longitude for geographic systems)
            y: Y coordinate (latitude for geographic systems)

        Returns:
            Point in this factory's spatial reference
        """
        return Point(x=float(x), y=float(y), srid=self.srid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeometryFactory):
            return NotImplemented
        return self.srid == other.srid

    def __hash__(self) -> int:
        return hash(self.srid)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(srid={self.srid})"


def wgs84() -> GeometryFactory:
    """Get a factory for geographic WGS84 coordinates."""
    return GeometryFactory(WGS84_SRID)
