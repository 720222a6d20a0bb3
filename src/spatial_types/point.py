"""Defines the Point spatial type."""

from typing import Any, Optional

from pydantic import Field, StrictInt, ValidationInfo, model_validator
from typing_extensions import Annotated

from spatial_types.config import ConfigProvider, resolve_default_srid
from spatial_types.models import SpatialValueModel


class Point(SpatialValueModel):
    """A geographic coordinate tagged with a spatial reference identifier.

    Coordinates are not range-checked. When srid is omitted or None it is resolved from the
    ``spatial.default_srid`` configuration at construction time, falling back to 0.

    Examples
    --------
    >>> Point(lat=25.1515, lng=36.1212, srid=4326).get_srid()
    4326
    >>> Point().get_lat()
    0.0
    """

    lat: float = Field(default=0.0, description="Latitude")
    lng: float = Field(default=0.0, description="Longitude")
    srid: Annotated[StrictInt, Field(ge=0, description="Spatial reference identifier")] = 0

    @model_validator(mode="before")
    @classmethod
    def _resolve_srid(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or data.get("srid") is not None:
            return data
        config = (info.context or {}).get("config")
        return {**data, "srid": resolve_default_srid(config)}

    def get_lat(self) -> float:
        return self.lat

    def get_lng(self) -> float:
        return self.lng

    def get_srid(self) -> int:
        return self.srid

    def with_changes(
        self, config: Optional[ConfigProvider] = None, **changes: Any
    ) -> "Point":
        """Return a copy with the given fields replaced. Passing srid=None resolves the
        default SRID again from config, the global configuration by default.
        """
        return super().with_changes(context={"config": config}, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return the point as a dictionary with keys lat, lng and srid."""
        return {"lat": self.lat, "lng": self.lng, "srid": self.srid}

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], config: Optional[ConfigProvider] = None
    ) -> "Point":
        """Construct a point from a dictionary. A missing srid is resolved from config, the
        global configuration by default.
        """
        return cls.model_validate(data, context={"config": config})

    @classmethod
    def example(cls) -> "Point":
        return cls(lat=25.1515, lng=36.1212, srid=4326)


class PointFactory:
    """Constructs points whose default SRID comes from an explicit configuration provider
    rather than the process-wide configuration.

    Examples
    --------
    >>> factory = PointFactory(ConfigRepository({"spatial": {"default_srid": 3857}}))
    >>> factory.make(lat=1.0).get_srid()
    3857
    """

    def __init__(self, config: ConfigProvider) -> None:
        self._config = config

    @property
    def config(self) -> ConfigProvider:
        """Return the configuration provider."""
        return self._config

    def make(
        self,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        srid: Optional[int] = None,
    ) -> Point:
        """Construct a point. Omitted coordinates are 0.0 and an omitted srid is resolved from
        the factory's configuration on every call.
        """
        data: dict[str, Any] = {"srid": srid}
        if lat is not None:
            data["lat"] = lat
        if lng is not None:
            data["lng"] = lng
        return Point.model_validate(data, context={"config": self._config})

    def with_changes(self, point: Point, **changes: Any) -> Point:
        """Return a copy of point with the given fields replaced, resolving srid=None from the
        factory's configuration.
        """
        return point.with_changes(config=self._config, **changes)
