"""
GeoFence — Модели географической точки и круговой зоны

Immutable Pydantic модели поверх функций src.core.math.geo.
Валидация диапазонов широты/долготы выполняется здесь, а не в haversine.
"""

from typing import Optional, Sequence, Union

from pydantic import BaseModel, Field

from src.core.math.geo import (
    HaversineConfig,
    geo_fence_did_enter,
    geo_fence_did_exit,
    geo_is_inside,
    haversine,
)


class GeoPoint(BaseModel):
    """Точка (lat, lon) в десятичных градусах."""

    lat: float = Field(..., ge=-90.0, le=90.0, description="Широта (градусы)")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Долгота (градусы)")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lon)

    def distance_to(
        self,
        other: "PointLike",
        config: Optional[HaversineConfig] = None,
    ) -> float:
        """
        Haversine расстояние до другой точки.

        Args:
            other: GeoPoint или пара (lat, lon)
            config: Параметры haversine (default: км, 2 знака)

        Returns:
            Расстояние в км
        """
        return haversine(self.as_tuple(), _coords(other), config)


PointLike = Union[GeoPoint, Sequence[float]]


def _coords(point: PointLike) -> Sequence[float]:
    if isinstance(point, GeoPoint):
        return point.as_tuple()
    return point


class GeoFence(BaseModel):
    """
    Круговая зона: центр и радиус в км.

    Граница включается в зону.
    """

    center: GeoPoint = Field(..., description="Центр зоны")
    radius_km: float = Field(..., ge=0, allow_inf_nan=False, description="Радиус зоны (км)")

    model_config = {"frozen": True}

    def contains(
        self, point: PointLike, config: Optional[HaversineConfig] = None
    ) -> bool:
        """Точка внутри зоны (включая границу)."""
        return geo_is_inside(self.center.as_tuple(), self.radius_km, config)(
            _coords(point)
        )

    def did_enter(
        self,
        previous: PointLike,
        current: PointLike,
        config: Optional[HaversineConfig] = None,
    ) -> bool:
        """Переход previous → current пересёк границу внутрь."""
        did_enter = geo_fence_did_enter(self.center.as_tuple(), self.radius_km, config)
        return did_enter(_coords(previous), _coords(current))

    def did_exit(
        self,
        previous: PointLike,
        current: PointLike,
        config: Optional[HaversineConfig] = None,
    ) -> bool:
        """Переход previous → current пересёк границу наружу."""
        did_exit = geo_fence_did_exit(self.center.as_tuple(), self.radius_km, config)
        return did_exit(_coords(previous), _coords(current))
