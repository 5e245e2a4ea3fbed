"""
Geo — Haversine-расстояние и круговые geo-fence

Модуль вычисляет great-circle расстояние между двумя точками (lat, lon)
в десятичных градусах и на его основе определяет:
- принадлежность точки круговой зоне (center, radius_km)
- вход в зону и выход из неё по паре (previous, current)

ФОРМУЛА (haversine):
    a = sin²(Δlat/2) + cos(lat1) × cos(lat2) × sin²(Δlon/2)
    d = 2R × asin(√a)

Диапазоны широты/долготы не валидируются: вызывающий код передаёт
корректные градусы (валидацию выполняет domain модель GeoPoint).
"""

import math
from dataclasses import dataclass
from typing import Callable, Final, Optional, Sequence

from src.core.math.numbers import p_round

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Радиус Земли (км)
EARTH_RADIUS_KM: Final[float] = 6372.8

# Количество знаков после запятой в результате haversine
HAVERSINE_PRECISION: Final[int] = 2

Point = Sequence[float]


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class HaversineConfig:
    """Параметры расчёта haversine расстояния.

    Значения по умолчанию дают расстояние в километрах с округлением
    до 2 знаков.
    """

    earth_radius_km: float = EARTH_RADIUS_KM
    precision: int = HAVERSINE_PRECISION

    def __post_init__(self) -> None:
        if not math.isfinite(self.earth_radius_km) or self.earth_radius_km <= 0:
            raise ValueError(
                f"earth_radius_km must be positive, got {self.earth_radius_km}"
            )
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


DEFAULT_HAVERSINE_CONFIG: Final[HaversineConfig] = HaversineConfig()


# =============================================================================
# HAVERSINE
# =============================================================================


def degrees_to_radians(x: float) -> float:
    """Конверсия десятичных градусов в радианы."""
    return x / 180 * math.pi


def haversine(
    p1: Point,
    p2: Point,
    config: Optional[HaversineConfig] = None,
) -> float:
    """
    Great-circle расстояние между двумя точками.

    Args:
        p1: Первая точка (lat, lon) в десятичных градусах
        p2: Вторая точка (lat, lon) в десятичных градусах
        config: Параметры расчёта (default: R = 6372.8 км, 2 знака)

    Returns:
        Расстояние в км, округлённое до config.precision знаков

    Examples:
        >>> haversine((36.12, -86.67), (33.94, -118.40))
        2887.26
    """
    cfg = config or DEFAULT_HAVERSINE_CONFIG
    lat1, lon1 = p1
    lat2, lon2 = p2

    rlat1, rlat2, rlon1, rlon2 = (
        degrees_to_radians(v) for v in (lat1, lat2, lon1, lon2)
    )
    d_lat = rlat2 - rlat1
    d_lon = rlon2 - rlon1

    a = (
        math.sin(d_lat / 2) ** 2
        + math.sin(d_lon / 2) ** 2 * (math.cos(rlat1) * math.cos(rlat2))
    )
    distance = cfg.earth_radius_km * 2 * math.asin(math.sqrt(a))
    return p_round(cfg.precision)(distance)


# =============================================================================
# GEO-FENCE
# =============================================================================


def geo_is_inside(
    center: Point,
    radius_km: float,
    config: Optional[HaversineConfig] = None,
) -> Callable[[Point], bool]:
    """
    Предикат принадлежности точки круговой зоне.

    Граница включается: точка на расстоянии ровно radius_km считается
    внутри.

    Args:
        center: Центр зоны (lat, lon)
        radius_km: Радиус зоны (км)
        config: Параметры haversine

    Returns:
        Функция point → haversine(center, point) <= radius_km
    """

    def is_inside(point: Point) -> bool:
        return haversine(center, point, config) <= radius_km

    return is_inside


def geo_fence_did_enter(
    center: Point,
    radius_km: float,
    config: Optional[HaversineConfig] = None,
) -> Callable[[Point, Point], bool]:
    """
    Предикат входа в зону: previous снаружи, current внутри.

    Examples:
        >>> geo_fence_did_enter((0, 0), 0.1)((1, 1), (0, 0))
        True
        >>> geo_fence_did_enter((0, 0), 0.1)((0, 0), (0.0001, 0.0001))
        False
    """
    is_inside = geo_is_inside(center, radius_km, config)

    def did_enter(previous: Point, current: Point) -> bool:
        return is_inside(current) and not is_inside(previous)

    return did_enter


def geo_fence_did_exit(
    center: Point,
    radius_km: float,
    config: Optional[HaversineConfig] = None,
) -> Callable[[Point, Point], bool]:
    """Предикат выхода из зоны: previous внутри, current снаружи."""
    is_inside = geo_is_inside(center, radius_km, config)

    def did_exit(previous: Point, current: Point) -> bool:
        return is_inside(previous) and not is_inside(current)

    return did_exit
