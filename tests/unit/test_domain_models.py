"""
Тесты для доменных моделей: GeoPoint, GeoFence, Band, Ipv4Pool

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Корректность предикатов (contains, did_enter, did_exit)
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
5. Граничные случаи и невалидные данные
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Band, GeoFence, GeoPoint, Ipv4Pool
from src.core.math.geo import HaversineConfig

NASHVILLE = GeoPoint(lat=36.12, lon=-86.67)
LOS_ANGELES = GeoPoint(lat=33.94, lon=-118.40)


# =============================================================================
# GEO TESTS
# =============================================================================


class TestGeoPoint:
    """Тесты для GeoPoint"""

    def test_distance_to(self) -> None:
        """Расстояние до точки и до пары координат совпадает"""
        assert NASHVILLE.distance_to(LOS_ANGELES) == 2887.26
        assert NASHVILLE.distance_to((33.94, -118.40)) == 2887.26

    def test_distance_with_config(self) -> None:
        config = HaversineConfig(precision=0)
        assert NASHVILLE.distance_to(LOS_ANGELES, config) == 2887

    @pytest.mark.parametrize("lat, lon", [(90.1, 0), (-90.1, 0), (0, 180.1), (0, -180.1)])
    def test_out_of_range_rejected(self, lat, lon) -> None:
        with pytest.raises(ValidationError):
            GeoPoint(lat=lat, lon=lon)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            NASHVILLE.lat = 0


class TestGeoFence:
    """Тесты для GeoFence"""

    @pytest.fixture
    def fence(self) -> GeoFence:
        return GeoFence(center=GeoPoint(lat=0, lon=0), radius_km=0.1)

    def test_contains(self, fence) -> None:
        assert fence.contains((0, 0.0001)) is True
        assert fence.contains(GeoPoint(lat=0, lon=0.001)) is False

    def test_boundary_is_inside(self) -> None:
        fence = GeoFence(center=NASHVILLE, radius_km=2887.26)
        assert fence.contains(LOS_ANGELES) is True

    def test_did_enter_and_exit(self, fence) -> None:
        outside, inside = (1, 1), (0, 0)
        assert fence.did_enter(outside, inside) is True
        assert fence.did_exit(outside, inside) is False
        assert fence.did_exit(inside, outside) is True
        assert fence.did_enter(inside, (0.0001, 0.0001)) is False

    def test_negative_radius_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeoFence(center=NASHVILLE, radius_km=-1)

    def test_infinite_radius_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeoFence(center=NASHVILLE, radius_km=float("inf"))

    def test_json_round_trip(self, fence) -> None:
        restored = GeoFence.model_validate_json(fence.model_dump_json())
        assert restored == fence


# =============================================================================
# BAND TESTS
# =============================================================================


class TestBand:
    """Тесты для Band"""

    @pytest.fixture
    def band(self) -> Band:
        return Band(upper=30, lower=20)

    def test_width(self, band) -> None:
        assert band.width == 10

    def test_contains_includes_bounds(self, band) -> None:
        assert band.contains(20) is True
        assert band.contains(30) is True
        assert band.contains(25) is True
        assert band.contains(31) is False

    def test_did_enter(self, band) -> None:
        assert band.did_enter(35, 25) is True
        assert band.did_enter(15, 25) is True
        assert band.did_enter(22, 25) is False

    def test_did_exit(self, band) -> None:
        assert band.did_exit(25, 35) is True
        assert band.did_exit(25, 15) is True
        assert band.did_exit(25, 22) is False

    def test_degenerate_band(self) -> None:
        """upper == lower допустимо"""
        assert Band(upper=5, lower=5).width == 0

    def test_lower_above_upper_rejected(self) -> None:
        with pytest.raises(ValidationError, match="lower 40.0 must be <= upper 30.0"):
            Band(upper=30, lower=40)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Band(upper=float("nan"), lower=0)

    def test_frozen(self, band) -> None:
        with pytest.raises(ValidationError):
            band.upper = 100


# =============================================================================
# IPV4 POOL TESTS
# =============================================================================


class TestIpv4Pool:
    """Тесты для Ipv4Pool"""

    def test_parse_canonicalizes(self) -> None:
        pool = Ipv4Pool.parse("87.70.141.1/22")
        assert pool.network == "87.70.140.0"
        assert pool.prefix_len == 22
        assert str(pool) == "87.70.140.0/22"

    def test_parse_without_prefix(self) -> None:
        assert str(Ipv4Pool.parse("10.207.219.251")) == "10.207.219.251/32"

    def test_network_int(self) -> None:
        assert Ipv4Pool.parse("10.207.219.251").network_int == 181394427

    def test_contains(self) -> None:
        pool = Ipv4Pool.parse("10.0.0.0/8")
        assert pool.contains("10.255.1.2") is True
        assert pool.contains("11.0.0.1") is False

    def test_zero_prefix_contains_everything(self) -> None:
        pool = Ipv4Pool.parse("87.70.141.1/0")
        assert str(pool) == "0.0.0.0/0"
        assert pool.contains("255.255.255.255") is True

    def test_non_canonical_network_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not canonical for /22"):
            Ipv4Pool(network="87.70.141.1", prefix_len=22)

    def test_prefix_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Ipv4Pool(network="10.0.0.0", prefix_len=33)

    def test_bad_octet_rejected(self) -> None:
        """Октет 300 приводится к 44, запись не каноническая"""
        with pytest.raises(ValidationError, match="expected 10.0.0.44"):
            Ipv4Pool(network="10.0.0.300", prefix_len=32)

    def test_parse_bad_prefix_raises(self) -> None:
        with pytest.raises(ValueError):
            Ipv4Pool.parse("10.0.0.0/40")

    def test_json_round_trip(self) -> None:
        pool = Ipv4Pool.parse("36.18.154.103/12")
        assert Ipv4Pool.model_validate_json(pool.model_dump_json()) == pool
