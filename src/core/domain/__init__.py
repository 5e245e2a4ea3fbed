"""
Domain models and value objects.

Contains immutable value objects: GeoPoint, GeoFence, Band, Ipv4Pool.
"""

from src.core.domain.band import Band
from src.core.domain.geo_fence import GeoFence, GeoPoint, PointLike
from src.core.domain.ipv4_pool import Ipv4Pool

__all__ = [
    # Band
    "Band",
    # Geo
    "GeoFence",
    "GeoPoint",
    "PointLike",
    # Network
    "Ipv4Pool",
]
