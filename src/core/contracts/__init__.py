"""
Contract Validation Module

Модуль для валидации JSON контрактов value objects (geo fence, band,
IPv4 pool).
"""

from .validators import (
    BandValidator,
    ContractValidator,
    GeoFenceValidator,
    Ipv4PoolValidator,
    SchemaLoader,
    default_schema_dir,
    get_schema_loader,
    validate_band,
    validate_geo_fence,
    validate_ipv4_pool,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GeoFenceValidator",
    "BandValidator",
    "Ipv4PoolValidator",
    # Functions
    "default_schema_dir",
    "get_schema_loader",
    "validate_geo_fence",
    "validate_band",
    "validate_ipv4_pool",
]
