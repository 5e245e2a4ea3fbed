"""
Network helpers — IPv4 адреса и пулы
"""

from src.core.network.ipv4 import (
    IPV4_MAX_OCTET,
    IPV4_MAX_PREFIX,
    IPV4_OCTETS,
    canonical_ipv4_pool,
    int_to_ipv4,
    ipv4_to_int,
)

__all__ = [
    # Constants
    "IPV4_MAX_OCTET",
    "IPV4_MAX_PREFIX",
    "IPV4_OCTETS",
    # Functions
    "canonical_ipv4_pool",
    "int_to_ipv4",
    "ipv4_to_int",
]
