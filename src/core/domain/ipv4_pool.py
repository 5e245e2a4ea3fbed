"""
Ipv4Pool — Модель IPv4 пула в канонической форме

Immutable Pydantic модель: адрес сети хранится с обнулёнными host-битами.
Нестрогие записи ('10..55/8') приводятся к канонической форме через
Ipv4Pool.parse.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.bits import zero_out_32
from src.core.network.ipv4 import (
    IPV4_MAX_PREFIX,
    canonical_ipv4_pool,
    int_to_ipv4,
    ipv4_to_int,
)


class Ipv4Pool(BaseModel):
    """
    IPv4 пул (CIDR).

    Инвариант: network == canonical(network/prefix_len).
    """

    prefix_len: int = Field(
        ..., ge=0, le=IPV4_MAX_PREFIX, description="Длина префикса (0..32)"
    )
    network: str = Field(..., min_length=1, description="Адрес сети (dotted-decimal)")

    model_config = {"frozen": True}

    @field_validator("network")
    @classmethod
    def validate_network_is_canonical(cls, v: str, info) -> str:
        """Проверка, что host-биты адреса сети обнулены."""
        value = ipv4_to_int(v)
        if "prefix_len" in info.data:
            canonical = int_to_ipv4(zero_out_32(value, info.data["prefix_len"]))
            if canonical != v:
                raise ValueError(
                    f"network {v} is not canonical for /{info.data['prefix_len']}, "
                    f"expected {canonical}"
                )
        return v

    @classmethod
    def parse(cls, s: str) -> "Ipv4Pool":
        """
        Создание пула из произвольной записи 'address[/prefix]'.

        Examples:
            >>> str(Ipv4Pool.parse("87.70.141.1/22"))
            '87.70.140.0/22'
        """
        network, _, prefix = canonical_ipv4_pool(s).partition("/")
        return cls(network=network, prefix_len=int(prefix))

    @property
    def network_int(self) -> int:
        return ipv4_to_int(self.network)

    def contains(self, ip: str) -> bool:
        """Адрес принадлежит пулу."""
        return zero_out_32(ipv4_to_int(ip), self.prefix_len) == self.network_int

    def __str__(self) -> str:
        return f"{self.network}/{self.prefix_len}"
