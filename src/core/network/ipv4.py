"""
IPv4 — Конверсия адресов и канонизация пулов (CIDR)

Адрес хранится как uint32 в сетевом порядке байт (big-endian):
первый октет — старший байт.

Нестрого записанные адреса допускаются и никогда не вызывают ошибку:
- пустой октет ('10..55') считается 0
- недостающие октеты в конце ('110.200.21') считаются 0
- нечисловой октет считается 0, хвост после ведущих цифр отбрасывается
- октет вне [0, 255] приводится по модулю 256 ('300' → 44, '-1' → 255)
- октеты после четвёртого игнорируются

КАНОНИЗАЦИЯ ПУЛА:
    '87.70.141.1/22' → '87.70.140.0/22'
    Host-биты (младшие 32 - prefix) обнуляются, отсутствующий prefix = 32.
"""

import re
from typing import Final

from src.core.math.bits import UINT32_MASK, zero_out_32

IPV4_OCTETS: Final[int] = 4
IPV4_MAX_OCTET: Final[int] = 255
IPV4_MAX_PREFIX: Final[int] = 32

_LEADING_DIGITS: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_octet(octet: str) -> int:
    # Как parseInt: ведущие цифры со знаком, без цифр = 0; результат — байт
    match = _LEADING_DIGITS.match(octet)
    if match is None:
        return 0
    return int(match.group(1)) & IPV4_MAX_OCTET


def ipv4_to_int(ip: str) -> int:
    """
    Конверсия IPv4 адреса в uint32.

    Args:
        ip: Адрес в dotted-decimal нотации (допускаются пустые,
            недостающие и лишние октеты)

    Returns:
        Целое в диапазоне [0, 2^32 - 1]

    Examples:
        >>> ipv4_to_int("10.207.219.251")
        181394427
        >>> ipv4_to_int("10..55")
        167786240
        >>> ipv4_to_int("300.0.0.1") == ipv4_to_int("44.0.0.1")
        True
    """
    octets = ip.split(".")[:IPV4_OCTETS]
    octets += [""] * (IPV4_OCTETS - len(octets))

    value = 0
    for octet in octets:
        value = (value << 8) | _parse_octet(octet)
    return value


def int_to_ipv4(n: int) -> str:
    """
    Конверсия uint32 в dotted-decimal адрес.

    Значение приводится по модулю 2^32.

    Examples:
        >>> int_to_ipv4(181394427)
        '10.207.219.251'
    """
    packed = (n & UINT32_MASK).to_bytes(IPV4_OCTETS, "big")
    return ".".join(str(octet) for octet in packed)


def canonical_ipv4_pool(s: str) -> str:
    """
    Каноническая запись IPv4 пула 'address/prefix'.

    Args:
        s: Пул в виде 'a.b.c.d/prefix' или 'a.b.c.d' (prefix = 32)

    Returns:
        Пул с обнулёнными host-битами и явным prefix

    Raises:
        ValueError: prefix вне [0, 32] или не десятичное число

    Examples:
        >>> canonical_ipv4_pool("36.18.154.103/12")
        '36.16.0.0/12'
        >>> canonical_ipv4_pool("10.207.219.251")
        '10.207.219.251/32'
        >>> canonical_ipv4_pool("10.../8")
        '10.0.0.0/8'
    """
    ip, _, prefix = s.partition("/")
    if prefix == "":
        prefix_len = IPV4_MAX_PREFIX
    elif prefix.isdecimal():
        prefix_len = int(prefix)
    else:
        raise ValueError(f"Invalid prefix length {prefix!r} in {s!r}")

    if not 0 <= prefix_len <= IPV4_MAX_PREFIX:
        raise ValueError(
            f"Prefix length must be in [0, {IPV4_MAX_PREFIX}], got {prefix_len}"
        )

    network = zero_out_32(ipv4_to_int(ip), prefix_len)
    return f"{int_to_ipv4(network)}/{prefix_len}"
