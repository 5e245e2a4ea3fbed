"""
Bits — Операции над отдельными битами целых чисел

Нумерация битов начинается с 0 (младший бит).
zero_out_32 работает с беззнаковым 32-битным представлением.
"""

from typing import Final

UINT32_BITS: Final[int] = 32
UINT32_MASK: Final[int] = 0xFFFFFFFF


def num_to_bin_string(n: int) -> str:
    """
    Двоичное представление числа без префикса.

    Examples:
        >>> num_to_bin_string(172)
        '10101100'
        >>> num_to_bin_string(-5)
        '-101'
    """
    return format(n, "b")


def bin_string_to_num(s: str) -> int:
    """Парсинг двоичной строки ('1011' → 11)."""
    return int(s, 2)


def get_bit_at(b: int, n: int) -> int:
    """
    Значение бита n числа b (0 или 1).

    Examples:
        >>> [get_bit_at(172, i) for i in range(8)]
        [0, 0, 1, 1, 0, 1, 0, 1]
    """
    return (b >> n) & 1


def set_bit_at(b: int, n: int) -> int:
    """Установка бита n в 1: set_bit_at(172, 0) == 173."""
    return b | (1 << n)


def clear_bit_at(b: int, n: int) -> int:
    """Сброс бита n в 0: clear_bit_at(255, 0) == 254."""
    return b & ~(1 << n)


def inv_bit_at(b: int, n: int) -> int:
    """Инверсия бита n: inv_bit_at(8, 0) == 9."""
    return b ^ (1 << n)


def has_bit_at(b: int, n: int) -> bool:
    return get_bit_at(b, n) == 1


def zero_out_32(n: int, keep: int) -> int:
    """
    Обнуление младших битов 32-битного беззнакового числа.

    Сохраняются только keep старших битов. Используется для
    канонизации IPv4 пулов (обнуление host-битов).

    Args:
        n: Число (приводится к uint32)
        keep: Количество сохраняемых старших битов

    Returns:
        uint32 с обнулёнными (32 - keep) младшими битами;
        0 при keep <= 0, n при keep >= 32

    Examples:
        >>> zero_out_32(0xFFFFFFFF, 8)
        4278190080
    """
    if keep <= 0:
        return 0
    value = n & UINT32_MASK
    if keep >= UINT32_BITS:
        return value
    shift = UINT32_BITS - keep
    return (value >> shift) << shift
