"""
Converters — Hex и UTF-8 конверсии байтовых массивов

Байтовый массив представлен списком int в диапазоне [0, 255].
"""

from typing import Iterable


def hex_to_byte_array(hex_string: str) -> list[int]:
    """
    Конверсия hex строки в список байтов (по 2 символа на байт).

    Raises:
        ValueError: Нечётная длина строки или не-hex символы

    Examples:
        >>> hex_to_byte_array("AE4E")
        [174, 78]
    """
    if len(hex_string) % 2 != 0:
        raise ValueError(
            f"Key string length must be multiple of 2, got {len(hex_string)}"
        )
    return list(bytes.fromhex(hex_string))


def byte_array_to_hex(arr: Iterable[int], separator: str = "") -> str:
    """
    Конверсия списка байтов в hex строку (заглавные, по 2 символа на байт).

    Examples:
        >>> byte_array_to_hex([174, 78, 5])
        'AE4E05'
        >>> byte_array_to_hex([174, 78], ":")
        'AE:4E'
    """
    return separator.join(f"{num_byte:02X}" for num_byte in arr)


def string_to_utf8_byte_array(s: str) -> list[int]:
    """
    Кодирование строки в UTF-8 байты.

    Одиночные surrogate коды кодируются тремя байтами, как в CESU-8.

    Examples:
        >>> string_to_utf8_byte_array("€")
        [226, 130, 172]
    """
    return list(s.encode("utf-8", errors="surrogatepass"))


def utf8_byte_array_to_string(byte_array: Iterable[int]) -> str:
    """
    Декодирование UTF-8 байтов в строку.

    Raises:
        UnicodeDecodeError: Некорректная UTF-8 последовательность
    """
    return bytes(byte_array).decode("utf-8", errors="surrogatepass")
