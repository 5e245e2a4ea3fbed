"""
Encoding — конверсии hex и UTF-8
"""

from src.core.encoding.converters import (
    byte_array_to_hex,
    hex_to_byte_array,
    string_to_utf8_byte_array,
    utf8_byte_array_to_string,
)

__all__ = [
    "byte_array_to_hex",
    "hex_to_byte_array",
    "string_to_utf8_byte_array",
    "utf8_byte_array_to_string",
]
