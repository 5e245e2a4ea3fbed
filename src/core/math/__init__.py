"""
Core math modules

Числовой парсинг, детекция пересечения границ, geo-fence, числовые
утилиты и битовые операции.
"""

# Numeric Parsing
from src.core.math.numeric_parsing import (
    BINARY_REGEX,
    EXPO_REGEX,
    HEX_REGEX,
    NUMBER_REGEX,
    parse_as_int_else,
    parse_as_num_else,
    parse_binary_string_to_num,
    parse_expo_string_to_num,
    parse_hex_string_to_num,
    will_parse_as_float_with_decimals,
    will_parse_as_int,
    will_parse_as_num,
)

# Thresholds
from src.core.math.thresholds import (
    SamplePredicate,
    did_enter_band,
    did_exit_band,
    did_fall_through_boundary,
    did_rise_through_boundary,
    is_within_band,
)

# Numbers
from src.core.math.numbers import (
    BYTE_UNITS,
    MAX_SAFE_INTEGER,
    LuhnResult,
    div_mod,
    div_mod2,
    english_number,
    extrapolate,
    factorize,
    format_bytes,
    imeisv_to_imei,
    is_negative_zero,
    is_signed_int,
    luhn,
    maybe_number,
    num_reverse,
    p_round,
    shannon,
    to_int,
)

# Geo
from src.core.math.geo import (
    DEFAULT_HAVERSINE_CONFIG,
    EARTH_RADIUS_KM,
    HAVERSINE_PRECISION,
    HaversineConfig,
    degrees_to_radians,
    geo_fence_did_enter,
    geo_fence_did_exit,
    geo_is_inside,
    haversine,
)

# Bits
from src.core.math.bits import (
    bin_string_to_num,
    clear_bit_at,
    get_bit_at,
    has_bit_at,
    inv_bit_at,
    num_to_bin_string,
    set_bit_at,
    zero_out_32,
)

__all__ = [
    # Numeric Parsing — Regexes
    "BINARY_REGEX",
    "EXPO_REGEX",
    "HEX_REGEX",
    "NUMBER_REGEX",
    # Numeric Parsing — Functions
    "parse_as_int_else",
    "parse_as_num_else",
    "parse_binary_string_to_num",
    "parse_expo_string_to_num",
    "parse_hex_string_to_num",
    "will_parse_as_float_with_decimals",
    "will_parse_as_int",
    "will_parse_as_num",
    # Thresholds
    "SamplePredicate",
    "did_enter_band",
    "did_exit_band",
    "did_fall_through_boundary",
    "did_rise_through_boundary",
    "is_within_band",
    # Numbers — Constants
    "BYTE_UNITS",
    "MAX_SAFE_INTEGER",
    # Numbers — Types
    "LuhnResult",
    # Numbers — Functions
    "div_mod",
    "div_mod2",
    "english_number",
    "extrapolate",
    "factorize",
    "format_bytes",
    "imeisv_to_imei",
    "is_negative_zero",
    "is_signed_int",
    "luhn",
    "maybe_number",
    "num_reverse",
    "p_round",
    "shannon",
    "to_int",
    # Geo — Constants
    "DEFAULT_HAVERSINE_CONFIG",
    "EARTH_RADIUS_KM",
    "HAVERSINE_PRECISION",
    # Geo — Config
    "HaversineConfig",
    # Geo — Functions
    "degrees_to_radians",
    "geo_fence_did_enter",
    "geo_fence_did_exit",
    "geo_is_inside",
    "haversine",
    # Bits
    "bin_string_to_num",
    "clear_bit_at",
    "get_bit_at",
    "has_bit_at",
    "inv_bit_at",
    "num_to_bin_string",
    "set_bit_at",
    "zero_out_32",
]
