"""
IDs — генераторы идентификаторов, случайные значения и время
"""

from src.core.ids.generators import (
    PrivateCounter,
    id_gen,
    make_random_string,
    private_counter,
    private_random,
    rand_int_between,
    rand_sign,
    rand_sub_set,
    random_id,
)
from src.core.ids.timestamps import (
    TS_MILLISECONDS_THRESHOLD,
    assume_date_from_ts,
    get_now_seconds,
)

__all__ = [
    # Generators — Types
    "PrivateCounter",
    # Generators — Functions
    "id_gen",
    "make_random_string",
    "private_counter",
    "private_random",
    "rand_int_between",
    "rand_sign",
    "rand_sub_set",
    "random_id",
    # Timestamps
    "TS_MILLISECONDS_THRESHOLD",
    "assume_date_from_ts",
    "get_now_seconds",
]
